#!/usr/bin/env python3
# coding: utf-8
import logging
import threading
from typing import Any, List, Optional, Sequence, Tuple, Union

from usageparse.argtype import FieldType
from usageparse.binder import FieldValueBinder
from usageparse.config import DEFAULT_DELIMITER, ParserConfig, ParserLogAdapter, parse_log_level
from usageparse.describer import TargetDescriber, create_target_describer
from usageparse.error import (
    EmptyOrUnresolvableUsage, MissingMandatoryOption, TargetConstructionError
)
from usageparse.registry import UsageTokenRegistry
from usageparse.usagetoken import UsageToken

#
# ########################################################
#  Argument Parser
# ########################################################
#
class ArgumentParser():
    """
    使用法の式に従って引数列を解析し、対象の型のインスタンスに値を書き込む。

    Params:
        usage(str): 使用法の式 例: -m minute [-s seconds]
        target(type|TargetDescriber): 値を書き込む型
        delimiter(str): 配列の値の区切り文字
        log_level(int|str): このパーサーのログレベル
    """
    def __init__(self, usage: str, target: Any, delimiter: str = DEFAULT_DELIMITER, *, log_level: Union[None, int, str] = None):
        if usage is None:
            raise ValueError("usage expression must be specified")
        if not delimiter:
            raise ValueError("array delimiter must not be empty")
        self.usage: str = usage
        self.describer: TargetDescriber = create_target_describer(target)
        self.delimiter: str = delimiter
        # レベルはこのインスタンスだけが持ち、名前付きロガーには設定しない
        self.log_level: Optional[int] = parse_log_level(log_level)
        self.logger = ParserLogAdapter(logging.getLogger("{}.{}".format(__name__, self.describer.get_typename())), self.log_level)

        self._lock = threading.RLock()
        self._registry = UsageTokenRegistry(usage, self.describer, self.log_level)
        self._binder = FieldValueBinder(self._registry, delimiter, self.log_level)

    @classmethod
    def from_config(cls, usage: str, target: Any, config: ParserConfig):
        return cls(usage, target, config.delimiter, log_level=config.log_level)

    def __repr__(self):
        return "<ArgumentParser '{}' -> {}>".format(self.usage, self.describer.get_typename())

    #
    # 引数解析
    #
    def parse(self, args: Sequence[str]) -> Any:
        with self._lock:
            self.initialize()

            self._binder.update_available_values(args)

            missings = self._registry.get_missing_mandatory_tokens(self._binder.get_available_usage_tokens())
            if missings:
                raise MissingMandatoryOption(["|".join(x.make_keys()) for x in missings])

            instance = self.new_target_instance()
            for token in self._binder.get_available_usage_tokens():
                self.write_value(instance, token)
            return instance

    def initialize(self):
        with self._lock:
            self._registry.initialize()
            if self._registry.no_tokens_available():
                raise EmptyOrUnresolvableUsage("No valid arguments found in usage expression ({})".format(self.usage))

    def new_target_instance(self):
        try:
            return self.describer.new_instance()
        except Exception as e:
            self.logger.warning("got exception while creating instance of %s: %s", self.describer.get_typename(), e)
            raise TargetConstructionError(self.describer.get_typename(), None, e) from e

    def write_value(self, instance, token: UsageToken):
        value = self._binder.get_arg_value_object(token)
        name = token.variable_name
        self.logger.debug("writing %s = %r", name, value)
        try:
            self.describer.write_value(instance, name, value)
        except Exception as e:
            self.logger.warning("got exception while writing %s: %s", name, e)
            raise TargetConstructionError(self.describer.get_typename(), name, e) from e

    #
    # 使用法の表示
    #
    def list_tokens(self) -> List[Tuple[UsageToken, FieldType, bool]]:
        with self._lock:
            self.initialize()
            rows = []
            for token in self._registry.get_usage_tokens():
                rows.append((token, self._registry.get_field_type(token), self._registry.is_mandatory(token)))
            return rows

    def get_usage(self) -> str:
        parts = []
        for token, _ftype, mandatory in self.list_tokens():
            if mandatory:
                parts.append(token.display())
            else:
                parts.append("[{}]".format(token.display()))
        return " ".join(parts)

    def get_delimiter(self) -> str:
        return self.delimiter

    def get_target(self) -> TargetDescriber:
        return self.describer
