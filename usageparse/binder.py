import logging
from typing import Any, Dict, List, Optional, Sequence

from usageparse.config import ParserLogAdapter
from usageparse.error import MissingValue
from usageparse.registry import UsageTokenRegistry
from usageparse.usagetoken import UsageToken

logger = logging.getLogger(__name__)

OPTION_PREFIX = "-"

def strip_option_prefix(arg: str) -> str:
    # 先頭のハイフンは2つまで
    if arg.startswith(OPTION_PREFIX*2):
        return arg[2:]
    return arg[1:]

#
# 引数列から各トークンの値を読み取り、型に合わせて変換する
#
class FieldValueBinder():
    def __init__(self, registry: UsageTokenRegistry, delimiter: str = ",", log_level: Optional[int] = None):
        self.registry = registry
        self.delimiter = delimiter
        self.log = ParserLogAdapter(logger, log_level)
        self._values: Dict[UsageToken, str] = {}

    def update_available_values(self, args: Sequence[str]):
        self.log.debug("parsing the arguments for values: %s", args)
        values: Dict[UsageToken, str] = {}
        index = 0
        while index < len(args):
            arg = args[index]
            index += 1
            if not arg.startswith(OPTION_PREFIX):
                continue # オプションでも値でもない

            option = strip_option_prefix(arg)
            token = self.registry.find_usage_token(option)
            value = ""
            if self.registry.get_field_type(token).needs_value():
                if index >= len(args):
                    raise MissingValue(option, token.variable_name)
                value = args[index]
                if value.startswith(OPTION_PREFIX):
                    raise MissingValue(option, token.variable_name, value)
                index += 1

            # 後に現れた値で上書きする
            values.pop(token, None)
            values[token] = value
            self.log.debug("captured value for %s: (%s)", token, value)

        self._values = values

    def get_available_usage_tokens(self) -> List[UsageToken]:
        return list(self._values.keys())

    def get_raw_value(self, token: UsageToken) -> str:
        return self._values[token]

    def get_arg_value_object(self, token: UsageToken) -> Any:
        fieldtype = self.registry.get_field_type(token)
        return fieldtype.convert(self._values[token], self.delimiter)
