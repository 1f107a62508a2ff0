import logging
from typing import Collection, Dict, List, Optional

from usageparse.argtype import FieldType
from usageparse.config import ParserLogAdapter
from usageparse.describer import TargetDescriber
from usageparse.error import InvalidGrammar, UnknownOption
from usageparse.expression import UsageExpression
from usageparse.usagetoken import UsageToken, compile_usage_tokens, make_switch
from usageparse.validator import TargetValidator

logger = logging.getLogger(__name__)

#
# 使用法の式から作ったトークンを保持する
#
class UsageTokenRegistry():
    def __init__(self, expression: str, describer: TargetDescriber, log_level: Optional[int] = None):
        self.expression: str = expression
        self.describer: TargetDescriber = describer
        self.log_level: Optional[int] = log_level
        self.log = ParserLogAdapter(logger, log_level)
        self._mandatory: List[UsageToken] = []
        self._optional: List[UsageToken] = []
        self._fieldtypes: Dict[str, FieldType] = {}

    def __repr__(self):
        return "<UsageTokenRegistry '{}'>".format(self.expression)

    def reset(self):
        self._mandatory = []
        self._optional = []
        self._fieldtypes = {}

    def initialize(self):
        """ 式を解析しなおし、変数の型を解決する """
        self.reset()
        expr = UsageExpression(self.expression, self.log_level)
        mandatory = compile_usage_tokens(expr.get_mandatory_expression(), self.log_level)
        optional = compile_usage_tokens(expr.get_optional_expression(), self.log_level)
        self._check_duplicates(mandatory + optional)

        validator = TargetValidator(self.describer, self.log_level)
        fieldtypes = validator.validate_tokens(mandatory + optional)

        self._mandatory = mandatory
        self._optional = optional
        self._fieldtypes = fieldtypes
        self.log.debug("usage tokens initialized: mandatory = %s, optional = %s", mandatory, optional)

    def _check_duplicates(self, tokens):
        # 同じオプション名を二度定義することはできない
        seen = set()
        for token in tokens:
            for name in token.get_names():
                if name in seen:
                    raise InvalidGrammar(self.expression, None, "Option '{}' is defined more than once".format(make_switch(name)))
                seen.add(name)

    #
    def no_tokens_available(self) -> bool:
        return not self._mandatory and not self._optional

    def get_mandatory_tokens(self) -> List[UsageToken]:
        return list(self._mandatory)

    def get_optional_tokens(self) -> List[UsageToken]:
        return list(self._optional)

    def get_usage_tokens(self) -> List[UsageToken]:
        return self._mandatory + self._optional

    def is_mandatory(self, token: UsageToken) -> bool:
        return any(x is token for x in self._mandatory)

    def get_missing_mandatory_tokens(self, available: Collection[UsageToken]) -> List[UsageToken]:
        return [x for x in self._mandatory if x not in available]

    def is_missing_mandatory_option(self, available: Collection[UsageToken]) -> bool:
        return len(self.get_missing_mandatory_tokens(available)) > 0

    def find_usage_token(self, option: str) -> UsageToken:
        token = self._find(option, self._mandatory)
        if token is None:
            token = self._find(option, self._optional)
        if token is None:
            raise UnknownOption(option)
        return token

    def _find(self, option, tokens) -> Optional[UsageToken]:
        for token in tokens:
            if token.match_name(option):
                return token
        return None

    def get_field_type(self, token: UsageToken) -> FieldType:
        return self._fieldtypes[token.variable_name]
