import logging
import re
from typing import List, Optional, Tuple

from usageparse.config import ParserLogAdapter
from usageparse.error import InvalidGrammar

logger = logging.getLogger(__name__)

ILLEGAL_BRACKETS = "(){}"

def normalize_whitespace(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()

#
# 使用法の式を必須部と省略可能部に分ける
#   -a val_a [-b val_b] -c val_c
#   => 必須部: "-a val_a -c val_c" 省略可能部: "-b val_b"
#
class UsageExpression():
    def __init__(self, expression: str, log_level: Optional[int] = None):
        self.expression: str = expression
        self._ranges: List[Tuple[int, int]] = find_optional_ranges(expression, log_level)
        self._check_brackets()

    def __repr__(self):
        return "<UsageExpression '{}'>".format(self.expression)

    def _check_brackets(self):
        # 角かっこ以外は使えない
        for i, ch in enumerate(self.expression):
            if ch in ILLEGAL_BRACKETS:
                raise InvalidGrammar(self.expression, i, "Illegal bracket '{}'".format(ch))
        # 範囲に属さない角かっこ
        for i, ch in enumerate(self.expression):
            if ch in "[]" and not self.is_optional_index(i):
                raise InvalidGrammar(self.expression, i, "Stray square bracket '{}'".format(ch))

    def get_optional_ranges(self) -> List[Tuple[int, int]]:
        """ 角かっこ自体の位置を含む範囲のリスト """
        return list(self._ranges)

    def is_optional_index(self, index: int) -> bool:
        for begin, end in self._ranges:
            if index < begin:
                break
            if index <= end:
                return True
        return False

    def get_mandatory_expression(self) -> str:
        parts = []
        for i, ch in enumerate(self.expression):
            if not self.is_optional_index(i):
                parts.append(ch)
        return normalize_whitespace("".join(parts))

    def get_optional_expression(self) -> str:
        parts = []
        for begin, end in self._ranges:
            parts.append(self.expression[begin+1:end])
            parts.append(" ")
        return normalize_whitespace("".join(parts))

#
#
#
def find_optional_ranges(expression: str, log_level: Optional[int] = None) -> List[Tuple[int, int]]:
    log = ParserLogAdapter(logger, log_level)
    log.debug("obtaining optional expressions from: %s", expression)
    ranges = []
    begin = expression.find("[")
    while begin != -1:
        end = expression.find("]", begin)
        if end == -1:
            raise InvalidGrammar(expression, begin, "No matching square bracket")
        # [-a val_a [ -b val_b]
        nested = expression.find("[", begin+1, end)
        if nested != -1:
            raise InvalidGrammar(expression, nested, "Nested opening square bracket")
        log.debug("found optional expression between indices: %d and %d", begin, end)
        ranges.append((begin, end))
        begin = expression.find("[", end)
    return ranges
