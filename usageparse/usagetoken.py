import logging
import re
from typing import List, Optional

from usageparse.config import ParserLogAdapter

logger = logging.getLogger(__name__)

#
# --day|-d day -time | -t time -f file
#
USAGE_TOKEN_PATTERN = re.compile(
    r"-{1,2}([a-zA-Z0-9_]+)( ?\| ?-{1,2}([a-zA-Z0-9_]+))? ([a-zA-Z$_][a-zA-Z$_0-9]*)"
)

#
# オプション名・別名と、値を書き込む変数名の組
#
class UsageToken():
    __slots__ = ("_option", "_alias", "_variable")

    def __init__(self, option_name: str, alias_name: Optional[str], variable_name: str):
        self._option = option_name
        self._alias = alias_name
        self._variable = variable_name

    @property
    def option_name(self) -> str:
        return self._option

    @property
    def alias_name(self) -> Optional[str]:
        return self._alias

    @property
    def variable_name(self) -> str:
        return self._variable

    def __repr__(self):
        return "<UsageToken '{}' -> {}>".format("|".join(self.make_keys()), self._variable)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, UsageToken):
            return NotImplemented
        # 別名のどちらで作られたトークンとも一致する
        return other._variable == self._variable and any(other.match_name(x) for x in self.get_names())

    def __hash__(self):
        return hash(self._variable)

    def get_names(self) -> List[str]:
        if self._alias is None:
            return [self._option]
        return [self._option, self._alias]

    def match_name(self, name: str) -> bool:
        return name == self._option or (self._alias is not None and name == self._alias)

    def make_keys(self, prefix="-") -> List[str]:
        return [make_switch(x, prefix) for x in self.get_names()]

    def display(self) -> str:
        return "{} {}".format("|".join(self.make_keys()), self._variable)

def make_switch(name: str, prefix="-") -> str:
    # 1文字の名前は短いオプション
    if len(name) == 1:
        return prefix + name
    return prefix*2 + name

#
# 区切られた式からトークンを抜き出す
# パターンに一致しない部分は読み飛ばす
#
def compile_usage_tokens(segment: str, log_level: Optional[int] = None) -> List[UsageToken]:
    log = ParserLogAdapter(logger, log_level)
    log.debug("parsing (%s) for usage tokens", segment)
    tokens = []
    for m in USAGE_TOKEN_PATTERN.finditer(segment):
        token = UsageToken(m.group(1), m.group(3), m.group(4))
        log.debug("found usage token: option = %s, alias = %s, variable name = %s", *m.group(1, 3, 4))
        tokens.append(token)
    return tokens
