import logging
from typing import Dict, Optional, Sequence

from usageparse.argtype import FieldType, typeof_field
from usageparse.config import ParserLogAdapter
from usageparse.describer import TargetDescriber
from usageparse.error import UnsupportedFieldType
from usageparse.usagetoken import UsageToken

logger = logging.getLogger(__name__)

#
# 変数が対象の型に存在し、扱える型で宣言されているか調べる
#
class TargetValidator():
    def __init__(self, describer: TargetDescriber, log_level: Optional[int] = None):
        self.describer = describer
        self.log = ParserLogAdapter(logger, log_level)

    def validate_field(self, name: str) -> FieldType:
        self.log.debug("checking %s for variable: %s", self.describer.get_typename(), name)
        declaration = self.describer.resolve_type(name)
        fieldtype = typeof_field(declaration)
        if fieldtype is None:
            raise UnsupportedFieldType(self.describer.get_typename(), name, declaration)
        self.log.debug("found variable %s as %s", name, fieldtype.typename)
        return fieldtype

    def validate_tokens(self, tokens: Sequence[UsageToken]) -> Dict[str, FieldType]:
        fieldtypes = {}
        for token in tokens:
            name = token.variable_name
            if name not in fieldtypes:
                fieldtypes[name] = self.validate_field(name)
        return fieldtypes
