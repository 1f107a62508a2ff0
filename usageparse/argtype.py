import collections.abc
import enum
import math
import re
import struct
from typing import Any, Callable, Dict, List, NewType, Optional, get_args, get_origin

from usageparse.error import DataFormatError

#
# 幅の決まった数値型と文字型を宣言するための型
#
Byte = NewType("Byte", int)
Short = NewType("Short", int)
Int = NewType("Int", int)
Long = NewType("Long", int)
Char = NewType("Char", str)
Float = NewType("Float", float)
Double = NewType("Double", float)

#
FIELDTYPE_SCALAR = 0x01
FIELDTYPE_BOOLEAN = 0x02
FIELDTYPE_ENUM = 0x04
FIELDTYPE_ARRAY = 0x10
FIELDTYPE_TUPLE = FIELDTYPE_ARRAY | 0x20

#
# #####################################################################
#   文字列引数をフィールドの型の値に変えるクラス
# #####################################################################
#
class FieldType():
    def __init__(self, typename: str, converter: Optional[Callable[[str], Any]], flags: int, element: "FieldType" = None, declaration: Any = None):
        self.typename: str = typename
        self.converter = converter
        self.flags: int = flags
        self.element: Optional[FieldType] = element
        self.declaration: Any = declaration

    def __repr__(self):
        return "<FieldType '{}'>".format(self.typename)

    def is_boolean(self):
        return (self.flags & FIELDTYPE_BOOLEAN) > 0

    def is_enum(self):
        return (self.flags & FIELDTYPE_ENUM) > 0

    def is_array(self):
        return (self.flags & FIELDTYPE_ARRAY) == FIELDTYPE_ARRAY

    def is_tuple(self):
        return (self.flags & FIELDTYPE_TUPLE) == FIELDTYPE_TUPLE

    def needs_value(self):
        """ 真偽値以外は後続の値を取る """
        return not self.is_boolean()

    def convert(self, value: str, delimiter: str = ","):
        if self.is_boolean():
            return True # 存在自体が値になる
        if self.is_array():
            items = [self.element.convert(x.strip()) for x in split_array(value, delimiter)]
            return tuple(items) if self.is_tuple() else items
        return self.converter(value)

#
# 区切り文字はパターンではなく文字列として扱う
#
def split_array(value: str, delimiter: str) -> List[str]:
    parts = re.split(re.escape(delimiter), value)
    if len(parts) > 1:
        # 末尾の空要素は捨てる
        while parts and parts[-1] == "":
            parts.pop()
    return parts

#
# 型を登録して検索する
#
class ArgTypeLibrary:
    def __init__(self):
        self._types: Dict[Any, FieldType] = {}
        self._names: Dict[str, FieldType] = {}

    def define(self, pytypes, typename: str, converter: Callable[[str], Any], flags: int) -> FieldType:
        if typename in self._names:
            raise ValueError("'{}' has already existed in ArgTypeLibrary".format(typename))
        t = FieldType(typename, converter, flags, declaration=pytypes[0])
        for pytype in pytypes:
            self._types[pytype] = t
        self._names[typename] = t
        return t

    def get(self, pytype) -> Optional[FieldType]:
        try:
            return self._types.get(pytype)
        except TypeError: # ハッシュ不能な宣言
            return None

    def get_by_name(self, typename: str) -> Optional[FieldType]:
        return self._names.get(typename)

    def get_pytype(self, typename: str):
        t = self._names.get(typename)
        return t.declaration if t is not None else None

    def typenames(self):
        return list(self._names.keys())

#
_argtypelib = ArgTypeLibrary()

#
def argument_type(*pytypes, name, flags=FIELDTYPE_SCALAR, converter=None):
    if converter is not None:
        _argtypelib.define(pytypes, name, converter, flags)
        return converter
    def _deco(fn):
        _argtypelib.define(pytypes, name, fn, flags)
        return fn
    return _deco

#
# 宣言された型からFieldTypeを得る
#
def typeof_field(declaration: Any) -> Optional[FieldType]:
    t = _argtypelib.get(declaration)
    if t is not None:
        return t

    if isinstance(declaration, type) and issubclass(declaration, enum.Enum):
        return enum_field_type(declaration)

    origin = get_origin(declaration)
    if origin in (list, collections.abc.Sequence):
        args = get_args(declaration)
        if len(args) != 1:
            return None
        return array_field_type(declaration, args[0], FIELDTYPE_ARRAY)
    elif origin is tuple:
        args = get_args(declaration)
        if len(args) != 2 or args[1] is not Ellipsis:
            return None # 固定長のタプルは扱わない
        return array_field_type(declaration, args[0], FIELDTYPE_TUPLE)

    return None

def typeof_argument(typename: str) -> Optional[FieldType]:
    """ 型名からFieldTypeを得る: str, int, list-int ... """
    if typename.startswith("list-"):
        elemtype = _argtypelib.get_pytype(typename[len("list-"):])
        if elemtype is None:
            return None
        return typeof_field(List[elemtype])
    return _argtypelib.get_by_name(typename)

def array_field_type(declaration, elemdecl, flags) -> Optional[FieldType]:
    elem = typeof_field(elemdecl)
    if elem is None or elem.is_array():
        return None # 配列の配列は扱わない
    if elem.is_boolean():
        return None # 真偽値は値を取らないので要素にできない
    name = "{}[]".format(elem.typename)
    return FieldType(name, None, flags, element=elem, declaration=declaration)

def enum_field_type(klass) -> FieldType:
    def convert_enum(value: str):
        member = klass.__members__.get(value)
        if member is None:
            raise DataFormatError(value, klass.__name__, "no such enum member")
        return member
    return FieldType(klass.__name__, convert_enum, FIELDTYPE_ENUM, declaration=klass)

#
# 基本型
#
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
FLOAT_PATTERN = re.compile(r"[+-]?(NaN|Infinity|(([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?)[fFdD]?)")

def integer_converter(typename, bits):
    lower = -(1 << (bits-1))
    upper = (1 << (bits-1)) - 1
    def convert_integer(value: str) -> int:
        if not INTEGER_PATTERN.fullmatch(value):
            raise DataFormatError(value, typename, "for input string: \"{}\"".format(value))
        n = int(value)
        if n < lower or upper < n:
            raise DataFormatError(value, typename, "value out of range [{}, {}]".format(lower, upper))
        return n
    return convert_integer

# 単精度の最大値を超えて丸められる値は無限大になる
FLOAT_OVERFLOW = 2.0**128 - 2.0**103

def narrow_to_single(n: float) -> float:
    if math.isfinite(n) and abs(n) >= FLOAT_OVERFLOW:
        return math.copysign(math.inf, n)
    return struct.unpack("f", struct.pack("f", n))[0]

def float_converter(typename, single):
    def convert_float(value: str) -> float:
        text = value.strip()
        if not FLOAT_PATTERN.fullmatch(text):
            raise DataFormatError(value, typename, "for input string: \"{}\"".format(value))
        text = text.rstrip("fFdD")
        if text.endswith("NaN"):
            return float("nan")
        n = float(text.replace("Infinity", "inf"))
        if single:
            n = narrow_to_single(n)
        return n
    return convert_float

@argument_type(str, name="str")
def convert_str(value: str) -> str:
    return value

@argument_type(bool, name="bool", flags=FIELDTYPE_BOOLEAN)
def convert_bool(value: str) -> bool:
    return True

@argument_type(Char, name="char")
def convert_char(value: str) -> str:
    if not value:
        raise DataFormatError(value, "char", "empty string")
    return value[0]

argument_type(Byte, name="byte", converter=integer_converter("byte", 8))
argument_type(Short, name="short", converter=integer_converter("short", 16))
argument_type(Int, name="int", converter=integer_converter("int", 32))
argument_type(Long, int, name="long", converter=integer_converter("long", 64))
argument_type(Float, name="float", converter=float_converter("float", True))
argument_type(Double, float, name="double", converter=float_converter("double", False))
