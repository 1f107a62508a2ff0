import logging

__version__ = '0.2.0'

from usageparse.argtype import Byte, Short, Int, Long, Char, Float, Double
from usageparse.config import ParserConfig, load_config
from usageparse.describer import TargetDescriber, TargetDescriberClass, TargetDescriberDict
from usageparse.error import (
    ArgumentParseError, InvalidGrammar, EmptyOrUnresolvableUsage, UnresolvableField, UnsupportedFieldType,
    UnknownOption, MissingValue, MissingMandatoryOption, DataFormatError, TargetConstructionError, ConfigError
)
from usageparse.parser import ArgumentParser

logging.getLogger(__name__).addHandler(logging.NullHandler())

def new_parser(usage, target, delimiter=",", **kwargs) -> ArgumentParser:
    return ArgumentParser(usage, target, delimiter, **kwargs)
