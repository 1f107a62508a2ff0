from typing import Dict, List

import pytest

from usageparse.describer import TargetDescriberDict, TargetDescriberClass
from usageparse.error import (
    InvalidGrammar, UnknownOption, UnresolvableField, UnsupportedFieldType
)
from usageparse.registry import UsageTokenRegistry
from usageparse.usagetoken import UsageToken
from usageparse.validator import TargetValidator

FIELDS = {
    "count": int,
    "text": str,
    "verbose": bool,
    "nums": List[int],
}

def build_registry(usage, fields=FIELDS):
    r = UsageTokenRegistry(usage, TargetDescriberDict(fields, typename="Data"))
    r.initialize()
    return r

#
#
#
def test_partition():
    r = build_registry("--num|-n count [-s text -v verbose] --nums nums")
    assert [x.option_name for x in r.get_mandatory_tokens()] == ["num", "nums"]
    assert [x.option_name for x in r.get_optional_tokens()] == ["s", "v"]
    assert [x.variable_name for x in r.get_usage_tokens()] == ["count", "nums", "text", "verbose"]
    assert not r.no_tokens_available()
    assert r.get_field_type(r.find_usage_token("v")).is_boolean()

def test_no_tokens():
    r = build_registry("")
    assert r.no_tokens_available()
    r = build_registry("just words [and more]")
    assert r.no_tokens_available()

def test_find_alias_symmetric():
    r = build_registry("--num|-n count")
    assert r.find_usage_token("num") == r.find_usage_token("n")
    assert r.find_usage_token("n") is r.find_usage_token("num")
    with pytest.raises(UnknownOption) as e:
        r.find_usage_token("count")
    assert e.value.option == "count"

def test_find_mandatory_first():
    # 必須部と省略可能部に同じ変数があっても、オプション名で区別される
    r = build_registry("-a count [-b count]")
    assert r.is_mandatory(r.find_usage_token("a"))
    assert not r.is_mandatory(r.find_usage_token("b"))

def test_missing_mandatory():
    r = build_registry("--num|-n count -s text [-v verbose]")
    num = r.find_usage_token("n")
    s = r.find_usage_token("s")
    v = r.find_usage_token("v")
    assert not r.is_missing_mandatory_option([num, s])
    assert not r.is_missing_mandatory_option([num, s, v])
    assert r.is_missing_mandatory_option([num, v])
    assert r.get_missing_mandatory_tokens([v]) == [num, s]
    # 別名で作られたトークンでも同じ義務を満たす
    assert not r.is_missing_mandatory_option({UsageToken("num", None, "count"), s})
    assert not r.is_missing_mandatory_option({UsageToken("n", None, "count"), s})

def test_duplicate_option_rejected():
    with pytest.raises(InvalidGrammar):
        build_registry("-s text [-s text]")
    with pytest.raises(InvalidGrammar):
        build_registry("--num|-n count -n nums")

def test_initialize_is_idempotent():
    r = build_registry("-n count [-s text]")
    first = r.get_usage_tokens()
    r.initialize()
    assert r.get_usage_tokens() == first
    assert len(r.get_usage_tokens()) == 2

def test_unresolvable_variable():
    with pytest.raises(UnresolvableField) as e:
        build_registry("-i integerVal [-s text]")
    assert e.value.name == "integerVal"

def test_unsupported_type():
    with pytest.raises(UnsupportedFieldType) as e:
        build_registry("-m mapVal", {"mapVal": Dict[str, str]})
    assert e.value.name == "mapVal"

def test_grammar_error_on_initialize():
    r = UsageTokenRegistry("-a x (-b y)", TargetDescriberDict({"x": str, "y": str}))
    with pytest.raises(InvalidGrammar):
        r.initialize()

#
# TargetValidator
#
class Sample:
    name: str
    mapping: dict

def test_validator():
    v = TargetValidator(TargetDescriberClass(Sample))
    assert v.validate_field("name").typename == "str"
    with pytest.raises(UnsupportedFieldType):
        v.validate_field("mapping")
    types = v.validate_tokens([UsageToken("n", None, "name"), UsageToken("m", None, "name")])
    assert list(types.keys()) == ["name"]
