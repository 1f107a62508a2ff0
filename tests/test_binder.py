from typing import List

import pytest

from usageparse.binder import FieldValueBinder, strip_option_prefix
from usageparse.describer import TargetDescriberDict
from usageparse.error import MissingValue, UnknownOption, DataFormatError
from usageparse.registry import UsageTokenRegistry

FIELDS = {
    "count": int,
    "text": str,
    "verbose": bool,
    "nums": List[int],
}

def build_binder(usage, delimiter=","):
    r = UsageTokenRegistry(usage, TargetDescriberDict(FIELDS))
    r.initialize()
    return r, FieldValueBinder(r, delimiter)

def captured(binder):
    return {x.variable_name: binder.get_raw_value(x) for x in binder.get_available_usage_tokens()}

#
#
#
def test_strip_option_prefix():
    assert strip_option_prefix("-n") == "n"
    assert strip_option_prefix("--num") == "num"
    assert strip_option_prefix("---num") == "-num"
    assert strip_option_prefix("-") == ""

def test_capture_values():
    r, b = build_binder("--num|-n count [-s text -v verbose]")
    b.update_available_values(["-n", "10", "-v", "--s", "path_to_file"])
    assert captured(b) == {"count": "10", "verbose": "", "text": "path_to_file"}
    assert b.get_arg_value_object(r.find_usage_token("n")) == 10
    assert b.get_arg_value_object(r.find_usage_token("v")) is True
    assert b.get_arg_value_object(r.find_usage_token("s")) == "path_to_file"

def test_ignores_stray_elements():
    _, b = build_binder("-n count [-s text]")
    b.update_available_values(["stray", "-n", "1", "words", "here"])
    assert captured(b) == {"count": "1"}

def test_last_occurrence_wins():
    _, b = build_binder("--num|-n count")
    b.update_available_values(["-n", "1", "--num", "2", "-n", "3"])
    assert captured(b) == {"count": "3"}

def test_capture_map_is_fresh_each_call():
    _, b = build_binder("-n count [-s text]")
    b.update_available_values(["-n", "1", "-s", "x"])
    b.update_available_values(["-n", "2"])
    assert captured(b) == {"count": "2"}

def test_missing_value():
    _, b = build_binder("-n count -s text")
    with pytest.raises(MissingValue) as e:
        b.update_available_values(["-n", "-s", "some_string"])
    assert e.value.found == "-s"
    with pytest.raises(MissingValue) as e:
        b.update_available_values(["-s", "x", "-n"])
    assert e.value.option == "n"

def test_unknown_option():
    _, b = build_binder("-n count")
    with pytest.raises(UnknownOption):
        b.update_available_values(["-n", "1", "-x", "2"])

def test_array_delimiter():
    r, b = build_binder("--nums nums", ":")
    b.update_available_values(["--nums", "10:89:2"])
    assert b.get_arg_value_object(r.find_usage_token("nums")) == [10, 89, 2]

def test_conversion_error():
    r, b = build_binder("-n count")
    b.update_available_values(["-n", "89.7F"])
    with pytest.raises(DataFormatError):
        b.get_arg_value_object(r.find_usage_token("n"))
