import logging

import pytest

from usageparse.config import ParserConfig, load_config, parse_log_level
from usageparse.error import ConfigError

def write_ini(tmp_path, text, name="parser.ini"):
    p = tmp_path / name
    p.write_text(text, encoding="utf-8")
    return str(p)

#
#
#
def test_defaults():
    c = ParserConfig()
    assert c.delimiter == ","
    assert c.log_level is None

def test_empty_delimiter():
    with pytest.raises(ConfigError):
        ParserConfig(delimiter="")

def test_parse_log_level():
    assert parse_log_level(None) is None
    assert parse_log_level("") is None
    assert parse_log_level("debug") == logging.DEBUG
    assert parse_log_level("WARNING") == logging.WARNING
    assert parse_log_level(" 15 ") == 15
    assert parse_log_level(logging.ERROR) == logging.ERROR
    with pytest.raises(ConfigError):
        parse_log_level("verbose")

def test_load_config(tmp_path):
    p = write_ini(tmp_path, "[usageparse]\ndelimiter = :\nloglevel = info\n")
    c = load_config(p)
    assert c.delimiter == ":"
    assert c.log_level == logging.INFO

def test_load_config_overrides(tmp_path):
    p1 = write_ini(tmp_path, "[usageparse]\ndelimiter = :\nloglevel = info\n", "a.ini")
    p2 = write_ini(tmp_path, "[usageparse]\ndelimiter = %\n", "b.ini")
    c = load_config([p1, p2])
    assert c.delimiter == "%"
    assert c.log_level == logging.INFO

def test_load_config_other_section(tmp_path):
    p = write_ini(tmp_path, "[other]\ndelimiter = ;\n")
    assert load_config(p).delimiter == ","
    assert load_config(p, section="other").delimiter == ";"

def test_load_config_errors(tmp_path):
    with pytest.raises(ConfigError):
        load_config(str(tmp_path / "missing.ini"))
    p = write_ini(tmp_path, "[usageparse]\nloglevel = loud\n")
    with pytest.raises(ConfigError):
        load_config(p)
