from usageparse.usagetoken import UsageToken, compile_usage_tokens, make_switch

def parts(tokens):
    return [(x.option_name, x.alias_name, x.variable_name) for x in tokens]

#
# compile_usage_tokens
#
def test_compile_simple():
    assert parts(compile_usage_tokens("-i intVal -s stringVal")) == [
        ("i", None, "intVal"),
        ("s", None, "stringVal"),
    ]

def test_compile_alias():
    assert parts(compile_usage_tokens("--day|-d day -time | -t time -f file")) == [
        ("day", "d", "day"),
        ("time", "t", "time"),
        ("f", None, "file"),
    ]
    assert parts(compile_usage_tokens("--num | -n count")) == [("num", "n", "count")]

def test_compile_variable_chars():
    assert parts(compile_usage_tokens("--out_dir $out -x _x1")) == [
        ("out_dir", None, "$out"),
        ("x", None, "_x1"),
    ]

def test_compile_skips_unmatched_text():
    # パターンに一致しない部分は無視される
    assert parts(compile_usage_tokens("garbage -a val_a ??? -b")) == [("a", None, "val_a")]
    assert compile_usage_tokens("") == []
    assert compile_usage_tokens("no options here") == []

#
# UsageToken
#
def test_token_equality():
    a = UsageToken("num", "n", "count")
    assert a == UsageToken("num", "n", "count")
    assert a == UsageToken("num", None, "count")
    assert a == UsageToken("n", None, "count")
    assert a != UsageToken("num", "n", "other")
    assert a != UsageToken("x", None, "count")
    assert UsageToken("n", None, "count") == a
    assert hash(a) == hash(UsageToken("n", None, "count"))
    assert a != "num"

def test_token_names():
    a = UsageToken("num", "n", "count")
    assert a.match_name("num")
    assert a.match_name("n")
    assert not a.match_name("count")
    assert a.get_names() == ["num", "n"]
    assert a.make_keys() == ["--num", "-n"]
    assert a.display() == "--num|-n count"

    b = UsageToken("v", None, "verbose")
    assert not b.match_name(None)
    assert b.get_names() == ["v"]
    assert b.display() == "-v verbose"

def test_make_switch():
    assert make_switch("a") == "-a"
    assert make_switch("all") == "--all"
