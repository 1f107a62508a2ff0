#!/usr/bin/env python3
# coding: utf-8

#
#
#
import argparse
import logging
import sys

from usageparse.argtype import typeof_argument
from usageparse.config import parse_log_level
from usageparse.describer import TargetDescriberDict
from usageparse.error import ArgumentParseError, ConfigError
from usageparse.expression import UsageExpression
from usageparse.parser import ArgumentParser
from usageparse.usagetoken import compile_usage_tokens

def build_fields(usage, flags, types):
    # 宣言されていない変数は文字列とする
    expr = UsageExpression(usage)
    fields = {}
    for segment in (expr.get_mandatory_expression(), expr.get_optional_expression()):
        for token in compile_usage_tokens(segment):
            fields[token.variable_name] = str
    for name in flags:
        fields[name] = bool
    for spec in types:
        name, sep, typename = spec.partition("=")
        if not sep:
            raise ConfigError("type must be specified as NAME=TYPE: {}".format(spec))
        t = typeof_argument(typename)
        if t is None:
            raise ConfigError("unknown type name: {}".format(typename))
        fields[name] = t.declaration
    return fields

def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    rest = []
    if "--" in argv:
        i = argv.index("--")
        argv, rest = argv[:i], argv[i+1:]

    pser = argparse.ArgumentParser(
        prog = "usageparse",
        description = "使用法の式に従って引数を解析し、その結果を表示する",
    )
    pser.add_argument("usage", help="使用法の式 例: \"-m minute [-s seconds]\"")
    pser.add_argument("-f", "--flag", action="append", default=[], help="真偽値として扱う変数名")
    pser.add_argument("-t", "--type", action="append", default=[], help="変数の型を[変数名=型名]の形式で指定")
    pser.add_argument("-d", "--delimiter", default=",", help="配列の区切り文字")
    pser.add_argument("--loglevel", default=None, help="ログレベル")
    args = pser.parse_args(argv)

    try:
        if args.loglevel:
            logging.basicConfig(format="{levelname}|{name}: {message}", style="{", level=parse_log_level(args.loglevel))
        fields = build_fields(args.usage, args.flag, args.type)
        target = TargetDescriberDict(fields, typename="arguments")
        parser = ArgumentParser(args.usage, target, args.delimiter, log_level=args.loglevel)
        print(parser.get_usage())
        result = parser.parse(rest)
    except (ArgumentParseError, ConfigError) as e:
        print("error: {}".format(e), file=sys.stderr)
        return 2

    for name, value in result.items():
        print("{} = {!r}".format(name, value))
    return 0

if __name__ == "__main__":
    sys.exit(main())
