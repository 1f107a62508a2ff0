#
# 解析エラー
#
class ArgumentParseError(ValueError):
    """ このパッケージが送出するすべてのエラーの基底 """
    pass

#
# 使用法の式の構文エラー
#
class InvalidGrammar(ArgumentParseError):
    def __init__(self, expression, index, message):
        super().__init__(expression, index, message)
        self.expression = expression
        self.index = index
        self.message = message

    def __str__(self):
        if self.index is None:
            return "{} in ({})".format(self.message, self.expression)
        return "{} at index = {} in ({})".format(self.message, self.index, self.expression)

#
# 使用法から引数を定義できない
#
class EmptyOrUnresolvableUsage(ArgumentParseError):
    pass

class UnresolvableField(EmptyOrUnresolvableUsage):
    def __init__(self, typename, name, reason=None):
        super().__init__(typename, name, reason)
        self.typename = typename
        self.name = name
        self.reason = reason

    def __str__(self):
        text = "Cannot find variable {} in {}".format(self.name, self.typename)
        if self.reason:
            text += " ({})".format(self.reason)
        return text

class UnsupportedFieldType(ArgumentParseError):
    def __init__(self, typename, name, fieldtype):
        super().__init__(typename, name, fieldtype)
        self.typename = typename
        self.name = name
        self.fieldtype = fieldtype

    def __str__(self):
        return "Field type {} of {}.{} is not allowed".format(_type_display(self.fieldtype), self.typename, self.name)

#
# 引数列の誤り
#
class UnknownOption(ArgumentParseError):
    def __init__(self, option):
        super().__init__(option)
        self.option = option

    def __str__(self):
        return "No usage definition could be found for option ({})".format(self.option)

class MissingValue(ArgumentParseError):
    def __init__(self, option, variable, found=None):
        super().__init__(option, variable, found)
        self.option = option
        self.variable = variable
        self.found = found

    def __str__(self):
        if self.found is not None:
            return "No value specified for ({}): next argument ({}) is an option".format(self.variable, self.found)
        return "Value for option ({}) could not be found".format(self.option)

class MissingMandatoryOption(ArgumentParseError):
    def __init__(self, options):
        super().__init__(options)
        self.options = options

    def __str__(self):
        return "Missing mandatory option from the arguments: {}".format(", ".join(self.options))

class DataFormatError(ArgumentParseError):
    def __init__(self, value, typename, reason=None):
        super().__init__(value, typename, reason)
        self.value = value
        self.typename = typename
        self.reason = reason

    def __str__(self):
        text = "Incorrect data format: cannot convert ({}) to {}".format(self.value, self.typename)
        if self.reason:
            text += " ({})".format(self.reason)
        return text

#
# 対象オブジェクトの生成・書き込みの失敗
#
class TargetConstructionError(ArgumentParseError):
    def __init__(self, typename, name, reason):
        super().__init__(typename, name, reason)
        self.typename = typename
        self.name = name
        self.reason = reason

    def __str__(self):
        if self.name is None:
            return "Cannot create instance of {} ({})".format(self.typename, self.reason)
        return "Cannot write {}.{} ({})".format(self.typename, self.name, self.reason)

#
# 設定ファイルの誤り
#
class ConfigError(ValueError):
    pass

#
def _type_display(t):
    name = getattr(t, "__qualname__", None) or getattr(t, "__name__", None)
    return name if name and not getattr(t, "__args__", None) else repr(t)
