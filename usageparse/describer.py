import collections.abc
from typing import Any, Callable, Dict, Optional, get_type_hints

from usageparse.error import UnresolvableField

#
# 値を書き込む対象の型を記述する
#   型の解決・インスタンスの生成・名前を指定した書き込み
#
class TargetDescriber:
    def get_typename(self) -> str:
        raise NotImplementedError()

    def resolve_type(self, name: str) -> Any:
        """ 変数の宣言型を返す。見つからなければUnresolvableFieldを送出する """
        raise NotImplementedError()

    def new_instance(self) -> Any:
        raise NotImplementedError()

    def write_value(self, instance: Any, name: str, value: Any):
        raise NotImplementedError()


class TargetDescriberClass(TargetDescriber):
    """
    クラスの型注釈から変数を解決する。
    set_<name>というメソッドがあればそれを通して書き込み、なければ属性に代入する。
    """
    def __init__(self, klass: type):
        super().__init__()
        self.klass = klass
        self._hints: Optional[Dict[str, Any]] = None

    def __repr__(self):
        return "<TargetDescriberClass {}>".format(self.get_typename())

    def get_typename(self):
        return self.klass.__qualname__

    def get_type_hints(self) -> Dict[str, Any]:
        if self._hints is None:
            try:
                self._hints = get_type_hints(self.klass)
            except (NameError, TypeError) as e:
                raise UnresolvableField(self.get_typename(), "*", "cannot resolve annotations: {}".format(e))
        return self._hints

    def resolve_type(self, name):
        hints = self.get_type_hints()
        if name not in hints:
            raise UnresolvableField(self.get_typename(), name)
        return hints[name]

    def new_instance(self):
        return self.klass()

    def get_setter(self, instance, name) -> Optional[Callable[[Any], Any]]:
        setter = getattr(instance, "set_" + name, None)
        return setter if callable(setter) else None

    def write_value(self, instance, name, value):
        setter = self.get_setter(instance, name)
        if setter is not None:
            setter(value)
        else:
            setattr(instance, name, value)


class TargetDescriberDict(TargetDescriber):
    """
    変数名と型の表で対象を記述する
    """
    def __init__(self, fields: Dict[str, Any], factory: Callable[[], Any] = dict, typename: str = None):
        super().__init__()
        self.fields: Dict[str, Any] = dict(fields)
        self.factory = factory
        self.typename = typename

    def __repr__(self):
        return "<TargetDescriberDict {}>".format(self.get_typename())

    def get_typename(self):
        if self.typename is not None:
            return self.typename
        return getattr(self.factory, "__qualname__", repr(self.factory))

    def resolve_type(self, name):
        if name not in self.fields:
            raise UnresolvableField(self.get_typename(), name)
        return self.fields[name]

    def new_instance(self):
        return self.factory()

    def write_value(self, instance, name, value):
        if isinstance(instance, collections.abc.MutableMapping):
            instance[name] = value
        else:
            setattr(instance, name, value)

#
def create_target_describer(target) -> TargetDescriber:
    if isinstance(target, TargetDescriber):
        return target
    elif isinstance(target, type):
        return TargetDescriberClass(target)
    elif isinstance(target, collections.abc.Mapping):
        return TargetDescriberDict(target)
    else:
        raise TypeError("create_target_describer(type|Mapping|TargetDescriber): {}".format(target))
