import abc
from typing import Any, Callable, Generic, Optional, Type, TypeVar, Union

import attr
from typing_extensions import TypeAlias, assert_never

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

TypeKey: TypeAlias = Union[str, Type[Any]]
Factory: TypeAlias = Callable[[], T_co]


def _display(type_key: TypeKey) -> str:
    if isinstance(type_key, type):
        return type_key.__name__
    return str(type_key)


@attr.frozen
class BindingKey:
    """Identifies a binding: a type key plus an optional qualifier name.

    A name of None is distinct from an empty string name.
    """

    type_key: TypeKey
    name: Optional[str] = None

    def __str__(self) -> str:
        if self.name is None:
            return _display(self.type_key)
        return f"{_display(self.type_key)} by name {self.name}"


class Resolver(abc.ABC):
    """
    Interface capable of resolving keys and injecting into objects.
    This interface primarily exists as a way to create a forward reference to Injector.
    """

    @abc.abstractmethod
    def get_instance(self, type_key: TypeKey, name: Optional[str] = None) -> Any:
        ...

    @abc.abstractmethod
    def inject_into(self, target: Any) -> None:
        ...


@attr.define
class ValueRule(Generic[T_co]):
    """Resolves to the same stored value every time."""

    value: T_co


@attr.define
class TypeRule(Generic[T_co]):
    """Resolves to a freshly constructed and injected instance every time."""

    factory: Factory[T_co]


@attr.define
class SingletonRule(Generic[T_co]):
    """Constructs and injects an instance on first resolution, then caches it."""

    factory: Factory[T_co]
    _instance: Optional[T_co] = attr.field(default=None, init=False, repr=False)
    _created: bool = attr.field(default=False, init=False, repr=False)

    @property
    def created(self) -> bool:
        return self._created


BindingRule: TypeAlias = Union[ValueRule[Any], TypeRule[Any], SingletonRule[Any]]


def _construct(resolver: Resolver, factory: Factory[T]) -> T:
    obj = factory()
    resolver.inject_into(obj)
    return obj


def resolve_rule(resolver: Resolver, rule: BindingRule) -> Any:
    """
    Produce the value a rule stands for. Any object constructed by a rule is
    passed through resolver.inject_into before it is returned.
    """
    if isinstance(rule, ValueRule):
        return rule.value
    elif isinstance(rule, TypeRule):
        return _construct(resolver, rule.factory)
    elif isinstance(rule, SingletonRule):
        if rule._created:
            return rule._instance

        obj = rule.factory()
        # cache before injecting so the instance can be found while it is being wired
        rule._instance = obj
        rule._created = True
        success = False
        try:
            resolver.inject_into(obj)
            success = True
        finally:
            if not success:
                rule._instance = None
                rule._created = False
        return obj
    else:
        assert_never(rule)
