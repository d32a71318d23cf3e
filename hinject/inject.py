"""Collection of annotations to declare how an injector should fill in a class."""

from typing import Any, Callable, List, Optional, Sequence, Type, TypeVar, Union

from .metadata import InjectionPoint, _gen_meta
from .model import BindingKey, TypeKey

T = TypeVar("T")
F = TypeVar("F", bound=Callable[..., Any])

_POST_CONSTRUCT_ATTR = "__hinject_post_construct__"


class _Reference:
    """Reference to a binding to be resolved at injection time.
    (you should not instantiate this class directly, instead use the
    inject.reference function)
    """

    def __init__(self, type_key: Optional[TypeKey] = None, name: Optional[str] = None) -> None:
        self._type_key = type_key
        self._name = name

    @property
    def type_key(self) -> Optional[TypeKey]:
        return self._type_key

    @property
    def name(self) -> Optional[str]:
        return self._name

    def point(self, attribute: str) -> InjectionPoint:
        return InjectionPoint(attribute, self._type_key, self._name)

    def __str__(self) -> str:
        if self._type_key is None:
            return f"ref(<attribute>, name={self._name})"
        return f"ref({BindingKey(self._type_key, self._name)})"

    def __repr__(self) -> str:
        return f"<_Reference({self._type_key!r}, name={self._name!r})>"


def reference(type_key: Optional[TypeKey] = None, name: Optional[str] = None) -> _Reference:
    """Return a reference to the binding (type_key, name).

    Parameters:
        type_key: the type key to resolve; if None the attribute name is used.
        name: optional qualifier name of the binding.
    """
    return _Reference(type_key, name)


def _to_point(attribute: str, binding: Union[_Reference, TypeKey]) -> InjectionPoint:
    if isinstance(binding, _Reference):
        return binding.point(attribute)
    if isinstance(binding, (str, type)):
        return InjectionPoint(attribute, binding)
    raise TypeError(
        f"binding for {attribute!r} must be an inject.reference, a type key string or a class,"
        f" not {binding!r}"
    )


def bind(
    _post_constructs: Optional[Sequence[str]] = None, **bindings: Union[_Reference, TypeKey]
) -> Callable[[Type[T]], Type[T]]:
    """Decorator to declare the attributes an injector should fill in on instances of a class.

    Example:
        @inject.bind(engine=inject.reference(), wheel=inject.reference("wheel", name="front"))
        class Car: ...

    Parameters:
        _post_constructs: names of methods to call once injection is complete.
        bindings: attribute names mapped to an inject.reference, or to a bare type key.
    """
    points = [_to_point(attribute, binding) for attribute, binding in bindings.items()]

    def wrap(cls: Type[T]) -> Type[T]:
        """Decorate a class with injection points."""
        meta = _gen_meta(cls)
        for point in points:
            meta.add_point(point)
        for method_name in _post_constructs or ():
            meta.add_post_construct(method_name)
        return cls

    return wrap


def post_construct(func: F) -> F:
    """Decorator marking a method to be called, without arguments, after injection."""
    setattr(func, _POST_CONSTRUCT_ATTR, True)
    return func


def _marked_methods(cls: Type[Any]) -> List[str]:
    seen: List[str] = []
    # base classes first so overriding methods keep the base class position
    for klass in reversed(cls.__mro__):
        for attribute, value in vars(klass).items():
            if getattr(value, _POST_CONSTRUCT_ATTR, False) and attribute not in seen:
                seen.append(attribute)
    return seen
