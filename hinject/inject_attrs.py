from importlib.metadata import version as importlib_version
from typing import Any, Dict, List, Optional, Type, TypeVar

from attr import define, field
from packaging import version

from .markers import format_marker

_T = TypeVar("_T")

_INJECT_DEFINE_DEFINE_KWARGS_DEFAULT_VAL: Dict[str, Any] = {}


class _AttrDefineKwarg:
    """
    Class to hold kwargs for attr.define, along with the attrs versions in which
    the parameter is accepted.
    """

    def __init__(
        self,
        key_word: str,
        attr_version_start: str,
        attr_version_end: Optional[str] = None,
        value: bool = False,
    ) -> None:
        self.key_word = key_word
        self.attr_version_start = attr_version_start
        self.attr_version_end = attr_version_end
        self.value = value


# Injected classes keep a plain __init__ and stay writable: injection assigns
# to fields after construction, so frozen and slotted classes are turned off.
_ATTRS_DEFINE_INJECTABLE: List[_AttrDefineKwarg] = [
    _AttrDefineKwarg("init", "0.0.0", value=True),
    _AttrDefineKwarg("repr", "0.0.0", value=True),
    _AttrDefineKwarg("slots", "16.0.0"),
    _AttrDefineKwarg("frozen", "16.1.0"),
    _AttrDefineKwarg("eq", "19.2.0"),
    _AttrDefineKwarg("order", "19.2.0"),
    _AttrDefineKwarg("match_args", "21.3.0"),
]


def _get_compatible_attrs_define_kwargs() -> Dict[str, bool]:
    """
    get kwargs compatible with current running version of attrs
    """
    parsed_attr_version = version.parse(importlib_version("attrs"))
    attrs_define_kwargs: Dict[str, bool] = {}
    for kwarg in _ATTRS_DEFINE_INJECTABLE:
        if version.parse(kwarg.attr_version_start) > parsed_attr_version:
            continue
        if (
            kwarg.attr_version_end is not None
            and version.parse(kwarg.attr_version_end) < parsed_attr_version
        ):
            continue
        attrs_define_kwargs[kwarg.key_word] = kwarg.value
    return attrs_define_kwargs


def inject_field(
    type_key: Optional[str] = None, name: Optional[str] = None, **attr_field_kwargs: Any
) -> Any:
    """
    Wrapper around attr.field whose default is an injection marker, so that
    instances created without a value for the field are filled in by
    Injector.inject_into.

    Parameters:
        type_key: the type key to inject, defaults to the field name.
        name: optional qualifier name of the binding.
        attr_field_kwargs: passed to attr.field; may not include a default.
    """
    if "default" in attr_field_kwargs or "factory" in attr_field_kwargs:
        raise TypeError("inject_field provides the field default, do not pass one")
    return field(default=format_marker(type_key, name), **attr_field_kwargs)


def inject_define(
    maybe_cls: Optional[Type[_T]] = None,
    define_kwargs: Dict[str, Any] = _INJECT_DEFINE_DEFINE_KWARGS_DEFAULT_VAL,
):
    """Wrapper around attr.define producing classes that can be injected into.

    Parameters:
        define_kwargs: attrs keyword arguments to use instead of the defaults.
    """
    attrs_kwargs: Dict[str, Any] = {}
    if define_kwargs is not _INJECT_DEFINE_DEFINE_KWARGS_DEFAULT_VAL:
        attrs_kwargs = define_kwargs
    else:
        attrs_kwargs = _get_compatible_attrs_define_kwargs()

    def inject_define_inner(cls: Type[_T]) -> Type[_T]:
        return define(cls, **attrs_kwargs)

    if maybe_cls is None:
        return inject_define_inner

    return inject_define_inner(maybe_cls)
