"""Helpers for reading and writing the attributes of injection targets.

A target is any object. Its properties are:
- the items of a mutable mapping (string keys only),
- the fields of an attrs class, including slotted ones,
- otherwise the instance __dict__.
Objects with none of these have no properties.
"""
from typing import Any, Dict, List, Mapping, MutableMapping, Sequence, Tuple

import attr

from .inject import _marked_methods
from .markers import parse_marker
from .metadata import _get_meta
from .model import BindingKey

_MISSING = object()


def own_properties(target: Any) -> List[Tuple[str, Any]]:
    """Snapshot the (name, value) pairs of target's own properties."""
    if isinstance(target, Mapping):
        return [(key, value) for key, value in target.items() if isinstance(key, str)]

    props: Dict[str, Any] = {}
    cls = type(target)
    if attr.has(cls):
        for field in attr.fields(cls):
            value = getattr(target, field.name, _MISSING)
            if value is not _MISSING:
                props[field.name] = value
    props.update(getattr(target, "__dict__", None) or {})
    return list(props.items())


def assign(target: Any, attribute: str, value: Any) -> None:
    if isinstance(target, MutableMapping):
        target[attribute] = value
    else:
        setattr(target, attribute, value)


def injection_points(target: Any) -> List[Tuple[str, BindingKey]]:
    """List the attributes of target to inject, with the key each one requests.

    Points declared on the class come first, in declaration order, followed by
    properties whose current value is a marker string.
    """
    points: List[Tuple[str, BindingKey]] = []
    seen = set()

    meta = _get_meta(type(target))
    if meta is not None:
        for point in meta.points:
            points.append((point.attribute, point.key))
            seen.add(point.attribute)

    for attribute, value in own_properties(target):
        if attribute in seen:
            continue
        marker = parse_marker(attribute, value)
        if marker is not None:
            points.append((attribute, BindingKey(marker.type_key, marker.name)))

    return points


def post_construct_names(target: Any, declared_attr: str) -> List[str]:
    """Names of the methods to call after injection, each listed once.

    The sequence held by the declared_attr property comes first, then names
    from class metadata, then methods marked with inject.post_construct.
    """
    if isinstance(target, Mapping):
        declared = target.get(declared_attr)
    else:
        declared = getattr(target, declared_attr, None)

    if declared is None:
        names: Sequence[str] = []
    elif isinstance(declared, str):
        names = [declared]
    else:
        names = list(declared)

    meta = _get_meta(type(target))
    if meta is not None:
        names = [*names, *meta.post_constructs]
    names = [*names, *_marked_methods(type(target))]

    # dict keeps first-seen order
    return list(dict.fromkeys(names))


def call_method(target: Any, method_name: str) -> Any:
    if isinstance(target, Mapping):
        return target[method_name]()
    return getattr(target, method_name)()
