"""Metadata declares, per class, which attributes an injector should fill in."""

from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar

import attr

from .model import BindingKey, TypeKey

T_co = TypeVar("T_co", covariant=True)

_INJECT_METADATA_ATTR = "_inject_meta"


@attr.frozen
class InjectionPoint:
    """An attribute to be assigned the instance resolved for (type_key, name).
    A type_key of None means the attribute name is the type key.
    """

    attribute: str
    type_key: Optional[TypeKey] = None
    name: Optional[str] = None

    @property
    def key(self) -> BindingKey:
        return BindingKey(self.attribute if self.type_key is None else self.type_key, self.name)


def _get_meta(cls: Type[Any], include_bases: bool = True) -> "Optional[InjectionMetadata[Any]]":
    """
    Get the injection metadata from a class and possibly its base classes.
    Parameters:
        cls: the type for which to get metadata.
        include_bases: True to return any base class metadata, False to only check cls.
    Returns:
        Injection metadata describing the given cls if found, otherwise None
    """
    if include_bases:
        return getattr(cls, _INJECT_METADATA_ATTR, None)
    else:
        return cls.__dict__.get(_INJECT_METADATA_ATTR)


def _gen_meta(cls: Type[T_co]) -> "InjectionMetadata[T_co]":
    """
    Get the injection metadata from a class, generating it if missing.
    If the provided class has base classes with metadata defined but not its own, the new metadata
    instance returned starts from a copy of the base class metadata.
    """
    meta: Optional[InjectionMetadata] = _get_meta(cls)
    if meta is None or _INJECT_METADATA_ATTR not in cls.__dict__:
        if meta:
            meta = InjectionMetadata(
                cls, points=meta.points, post_constructs=meta.post_constructs
            )
        else:
            meta = InjectionMetadata(cls)
        setattr(cls, _INJECT_METADATA_ATTR, meta)
    return meta


class InjectionMetadata(Generic[T_co]):
    """Injection points and post-construct method names declared on a class."""

    def __init__(
        self,
        cls: Type[T_co],
        points: Optional[Sequence[InjectionPoint]] = None,
        post_constructs: Optional[Sequence[str]] = None,
    ):
        self._cls = cls
        self._points: Dict[str, InjectionPoint] = {p.attribute: p for p in points or ()}
        self._post_constructs: List[str] = list(post_constructs or ())

    @property
    def points(self) -> Sequence[InjectionPoint]:
        """Injection points in declaration order."""
        return list(self._points.values())

    @property
    def post_constructs(self) -> Sequence[str]:
        return list(self._post_constructs)

    def add_point(self, point: InjectionPoint) -> None:
        # redeclaring an attribute replaces it but keeps its original position
        self._points[point.attribute] = point

    def add_post_construct(self, method_name: str) -> None:
        if method_name not in self._post_constructs:
            self._post_constructs.append(method_name)

    def __repr__(self) -> str:
        return f"<InjectionMetadata {self._cls.__name__} points={self.points!r}>"
