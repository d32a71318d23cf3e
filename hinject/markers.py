"""
Injection markers are strings stored as the current value of an attribute.

    inject                  -> type key is the attribute name
    inject(name="Q")        -> type key is the attribute name, qualified by Q
    inject:K                -> type key is K
    inject(name="Q"):K      -> type key is K, qualified by Q

Any other value, including near misses such as an unterminated quote, is not a
marker and is left alone.
"""
import re
from typing import Any, NamedTuple, Optional

KEYWORD = "inject"

_MARKER_RE = re.compile(
    r"""
    inject
    (?:\(name="(?P<name>[^"]*)"\))?
    (?::(?P<type_key>\S+))?
    """,
    re.VERBOSE,
)


class Marker(NamedTuple):
    type_key: str
    name: Optional[str] = None


def parse_marker(attribute: str, value: Any) -> Optional[Marker]:
    """Parse the value of attribute as an injection marker.

    Returns:
        The marker, or None if value is not a marker string.
    """
    if not isinstance(value, str):
        return None
    match = _MARKER_RE.fullmatch(value)
    if match is None:
        return None
    return Marker(match.group("type_key") or attribute, match.group("name"))


def format_marker(type_key: Optional[str] = None, name: Optional[str] = None) -> str:
    """Build the marker string requesting type_key (or the attribute name) and name."""
    if name is not None and '"' in name:
        raise ValueError(f"marker names cannot contain a double quote: {name!r}")
    if type_key is not None and (not type_key or re.search(r"\s", type_key)):
        raise ValueError(f"invalid marker type key: {type_key!r}")

    marker = KEYWORD
    if name is not None:
        marker += f'(name="{name}")'
    if type_key is not None:
        marker += f":{type_key}"
    return marker
