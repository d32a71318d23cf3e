from typing import Any, Optional

import pytest

from hinject.markers import Marker, format_marker, parse_marker


@pytest.mark.parametrize(
    ("value", "expected"),
    (
        ("inject", Marker("prop")),
        ('inject(name="one")', Marker("prop", "one")),
        ("inject:some_value", Marker("some_value")),
        ('inject(name="one"):some_value', Marker("some_value", "one")),
        ('inject(name="")', Marker("prop", "")),
        ("inject:pkg.module.Type", Marker("pkg.module.Type")),
    ),
    ids=("bare", "named", "typed", "named and typed", "empty name", "dotted type key"),
)
def test_parse_marker(value: str, expected: Marker) -> None:
    assert parse_marker("prop", value) == expected


@pytest.mark.parametrize(
    "value",
    (
        "",
        "Inject",
        "injected",
        " inject",
        "inject ",
        "inject:",
        "inject: some_value",
        'inject(name="one"',
        'inject(name="one',
        "inject(name='one')",
        "inject(one)",
        'inject(name="one"):',
        "hello world",
        None,
        42,
        ["inject"],
    ),
)
def test_parse_non_markers(value: Any) -> None:
    assert parse_marker("prop", value) is None


def test_parse_empty_name_is_not_absent_name() -> None:
    assert parse_marker("prop", 'inject(name="")').name == ""
    assert parse_marker("prop", "inject").name is None


@pytest.mark.parametrize(
    ("type_key", "name", "expected"),
    (
        (None, None, "inject"),
        (None, "one", 'inject(name="one")'),
        ("some_value", None, "inject:some_value"),
        ("some_value", "one", 'inject(name="one"):some_value'),
    ),
)
def test_format_marker(type_key: Optional[str], name: Optional[str], expected: str) -> None:
    assert format_marker(type_key, name) == expected
    parsed = parse_marker("prop", expected)
    assert parsed == Marker(type_key or "prop", name)


@pytest.mark.parametrize(
    ("type_key", "name"),
    (("", None), ("two words", None), (None, 'say "hi"')),
)
def test_format_marker_rejects_unparseable(type_key: Optional[str], name: Optional[str]) -> None:
    with pytest.raises(ValueError):
        format_marker(type_key, name)
