import pytest

from hinject import initialize
from hinject.config import DEFAULT_POST_CONSTRUCTS_ATTR, InjectorConfigWrapper


class AfterInject:
    def __init__(self):
        self.after_inject = ["ready"]
        self.post_constructs = ["not_called"]
        self.calls = []

    def ready(self):
        self.calls.append("ready")

    def not_called(self):
        self.calls.append("not_called")


def test_default_post_constructs_attr() -> None:
    injector = initialize()
    assert injector.config.post_constructs_attr == DEFAULT_POST_CONSTRUCTS_ATTR

    target = AfterInject()
    injector.inject_into(target)
    assert target.calls == ["not_called"]


def test_custom_post_constructs_attr() -> None:
    injector = initialize({"post_constructs_attr": "after_inject"})

    target = AfterInject()
    injector.inject_into(target)
    assert target.calls == ["ready"]


def test_post_constructs_attr_shared_with_children() -> None:
    child = initialize({"post_constructs_attr": "after_inject"}).create_child_injector()

    target = AfterInject()
    child.inject_into(target)
    assert target.calls == ["ready"]


@pytest.mark.parametrize("value", ["", 1])
def test_invalid_post_constructs_attr(value) -> None:
    with pytest.raises(ValueError):
        initialize({"post_constructs_attr": value})


def test_config_wrapper_mapping() -> None:
    wrapper = InjectorConfigWrapper()
    wrapper._from_dict({"post_constructs_attr": "after", "other": 1})

    assert "other" in wrapper
    assert wrapper["other"] == 1
    assert wrapper.get("missing", "default") == "default"
    with pytest.raises(KeyError):
        wrapper["missing"]  # pylint: disable=pointless-statement
