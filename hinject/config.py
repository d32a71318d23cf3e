from typing import Any, Mapping, Optional, TypeVar, Union

from typing_extensions import TypedDict

# Unbound, invariant type variable
T = TypeVar("T")

DEFAULT_POST_CONSTRUCTS_ATTR = "post_constructs"


class InjectorConfig(TypedDict, total=False):
    """Configuration entries that apply to an injector and its children."""

    # Name of the attribute (or mapping key) on a target holding the sequence of
    # method names to call after injection.
    post_constructs_attr: str


InjectorInitConfig = Union[Mapping[str, Any], InjectorConfig]


class InjectorConfigWrapper:
    """Manages the configuration of an injector chain."""

    def __init__(self):
        self._impl: Mapping[str, Any] = {}

    def _from_dict(self, config_dict: InjectorInitConfig):
        """Configure the injector from a dictionary-like mapping.

        Parameters:
            config_dict: the configuration data to apply.
        """
        attr_name = config_dict.get("post_constructs_attr")
        if attr_name is not None and (not isinstance(attr_name, str) or not attr_name):
            raise ValueError(f"post_constructs_attr must be a non-empty string: {attr_name!r}")
        self._impl = config_dict

    def __contains__(self, key: str):
        return key in self._impl

    def get(self, key: str, default: Optional[T] = None) -> T:
        return self._impl.get(key, default)

    def __getitem__(self, key: str) -> Any:
        item: Optional[Any] = self.get(key)
        if item is None:
            raise KeyError(key)
        return item

    @property
    def post_constructs_attr(self) -> str:
        return self.get("post_constructs_attr", DEFAULT_POST_CONSTRUCTS_ATTR)
