"""
The Injector is a hierarchical dependency injection container.

Bindings are registered on an injector by key: a type key string plus an
optional qualifier name. A binding resolves to a fixed value, to a new instance
on every request, or to a lazily created singleton:

from hinject import initialize
injector = initialize()
injector.map("url").to_value("http://localhost")
injector.map("api").to_singleton(MyApi)
injector.map("session", "admin").to_type(Session)
api = injector.get_instance("api")

Objects are wired by injecting into them. Every attribute whose current value is
an injection marker string is replaced by the instance it asks for, and the
methods named by the object's post_constructs attribute are called afterwards:

class MyApi:
    def __init__(self):
        self.url = "inject"
        self.admin = 'inject(name="admin"):session'
        self.post_constructs = ["connect"]

    def connect(self): ...

Instances built by to_type and to_singleton bindings are injected this way
before they are returned.

The attribute (or mapping key) holding the post-construct method names is
configurable, e.g. for targets written with camelCase keys:

injector = initialize({"post_constructs_attr": "postConstructs"})
injector.inject_into({"postConstructs": ["onPostConstruct"], "onPostConstruct": callback})

Child injectors see every binding of their ancestors and may shadow them
without affecting the parent:

child = injector.create_child_injector()
child.map("url").to_value("http://example.com")

Each injector is mapped under "injector" to itself, so objects can ask for the
injector that wired them.
"""
import logging
from typing import Any, Optional, Tuple, Union

from .config import InjectorConfigWrapper, InjectorInitConfig
from .errors import InvalidParentInjectorError, MappingNotFoundError
from .model import BindingKey, Resolver, TypeKey, resolve_rule
from .registry import MappingRegistry, RuleBuilder
from .targets import assign, call_method, injection_points, post_construct_names

LOG = logging.getLogger(__name__)

SELF_KEY = "injector"

InjectorKey = Union[TypeKey, Tuple[TypeKey, Optional[str]]]


def initialize(config: Optional[InjectorInitConfig] = None) -> "Injector":
    """Initialize a new root injector."""
    LOG.debug("initializing a new root injector")
    return Injector(config)


def _split_key(key: InjectorKey) -> Tuple[TypeKey, Optional[str]]:
    if isinstance(key, tuple):
        type_key, name = key
        return type_key, name
    return key, None


class Injector(Resolver):
    """Owns a set of bindings and resolves keys through its parent chain."""

    def __init__(
        self,
        config: Optional[InjectorInitConfig] = None,
        parent: Optional["Injector"] = None,
    ):
        self._registry = MappingRegistry()
        self._parent: Optional[Injector] = None
        self._config = InjectorConfigWrapper()

        if config is not None:
            self._config._from_dict(config)

        self.set_parent_injector(parent)
        self._registry.map(SELF_KEY).to_value(self)

    @property
    def config(self) -> InjectorConfigWrapper:
        return self._config

    @property
    def registry(self) -> MappingRegistry:
        """The bindings owned by this injector, excluding its ancestors."""
        return self._registry

    def map(self, type_key: TypeKey, name: Optional[str] = None) -> RuleBuilder:
        """Start a binding for (type_key, name) on this injector.

        Returns:
            A builder whose to_value, to_type or to_singleton method commits the binding.
        """
        return self._registry.map(type_key, name)

    def unmap(self, type_key: TypeKey, name: Optional[str] = None) -> None:
        """Remove the binding for (type_key, name) from this injector only."""
        self._registry.unmap(type_key, name)

    def has_mapping(self, type_key: TypeKey, name: Optional[str] = None) -> bool:
        """True if (type_key, name) is bound on this injector or any ancestor."""
        if self._registry.has_direct_mapping(type_key, name):
            return True
        if self._parent is not None:
            return self._parent.has_mapping(type_key, name)
        return False

    def has_direct_mapping(self, type_key: TypeKey, name: Optional[str] = None) -> bool:
        """True if (type_key, name) is bound on this injector itself."""
        return self._registry.has_direct_mapping(type_key, name)

    def get_instance(self, type_key: TypeKey, name: Optional[str] = None) -> Any:
        """Resolve (type_key, name), trying this injector first and then its ancestors.

        Raises:
            MappingNotFoundError: if no injector in the chain binds the key.
        """
        rule = self._registry.get_rule(BindingKey(type_key, name))
        if rule is not None:
            return resolve_rule(self, rule)

        if self._parent is not None:
            LOG.debug("%s not mapped locally, asking parent", BindingKey(type_key, name))
            return self._parent.get_instance(type_key, name)

        raise MappingNotFoundError(type_key, name)

    def inject_into(self, target: Any) -> None:
        """Replace the injection points of target with resolved instances, in place.

        Once every point is assigned, the post-construct methods of target are
        called in order, each exactly once.
        """
        points = injection_points(target)
        if points:
            LOG.debug("injecting %d attributes into %s", len(points), type(target).__name__)
        # resolve everything before assigning so a missing mapping leaves target untouched
        resolved = [(attribute, self.get_instance(key.type_key, key.name)) for attribute, key in points]
        for attribute, value in resolved:
            assign(target, attribute, value)

        for method_name in post_construct_names(target, self._config.post_constructs_attr):
            call_method(target, method_name)

    def create_child_injector(self) -> "Injector":
        """Create an injector whose parent is this one, sharing its configuration."""
        child = Injector(parent=self)
        child._config = self._config
        return child

    def get_parent_injector(self) -> Optional["Injector"]:
        return self._parent

    def set_parent_injector(self, parent: Optional["Injector"]) -> None:
        """
        Raises:
            InvalidParentInjectorError: if parent is neither an Injector nor None,
                or if parent is this injector or one of its descendants.
                The current parent is kept.
        """
        if parent is not None and not isinstance(parent, Injector):
            raise InvalidParentInjectorError(parent)

        ancestor = parent
        while ancestor is not None:
            if ancestor is self:
                raise InvalidParentInjectorError(
                    parent, "Cannot set the parentInjector because it would create a cycle"
                )
            ancestor = ancestor._parent

        self._parent = parent

    parent_injector = property(get_parent_injector, set_parent_injector)

    def teardown(self) -> None:
        """Remove every binding of this injector, including its own "injector" binding."""
        LOG.debug("tearing down %r", self)
        self._registry.clear()

    def __getitem__(self, key: InjectorKey) -> Any:
        """Resolve key, which is a type key or a (type key, name) pair.

        Raises:
            MappingNotFoundError: if no injector in the chain binds the key.
        """
        return self.get_instance(*_split_key(key))

    def __contains__(self, key: InjectorKey) -> bool:
        return self.has_mapping(*_split_key(key))

    def __repr__(self) -> str:
        depth = 0
        parent = self._parent
        while parent is not None:
            depth += 1
            parent = parent._parent
        return f"<Injector depth={depth} mappings={len(self._registry)}>"
