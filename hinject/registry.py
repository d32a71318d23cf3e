"""The MappingRegistry stores the binding rules owned by a single injector."""
import logging
from typing import Any, Dict, Iterator, Optional

from .model import (
    BindingKey,
    BindingRule,
    Factory,
    SingletonRule,
    TypeKey,
    TypeRule,
    ValueRule,
)

LOG = logging.getLogger(__name__)


class RuleBuilder:
    """Commits a rule for one key into a MappingRegistry.
    (you should not instantiate this class directly, instead use
    MappingRegistry.map or Injector.map)
    """

    def __init__(self, registry: "MappingRegistry", key: BindingKey) -> None:
        self._registry = registry
        self._key = key

    @property
    def key(self) -> BindingKey:
        return self._key

    def to_value(self, value: Any) -> None:
        """Resolve the key to the given value, by identity."""
        self._registry._commit(self._key, ValueRule(value))

    def to_type(self, factory: Factory[Any]) -> None:
        """Resolve the key to a new instance from factory on every request."""
        self._registry._commit(self._key, TypeRule(factory))

    def to_singleton(self, factory: Factory[Any]) -> None:
        """Resolve the key to one lazily created instance from factory."""
        self._registry._commit(self._key, SingletonRule(factory))

    def __repr__(self) -> str:
        return f"<RuleBuilder {self._key}>"


class MappingRegistry:
    """Mapping of binding keys to binding rules.

    Mapping a key a second time replaces the previous rule.
    """

    def __init__(self) -> None:
        self._rules: Dict[BindingKey, BindingRule] = {}

    def map(self, type_key: TypeKey, name: Optional[str] = None) -> RuleBuilder:
        return RuleBuilder(self, BindingKey(type_key, name))

    def _commit(self, key: BindingKey, rule: BindingRule) -> None:
        if key in self._rules:
            LOG.debug("replacing mapping for %s with %r", key, rule)
        else:
            LOG.debug("mapping %s to %r", key, rule)
        self._rules[key] = rule

    def get_rule(self, key: BindingKey) -> Optional[BindingRule]:
        return self._rules.get(key)

    def has_direct_mapping(self, type_key: TypeKey, name: Optional[str] = None) -> bool:
        return BindingKey(type_key, name) in self._rules

    def unmap(self, type_key: TypeKey, name: Optional[str] = None) -> None:
        key = BindingKey(type_key, name)
        if self._rules.pop(key, None) is not None:
            LOG.debug("unmapped %s", key)

    def clear(self) -> None:
        LOG.debug("clearing %d mappings", len(self._rules))
        self._rules.clear()

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, key: object) -> bool:
        return key in self._rules

    def __iter__(self) -> Iterator[BindingKey]:
        return iter(list(self._rules))
