from typing import Any, Optional

from .model import BindingKey, TypeKey


class HinjectError(Exception):
    pass


class MappingNotFoundError(HinjectError, KeyError):
    """Raised when a key has no mapping anywhere in the injector chain."""

    def __init__(self, type_key: TypeKey, name: Optional[str] = None) -> None:
        self.type_key = type_key
        self.name = name
        super().__init__(
            f'Cannot return instance "{BindingKey(type_key, name)}" because no mapping has been found'
        )

    @property
    def key(self) -> BindingKey:
        return BindingKey(self.type_key, self.name)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class InvalidParentInjectorError(HinjectError, TypeError):
    """Raised when a parent injector is neither an Injector nor None."""

    def __init__(
        self,
        value: Any,
        message: str = "Cannot set the parentInjector because it is not an injector",
    ) -> None:
        self.value = value
        super().__init__(message)
