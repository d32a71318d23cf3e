from typing import Any, Callable, Optional, TypeVar
from unittest.mock import MagicMock

from typing_extensions import TypeAlias

from .model import BindingKey
from .targets import assign, injection_points

T = TypeVar("T")

MockingFunction: TypeAlias = Callable[[BindingKey], Any]

DEFAULT_MOCKING_FUNCTION: MockingFunction = lambda key: MagicMock(name=str(key))


def mock(target: T, mocking_function: Optional[MockingFunction] = None) -> T:
    """
    Replace every injection point of target with a mock, in place, without
    consulting an injector.

    Post-construct methods are not called, so the test can call them itself
    once the mocks are configured.

    Returns:
        target, for convenience.
    """
    mocking_f = mocking_function or DEFAULT_MOCKING_FUNCTION

    for attribute, key in injection_points(target):
        assign(target, attribute, mocking_f(key))

    return target
