"""Type aliases to improve type hint readability."""

from typing import Callable, TypeAlias, TypeVar

from .protocol import SupportsNewtonUpdate

T = TypeVar("T", bound=SupportsNewtonUpdate)

ScalarMap: TypeAlias = Callable[[T], T]
