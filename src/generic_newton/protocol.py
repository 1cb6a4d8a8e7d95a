"""Protocol for values the Newton update can be applied to."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SupportsNewtonUpdate(Protocol):
    """
    Protocol for numeric values usable as Newton iterates.

    The update $x \\leftarrow x - f(x) / f'(x)$ only needs subtraction and
    true division. Python numbers, `fractions.Fraction`, `decimal.Decimal`,
    NumPy scalars and JAX arrays all satisfy it.

    Values are expected to be immutable, so that holding one never aliases
    mutable state.
    """

    def __sub__(self, other: Any, /) -> Any:
        ...

    def __truediv__(self, other: Any, /) -> Any:
        ...
