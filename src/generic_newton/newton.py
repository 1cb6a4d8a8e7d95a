"""Newton's method as an infinite iterator."""

import logging
from typing import Generic, Iterator

from .custom_types import ScalarMap, T

logger = logging.getLogger(__name__)


class Newton(Generic[T]):
    """
    Successive Newton's method approximations to a root of `func`.

    Iterative update: $x_{n+1} = x_n - f(x_n) / f'(x_n)$

    Each call to `next()` applies the update once and returns the new value,
    so the first value produced is $x_1$, not the initial guess. The
    iterator never stops on its own; bound it with `itertools.islice`,
    `itertools.takewhile` or a convergence test of your own.

    Arithmetic is done with the value's own `-` and `/` operators and
    nothing is checked. A zero derivative raises `ZeroDivisionError` for
    Python `int` and `float`, and produces `inf`/`nan` for NumPy and JAX
    floating types, which then propagate through later steps.

    Attributes:
        current: Latest approximation (the initial guess before any step)
        func: Function whose root is sought
        derivative: Derivative of `func`

    Example usage:
    ```python
    import math
    from itertools import islice
    from generic_newton import Newton

    n = Newton(
        0.5,
        lambda x: math.cos(x) - x**3,
        lambda x: -(math.sin(x) + 3.0 * x**2),
    )
    root = next(islice(n, 1000, None))
    ```
    """

    def __init__(self, initial_guess: T, func: ScalarMap[T], derivative: ScalarMap[T]):
        self._current = initial_guess
        self._func = func
        self._derivative = derivative

    @classmethod
    def from_autodiff(cls, initial_guess: T, func: ScalarMap[T]) -> "Newton[T]":
        """
        Create a `Newton` iterator whose derivative is obtained with `jax.grad`.

        Args:
            initial_guess: Starting point. Must be a floating-point value.
            func: JAX-traceable scalar function

        Returns:
            A fresh `Newton` iterator.
        """
        from .trajectory import autodiff_derivative

        logger.debug("Building derivative of %r with jax.grad", func)
        return cls(initial_guess, func, autodiff_derivative(func))

    @property
    def current(self) -> T:
        return self._current

    @property
    def func(self) -> ScalarMap[T]:
        return self._func

    @property
    def derivative(self) -> ScalarMap[T]:
        return self._derivative

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        x = self._current
        self._current = x - self._func(x) / self._derivative(x)
        return self._current

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(current={self._current!r}, "
            f"func={self._func!r}, derivative={self._derivative!r})"
        )
