"""
Newton iterations written with JAX control flow.

These are the traceable counterparts of pulling values from a `Newton`
iterator, for use inside `jax.jit`, `jax.vmap` and friends where Python
iteration cannot be traced. They follow the same convention: the first
value is the guess after one update.
"""

import logging
from functools import partial

import jax
from jax import Array
import jax.numpy as jnp

from .custom_types import ScalarMap

logger = logging.getLogger(__name__)


def newton_step(x, func: ScalarMap, derivative: ScalarMap):
    """
    Apply a single Newton update, $x - f(x) / f'(x)$.

    Args:
        x: Current approximation
        func: Function whose root is sought
        derivative: Derivative of func

    Returns:
        Next approximation
    """
    return x - func(x) / derivative(x)


def autodiff_derivative(func: ScalarMap) -> ScalarMap:
    """Derivative of a scalar JAX-traceable function, via `jax.grad`."""
    return jax.grad(func)


def _check_count(value: int, name: str) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be a Python int, got {type(value).__name__}.")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}.")


def _as_carry(initial_guess) -> Array:
    # Integer guesses become floating point after one true division
    x0 = jnp.asarray(initial_guess)
    dtype = x0.dtype if jnp.issubdtype(x0.dtype, jnp.inexact) else jnp.result_type(float)
    return jnp.asarray(x0, dtype=dtype)


@partial(jax.jit, static_argnames=['func', 'derivative', 'num_steps'])
def newton_trajectory(
    initial_guess,
    func: ScalarMap,
    derivative: ScalarMap,
    num_steps: int,
) -> Array:
    """
    Compute the first `num_steps` Newton approximations.

    Equivalent to `jnp.stack(list(islice(Newton(x0, f, df), num_steps)))`,
    but traceable.

    Args:
        initial_guess: Starting point $x_0$
        func: Function whose root is sought
        derivative: Derivative of func
        num_steps: Number of updates to apply (static)

    Returns:
        Array of shape (num_steps, *x0.shape) holding $x_1, ..., x_N$

    Raises:
        TypeError: If num_steps is not a Python int
        ValueError: If num_steps is negative
    """
    _check_count(num_steps, "num_steps")
    logger.debug("Tracing newton_trajectory with num_steps=%d", num_steps)

    x0 = _as_carry(initial_guess)

    def body_fun(x, _):
        x_next = jnp.asarray(newton_step(x, func, derivative)).astype(x.dtype)
        return x_next, x_next

    _, xs = jax.lax.scan(body_fun, x0, xs=None, length=num_steps)
    return xs


@partial(jax.jit, static_argnames=['func', 'derivative', 'n'])
def newton_nth(
    initial_guess,
    func: ScalarMap,
    derivative: ScalarMap,
    n: int,
) -> Array:
    """
    Value of the zero-based `n`-th pull, i.e. $x_{n+1}$.

    Equivalent to `next(islice(Newton(x0, f, df), n, None))`, but traceable.

    Args:
        initial_guess: Starting point $x_0$
        func: Function whose root is sought
        derivative: Derivative of func
        n: Zero-based index of the value to return (static)

    Returns:
        The approximation after n + 1 updates
    """
    _check_count(n, "n")
    logger.debug("Tracing newton_nth with n=%d", n)

    x0 = _as_carry(initial_guess)

    def body_fun(_, x):
        return jnp.asarray(newton_step(x, func, derivative)).astype(x.dtype)

    return jax.lax.fori_loop(0, n + 1, body_fun, x0)
