"""
Generic Newton's method

Newton's method root-finding as a lazy, infinite iterator that works with
any numeric type supporting subtraction and division.

Main components:
- Newton: iterator over successive approximations
- newton_trajectory, newton_nth: JAX-traceable equivalents
"""

from .protocol import SupportsNewtonUpdate
from .newton import Newton
from .trajectory import newton_step, newton_trajectory, newton_nth, autodiff_derivative

__all__ = [
    # Iterator
    "Newton",
    "SupportsNewtonUpdate",

    # JAX helpers
    "newton_step",
    "newton_trajectory",
    "newton_nth",
    "autodiff_derivative",
]
