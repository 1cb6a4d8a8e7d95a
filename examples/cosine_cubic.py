import math
from itertools import islice

import jax.numpy as jnp

from generic_newton import Newton, newton_trajectory


def main(x0=0.5, tol=1e-12, max_steps=100):
    """
    Find the root of cos(x) - x^3 with the Newton iterator, stopping when
    successive approximations agree to within `tol`.

    Arguments:
        x0 - Initial guess (default 0.5)
        tol - Stopping tolerance between successive terms (default 1e-12)
        max_steps - Upper bound on the number of pulls (default 100)
    """
    n = Newton(
        x0,
        lambda x: math.cos(x) - x**3,  # function
        lambda x: -(math.sin(x) + 3.0 * x**2),  # derivative
    )

    # Stopping policy lives here, not in the iterator
    previous = x0
    for i, x in enumerate(islice(n, max_steps), start=1):
        print(f"Iter #{i} - Guessing {x}")
        if abs(x - previous) < tol:
            break
        previous = x

    # Same iteration, traced by JAX
    xs = newton_trajectory(
        x0,
        lambda x: jnp.cos(x) - x**3,
        lambda x: -(jnp.sin(x) + 3.0 * x**2),
        10,
    )
    print(f"JAX trajectory: {xs}")


if __name__ == "__main__":
    main()
