"""One quasi-Newton step with a numerically estimated derivative.

Iterating to convergence is left to the caller:

>>> from numl.root_finding.newton import newton_step
>>> f = lambda x: x**3 + 2.0 * x**2 - 0.4
>>> x = 1.0
>>> for _ in range(11):
...     x = newton_step(f, x, 0.5)
>>> 0.4 < x < 0.41
True
"""

from __future__ import annotations

import numpy as np

from numl.errors import DerivativeZeroError
from numl.finite.central import derivative
from numl.utils.types import ScalarFunction

__all__ = [
    "newton_step",
]


def newton_step(function: ScalarFunction, x: float, typ: float) -> float:
    """Returns the next Newton iterate ``x - f(x) / f'(x)``.

    The derivative comes from :func:`numl.finite.central.derivative` with the
    same ``typ``. ``function`` is evaluated three times in total: twice for
    the derivative and once at ``x``.

    Args:
        function: Pure scalar function ``f(x) -> float``.
        x: Current iterate.
        typ: Typical magnitude of ``x``, passed through to the derivative.

    Returns:
        The next iterate.

    Raises:
        TypError: If ``typ`` is exactly zero. Propagated unchanged from the
            derivative.
        DerivativeZeroError: If the estimated derivative is exactly zero.
            ``function(x)`` is not evaluated in that case.
    """
    deriv = derivative(function, x, typ)
    if deriv == 0.0:
        raise DerivativeZeroError()

    x = np.float64(x)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        step = np.float64(function(x)) / deriv
    return float(x - step)
