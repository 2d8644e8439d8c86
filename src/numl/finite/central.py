"""Central finite-difference derivative with a scale-aware step size.

The step size is tied to the larger of ``|x|`` and the typical scale
``|typ|`` so that truncation error and floating-point cancellation stay
balanced over a wide dynamic range of ``x``. Near ``x = 0`` the typical
scale keeps the step from collapsing.

Examples:
--------
>>> from numl.finite.central import derivative
>>> f = lambda x: x**3 + 2.0 * x**2 - 0.4
>>> round(derivative(f, 1.0, 0.5), 6)
7.0
"""

from __future__ import annotations

import numpy as np

from numl.logger import numl_logger
from numl.utils.types import ScalarFunction
from numl.utils.validate import validate_typ

__all__ = [
    "CBRT_EPS",
    "derivative",
]

#: Cube root of float64 machine epsilon, the relative step of a central difference.
CBRT_EPS = np.cbrt(np.finfo(np.float64).eps)


def _central_step_size(x: np.float64, typ: np.float64) -> np.float64:
    """Returns the step h for a central difference at ``x``.

    Uses ``CBRT_EPS * x`` when ``|x| > |typ|`` and ``CBRT_EPS * |typ|``
    otherwise. The first branch keeps the sign of ``x``.
    """
    if np.abs(x) > np.abs(typ):
        return CBRT_EPS * x
    return CBRT_EPS * np.abs(typ)


def derivative(function: ScalarFunction, x: float, typ: float) -> float:
    """Estimates the first derivative of ``function`` at ``x``.

    Computes ``(f(x + h) - f(x - h)) / (2h)`` with ``h`` chosen from ``x``
    and ``typ``. The function is evaluated exactly twice, at ``x + h`` and
    then at ``x - h``.

    Non-finite values are not intercepted. If ``function`` returns ``NaN``
    or ``inf``, or if the step underflows to zero, the result is the
    corresponding ``NaN``/``inf`` value rather than an exception.

    Args:
        function: Pure scalar function ``f(x) -> float``.
        x: The point at which the derivative is evaluated.
        typ: Typical magnitude of ``x``. Must be nonzero; only its absolute
            value is used.

    Returns:
        The central-difference estimate of ``f'(x)``.

    Raises:
        TypError: If ``typ`` is exactly zero. Raised before ``function`` is
            evaluated.
    """
    typ = validate_typ(typ)
    x = np.float64(x)

    h = _central_step_size(x, typ)
    numl_logger.debug("central difference at x=%r uses step h=%r", float(x), float(h))

    f_plus = np.float64(function(x + h))
    f_minus = np.float64(function(x - h))

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        deriv = (f_plus - f_minus) / (2.0 * h)
    return float(deriv)
