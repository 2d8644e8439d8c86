"""Provides the ScalarKit class.

A light wrapper that binds a scalar function and its typical scale, and
exposes the derivative and the Newton step at any point.

Typical usage examples:

>>> from numl.scalar_kit import ScalarKit
>>>
>>> def cubic(x):
...     return x**3 + 2.0 * x**2 - 0.4
>>>
>>> kit = ScalarKit(cubic, typ=0.5)
>>> round(kit.derivative(1.0), 6)
7.0
>>> x = 1.0
>>> for _ in range(11):
...     x = kit.newton_step(x)
"""

from numl.finite.central import derivative
from numl.root_finding.newton import newton_step
from numl.utils.types import ScalarFunction
from numl.utils.validate import validate_typ


class ScalarKit:
    """Provides access to the derivative and the Newton step of one function."""

    def __init__(self, function: ScalarFunction, typ: float = 1.0):
        """Initialise with function and typical scale.

        Args:
            function: Pure scalar function ``f(x) -> float``. Captured state
                must not change between calls.
            typ: Typical magnitude of the points the kit is evaluated at.
                Must be nonzero.

        Raises:
            TypError: If ``typ`` is exactly zero.
        """
        self.function = function
        self.typ = float(validate_typ(typ))

    def derivative(self, x: float) -> float:
        """Returns the central-difference derivative at ``x``."""
        return derivative(self.function, x, self.typ)

    def newton_step(self, x: float) -> float:
        """Returns the Newton iterate following ``x``."""
        return newton_step(self.function, x, self.typ)
