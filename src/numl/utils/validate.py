"""Validation utilities for numl."""

from __future__ import annotations

import numpy as np

from numl.errors import TypError

__all__ = [
    "validate_typ",
]


def validate_typ(typ: float) -> np.float64:
    """Checks the typical-scale hint and returns it as a float64.

    Only an exact zero is rejected. Tiny nonzero values are accepted even
    though they may degrade the accuracy of the step size; that choice is
    left to the caller.

    Args:
        typ: Expected order of magnitude of the evaluation point. The sign
            is ignored by the callers.

    Returns:
        ``typ`` converted to ``numpy.float64``.

    Raises:
        TypError: If ``typ`` equals ``0.0`` (either sign).
    """
    typ = np.float64(typ)
    if typ == 0.0:
        raise TypError()
    return typ
