"""Utility functions for numl package."""

from .types import ScalarFunction
from .validate import validate_typ

__all__ = [
    "ScalarFunction",
    "validate_typ",
]
