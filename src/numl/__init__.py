"""Provides all numl methods."""

from importlib.metadata import PackageNotFoundError, version

from numl.errors import DerivativeZeroError, NumlError, TypError
from numl.finite.central import derivative
from numl.root_finding.newton import newton_step
from numl.scalar_kit import ScalarKit

try:
    __version__ = version("numl")
except PackageNotFoundError:
    pass

__all__ = [
    "derivative",
    "newton_step",
    "ScalarKit",
    "NumlError",
    "TypError",
    "DerivativeZeroError",
]
