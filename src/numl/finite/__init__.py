"""Central finite-difference derivative estimation."""

from .central import derivative

__all__ = [
    "derivative",
]
