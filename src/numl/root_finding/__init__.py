"""Single-step root refinement."""

from .newton import newton_step

__all__ = [
    "newton_step",
]
