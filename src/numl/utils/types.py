"""Shared typing aliases for numl."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

import numpy as np

Float: TypeAlias = float | np.floating

# Must be pure: the same input returns the same output for the duration of a call.
ScalarFunction: TypeAlias = Callable[[float], Float]
