"""Unit tests for numl.scalar_kit."""

import pytest

from numl.errors import DerivativeZeroError, TypError
from numl.finite.central import derivative
from numl.root_finding.newton import newton_step
from numl.scalar_kit import ScalarKit


def sample_cubic(x):
    """Cubic with a real root near 0.4076."""
    return x**3 + 2.0 * x**2 - 0.4


def test_kit_forwards_to_free_functions():
    """Kit methods return what the free functions return."""
    kit = ScalarKit(sample_cubic, typ=0.5)
    assert kit.derivative(1.0) == derivative(sample_cubic, 1.0, 0.5)
    assert kit.newton_step(1.0) == newton_step(sample_cubic, 1.0, 0.5)


def test_kit_default_typ_is_one():
    """typ defaults to 1.0."""
    kit = ScalarKit(sample_cubic)
    assert kit.typ == 1.0
    assert kit.derivative(0.3) == derivative(sample_cubic, 0.3, 1.0)


def test_kit_rejects_zero_typ_on_construction():
    """A kit cannot be built with typ == 0."""
    with pytest.raises(TypError):
        ScalarKit(sample_cubic, typ=0.0)


def test_kit_newton_iteration_converges():
    """Caller-driven iteration with the kit finds the root."""
    kit = ScalarKit(sample_cubic, typ=0.5)
    x = 1.0
    for _ in range(11):
        x = kit.newton_step(x)
    assert 0.4 < x < 0.41


def test_kit_propagates_derivative_zero():
    """Kit surfaces DerivativeZeroError for a constant function."""
    kit = ScalarKit(lambda x: -2.0, typ=0.5)
    assert kit.derivative(4.0) == 0.0
    with pytest.raises(DerivativeZeroError):
        kit.newton_step(4.0)
