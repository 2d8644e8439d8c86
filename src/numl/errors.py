"""Exception classes raised by numl."""

__all__ = [
    "NumlError",
    "TypError",
    "DerivativeZeroError",
]


class NumlError(Exception):
    """Base exception for numl errors."""

    pass


class TypError(NumlError, ValueError):
    """Raised when the typical scale ``typ`` is exactly zero."""

    def __init__(self, message: str = "typ must be nonzero") -> None:
        super().__init__(message)


class DerivativeZeroError(NumlError, ArithmeticError):
    """Raised when a Newton step meets a derivative that is exactly zero."""

    def __init__(
        self,
        message: str = "Derivative calculated to zero, but needs to be nonzero",
    ) -> None:
        super().__init__(message)
