"""Exception types raised by unisim."""


class UnisimError(Exception):
    """Base exception for all unisim errors."""


class ValidationError(UnisimError):
    """Raised when input validation fails (invalid parameters, out of range values)."""


__all__ = ["UnisimError", "ValidationError"]
