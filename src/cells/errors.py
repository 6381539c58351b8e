"""Exceptions raised by the cells package."""


class ValidationError(ValueError):
    """Raised when records, defaults or an ordering cannot form a cells matrix."""
