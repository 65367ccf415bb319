"""Errors raised by the matching engine."""
from typing import Optional


class ValidationError(ValueError):
    """Raised when an input violates a precondition of a core operation."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def __str__(self) -> str:
        if self.field:
            return f"{self.field}: {self.message}"
        return self.message
