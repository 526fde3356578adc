"""Errors raised by the shop-floor calculators and services."""

from enum import Enum
from typing import Any, Optional


class ErrorType(str, Enum):
    """Error type reported in API error bodies."""

    INVALID_ARGUMENT = "invalid_argument"


class ShopfloorError(Exception):
    """Base class for errors with a type and structured details."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for API responses."""
        return {
            "type": self.error_type.value,
            "message": self.message,
            "details": self.details,
        }


class InvalidArgumentError(ShopfloorError, ValueError):
    """Raised when a calculator receives input outside its contract."""

    def __init__(self, argument: str, value: Any, message: str) -> None:
        super().__init__(
            message,
            ErrorType.INVALID_ARGUMENT,
            details={"argument": argument, "value": repr(value)},
        )
        self.argument = argument
        self.value = value
