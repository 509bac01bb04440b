"""Planet Wars error hierarchy.

Usage:
    from planet_wars.errors import ProtocolError

    try:
        session.handle_message(raw)
    except ProtocolError as e:
        logger.info(f"Rejected message: {e.message}")
"""

from enum import Enum
from typing import Any

__all__ = [
    "PlanetWarsError",
    "ProtocolError",
    "OrderValidationError",
    "ValidationErrorKind",
]


class PlanetWarsError(Exception):
    """Base exception for all Planet Wars errors.

    Attributes:
        code: Machine-readable error code for categorization
        message: Human-readable error description
        context: Additional context for debugging
    """

    code: str = "PLANET_WARS_ERROR"

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            return f"[{self.code}] {self.message} ({self.context})"
        return f"[{self.code}] {self.message}"


class ProtocolError(PlanetWarsError):
    """An inbound message could not be parsed or is not allowed right now.

    Answered with an ``error`` message; the round is not advanced.
    """

    code = "PROTOCOL_ERROR"


class ValidationErrorKind(str, Enum):
    """Reason a single move was rejected by the order validator."""

    SAME_SOURCE_TARGET = "same_source_target"
    ZERO_SHIPS = "zero_ships"
    UNKNOWN_SOURCE = "unknown_source"
    NOT_OWNER = "not_owner"
    UNKNOWN_TARGET = "unknown_target"
    INSUFFICIENT_SHIPS = "insufficient_ships"


class OrderValidationError(PlanetWarsError, ValueError):
    """A single move failed validation and is dropped from the order."""

    code = "INVALID_MOVE"

    def __init__(
        self,
        kind: ValidationErrorKind,
        message: str,
        *,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        self.kind = kind
