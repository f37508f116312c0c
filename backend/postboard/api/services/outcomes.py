"""
Tagged results returned by the post service.

Every service call ends in exactly one of four outcomes; the API layer turns
an outcome into an HTTP response in a single place (see api/errors.py).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

from backend.postboard.api.schemas import FieldViolation

NOT_FOUND_MESSAGE = "Post not found"


class OutcomeKind(str, Enum):
    """
    Kind of service outcome.

    Values:
        OK: Operation succeeded; value holds the result (may be None).
        INVALID: Payload failed validation; violations lists the reasons.
        NOT_FOUND: Identifier missing or malformed.
        STORE_ERROR: The document store failed; error holds the cause.
    """

    OK = "ok"
    INVALID = "invalid"
    NOT_FOUND = "not_found"
    STORE_ERROR = "store_error"


@dataclass
class PostOutcome:
    """Result of one post service operation."""

    kind: OutcomeKind
    value: Any = None
    violations: List[FieldViolation] = field(default_factory=list)
    message: Optional[str] = None
    error: Optional[Exception] = None

    @classmethod
    def ok(cls, value: Any = None) -> "PostOutcome":
        """Successful outcome carrying the result (None for no content)."""
        return cls(OutcomeKind.OK, value=value)

    @classmethod
    def invalid(cls, violations: List[FieldViolation]) -> "PostOutcome":
        """Validation failure listing one violation per field."""
        return cls(OutcomeKind.INVALID, violations=list(violations))

    @classmethod
    def not_found(cls, message: str = NOT_FOUND_MESSAGE) -> "PostOutcome":
        """Missing or malformed identifier."""
        return cls(OutcomeKind.NOT_FOUND, message=message)

    @classmethod
    def store_error(cls, error: Exception) -> "PostOutcome":
        """Document store failure; the cause is kept for logging."""
        return cls(OutcomeKind.STORE_ERROR, error=error)

    @property
    def is_ok(self) -> bool:
        """True when the operation succeeded."""
        return self.kind is OutcomeKind.OK
