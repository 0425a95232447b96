"""
Structured error taxonomy for the status exchange.

Every failure the consumer can hit while fetching and transforming the
status payload maps to one error code, so callers can branch on the
category instead of parsing messages.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel


class ErrorCategory(str, Enum):
    """High-level error categories."""
    CONN = "CONN"
    HTTP = "HTTP"
    PARSE = "PARSE"
    FIELD = "FIELD"
    DATE = "DATE"


class ErrorCode(str, Enum):
    """
    Error codes for the status exchange.

    Format: {CATEGORY}_{SPECIFIC_CODE}
    """

    # Transport errors (CONN_xx)
    CONN_UNREACHABLE = "CONN_001"
    CONN_TIMEOUT = "CONN_002"

    # Response status errors (HTTP_xx)
    HTTP_UNSUCCESSFUL_STATUS = "HTTP_001"

    # Payload decoding errors (PARSE_xx)
    PARSE_INVALID_JSON = "PARSE_001"
    PARSE_INVALID_FIELD = "PARSE_002"

    # Payload shape errors (FIELD_xx)
    FIELD_MISSING = "FIELD_001"

    # Date handling errors (DATE_xx)
    DATE_UNPARSABLE = "DATE_001"


class ErrorDetail(BaseModel):
    """Actionable information attached to every StatusExchangeError."""
    code: ErrorCode
    message: str
    details: Optional[str] = None
    context: Dict[str, Any] = {}

    @property
    def category(self) -> ErrorCategory:
        """Extract error category from code."""
        return ErrorCategory(self.code.value.split("_")[0])

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging and API responses."""
        result = {
            "error_code": self.code.value,
            "category": self.category.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.context:
            result["context"] = self.context
        return result


class StatusExchangeError(Exception):
    """
    Base exception class with structured error information.

    All exchange-specific exceptions inherit from this so the consumer can
    turn any of them into an explicit failure outcome.
    """

    def __init__(self, error_detail: ErrorDetail):
        self.error_detail = error_detail
        super().__init__(error_detail.message)

    @property
    def code(self) -> ErrorCode:
        return self.error_detail.code

    @property
    def category(self) -> ErrorCategory:
        return self.error_detail.category


class ResponderConnectionError(StatusExchangeError):
    """The responder could not be reached, or did not answer in time."""

    @classmethod
    def unreachable(cls, url: str, reason: str) -> "ResponderConnectionError":
        return cls(ErrorDetail(
            code=ErrorCode.CONN_UNREACHABLE,
            message=f"Could not connect to responder at {url}",
            details=reason,
            context={"url": url},
        ))

    @classmethod
    def timeout(cls, url: str, timeout: float) -> "ResponderConnectionError":
        return cls(ErrorDetail(
            code=ErrorCode.CONN_TIMEOUT,
            message=f"Responder at {url} did not answer within {timeout}s",
            context={"url": url, "timeout": timeout},
        ))


class HttpStatusError(StatusExchangeError):
    """The responder answered with a non-2xx status."""

    def __init__(self, status_code: int, url: str, body: str = ""):
        self.status_code = status_code
        super().__init__(ErrorDetail(
            code=ErrorCode.HTTP_UNSUCCESSFUL_STATUS,
            message=f"Responder returned HTTP {status_code}",
            details=body[:200] or None,
            context={"status_code": status_code, "url": url},
        ))


class PayloadParseError(StatusExchangeError):
    """The response body is not a well-formed status payload."""

    @classmethod
    def invalid_json(cls, reason: str) -> "PayloadParseError":
        return cls(ErrorDetail(
            code=ErrorCode.PARSE_INVALID_JSON,
            message="Response body is not a JSON object",
            details=reason,
        ))

    @classmethod
    def invalid_field(cls, field: str, reason: str) -> "PayloadParseError":
        return cls(ErrorDetail(
            code=ErrorCode.PARSE_INVALID_FIELD,
            message=f"Field '{field}' has an invalid value",
            details=reason,
            context={"field": field},
        ))


class MissingFieldError(StatusExchangeError):
    """A required field is absent from the payload."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(ErrorDetail(
            code=ErrorCode.FIELD_MISSING,
            message=f"Required field '{field}' is missing from the payload",
            context={"field": field},
        ))


class DateParseError(StatusExchangeError):
    """A date-time string could not be parsed."""

    def __init__(self, value: str, details: Optional[str] = None):
        self.value = value
        super().__init__(ErrorDetail(
            code=ErrorCode.DATE_UNPARSABLE,
            message=f"Could not parse date-time value {value!r}",
            details=details,
            context={"value": value},
        ))
