from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class StatusPayload(BaseModel):
    """
    The JSON document exchanged between responder and consumer.

    ``test`` is a marker flag, ``date`` an ISO-8601-like timestamp and
    ``count`` a non-negative integer the consumer scales down by 100.
    """
    test: Optional[str] = Field(
        None,
        description="Status marker; the responder always sends 'NO'",
        examples=["NO"]
    )
    date: str = Field(
        ...,
        description="Date-time string, parsed leniently by the consumer",
        examples=["2013-08-16T15:31:20+10:00"]
    )
    count: int = Field(
        ...,
        description="Non-negative count; the consumer reports count // 100",
        examples=[1000],
        ge=0,
        strict=True
    )


FIXED_STATUS = StatusPayload(test="NO", date="2013-08-16T15:31:20+10:00", count=1000)


class ProblemDetails(BaseModel):
    """
    RFC 7807 Problem Details for HTTP APIs.
    """
    type: Optional[str] = Field(
        "about:blank",
        description="A URI reference that identifies the problem type"
    )
    title: Optional[str] = Field(
        None,
        description="A short, human-readable summary of the problem type"
    )
    status: Optional[int] = Field(
        None,
        description="The HTTP status code"
    )
    detail: Optional[str] = Field(
        None,
        description="A human-readable explanation specific to this occurrence"
    )
    instance: Optional[str] = Field(
        None,
        description="A URI reference that identifies the specific occurrence"
    )
    errorCode: Optional[str] = Field(
        None,
        description="Structured error code, e.g. DATE_001"
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "type": "https://status-exchange.local/problems/date-parse-error",
                    "title": "Invalid valid_date",
                    "status": 400,
                    "detail": "Could not parse date-time value 'yesterday-ish'",
                    "errorCode": "DATE_001"
                }
            ]
        }
    }
