from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Query, Response
from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, Counter, generate_latest

from .. import __version__
from ..config import get_settings
from ..core.dates import parse_timestamp
from ..core.errors import DateParseError
from ..core.schemas import FIXED_STATUS, StatusPayload

logger = logging.getLogger(__name__)

STATUS_MEDIA_TYPE = "application/json;charset=utf-8"

router = APIRouter()

registry = CollectorRegistry()
RESPONSES = Counter(
    "status_exchange_responses_total",
    "Total status payload requests served",
    labelnames=("outcome",),
    registry=registry,
)


@router.get(
    "/healthz",
    tags=["health"],
    summary="Health Check",
    responses={200: {"content": {"application/json": {"example": {"status": "ok"}}}}}
)
def healthz() -> dict:
    """Health check endpoint to verify service availability."""
    return {"status": "ok"}


@router.get(
    "/version",
    tags=["health"],
    summary="Service Version",
    responses={
        200: {"content": {"application/json": {"example": {"service": "status-responder", "version": "0.1.0"}}}}
    }
)
def version() -> dict:
    """Get service name and version."""
    return {"service": get_settings().SERVICE_NAME, "version": __version__}


@router.get(
    "/metrics",
    tags=["metrics"],
    summary="Prometheus Metrics",
    response_description="Prometheus metrics in text format",
)
def metrics() -> Response:
    """Prometheus metrics endpoint."""
    data = generate_latest(registry)
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)


def render_status(payload: StatusPayload) -> str:
    return json.dumps(payload.model_dump(), indent=2)


def get_status(valid_date: str = Query(..., description="Date-time the status is requested for (HTTP-date or ISO-8601)")) -> Response:
    """
    Return the status payload.

    ``valid_date`` must parse as a date-time, but the response is the same
    fixed payload whatever its value.
    """
    try:
        valid_time = parse_timestamp(valid_date)
    except DateParseError:
        RESPONSES.labels(outcome="invalid_date").inc()
        raise

    logger.debug("Serving status payload", extra={"extra": {"valid_date": valid_time.isoformat()}})
    RESPONSES.labels(outcome="ok").inc()
    return Response(content=render_status(FIXED_STATUS), media_type=STATUS_MEDIA_TYPE)


def build_status_router(path: str) -> APIRouter:
    """Router serving the status payload at ``path``."""
    status_router = APIRouter()
    status_router.add_api_route(
        path,
        get_status,
        methods=["GET"],
        tags=["status"],
        summary="Status Payload",
        response_class=Response,
        responses={
            200: {
                "description": "Fixed status payload",
                "content": {"application/json": {"example": FIXED_STATUS.model_dump()}},
            },
            400: {"description": "valid_date could not be parsed"},
        },
    )
    return status_router
