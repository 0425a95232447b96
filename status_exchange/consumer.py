"""
HTTP consumer for the responder's status payload.

StatusConsumer issues ``GET {base_url}{path}?valid_date=<HTTP-date>``, decodes
the JSON body into a StatusPayload and reduces it to ``(count // 100, date)``.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Callable, Optional
from urllib.parse import quote, urlencode

import requests
from pydantic import ValidationError

from .config import Settings
from .core.dates import format_http_date, parse_timestamp
from .core.errors import (
    HttpStatusError,
    MissingFieldError,
    PayloadParseError,
    ResponderConnectionError,
    StatusExchangeError,
)
from .core.outcome import ExchangeFailure, ExchangeOutcome, ExchangeSuccess
from .core.schemas import StatusPayload
from .logging_setup import request_id

logger = logging.getLogger(__name__)

DEFAULT_PATH = "/provider.json"
REQUIRED_FIELDS = ("count", "date")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def decode_payload(body: str) -> StatusPayload:
    """Decode a response body into a StatusPayload, raising typed errors."""
    try:
        data = json.loads(body)
    except json.JSONDecodeError as exc:
        raise PayloadParseError.invalid_json(str(exc)) from exc

    if not isinstance(data, dict):
        raise PayloadParseError.invalid_json(f"expected an object, got {type(data).__name__}")

    for field in REQUIRED_FIELDS:
        if field not in data:
            raise MissingFieldError(field)

    try:
        return StatusPayload.model_validate(data)
    except ValidationError as exc:
        error = exc.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or "payload"
        raise PayloadParseError.invalid_field(field, error["msg"]) from exc


class StatusConsumer:
    """
    Client for the responder's status endpoint.

    Args:
        base_url: Scheme, host and port of the responder, e.g. ``http://localhost:8081``
        path: Endpoint path on the responder
        timeout: Request timeout in seconds; expiry surfaces as ResponderConnectionError
        session: Optional requests session; one is created (and owned) if omitted
        clock: Zero-argument callable returning the time sent as ``valid_date``
    """

    def __init__(
        self,
        base_url: str,
        *,
        path: str = DEFAULT_PATH,
        timeout: float = 5.0,
        session: Optional[requests.Session] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.path = path if path.startswith("/") else f"/{path}"
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.clock = clock or _utc_now

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "StatusConsumer":
        return cls(
            settings.RESPONDER_BASE_URL,
            path=settings.RESPONDER_PATH,
            timeout=settings.REQUEST_TIMEOUT_SECONDS,
            **kwargs,
        )

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "StatusConsumer":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def build_url(self, now: Optional[datetime] = None) -> str:
        """Endpoint URL with ``valid_date`` set to ``now`` (default: the clock) as an HTTP-date."""
        moment = now or self.clock()
        query = urlencode({"valid_date": format_http_date(moment)}, quote_via=quote)
        return f"{self.base_url}{self.path}?{query}"

    def load_payload(self) -> StatusPayload:
        """
        Fetch and decode the status payload.

        Raises:
            ResponderConnectionError: network failure or timeout
            HttpStatusError: non-2xx response
            PayloadParseError: body is not a valid status payload
            MissingFieldError: ``count`` or ``date`` absent
        """
        url = self.build_url()
        rid = request_id()
        logger.info("Requesting status payload", extra={"extra": {"url": url, "request_id": rid}})

        try:
            response = self.session.get(
                url,
                headers={"Accept": "application/json", "X-Request-ID": rid},
                timeout=self.timeout,
            )
        except requests.Timeout as exc:
            raise ResponderConnectionError.timeout(url, self.timeout) from exc
        except requests.RequestException as exc:
            raise ResponderConnectionError.unreachable(url, str(exc)) from exc

        if not 200 <= response.status_code < 300:
            raise HttpStatusError(response.status_code, url, response.text or "")

        return decode_payload(response.text)

    def process_payload(self, payload: StatusPayload) -> ExchangeSuccess:
        """Reduce a payload to ``(count // 100, parsed date)``."""
        return ExchangeSuccess(value=payload.count // 100, date=parse_timestamp(payload.date))

    def fetch_and_process(self) -> ExchangeOutcome:
        """
        One full round trip: fetch, decode, transform.

        Never returns ``None``: every StatusExchangeError becomes an
        ExchangeFailure carrying the typed error. Use
        ``outcome.unwrap()`` to get the pair or re-raise.
        """
        try:
            result = self.process_payload(self.load_payload())
        except StatusExchangeError as exc:
            logger.warning("Status exchange failed", extra={"extra": exc.error_detail.to_dict()})
            return ExchangeFailure(exc)

        logger.info(
            "Status payload processed",
            extra={"extra": {"value": result.value, "date": result.date.isoformat()}},
        )
        return result
