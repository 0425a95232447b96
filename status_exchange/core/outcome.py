"""
Result type returned by StatusConsumer.fetch_and_process.

A failed fetch is an ExchangeFailure carrying the typed error, never ``None``,
so a zero count can't be confused with an unavailable responder.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Tuple, Union

from .errors import StatusExchangeError


@dataclass(frozen=True)
class ExchangeSuccess:
    value: int
    date: datetime

    ok = True

    def as_tuple(self) -> Tuple[int, datetime]:
        return (self.value, self.date)

    def unwrap(self) -> Tuple[int, datetime]:
        return self.as_tuple()


@dataclass(frozen=True)
class ExchangeFailure:
    error: StatusExchangeError

    ok = False

    def unwrap(self) -> Tuple[int, datetime]:
        """Re-raise the captured error."""
        raise self.error.with_traceback(None)


ExchangeOutcome = Union[ExchangeSuccess, ExchangeFailure]
