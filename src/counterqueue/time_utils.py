"""Clock helpers for call timestamps.

The queue never reads the wall clock directly: ``QueueManager`` takes a
``Clock`` and every call record is stamped through ``call_timestamp`` so
the history board always shows UTC instants.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable

import pytz

Clock = Callable[[], datetime]


def now_utc() -> datetime:
    return datetime.now(pytz.UTC)


def call_timestamp(value: object) -> datetime:
    """Normalize a clock reading into an aware UTC ``called_at``.

    Naive readings are taken to already be UTC. Anything that is not a
    datetime is rejected with ``TypeError``.
    """
    if not isinstance(value, datetime):
        raise TypeError(f"clock returned {type(value).__name__}, expected datetime")
    if value.tzinfo is None:
        return pytz.UTC.localize(value)
    return value.astimezone(pytz.UTC)
