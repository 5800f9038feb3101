"""Single-counter ticket queue."""

from __future__ import annotations

import logging
from collections import deque

from counterqueue.models import (
    FALLBACK_PREFIX,
    CallRecord,
    ServiceCategory,
    Ticket,
    format_label,
    service_name,
    service_prefix,
)
from counterqueue.time_utils import Clock, call_timestamp, now_utc

logger = logging.getLogger(__name__)

RECENT_CALLS_LIMIT = 5


class QueueManager:
    """Owns the waiting line, the ticket at the counter and the call history.

    Every operation runs to completion synchronously. Nothing here is
    thread-safe; one manager serves exactly one counter.
    """

    def __init__(self, clock: Clock = now_utc):
        self._clock = clock
        self._waiting: deque[Ticket] = deque()
        self._last_id = 0
        self._current: Ticket | None = None
        self._recent_calls: list[CallRecord] = []

    @property
    def waiting_count(self) -> int:
        return len(self._waiting)

    @property
    def waiting_tickets(self) -> tuple[Ticket, ...]:
        return tuple(self._waiting)

    @property
    def current_ticket(self) -> Ticket | None:
        return self._current

    @property
    def recent_calls(self) -> tuple[CallRecord, ...]:
        return tuple(self._recent_calls)

    def issue_ticket(self, service: ServiceCategory | str) -> Ticket:
        """Append a new ticket for ``service`` to the back of the line.

        Unknown categories are accepted and labelled with the ``X`` prefix.
        """
        self._last_id += 1
        name = service_name(service)
        if service_prefix(name) == FALLBACK_PREFIX:
            logger.debug("unrecognized service %r, using fallback prefix", name)

        ticket = Ticket(id=self._last_id, label=format_label(name, self._last_id), service=name)
        self._waiting.append(ticket)
        logger.info("issued ticket %s (%s), %s waiting", ticket.label, ticket.service, len(self._waiting))
        return ticket

    def call_next(self) -> Ticket | None:
        """Move the front ticket to the counter, or return None if nobody waits."""
        if not self._waiting:
            logger.info("call_next with empty queue")
            return None

        # Stamp first so a failing clock leaves the line untouched.
        called_at = call_timestamp(self._clock())
        ticket = self._waiting.popleft()
        if self._current is not None:
            logger.warning("ticket %s replaced before being finished", self._current.label)
        self._current = ticket

        record = CallRecord(
            label=ticket.label,
            service=ticket.service,
            called_at=called_at,
        )
        self._recent_calls.insert(0, record)
        del self._recent_calls[RECENT_CALLS_LIMIT:]
        logger.info("called ticket %s, %s waiting", ticket.label, len(self._waiting))
        return ticket

    def recall_current(self) -> Ticket | None:
        return self._current

    def finish_current(self) -> Ticket | None:
        done = self._current
        self._current = None
        if done is not None:
            logger.info("finished ticket %s", done.label)
        return done
