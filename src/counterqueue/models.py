"""Value objects for the counter queue."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

LABEL_DIGITS = 3
FALLBACK_PREFIX = "X"


class ServiceCategory(str, Enum):
    GENERAL = "GENERAL"
    PAYMENTS = "PAYMENTS"
    CONSULTATION = "CONSULTATION"

    @property
    def prefix(self) -> str:
        return _PREFIXES[self]


_PREFIXES = {
    ServiceCategory.GENERAL: "G",
    ServiceCategory.PAYMENTS: "P",
    ServiceCategory.CONSULTATION: "C",
}


def service_name(service: ServiceCategory | str) -> str:
    """Return the plain category string stored on tickets."""
    if isinstance(service, ServiceCategory):
        return service.value
    return str(service)


def service_prefix(service: ServiceCategory | str) -> str:
    """Map a category to its label prefix; unknown categories get ``X``."""
    try:
        return ServiceCategory(service_name(service)).prefix
    except ValueError:
        return FALLBACK_PREFIX


def format_label(service: ServiceCategory | str, ticket_id: int) -> str:
    # Wider ids grow the label instead of being truncated.
    return f"{service_prefix(service)}{str(ticket_id).zfill(LABEL_DIGITS)}"


@dataclass(frozen=True)
class Ticket:
    """One customer's place in line."""

    id: int
    label: str
    service: str


@dataclass(frozen=True)
class CallRecord:
    """Snapshot of a ticket being called to the counter."""

    label: str
    service: str
    called_at: datetime
