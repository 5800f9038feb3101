"""Single-counter service queue."""

from .models import CallRecord, ServiceCategory, Ticket
from .services import QueueManager

__all__ = [
    "__version__",
    "CallRecord",
    "QueueManager",
    "ServiceCategory",
    "Ticket",
]

__version__ = "0.1.0"
