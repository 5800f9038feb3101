from .queue_manager import RECENT_CALLS_LIMIT, QueueManager

__all__ = [
    "QueueManager",
    "RECENT_CALLS_LIMIT",
]
