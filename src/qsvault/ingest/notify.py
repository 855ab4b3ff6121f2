import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class Notifier(ABC):
    """Posts human-readable status messages back to the ticket thread."""

    @abstractmethod
    async def notify(self, message: str) -> None: ...


async def safe_notify(notifier: Notifier | None, message: str) -> None:
    """Send a message if a notifier is configured; never raises."""
    if notifier is None:
        return
    try:
        await notifier.notify(message)
    except Exception:
        logger.exception("Failed to post notification")
