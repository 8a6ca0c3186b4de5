"""
Notification fan-out: listeners registered on an OrderTracker receive every status line pushed to it.
"""
import logging
from typing import Protocol

from pizzeria.metrics import notifications_sent_total

logger = logging.getLogger(__name__)


class Listener(Protocol):
    def update(self, status: str) -> None: ...


class Customer:
    """Console listener: prints each status it receives."""

    def __init__(self, name: str, output_fn=print) -> None:
        self.name = name
        self._output = output_fn

    def update(self, status: str) -> None:
        self._output(f"{self.name} notified: {status}")


class OrderTracker:
    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def register(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def notify(self, status: str) -> None:
        """Deliver status to every listener in registration order. Listener errors propagate."""
        # Snapshot so a listener registering another listener doesn't extend this round
        for listener in list(self._listeners):
            listener.update(status)
            notifications_sent_total.inc()
        logger.debug("Notified %d listener(s): %s", len(self._listeners), status)

    def __len__(self) -> int:
        return len(self._listeners)
