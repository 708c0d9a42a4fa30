"""
Owned signal connections.

A `Subscription` wraps one Qt signal connection so the engine can keep every
connection it makes in a list and release them together on teardown.
"""

import logging
from typing import Callable, Iterable, List, Optional

from PyQt6.QtCore import pyqtBoundSignal

logger = logging.getLogger("SmartHidePanel.Subscriptions")


class Subscription:
    """
    A single signal-to-slot connection that can be cancelled exactly once.

    Cancelling an already cancelled subscription, or one whose sender has
    been deleted, is silently ignored.
    """

    def __init__(self, signal: pyqtBoundSignal, slot: Callable, label: str = "") -> None:
        self._signal: Optional[pyqtBoundSignal] = signal
        self._connection = signal.connect(slot)
        self.label = label or getattr(slot, "__name__", repr(slot))

    @property
    def active(self) -> bool:
        return self._signal is not None

    def cancel(self) -> None:
        signal = self._signal
        if signal is None:
            return
        self._signal = None
        try:
            signal.disconnect(self._connection)
        except (TypeError, RuntimeError) as e:
            # Sender already destroyed or connection already gone.
            logger.debug("Ignoring stale disconnect for %s: %s", self.label, e)
        finally:
            self._connection = None


def subscribe(signal: pyqtBoundSignal, slot: Callable, label: str = "") -> Subscription:
    """Connects `slot` to `signal` and returns the owning handle."""
    return Subscription(signal, slot, label)


def cancel_all(subscriptions: Iterable[Subscription]) -> int:
    """Cancels every handle in `subscriptions`. Returns how many were still active."""
    cancelled = 0
    for sub in list(subscriptions):
        if sub.active:
            cancelled += 1
        sub.cancel()
    return cancelled


class SubscriptionGroup:
    """A named list of subscriptions released together, e.g. all signals of one window."""

    def __init__(self) -> None:
        self._subscriptions: List[Subscription] = []

    def __len__(self) -> int:
        return len(self._subscriptions)

    def add(self, signal: pyqtBoundSignal, slot: Callable, label: str = "") -> Subscription:
        sub = subscribe(signal, slot, label)
        self._subscriptions.append(sub)
        return sub

    def cancel(self) -> int:
        count = cancel_all(self._subscriptions)
        self._subscriptions.clear()
        return count
