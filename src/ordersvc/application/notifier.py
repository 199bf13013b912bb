"""Notifier port: abstract interface for outbound email."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Notifier(ABC):
    """Sends plain-text messages to a single recipient."""

    @abstractmethod
    def send(self, to: str, subject: str, body: str) -> None:
        """Deliver one message.

        Raises NotificationError when the relay rejects or cannot take
        the message.
        """
