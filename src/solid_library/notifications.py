"""
Notification channels.

A channel delivers a text message to a recipient and reports whether it
accepted the message. Callers rely only on that boolean, so any channel
can stand in for any other.
"""

import logging
import sys
from abc import ABC, abstractmethod
from typing import TextIO

logger = logging.getLogger(__name__)


class NotificationChannel(ABC):
    """Strategy for delivering a message to a user."""

    @abstractmethod
    def send(self, message: str, recipient: str) -> bool:
        """
        Send ``message`` to ``recipient``.

        Returns:
            True if the message was accepted for delivery
        """


class StreamNotificationChannel(NotificationChannel):
    """
    Channel that "delivers" by writing one line to a text stream.

    Subclasses only choose the label written in front of each message.
    The stream defaults to stdout and is resolved at send time, so output
    capture in tests and shells keeps working.
    """

    label = "Message"

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def send(self, message: str, recipient: str) -> bool:
        print(f"{self.label} to {recipient}: {message}", file=self.stream)
        logger.debug("%s sent to %s", self.label, recipient)
        return True


class EmailNotificationChannel(StreamNotificationChannel):
    """Notify users by e-mail."""

    label = "Email"


class SmsNotificationChannel(StreamNotificationChannel):
    """Notify users by SMS."""

    label = "SMS"
