"""In-memory notification adapter for testing."""

from __future__ import annotations

from dataclasses import dataclass, field

from ...domain.notification import NotificationMessage


def _empty_message_list() -> list[NotificationMessage]:
    return []


@dataclass
class NotificationSpy:
    """Captures notifications for test assertions.

    Attributes:
        sent: Messages passed to :meth:`send_notification`.
        should_fail: When True, sends return False.
        raise_exception: When set, sends raise this exception after recording.

    Example:
        >>> spy = NotificationSpy()
        >>> spy.send_notification(NotificationMessage(recipients=("ops@x",), sender="me@x", host="x"))
        True
        >>> len(spy.sent)
        1
    """

    sent: list[NotificationMessage] = field(default_factory=_empty_message_list)
    should_fail: bool = False
    raise_exception: Exception | None = None

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.sent.clear()
        self.raise_exception = None

    def send_notification(self, message: NotificationMessage) -> bool:
        """Record the message and return success/failure based on spy state."""
        self.sent.append(message)
        if self.raise_exception is not None:
            raise self.raise_exception
        return not self.should_fail


__all__ = ["NotificationSpy"]
