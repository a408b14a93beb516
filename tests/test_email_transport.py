"""SMTP delivery adapter."""

from __future__ import annotations

from typing import Any

import pytest

from itms.adapters.email import transport
from itms.adapters.email.transport import SMTP_TIMEOUT, send_notification
from itms.domain.errors import DeliveryError
from itms.domain.notification import NotificationMessage


def _message(**overrides: Any) -> NotificationMessage:
    values: dict[str, Any] = {
        "recipients": ("ops@example.com",),
        "sender": "jdoe@example.com",
        "host": "mail.example.com",
        "subject": "upload done",
        "body": "All good.",
    }
    values.update(overrides)
    return NotificationMessage(**values)


@pytest.mark.os_agnostic
def test_send_notification_passes_message_to_btx_send(monkeypatch: pytest.MonkeyPatch) -> None:
    """Sender, envelope, subject, body, and host reach the mail library."""
    captured: dict[str, Any] = {}

    def fake_send(**kwargs: Any) -> bool:
        captured.update(kwargs)
        return True

    monkeypatch.setattr(transport, "btx_send", fake_send)

    assert send_notification(_message(cc=("a@example.com",), bcc=("b@example.com",), port=2525)) is True
    assert captured["mail_from"] == "jdoe@example.com"
    assert captured["mail_recipients"] == ["ops@example.com", "a@example.com", "b@example.com"]
    assert captured["mail_subject"] == "upload done"
    assert captured["mail_body"] == (
        "to: ops@example.com\nfrom: jdoe@example.com\nsubject: upload done\ncc: a@example.com\n\nAll good."
    )
    assert captured["smtphosts"] == ["mail.example.com:2525"]
    assert captured["credentials"] is None
    assert captured["use_starttls"] is False
    assert captured["timeout"] == SMTP_TIMEOUT


@pytest.mark.os_agnostic
def test_send_notification_wraps_runtime_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    """Transport failures surface as DeliveryError naming the host."""

    def failing_send(**_kwargs: Any) -> bool:
        raise RuntimeError("connection refused")

    monkeypatch.setattr(transport, "btx_send", failing_send)

    with pytest.raises(DeliveryError, match=r"mail\.example\.com: connection refused"):
        send_notification(_message())


@pytest.mark.os_agnostic
def test_send_notification_raises_when_smtp_connection_fails() -> None:
    """A refused SMTP connection is not swallowed."""
    with pytest.raises(DeliveryError, match=r"127\.0\.0\.1:1"):
        send_notification(_message(host="127.0.0.1", port=1))


@pytest.mark.os_agnostic
def test_send_notification_reports_false_result(monkeypatch: pytest.MonkeyPatch) -> None:
    """A False result from the library is returned unchanged."""
    monkeypatch.setattr(transport, "btx_send", lambda **_kwargs: False)

    assert send_notification(_message()) is False


@pytest.mark.os_agnostic
@pytest.mark.parametrize("starttls", [False, True], ids=["plain", "starttls"])
def test_send_notification_passes_starttls_explicitly(monkeypatch: pytest.MonkeyPatch, starttls: bool) -> None:
    """The library's own STARTTLS default never applies."""
    captured: dict[str, Any] = {}

    def fake_send(**kwargs: Any) -> bool:
        captured.update(kwargs)
        return True

    monkeypatch.setattr(transport, "btx_send", fake_send)

    send_notification(_message(starttls=starttls))

    assert captured["use_starttls"] is starttls

