"""Outcome notifications: parameter bag, selection, and delivery."""

from __future__ import annotations

import pytest

from itms.adapters.memory import NotificationSpy
from itms.application.notifier import FALLBACK_USER, build_params, current_user, notify, notify_outcome
from itms.domain.enums import Outcome
from itms.domain.errors import DeliveryError, EmailError
from itms.domain.options import EmailSettings


@pytest.mark.os_agnostic
def test_build_params_excludes_password() -> None:
    """The password is never available to templates."""
    params = build_params("upload", {"username": "jdoe", "password": "hunter2"})

    assert params == {"username": "jdoe", "command": "upload"}


@pytest.mark.os_agnostic
def test_build_params_adds_errors_one_per_line() -> None:
    """Failure parameters carry every message and their count."""
    params = build_params("verify", {}, errors=("first", "second"))

    assert params["error"] == "first\nsecond"
    assert params["error_count"] == 2


@pytest.mark.os_agnostic
def test_build_params_without_errors_has_no_error_key() -> None:
    """Success parameters do not mention errors."""
    assert "error" not in build_params("verify", {})


@pytest.mark.os_agnostic
def test_current_user_prefers_user_then_username_then_logname() -> None:
    """The first non-empty variable wins."""
    assert current_user({"USER": "", "USERNAME": "win", "LOGNAME": "posix"}) == "win"
    assert current_user({"LOGNAME": "posix"}) == "posix"


@pytest.mark.os_agnostic
def test_current_user_falls_back_without_login_variables() -> None:
    """No login name in the environment gives the documented fallback."""
    assert current_user({}) == FALLBACK_USER == "itms"


@pytest.mark.os_agnostic
def test_notify_sends_rendered_message() -> None:
    """A configured outcome reaches the delivery port."""
    spy = NotificationSpy()

    sent = notify({"to": "ops@x", "subject": "$command ok"}, {"command": "upload"}, send=spy.send_notification, user="jdoe")

    assert sent is True
    assert spy.sent[0].subject == "upload ok"
    assert spy.sent[0].sender == "jdoe@localhost"


@pytest.mark.os_agnostic
def test_notify_is_a_no_op_without_to() -> None:
    """Nothing is sent when ``to`` is missing."""
    spy = NotificationSpy()

    assert notify({"subject": "x"}, {}, send=spy.send_notification, user="jdoe") is False
    assert spy.sent == []


@pytest.mark.os_agnostic
def test_notify_raises_for_empty_recipients() -> None:
    """An enabled notification without addresses is an error."""
    spy = NotificationSpy()

    with pytest.raises(EmailError):
        notify({"to": " "}, {}, send=spy.send_notification, user="jdoe")
    assert spy.sent == []


@pytest.mark.os_agnostic
def test_notify_propagates_delivery_errors() -> None:
    """SMTP failures are not swallowed."""
    spy = NotificationSpy(raise_exception=DeliveryError("localhost: refused"))

    with pytest.raises(DeliveryError, match="refused"):
        notify({"to": "ops@x"}, {}, send=spy.send_notification, user="jdoe")


@pytest.mark.os_agnostic
def test_notify_outcome_selects_the_matching_branch() -> None:
    """Only the outcome that happened is notified."""
    spy = NotificationSpy()
    email = EmailSettings(success={"to": "ok@x"}, failure={"to": "bad@x"})

    notify_outcome(email, Outcome.FAILURE, {}, send=spy.send_notification)

    assert [message.recipients for message in spy.sent] == [("bad@x",)]


@pytest.mark.os_agnostic
def test_notify_outcome_without_configuration_sends_nothing() -> None:
    """An unset outcome is silent."""
    spy = NotificationSpy()

    assert notify_outcome(EmailSettings(), Outcome.SUCCESS, {}, send=spy.send_notification) is False
    assert spy.sent == []


@pytest.mark.os_agnostic
def test_notify_uses_environment_user_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    """The sender's local part comes from the login name."""
    monkeypatch.setenv("USER", "builder")
    spy = NotificationSpy()

    notify({"to": "ops@x", "host": "mail.x"}, {}, send=spy.send_notification)

    assert spy.sent[0].sender == "builder@mail.x"
