"""Decide whether and what to notify after a transporter run.

Contents:
    * :func:`current_user` - Local part for the default sender address.
    * :func:`build_params` - Parameter bag available to notification templates.
    * :func:`notify` - Render and send one outcome's notification.
    * :func:`notify_outcome` - Select the outcome branch and notify.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

from ..domain.enums import Outcome
from ..domain.notification import build_message
from ..domain.options import EmailSettings, OptionValue
from .ports import SendNotification

logger = logging.getLogger(__name__)

#: Environment variables consulted, in order, for the current user name.
USER_VARIABLES: tuple[str, ...] = ("USER", "USERNAME", "LOGNAME")

#: Local part of the default sender when none of :data:`USER_VARIABLES` is set.
FALLBACK_USER = "itms"


def current_user(environ: Mapping[str, str] | None = None) -> str:
    """Return the login name from the environment.

    Example:
        >>> current_user({"USERNAME": "jdoe"})
        'jdoe'
        >>> current_user({})
        'itms'
    """
    env = os.environ if environ is None else environ
    for variable in USER_VARIABLES:
        value = env.get(variable)
        if value:
            return value
    return FALLBACK_USER


def build_params(
    command: str,
    options: Mapping[str, OptionValue],
    *,
    errors: tuple[str, ...] = (),
) -> dict[str, Any]:
    """Return the values templates may reference.

    Final options other than ``password`` are available by name, plus
    ``command`` and, after a failure, ``error`` (all messages, one per
    line) and ``error_count``.

    Example:
        >>> build_params("upload", {"package": "a.itmsp"}, errors=("bad", "worse"))
        {'package': 'a.itmsp', 'command': 'upload', 'error': 'bad\\nworse', 'error_count': 2}
    """
    params: dict[str, Any] = {key: value for key, value in options.items() if key != "password"}
    params["command"] = command
    if errors:
        params["error"] = "\n".join(errors)
        params["error_count"] = len(errors)
    return params


def notify(
    config: Mapping[str, str] | None,
    params: Mapping[str, Any],
    *,
    send: SendNotification,
    user: str | None = None,
) -> bool:
    """Render and deliver a notification if ``config`` asks for one.

    Args:
        config: One outcome's email settings; None disables it.
        params: Template parameters from :func:`build_params`.
        send: Delivery port.
        user: Sender local part; defaults to :func:`current_user`.

    Returns:
        True if a message was delivered, False if nothing was sent.

    Raises:
        EmailError: ``to`` is configured but empty.
        DeliveryError: SMTP delivery failed.
    """
    message = build_message(config, params, user=user or current_user())
    if message is None:
        return False
    return send(message)


def notify_outcome(
    email: EmailSettings,
    outcome: Outcome,
    params: Mapping[str, Any],
    *,
    send: SendNotification,
) -> bool:
    """Send the notification configured for ``outcome``, if any."""
    config = email.for_outcome(outcome)
    if config is None:
        logger.debug("No %s notification configured", outcome.value)
        return False
    logger.info("Sending %s notification", outcome.value)
    return notify(config, params, send=send)


__all__ = [
    "FALLBACK_USER",
    "USER_VARIABLES",
    "build_params",
    "current_user",
    "notify",
    "notify_outcome",
]
