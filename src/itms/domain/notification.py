"""Render notification messages from an outcome's email settings.

Templates are plain ``string.Template`` strings over a closed field set.
Placeholders (``$package``, ``${error}``) are looked up in the parameter
bag; unknown placeholders are left as written. Nothing from the settings
document is ever evaluated.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from string import Template
from typing import Any

from .errors import EmailError

#: Fields rendered from templates. ``message`` is the body.
TEMPLATE_FIELDS: tuple[str, ...] = ("to", "from", "host", "port", "subject", "cc", "bcc", "message")

#: Fields written to the header block, in order.
HEADER_FIELDS: tuple[str, ...] = ("to", "from", "subject", "cc", "bcc")

DEFAULT_HOST = "localhost"

#: Values accepted for the ``starttls`` setting, case-insensitively.
_TRUE_WORDS = frozenset({"true", "yes", "on", "1"})
_FALSE_WORDS = frozenset({"false", "no", "off", "0", ""})


def split_addresses(value: str) -> tuple[str, ...]:
    """Split a comma-separated address list, dropping blanks.

    Example:
        >>> split_addresses("a@x, b@x,,")
        ('a@x', 'b@x')
    """
    return tuple(part.strip() for part in value.split(",") if part.strip())


@dataclass(frozen=True, slots=True)
class NotificationMessage:
    """A rendered notification ready for delivery."""

    recipients: tuple[str, ...]
    sender: str
    host: str
    subject: str = ""
    cc: tuple[str, ...] = ()
    bcc: tuple[str, ...] = ()
    body: str = ""
    port: int | None = None
    starttls: bool = False

    @property
    def envelope_recipients(self) -> tuple[str, ...]:
        """Every address the message is delivered to."""
        return self.recipients + self.cc + self.bcc

    @property
    def smtp_host(self) -> str:
        """``host`` or ``host:port`` as understood by the mail transport."""
        return f"{self.host}:{self.port}" if self.port else self.host

    def as_text(self, *, include_bcc: bool = True) -> str:
        """Return the header block, a blank line, and the body.

        The delivered copy is rendered with ``include_bcc=False`` so blind
        copies stay blind.

        Example:
            >>> msg = NotificationMessage(recipients=("ops@x",), sender="me@x", host="x", subject="done")
            >>> print(msg.as_text())
            to: ops@x
            from: me@x
            subject: done
            <BLANKLINE>
            <BLANKLINE>
        """
        headers = {
            "to": ", ".join(self.recipients),
            "from": self.sender,
            "subject": self.subject,
            "cc": ", ".join(self.cc),
            "bcc": ", ".join(self.bcc) if include_bcc else "",
        }
        lines = [f"{name}: {headers[name]}" for name in HEADER_FIELDS if headers[name]]
        return "\n".join(lines) + "\n\n" + self.body


def render_fields(config: Mapping[str, str], params: Mapping[str, Any]) -> dict[str, str]:
    """Render the template fields of ``config`` against ``params``.

    ``params`` are laid over ``config``; config values act as defaults.

    Example:
        >>> render_fields({"to": "ops@x", "subject": "$command done"}, {"command": "upload"})["subject"]
        'upload done'
        >>> render_fields({"message": "Failed: ${error}"}, {})["message"]
        'Failed: ${error}'
    """
    context: dict[str, str] = {key: str(value) for key, value in config.items()}
    context.update({key: "" if value is None else str(value) for key, value in params.items()})
    rendered: dict[str, str] = {}
    for name in TEMPLATE_FIELDS:
        raw = context.get(name)
        if raw is None:
            continue
        rendered[name] = Template(raw).safe_substitute(context)
    return rendered


def _parse_flag(value: str | None) -> bool:
    """Interpret the ``starttls`` setting; absent or blank is off.

    Example:
        >>> _parse_flag("True"), _parse_flag(None), _parse_flag("off")
        (True, False, False)
    """
    word = (value or "").strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise EmailError(f"invalid starttls value: {value!r}")


def _parse_port(value: str | None) -> int | None:
    if value is None or not value.strip():
        return None
    try:
        return int(value.strip())
    except ValueError as exc:
        raise EmailError(f"invalid port: {value!r}") from exc


def build_message(
    config: Mapping[str, str] | None,
    params: Mapping[str, Any],
    *,
    user: str,
) -> NotificationMessage | None:
    """Build the message for one outcome, or None when nothing should be sent.

    Args:
        config: The outcome's email settings, or None when not configured.
        params: Parameter bag (final options, command name, error text).
        user: Local part used for the default sender address.

    Returns:
        The rendered message, or None if ``config`` is None or lacks ``to``.

    Raises:
        EmailError: ``to`` is present but contains no address, ``port``
            is not a number, or ``starttls`` is not a yes/no word.

    Example:
        >>> msg = build_message({"to": "ops@x"}, {"host": "mail.x"}, user="jdoe")
        >>> msg.sender, msg.recipients
        ('jdoe@mail.x', ('ops@x',))
        >>> build_message(None, {}, user="jdoe") is None
        True
    """
    if config is None or "to" not in config:
        return None
    if not str(config["to"]).strip():
        raise EmailError("no recipients")

    fields = render_fields(config, params)
    recipients = split_addresses(fields.get("to", ""))
    if not recipients:
        raise EmailError("no recipients")

    host = fields.get("host", "").strip() or DEFAULT_HOST
    sender = fields.get("from", "").strip() or f"{user}@{host}"
    return NotificationMessage(
        recipients=recipients,
        sender=sender,
        host=host,
        port=_parse_port(fields.get("port")),
        subject=fields.get("subject", ""),
        cc=split_addresses(fields.get("cc", "")),
        bcc=split_addresses(fields.get("bcc", "")),
        body=fields.get("message", ""),
        starttls=_parse_flag(config.get("starttls")),
    )


__all__ = [
    "DEFAULT_HOST",
    "HEADER_FIELDS",
    "NotificationMessage",
    "TEMPLATE_FIELDS",
    "build_message",
    "render_fields",
    "split_addresses",
]
