"""Resolve the effective options for one command from the settings document.

The settings document is a flat YAML mapping. Scalar top-level values are
global defaults; mapping values are command sections keyed by command name.
The top-level ``email`` mapping carries email defaults shared by every
command.

Example document::

    username: jdoe
    email:
      host: mail.example.com
      cc: audit@example.com
    upload:
      transport: Aspera
      email:
        success:
          to: ops@example.com
          subject: "$package uploaded"
        failure:
          to: ops@example.com, dev@example.com

Contents:
    * :class:`EmailSettings` - Two-slot (success/failure) notification settings.
    * :class:`EffectiveOptions` - Resolved options plus the email slot.
    * :func:`resolve` - The merge algorithm.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .enums import Outcome

OptionValue = str | int | float | bool | None
"""Scalar values an option may hold once resolved."""

EmailOutcomeConfig = dict[str, str]
"""Fields (``to``, ``from``, ``host``, ``port``, ``subject``, ``cc``, ``bcc``, ``message``) for one outcome."""

EMAIL_KEY = "email"
_OUTCOME_KEYS = frozenset(outcome.value for outcome in Outcome)


@dataclass(frozen=True, slots=True)
class EmailSettings:
    """Notification settings for both outcomes; ``None`` disables that outcome.

    Example:
        >>> settings = EmailSettings(success={"to": "ops@example.com"})
        >>> settings.for_outcome(Outcome.SUCCESS)
        {'to': 'ops@example.com'}
        >>> settings.for_outcome(Outcome.FAILURE) is None
        True
    """

    success: EmailOutcomeConfig | None = None
    failure: EmailOutcomeConfig | None = None

    def for_outcome(self, outcome: Outcome) -> EmailOutcomeConfig | None:
        """Return the configuration for ``outcome``."""
        return self.success if outcome is Outcome.SUCCESS else self.failure


def _empty_options() -> dict[str, OptionValue]:
    return {}


@dataclass(slots=True)
class EffectiveOptions:
    """Options resolved for one command invocation.

    ``options`` is what the delegated operation receives. ``email`` is kept
    apart and only consumed by the notifier.
    """

    options: dict[str, OptionValue] = field(default_factory=_empty_options)
    email: EmailSettings = field(default_factory=EmailSettings)


def symbol(key: object) -> str:
    """Return the option name used for a settings key.

    Example:
        >>> symbol("vendor_id")
        'vendor_id'
        >>> symbol(42)
        '42'
    """
    return str(key)


def partition(document: Mapping[str, Any]) -> tuple[dict[str, Any], dict[str, Mapping[str, Any]]]:
    """Split top-level entries into global defaults and command sections.

    Example:
        >>> defaults, sections = partition({"a": 1, "upload": {"b": 2}})
        >>> defaults
        {'a': 1}
        >>> sections
        {'upload': {'b': 2}}
    """
    defaults: dict[str, Any] = {}
    sections: dict[str, Mapping[str, Any]] = {}
    for key, value in document.items():
        if isinstance(value, Mapping):
            sections[key] = value
        else:
            defaults[key] = value
    return defaults, sections


def _email_entries(section: Any) -> list[tuple[Any, Any]]:
    """Return an email mapping's entries, minus the per-outcome sub-mappings."""
    if not isinstance(section, Mapping):
        return []
    return [(key, value) for key, value in section.items() if key not in _OUTCOME_KEYS]


def _email_text(value: Any) -> str:
    """Return an email setting as text; a YAML null is empty.

    Example:
        >>> _email_text(None), _email_text(25), _email_text(" ops@x ")
        ('', '25', ' ops@x ')
    """
    return "" if value is None else str(value)


def merge_email_outcome(
    outcome_section: Mapping[str, Any],
    settings: Iterable[tuple[Any, Any]],
) -> EmailOutcomeConfig:
    """Fold shared email settings into one outcome's own settings.

    A key already present is extended as ``"existing, new"``; a missing key
    is set. Empty values are never joined, so a blank entry contributes
    nothing. Assignment order is preserved.

    Example:
        >>> merge_email_outcome({"to": "a@x"}, [("cc", "x@y"), ("cc", "z@y"), ("to", "b@x")])
        {'to': 'a@x, b@x', 'cc': 'x@y, z@y'}
        >>> merge_email_outcome({"to": None}, [("cc", None), ("cc", "z@y")])
        {'to': '', 'cc': 'z@y'}
    """
    merged: EmailOutcomeConfig = {str(key): _email_text(value) for key, value in outcome_section.items()}
    for key, value in settings:
        name = str(key)
        text = _email_text(value)
        existing = merged.get(name)
        if existing is None or not existing.strip():
            merged[name] = text
        elif text.strip():
            merged[name] = f"{existing}, {text}"
    return merged


def resolve_email(
    global_email: Any,
    command_email: Any,
) -> EmailSettings:
    """Build the success/failure notification settings for a command.

    An outcome is only configured when the command's ``email`` section names
    it; global and command-level email keys are then folded in, global first.

    Example:
        >>> settings = resolve_email({"cc": "x@y"}, {"cc": "z@y", "success": {"to": "ops@x"}})
        >>> settings.success
        {'to': 'ops@x', 'cc': 'x@y, z@y'}
        >>> settings.failure is None
        True
    """
    shared = _email_entries(global_email) + _email_entries(command_email)
    configured: dict[Outcome, EmailOutcomeConfig | None] = {}
    for outcome in Outcome:
        section = command_email.get(outcome.value) if isinstance(command_email, Mapping) else None
        if section is None:
            configured[outcome] = None
            continue
        own = section if isinstance(section, Mapping) else {}
        configured[outcome] = merge_email_outcome(own, shared)
    return EmailSettings(success=configured[Outcome.SUCCESS], failure=configured[Outcome.FAILURE])


def resolve(document: Mapping[str, Any], command: str) -> EffectiveOptions:
    """Compute the effective options for ``command``.

    Command-section values override global defaults of the same name. Empty
    keys are dropped. The ``email`` entry becomes the separate email slot.

    Args:
        document: Entire settings document.
        command: Name of the command being run.

    Returns:
        Fresh EffectiveOptions owned by the caller.

    Example:
        >>> doc = {"a": 1, "b": 1, "upload": {"b": 2, "email": {"success": {"to": "ops@x"}}}}
        >>> effective = resolve(doc, "upload")
        >>> effective.options
        {'a': 1, 'b': 2}
        >>> effective.email.success
        {'to': 'ops@x'}
        >>> resolve({}, "upload").options
        {}
    """
    defaults, sections = partition(document)
    section: dict[Any, Any] = {**defaults, **sections.get(command, {})}

    email = resolve_email(document.get(EMAIL_KEY), section.get(EMAIL_KEY))

    options: dict[str, OptionValue] = {}
    for key, value in section.items():
        if key == EMAIL_KEY or key is None or key == "":
            continue
        options[symbol(key)] = value
    return EffectiveOptions(options=options, email=email)


__all__ = [
    "EMAIL_KEY",
    "EffectiveOptions",
    "EmailOutcomeConfig",
    "EmailSettings",
    "OptionValue",
    "merge_email_outcome",
    "partition",
    "resolve",
    "resolve_email",
    "symbol",
]
