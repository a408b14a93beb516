"""Click settings and output limits shared by the CLI modules.

Contents:
    * :data:`CLICK_CONTEXT_SETTINGS` - Settings for ordinary commands.
    * :data:`PASSTHROUGH_CONTEXT_SETTINGS` - Settings for transporter commands.
    * :data:`TRACEBACK_SUMMARY_LIMIT` / :data:`TRACEBACK_VERBOSE_LIMIT` - Traceback lengths.
"""

from __future__ import annotations

from typing import Any, Final

#: ``-h`` and ``--help`` on the group, ``config`` and ``info``.
CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}

#: Transporter commands see their arguments unparsed and in order. Only
#: ``--help`` is reserved; ``-h`` and every ``--key[=value]`` reach the
#: overlay, and tokens after the first positional are never inspected.
PASSTHROUGH_CONTEXT_SETTINGS: Final[dict[str, Any]] = {
    "help_option_names": ["--help"],
    "ignore_unknown_options": True,
    "allow_extra_args": True,
    "allow_interspersed_args": False,
}

#: Characters of traceback printed without ``--traceback``.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500

#: Characters of traceback printed with ``--traceback``.
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "PASSTHROUGH_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
]
