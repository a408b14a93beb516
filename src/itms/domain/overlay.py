"""Overlay ``--key=value`` command-line tokens onto resolved options.

Command-line values have the highest precedence. Parsing stops at the first
token that is not a long option; everything from there on is passed to the
delegated operation untouched.

Negated flags (``--no-foo``) are not recognised: ``--no-foo`` sets the
option ``no_foo`` to ``True``.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from .options import EffectiveOptions, OptionValue, symbol

_LONG_OPTION = re.compile(r"\A--(?=\w)")
_DIGITS = re.compile(r"\A[0-9]+\Z")


def parse_option(token: str) -> tuple[str, OptionValue]:
    """Split a ``--key[=value]`` token into an option name and coerced value.

    Example:
        >>> parse_option("--vendor-id=X123")
        ('vendor_id', 'X123')
        >>> parse_option("--port=2112")
        ('port', 2112)
        >>> parse_option("--delete")
        ('delete', True)
        >>> parse_option("--subject=a=b")
        ('subject', 'a=b')
    """
    body = _LONG_OPTION.sub("", token, count=1)
    key, sep, raw = body.partition("=")
    value: OptionValue
    if not sep:
        value = True
    elif _DIGITS.match(raw):
        value = int(raw)
    else:
        value = raw
    return symbol(key.replace("-", "_")), value


def is_long_option(token: str) -> bool:
    """Return True when ``token`` looks like ``--<word>...``.

    Example:
        >>> is_long_option("--package=foo.itmsp")
        True
        >>> is_long_option("--")
        False
        >>> is_long_option("-v")
        False
    """
    return _LONG_OPTION.match(token) is not None


def overlay(effective: EffectiveOptions, argv: Sequence[str]) -> tuple[dict[str, OptionValue], list[str]]:
    """Apply leading long options from ``argv`` onto ``effective.options``.

    ``effective.options`` is updated in place and also returned.

    Args:
        effective: Options resolved from the settings document.
        argv: Tokens following the command name.

    Returns:
        Tuple of (final options, remaining positional arguments).

    Example:
        >>> from itms.domain.options import EffectiveOptions
        >>> eff = EffectiveOptions(options={"verbose": False, "rate": 10})
        >>> overlay(eff, ["--verbose=true", "--rate=50", "pkg.itmsp", "--late"])
        ({'verbose': 'true', 'rate': 50}, ['pkg.itmsp', '--late'])
    """
    tokens = list(argv)
    index = 0
    while index < len(tokens) and is_long_option(tokens[index]):
        key, value = parse_option(tokens[index])
        effective.options[key] = value
        index += 1
    return effective.options, tokens[index:]


__all__ = [
    "is_long_option",
    "overlay",
    "parse_option",
]
