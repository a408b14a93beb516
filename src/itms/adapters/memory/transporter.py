"""In-memory transporter adapter for testing."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from ..config.loader import DEFAULT_EXECUTABLE


@dataclass(frozen=True, slots=True)
class TransporterCall:
    """One recorded transporter invocation."""

    command: str
    options: dict[str, Any]
    args: tuple[str, ...]
    executable: str


def _empty_call_list() -> list[TransporterCall]:
    return []


@dataclass
class TransporterStub:
    """Records transporter invocations and returns a canned result.

    Attributes:
        output: Text returned by successful runs.
        raise_exception: When set, runs raise this exception after recording.
        calls: Recorded invocations.

    Example:
        >>> stub = TransporterStub(output="done")
        >>> stub.run_transporter("upload", {"package": "a.itmsp"}, [])
        'done'
        >>> stub.calls[0].options
        {'package': 'a.itmsp'}
    """

    output: str = ""
    raise_exception: Exception | None = None
    calls: list[TransporterCall] = field(default_factory=_empty_call_list)

    def run_transporter(
        self,
        command: str,
        options: Mapping[str, Any],
        args: Sequence[str],
        *,
        executable: str = DEFAULT_EXECUTABLE,
    ) -> str:
        """Record the call and return :attr:`output` or raise."""
        self.calls.append(TransporterCall(command, dict(options), tuple(args), executable))
        if self.raise_exception is not None:
            raise self.raise_exception
        return self.output


__all__ = ["TransporterCall", "TransporterStub"]
