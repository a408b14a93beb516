"""Typed transporter options validated at the command boundary.

Resolved options arrive as a loosely typed mapping (YAML scalars and
``--key=value`` strings). Each command passes the subset it accepts through
:class:`TransporterOptions`, so values are coerced and checked once before
the argument list is built.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

#: Options understood by every command.
SHARED_OPTIONS: frozenset[str] = frozenset(
    {
        "path",
        "username",
        "password",
        "shortname",
        "itc_provider",
        "print_stdout",
        "print_stderr",
    }
)


class TransporterOptions(BaseModel):
    """Validated, immutable transporter options.

    Example:
        >>> opts = TransporterOptions.model_validate({"vendor_id": 12345, "delete": "true"})
        >>> opts.vendor_id, opts.delete
        ('12345', True)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: str | None = None
    username: str | None = None
    password: str | None = None
    shortname: str | None = None
    itc_provider: str | None = None
    print_stdout: bool = False
    print_stderr: bool = False

    package: str | None = None
    transport: str | None = None
    delete: bool = False
    rate: int | None = None
    log_history: str | None = None
    success: str | None = None
    failure: str | None = None

    verify_assets: bool = False

    vendor_id: str | None = None
    apple_id: str | None = None
    destination: str | None = None

    type: str | None = None
    version: str | None = None

    @field_validator(
        "path",
        "username",
        "password",
        "shortname",
        "itc_provider",
        "package",
        "transport",
        "log_history",
        "success",
        "failure",
        "vendor_id",
        "apple_id",
        "destination",
        "type",
        "version",
        mode="before",
    )
    @classmethod
    def _coerce_scalar_to_str(cls, v: Any) -> Any:
        """Accept numbers where identifiers are expected; blank means unset.

        Vendor IDs and schema versions are often all digits, which both YAML
        and the command-line overlay turn into numbers.

        Examples:
            >>> TransporterOptions._coerce_scalar_to_str(12345)
            '12345'
            >>> TransporterOptions._coerce_scalar_to_str("  ") is None
            True
        """
        if isinstance(v, bool):
            return v
        if isinstance(v, int | float):
            return str(v)
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def __repr__(self) -> str:
        """Return string representation with the password redacted.

        Example:
            >>> "hunter2" in repr(TransporterOptions(password="hunter2"))
            False
        """
        fields: list[str] = []
        for name, value in self:
            if value is None or value is False:
                continue
            if name == "password":
                fields.append(f"{name}='[REDACTED]'")
            else:
                fields.append(f"{name}={value!r}")
        return f"TransporterOptions({', '.join(fields)})"


__all__ = [
    "SHARED_OPTIONS",
    "TransporterOptions",
]
