"""Registry of transporter commands and their argument builders.

Every command the CLI exposes is listed in :data:`COMMANDS`. A command
accepts the shared options plus its own; anything else found in the resolved
options is logged and dropped here, before the transporter is started.

Contents:
    * :class:`TransporterCommand` - Base handler (filter, validate, run, interpret).
    * Concrete handlers: lookup, providers, schema, status, upload, verify.
    * :data:`COMMANDS` - Static name -> handler mapping.
    * :func:`get_command` - Registry lookup raising UnknownCommandError.
    * :func:`run_transporter` - Production entry point used by the CLI.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any, ClassVar

import rich_click as click

from itms.domain.errors import ExecutionError, TransporterError, UnknownCommandError

from ..config.loader import DEFAULT_EXECUTABLE
from .options import SHARED_OPTIONS, TransporterOptions
from .runner import ProcessOutput, parse_errors, run_process

logger = logging.getLogger(__name__)

ProcessRunner = Callable[[Sequence[str]], ProcessOutput]


class TransporterCommand:
    """Base class for one transporter mode.

    Subclasses set the class attributes and may extend :meth:`arguments` and
    :meth:`summarize`.
    """

    name: ClassVar[str]
    mode: ClassVar[str]
    summary: ClassVar[str]
    #: Command-specific options, in addition to :data:`SHARED_OPTIONS`.
    options: ClassVar[frozenset[str]] = frozenset()
    #: Options that must be set before the transporter is started.
    required: ClassVar[tuple[str, ...]] = ()
    #: Option filled from the first positional argument when unset.
    positional: ClassVar[str | None] = None

    def accepted(self) -> frozenset[str]:
        """Return every option name this command understands."""
        return SHARED_OPTIONS | self.options

    def validate(self, options: Mapping[str, Any], args: Sequence[str]) -> tuple[TransporterOptions, list[str]]:
        """Filter, validate, and complete the resolved options.

        Unknown keys are logged as warnings and dropped.

        Returns:
            Validated options and the positional arguments left over.

        Raises:
            pydantic.ValidationError: A value has the wrong type.
            TransporterError: A required option is missing.
        """
        accepted = self.accepted()
        unknown = sorted(key for key in options if key not in accepted)
        if unknown:
            logger.warning("Ignoring options not used by %s: %s", self.name, ", ".join(unknown))

        known = {key: value for key, value in options.items() if key in accepted}
        remaining = list(args)
        if self.positional is not None and known.get(self.positional) in (None, "") and remaining:
            known[self.positional] = remaining.pop(0)

        validated = TransporterOptions.model_validate(known)
        missing = [name for name in self.required if getattr(validated, name) in (None, "")]
        if missing:
            flags = ", ".join(f"--{name.replace('_', '-')}" for name in missing)
            raise TransporterError(f"{self.name}: missing required option(s): {flags}")
        return validated, remaining

    def arguments(self, opts: TransporterOptions) -> list[str]:
        """Return the command-specific transporter flags."""
        return []

    def build_argv(self, opts: TransporterOptions, args: Sequence[str], *, executable: str) -> list[str]:
        """Assemble the full transporter command line.

        Example:
            >>> cmd = StatusCommand()
            >>> opts = TransporterOptions(username="jdoe", password="pw", vendor_id="X1")
            >>> cmd.build_argv(opts, [], executable="iTMSTransporter")
            ['iTMSTransporter', '-m', 'status', '-u', 'jdoe', '-p', 'pw', '-vendor_id', 'X1']
        """
        argv = [opts.path or executable, "-m", self.mode]
        if opts.username:
            argv += ["-u", opts.username]
        if opts.password:
            argv += ["-p", opts.password]
        if opts.shortname:
            argv += ["-s", opts.shortname]
        if opts.itc_provider:
            argv += ["-itc_provider", opts.itc_provider]
        argv += self.arguments(opts)
        argv += list(args)
        return argv

    def summarize(self, opts: TransporterOptions, output: ProcessOutput) -> str:
        """Return the text shown to the user after a successful run."""
        return "\n".join(line for line in output.stdout.splitlines() if line.strip())

    def execute(
        self,
        options: Mapping[str, Any],
        args: Sequence[str],
        *,
        executable: str = DEFAULT_EXECUTABLE,
        process_runner: ProcessRunner = run_process,
    ) -> str:
        """Run this command and interpret the transporter's result.

        Raises:
            ExecutionError: The transporter exited non-zero.
            TransporterError: The transporter could not be started.
        """
        opts, remaining = self.validate(options, args)
        argv = self.build_argv(opts, remaining, executable=executable)
        logger.info("Running transporter", extra={"command": self.name, "mode": self.mode, "opts": repr(opts)})

        output = process_runner(argv)
        if opts.print_stdout and output.stdout:
            click.echo(output.stdout, nl=False)
        if opts.print_stderr and output.stderr:
            click.echo(output.stderr, nl=False, err=True)

        if output.returncode != 0:
            errors = parse_errors(output.stdout + "\n" + output.stderr)
            if not errors:
                errors = [f"{argv[0]} exited with status {output.returncode}"]
            raise ExecutionError(errors)
        return self.summarize(opts, output)


class LookupCommand(TransporterCommand):
    name = "lookup"
    mode = "lookupMetadata"
    summary = "Retrieve the metadata for a previously delivered package."
    options = frozenset({"vendor_id", "apple_id", "destination"})
    positional = "vendor_id"

    def validate(self, options: Mapping[str, Any], args: Sequence[str]) -> tuple[TransporterOptions, list[str]]:
        opts, remaining = super().validate(options, args)
        if not (opts.vendor_id or opts.apple_id):
            raise TransporterError("lookup: one of --vendor-id or --apple-id is required")
        return opts, remaining

    def arguments(self, opts: TransporterOptions) -> list[str]:
        argv = ["-vendor_id", opts.vendor_id] if opts.vendor_id else ["-apple_id", str(opts.apple_id)]
        argv += ["-destination", opts.destination or "."]
        return argv


class ProvidersCommand(TransporterCommand):
    name = "providers"
    mode = "provider"
    summary = "List the providers the account may deliver for."


class SchemaCommand(TransporterCommand):
    name = "schema"
    mode = "generateSchema"
    summary = "Download a metadata schema."
    options = frozenset({"type", "version", "destination"})
    required = ("version",)

    def arguments(self, opts: TransporterOptions) -> list[str]:
        return [
            "-schemaType",
            opts.type or "strict",
            "-schemaVersion",
            str(opts.version),
            "-destination",
            opts.destination or ".",
        ]


class StatusCommand(TransporterCommand):
    name = "status"
    mode = "status"
    summary = "Show the upload and processing status of a package."
    options = frozenset({"vendor_id"})
    required = ("vendor_id",)
    positional = "vendor_id"

    def arguments(self, opts: TransporterOptions) -> list[str]:
        return ["-vendor_id", str(opts.vendor_id)]


class UploadCommand(TransporterCommand):
    name = "upload"
    mode = "upload"
    summary = "Upload a package."
    options = frozenset({"package", "transport", "delete", "rate", "log_history", "success", "failure"})
    required = ("package",)
    positional = "package"

    def arguments(self, opts: TransporterOptions) -> list[str]:
        argv = ["-f", str(opts.package)]
        if opts.transport:
            argv += ["-t", opts.transport]
        if opts.delete:
            argv.append("-delete")
        if opts.rate is not None:
            argv += ["-k", str(opts.rate)]
        if opts.log_history:
            argv += ["-loghistory", opts.log_history]
        if opts.success:
            argv += ["-success", opts.success]
        if opts.failure:
            argv += ["-failure", opts.failure]
        return argv

    def summarize(self, opts: TransporterOptions, output: ProcessOutput) -> str:
        return f"Upload of {opts.package} complete"


class VerifyCommand(TransporterCommand):
    name = "verify"
    mode = "verify"
    summary = "Validate a package without uploading it."
    options = frozenset({"package", "verify_assets"})
    required = ("package",)
    positional = "package"

    def arguments(self, opts: TransporterOptions) -> list[str]:
        argv = ["-f", str(opts.package)]
        if opts.verify_assets:
            argv.append("-verifyAssets")
        return argv

    def summarize(self, opts: TransporterOptions, output: ProcessOutput) -> str:
        return f"{opts.package} is valid"


COMMANDS: dict[str, TransporterCommand] = {
    command.name: command
    for command in (
        LookupCommand(),
        ProvidersCommand(),
        SchemaCommand(),
        StatusCommand(),
        UploadCommand(),
        VerifyCommand(),
    )
}


def get_command(name: str) -> TransporterCommand:
    """Return the registered handler for ``name``.

    Raises:
        UnknownCommandError: ``name`` is not a transporter command.

    Example:
        >>> get_command("upload").mode
        'upload'
        >>> get_command("frobnicate")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        UnknownCommandError: frobnicate
    """
    try:
        return COMMANDS[name]
    except KeyError:
        raise UnknownCommandError(name) from None


def run_transporter(
    command: str,
    options: Mapping[str, Any],
    args: Sequence[str],
    *,
    executable: str = DEFAULT_EXECUTABLE,
) -> str:
    """Run ``command`` through iTMSTransporter.

    Args:
        command: Registered command name.
        options: Final options (email slot already removed).
        args: Positional arguments left after the option overlay.
        executable: Transporter used when ``path`` is not set.

    Returns:
        Text to show the user.

    Raises:
        UnknownCommandError: ``command`` is not registered.
        ExecutionError: The transporter reported errors.
        TransporterError: The transporter could not be run.
    """
    return get_command(command).execute(options, args, executable=executable)


__all__ = [
    "COMMANDS",
    "LookupCommand",
    "ProvidersCommand",
    "SchemaCommand",
    "StatusCommand",
    "TransporterCommand",
    "UploadCommand",
    "VerifyCommand",
    "get_command",
    "run_transporter",
]
