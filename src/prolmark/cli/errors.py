# topmark:header:start
#
#   project      : ProlMark
#   file         : errors.py
#   file_relpath : src/prolmark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the ProlMark CLI.

Raise these from commands to exit with a standardized message and exit code.
When a project console is present in the Click context, errors are printed
through it; otherwise Click's default display is used.
"""

from __future__ import annotations

from typing import IO, Any

import click

from prolmark.cli_shared.exit_codes import ExitCode


class ProlmarkError(click.ClickException):
    """Base class for all ProlMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (color is applied in `show`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class ProlmarkUsageError(ProlmarkError):
    """Invalid flags or arguments."""

    exit_code = ExitCode.USAGE_ERROR


class ProlmarkConfigError(ProlmarkError):
    """Missing, invalid or malformed configuration."""

    exit_code = ExitCode.CONFIG_ERROR


class ProlmarkIOError(ProlmarkError):
    """I/O error reading or writing files."""

    exit_code = ExitCode.IO_ERROR
