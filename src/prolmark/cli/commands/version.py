# topmark:header:start
#
#   project      : ProlMark
#   file         : version.py
#   file_relpath : src/prolmark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ProlMark ``version`` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from prolmark.cli.cmd_common import get_effective_verbosity
from prolmark.cli.options import output_format_option
from prolmark.cli_shared.utils import OutputFormat
from prolmark.constants import PROLMARK_VERSION

if TYPE_CHECKING:
    from prolmark.cli_shared.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of ProlMark.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Print the ProlMark version installed in the active environment."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt in (OutputFormat.JSON, OutputFormat.NDJSON):
        console.print(json.dumps({"version": PROLMARK_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# ProlMark Version\n")
        console.print(f"**ProlMark version: {PROLMARK_VERSION}**")
    elif vlevel > 0:
        console.print(console.styled("ProlMark version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(PROLMARK_VERSION, bold=True)}")
    else:
        console.print(console.styled(PROLMARK_VERSION, bold=True))
