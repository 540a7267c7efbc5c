# topmark:header:start
#
#   project      : ProlMark
#   file         : dialects.py
#   file_relpath : src/prolmark/cli/commands/dialects.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ProlMark ``dialects`` command.

Lists the registered prologue dialects in their default priority order.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from prolmark.cli.cmd_common import get_effective_verbosity
from prolmark.cli.options import output_format_option
from prolmark.cli_shared.utils import OutputFormat
from prolmark.dialects.registry import DialectRegistry

if TYPE_CHECKING:
    from prolmark.cli_shared.console_api import ConsoleLike


@click.command(
    name="dialects",
    help="List registered prologue dialects.",
)
@output_format_option
def dialects_command(*, output_format: OutputFormat | None = None) -> None:
    """List registered dialects.

    Args:
        output_format (OutputFormat | None): Output format.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    metas = list(DialectRegistry.iter_meta())
    default_order = DialectRegistry.default_order()

    if fmt in (OutputFormat.JSON, OutputFormat.NDJSON):
        rows = [
            {
                "name": m.name,
                "description": m.description,
                "canonical": m.canonical,
                "default": m.name in default_order,
            }
            for m in metas
        ]
        if fmt == OutputFormat.NDJSON:
            for row in rows:
                console.print(json.dumps(row))
        else:
            console.print(json.dumps({"dialects": rows}, indent=2))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# Prologue Dialects\n")
        console.print("| Name | Canonical | Description |")
        console.print("|------|-----------|-------------|")
        for m in metas:
            console.print(f"| `{m.name}` | {'yes' if m.canonical else ''} | {m.description} |")
    else:
        if vlevel > 0:
            console.print(console.styled("Prologue dialects (priority order):\n", bold=True))
        width = max((len(m.name) for m in metas), default=0)
        for m in metas:
            marker = " (canonical)" if m.canonical else ""
            name = console.styled(f"{m.name:<{width}}", bold=True)
            console.print(f"{name}  {m.description}{marker}")
