# topmark:header:start
#
#   project      : ProlMark
#   file         : list.py
#   file_relpath : src/prolmark/cli/commands/list.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ProlMark ``list`` command.

Prints the prologues recognized in the given files without modifying them.
With ``-v`` each prologue is also shown in its canonical rendering.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import click

from prolmark.cli.cmd_common import (
    build_config,
    exit_if_no_files,
    get_effective_verbosity,
    maybe_exit_on_error,
    resolve_file_list,
    run_pipeline,
)
from prolmark.cli.errors import ProlmarkUsageError
from prolmark.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_recognition_options,
    output_format_option,
)
from prolmark.cli.utils import render_diagnostics
from prolmark.cli_shared.utils import OutputFormat
from prolmark.pipeline.status import FsStatus
from prolmark.rendering.payloads import prologue_payload
from prolmark.rendering.starlse import render_prologue

if TYPE_CHECKING:
    from prolmark.cli_shared.console_api import ConsoleLike
    from prolmark.pipeline.context import ProcessingContext
    from prolmark.prologue.model import Prologue


def _describe(prologue: Prologue) -> str:
    title = prologue.title or "<unnamed>"
    return f"{title} - {prologue.purpose}" if prologue.purpose else title


def _emit_markdown(console: ConsoleLike, results: list[ProcessingContext]) -> None:
    console.print("# Prologues\n")
    console.print("| File | Name | Purpose | Dialect | Sections |")
    console.print("|------|------|---------|---------|----------|")
    for r in results:
        for p in r.prologues:
            sections = ", ".join(p.section_names())
            purpose = p.purpose.replace("|", "\\|")
            console.print(f"| `{r.path}` | {p.title} | {purpose} | {p.dialect} | {sections} |")


@click.command(
    name="list",
    help="List the prologues recognized in files.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("paths", nargs=-1, type=click.Path(path_type=Path))
@common_config_options
@common_recognition_options
@output_format_option
def list_command(
    *,
    paths: tuple[Path, ...],
    no_config: bool,
    config_paths: tuple[str, ...],
    dialects: tuple[str, ...],
    write_defaults: bool,
    output_format: OutputFormat | None,
) -> None:
    """List recognized prologues.

    Args:
        paths (tuple[Path, ...]): Files or directories to scan.
        no_config (bool): Skip project config discovery.
        config_paths (tuple[str, ...]): Extra config files, merged in order.
        dialects (tuple[str, ...]): Dialects to try, in priority order.
        write_defaults (bool): Show placeholder-only sections in verbose rendering.
        output_format (OutputFormat | None): Output format.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if not paths:
        raise ProlmarkUsageError(f"{ctx.command.name}: no PATHS given.")

    config = build_config(
        ctx=ctx,
        no_config=no_config,
        config_paths=config_paths,
        dialects=dialects,
        write_defaults=write_defaults,
    )
    vlevel = get_effective_verbosity(ctx, config)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    file_list = resolve_file_list(paths)
    if exit_if_no_files(file_list):
        return

    results = run_pipeline(file_list, pipeline_name="list", config=config)

    if fmt == OutputFormat.JSON:
        payload = [
            {"path": str(r.path), "prologues": [prologue_payload(p) for p in r.prologues]}
            for r in results
            if r.status.fs == FsStatus.OK
        ]
        console.print(json.dumps(payload, indent=2))
    elif fmt == OutputFormat.NDJSON:
        for r in results:
            for p in r.prologues:
                console.print(json.dumps({"path": str(r.path), **prologue_payload(p)}))
    elif fmt == OutputFormat.MARKDOWN:
        _emit_markdown(console, results)
    else:
        render_diagnostics(results, verbosity=vlevel)
        for r in results:
            prologues = r.prologues
            if not prologues:
                if vlevel > 0 and r.status.fs == FsStatus.OK:
                    console.print(f"{r.path}: {r.status.prologue.value}")
                continue
            console.print(console.styled(str(r.path), bold=True))
            for p in prologues:
                console.print(f"  {_describe(p)} [{p.dialect}]")
                if vlevel > 0:
                    for line in render_prologue(p):
                        console.print(f"    {line}", nl=False)
                elif vlevel == 0 and p.sections:
                    console.print(f"    sections: {', '.join(p.section_names())}")

    maybe_exit_on_error(results)
