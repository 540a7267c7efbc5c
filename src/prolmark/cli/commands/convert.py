# topmark:header:start
#
#   project      : ProlMark
#   file         : convert.py
#   file_relpath : src/prolmark/cli/commands/convert.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ProlMark ``convert`` command.

Rewrites legacy prologues in the canonical STARLSE layout, leaving the
surrounding code untouched. Performs a dry run by default and writes files
only with ``--apply``.

Examples:
  Preview which files would change (dry run):
    $ prolmark convert src

  Show what would change:
    $ prolmark convert --diff src/kpg1_axbn.f

  Apply changes in place:
    $ prolmark convert --apply src
"""

from __future__ import annotations

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
from prolmark.cli.errors import ProlmarkIOError, ProlmarkUsageError
from prolmark.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_recognition_options,
    output_format_option,
)
from prolmark.cli.utils import (
    classify_outcome,
    emit_diffs,
    emit_machine_output,
    render_diagnostics,
    render_per_file_guidance,
    render_summary_counts,
)
from prolmark.cli_shared.exit_codes import ExitCode
from prolmark.cli_shared.utils import OutputFormat
from prolmark.config.logging import get_logger
from prolmark.pipeline.pipelines import select_convert_pipeline
from prolmark.pipeline.status import ComparisonStatus, WriteStatus

if TYPE_CHECKING:
    from prolmark.cli_shared.console_api import ConsoleLike
    from prolmark.pipeline.context import ProcessingContext

logger = get_logger(__name__)


@click.command(
    name="convert",
    help="Convert legacy prologues to the canonical STARLSE layout.",
    context_settings=CONTEXT_SETTINGS,
    epilog="""\
Examples:

  # Preview which files would change (dry-run)
  prolmark convert src

  # Apply: rewrite prologues in place
  prolmark convert --apply src
""",
)
@click.argument("paths", nargs=-1, type=click.Path(path_type=Path))
@common_config_options
@common_recognition_options
@click.option(
    "--normalize",
    is_flag=True,
    help="Also re-render prologues that are already in the canonical layout.",
)
@click.option(
    "--apply", "apply_changes", is_flag=True, help="Write changes to files (off by default)."
)
@click.option("--diff", is_flag=True, help="Show unified diffs (human output only).")
@click.option(
    "--summary",
    "summary_mode",
    is_flag=True,
    help="Show outcome counts instead of per-file details.",
)
@output_format_option
def convert_command(
    *,
    paths: tuple[Path, ...],
    no_config: bool,
    config_paths: tuple[str, ...],
    dialects: tuple[str, ...],
    write_defaults: bool,
    normalize: bool,
    apply_changes: bool,
    diff: bool,
    summary_mode: bool,
    output_format: OutputFormat | None,
) -> None:
    """Convert the prologues of the given files.

    Args:
        paths (tuple[Path, ...]): Files or directories to process.
        no_config (bool): Skip project config discovery.
        config_paths (tuple[str, ...]): Extra config files, merged in order.
        dialects (tuple[str, ...]): Dialects to try, in priority order.
        write_defaults (bool): Render placeholder-only sections.
        normalize (bool): Re-render canonical prologues too.
        apply_changes (bool): Write changes; otherwise dry run.
        diff (bool): Show unified diffs.
        summary_mode (bool): Show outcome counts instead of per-file lines.
        output_format (OutputFormat | None): Output format.

    Raises:
        ProlmarkUsageError: No paths given, unknown dialect, or ``--diff`` with
            a machine format.
        ProlmarkIOError: One or more files could not be written.

    Exit Status:
        SUCCESS (0): Nothing to convert, or all conversions were written.
        WOULD_CHANGE (2): Dry run found files that would be converted.
        USAGE_ERROR (64): Invalid invocation.
        ENCODING_ERROR (65): A file is not valid UTF-8.
        FILE_NOT_FOUND (66): A path does not exist.
        IO_ERROR (74): Reading or writing a file failed.
        PERMISSION_DENIED (77): A file could not be read.
        CONFIG_ERROR (78): The configuration is invalid.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt in (OutputFormat.JSON, OutputFormat.NDJSON) and diff:
        raise ProlmarkUsageError(
            f"{ctx.command.name}: --diff is not supported with machine-readable output formats."
        )
    if not paths:
        raise ProlmarkUsageError(f"{ctx.command.name}: no PATHS given.")

    config = build_config(
        ctx=ctx,
        no_config=no_config,
        config_paths=config_paths,
        dialects=dialects,
        write_defaults=write_defaults,
        normalize=normalize,
        apply_changes=apply_changes,
    )
    vlevel = get_effective_verbosity(ctx, config)

    file_list = resolve_file_list(paths)
    if exit_if_no_files(file_list):
        return

    pipeline_name = select_convert_pipeline(diff=diff, apply_changes=config.apply_changes)
    results: list[ProcessingContext] = run_pipeline(
        file_list, pipeline_name=pipeline_name, config=config
    )

    if fmt in (OutputFormat.JSON, OutputFormat.NDJSON):
        emit_machine_output(results, fmt)
    elif fmt == OutputFormat.MARKDOWN:
        console.print("| File | Outcome |")
        console.print("|------|---------|")
        for r in results:
            console.print(f"| `{r.path}` | {classify_outcome(r)[1]} |")
    else:
        render_diagnostics(results, verbosity=vlevel)
        if summary_mode:
            render_summary_counts(results, total=len(file_list))
        elif vlevel >= 0:

            def _convert_msg(r: ProcessingContext) -> str | None:
                if r.status.write == WriteStatus.WRITTEN:
                    return f"✏️  Converted prologue(s) in '{r.path}'"
                if r.status.comparison == ComparisonStatus.CHANGED:
                    return f"🛠️  Run `prolmark convert --apply {r.path}` to update this file."
                if vlevel > 0:
                    return f"✅ {r.path}: {classify_outcome(r)[1]}"
                return None

            render_per_file_guidance(results, make_message=_convert_msg)
        if diff:
            emit_diffs(results)

    if config.apply_changes:
        failed = sum(1 for r in results if r.status.write == WriteStatus.FAILED)
        written = sum(1 for r in results if r.status.write == WriteStatus.WRITTEN)
        if fmt == OutputFormat.DEFAULT and vlevel >= 0:
            msg = (
                f"\n✅ Converted prologues in {written} file(s)."
                if written
                else "\n✅ No changes to apply."
            )
            console.print(console.styled(msg, fg="green", bold=True))
        if failed:
            raise ProlmarkIOError(f"Failed to write {failed} file(s). See log for details.")
    elif any(r.would_change for r in results):
        ctx.exit(ExitCode.WOULD_CHANGE)

    maybe_exit_on_error(results)
