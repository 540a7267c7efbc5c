# topmark:header:start
#
#   project      : ProlMark
#   file         : utils.py
#   file_relpath : src/prolmark/cli/utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Presentation helpers shared by the ``convert`` and ``list`` commands."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Callable

from prolmark.cli.console import get_console_safely
from prolmark.cli_shared.utils import OutputFormat
from prolmark.pipeline.status import ComparisonStatus, FsStatus, PrologueStatus, WriteStatus
from prolmark.utils.diff import render_patch

if TYPE_CHECKING:
    from prolmark.cli_shared.console_api import ConsoleLike
    from prolmark.pipeline.context import ProcessingContext
    from prolmark.rendering.colored_enum import Colorizer


def classify_outcome(r: ProcessingContext) -> tuple[str, str, Colorizer]:
    """Return ``(key, label, color)`` summarizing one file's result.

    Keys are stable identifiers used for aggregation and tests.
    """
    if r.status.fs != FsStatus.OK:
        return f"fs:{r.status.fs.name.lower()}", r.status.fs.value, r.status.fs.color
    if r.status.prologue == PrologueStatus.NONE:
        return "prologue:none", r.status.prologue.value, r.status.prologue.color
    if r.status.write == WriteStatus.WRITTEN:
        return "convert:written", "converted", r.status.write.color
    if r.status.write == WriteStatus.FAILED:
        return "convert:failed", r.status.write.value, r.status.write.color
    if r.status.comparison == ComparisonStatus.CHANGED:
        return "convert:would_change", "would convert", r.status.comparison.color
    return "convert:unchanged", "up-to-date", ComparisonStatus.UNCHANGED.color


def collect_outcome_counts(
    results: list[ProcessingContext],
) -> dict[str, tuple[int, str, Colorizer]]:
    """Count results per outcome key, preserving first-seen order."""
    counts: dict[str, tuple[int, str, Colorizer]] = {}
    for r in results:
        key, label, color = classify_outcome(r)
        n, _, _ = counts.get(key, (0, label, color))
        counts[key] = (n + 1, label, color)
    return counts


def render_summary_counts(results: list[ProcessingContext], *, total: int) -> None:
    """Print aligned outcome counts."""
    console: ConsoleLike = get_console_safely()
    console.print()
    console.print(console.styled("Summary by outcome:", bold=True, underline=True))
    counts = collect_outcome_counts(results)
    label_width = max((len(v[1]) for v in counts.values()), default=0) + 1
    num_width = len(str(total))
    for n, label, color in counts.values():
        line = f"  {label:<{label_width}}: {n:>{num_width}}"
        console.print(color(line) if console.enable_color else line)


def render_diagnostics(results: list[ProcessingContext], *, verbosity: int) -> None:
    """Print per-file errors always, and warnings when verbose."""
    console: ConsoleLike = get_console_safely()
    for r in results:
        for level, message in r.diagnostics:
            if level == "error":
                console.error(f"❌ {r.path}: {message}")
            elif level == "warning" and verbosity > 0:
                console.warn(f"⚠️  {r.path}: {message}")


def render_per_file_guidance(
    results: list[ProcessingContext],
    *,
    make_message: Callable[[ProcessingContext], str | None],
) -> None:
    """Print one guidance line per file for which ``make_message`` returns text."""
    console: ConsoleLike = get_console_safely()
    for r in results:
        msg = make_message(r)
        if msg:
            console.print(console.styled(msg, fg="yellow"))


def emit_diffs(results: list[ProcessingContext]) -> None:
    """Print the colorized unified diff of every changed file."""
    console: ConsoleLike = get_console_safely()
    for r in results:
        if not r.diff:
            continue
        if console.enable_color:
            console.print(render_patch(r.diff), nl=False)
        else:
            console.print(r.diff, nl=False)


def emit_machine_output(results: list[ProcessingContext], fmt: OutputFormat) -> None:
    """Print per-file results as JSON (one array) or NDJSON (one object per line)."""
    console: ConsoleLike = get_console_safely()
    payloads = [r.to_dict() for r in results]
    if fmt == OutputFormat.NDJSON:
        for payload in payloads:
            console.print(json.dumps(payload))
    else:
        console.print(json.dumps(payloads, indent=2))
