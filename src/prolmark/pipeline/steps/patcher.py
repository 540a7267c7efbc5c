# topmark:header:start
#
#   project      : ProlMark
#   file         : patcher.py
#   file_relpath : src/prolmark/pipeline/steps/patcher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Patch (diff) generation step.

Produces a unified diff between the original and the updated file image. The
step performs no I/O; the CLI decides whether and how to show the diff.
"""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from prolmark.config.logging import get_logger
from prolmark.pipeline.status import ComparisonStatus, PatchStatus
from prolmark.pipeline.steps.base import BaseStep
from prolmark.utils.diff import render_patch

if TYPE_CHECKING:
    from prolmark.config.logging import ProlmarkLogger
    from prolmark.pipeline.context import ProcessingContext

logger: ProlmarkLogger = get_logger(__name__)


class PatcherStep(BaseStep):
    """Attach a unified diff to ``ctx.diff``.

    Axis written: ``patch``.
    """

    axis = "patch"

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Run only after comparison."""
        return ctx.status.comparison != ComparisonStatus.PENDING

    def run(self, ctx: ProcessingContext) -> None:
        """Generate the diff when the file changed."""
        if ctx.status.comparison != ComparisonStatus.CHANGED or ctx.updated_lines is None:
            ctx.diff = None
            ctx.status.patch = PatchStatus.SKIPPED
            return

        patch_lines: list[str] = list(
            difflib.unified_diff(
                ctx.lines,
                ctx.updated_lines,
                fromfile=f"{ctx.path} (current)",
                tofile=f"{ctx.path} (updated)",
                n=3,
                lineterm=ctx.newline_style,
            )
        )
        # difflib leaves the last line bare when the file lacks a final newline.
        patch_lines = [
            line if line.endswith(("\n", "\r")) else line + ctx.newline_style
            for line in patch_lines
        ]
        ctx.diff = "".join(patch_lines)
        ctx.status.patch = PatchStatus.GENERATED
        logger.trace("Patch (rendered):\n%s", render_patch(patch_lines))
