# topmark:header:start
#
#   project      : ProlMark
#   file         : comparer.py
#   file_relpath : src/prolmark/pipeline/steps/comparer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comparison step: decide whether the updated image differs from the original."""

from __future__ import annotations

from typing import TYPE_CHECKING

from prolmark.pipeline.status import ComparisonStatus, PrologueStatus, RenderStatus
from prolmark.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from prolmark.pipeline.context import ProcessingContext


class ComparerStep(BaseStep):
    """Compare ``ctx.lines`` with ``ctx.updated_lines``.

    Axis written: ``comparison``.
    """

    axis = "comparison"

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Run once recognition produced a verdict."""
        return ctx.status.prologue != PrologueStatus.PENDING

    def run(self, ctx: ProcessingContext) -> None:
        """Set the comparison status."""
        if ctx.status.render != RenderStatus.RENDERED or ctx.updated_lines is None:
            ctx.status.comparison = ComparisonStatus.UNCHANGED
            return
        if ctx.updated_lines == ctx.lines:
            ctx.status.comparison = ComparisonStatus.UNCHANGED
        else:
            ctx.status.comparison = ComparisonStatus.CHANGED
