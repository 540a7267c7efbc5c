# topmark:header:start
#
#   project      : ProlMark
#   file         : renderer.py
#   file_relpath : src/prolmark/pipeline/steps/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering step: rebuild the file image with canonical prologues.

Only runs when the file needs conversion (a non-canonical prologue is present,
or ``normalize`` is set). Missing mandatory content is filled in with
[`guess_defaults`][prolmark.prologue.defaults.guess_defaults] before rendering.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from prolmark.config.logging import get_logger
from prolmark.pipeline.status import PrologueStatus, RenderStatus
from prolmark.pipeline.steps.base import BaseStep
from prolmark.prologue.defaults import guess_defaults
from prolmark.rendering.starlse import render_entries

if TYPE_CHECKING:
    from prolmark.config.logging import ProlmarkLogger
    from prolmark.pipeline.context import ProcessingContext
    from prolmark.prologue.model import Prologue

logger: ProlmarkLogger = get_logger(__name__)


class RendererStep(BaseStep):
    """Render ``ctx.updated_lines`` from ``ctx.entries``.

    Axis written: ``render``.
    """

    axis = "render"

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Run only when prologues were recognized."""
        return ctx.status.prologue in (PrologueStatus.CANONICAL, PrologueStatus.LEGACY)

    def run(self, ctx: ProcessingContext) -> None:
        """Render the updated image, or mark rendering as skipped."""
        if not ctx.needs_conversion:
            ctx.status.render = RenderStatus.SKIPPED
            logger.debug("%s: already canonical, nothing to render", ctx.path)
            return

        def prepare(prologue: Prologue) -> None:
            guess_defaults(prologue, path=ctx.path)

        ctx.updated_lines = render_entries(
            ctx.entries, newline=ctx.newline_style, prepare=prepare
        )
        ctx.status.render = RenderStatus.RENDERED
