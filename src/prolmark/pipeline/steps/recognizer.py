# topmark:header:start
#
#   project      : ProlMark
#   file         : recognizer.py
#   file_relpath : src/prolmark/pipeline/steps/recognizer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Recognition step: run the prologue parser over the file image.

Feeds every line to a fresh [`PrologueParser`][prolmark.engine.PrologueParser]
configured with ``config.dialects``, closes it at end of input, and stores the
entry sequence on the context. The ``write_defaults`` setting is copied onto
each entity for the serializer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from prolmark.config.logging import get_logger
from prolmark.constants import CANONICAL_DIALECT
from prolmark.engine import PrologueParser
from prolmark.pipeline.status import FsStatus, PrologueStatus
from prolmark.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from prolmark.config.logging import ProlmarkLogger
    from prolmark.pipeline.context import ProcessingContext

logger: ProlmarkLogger = get_logger(__name__)


class RecognizerStep(BaseStep):
    """Recognize prologues in ``ctx.lines``.

    Axis written: ``prologue``.

    Sets:
      - PrologueStatus: {NONE, CANONICAL, LEGACY}
    """

    axis = "prologue"

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Run only after a successful read."""
        return ctx.status.fs == FsStatus.OK

    def run(self, ctx: ProcessingContext) -> None:
        """Populate ``ctx.entries`` and classify the file."""
        parser = PrologueParser(ctx.config.dialects, source=str(ctx.path))
        ctx.entries = parser.parse(ctx.lines)

        prologues = ctx.prologues
        if not prologues:
            ctx.status.prologue = PrologueStatus.NONE
            ctx.request_halt(reason="no prologue", at_step=self.name)
            return

        for prologue in prologues:
            prologue.write_defaults = ctx.config.write_defaults
            if not prologue.is_recognized:
                ctx.add_warning(f"Prologue without a routine name in {ctx.path}")
            if prologue.has_orphans:
                ctx.add_warning(
                    f"Prologue {prologue.title!r}: content outside any section kept under Notes"
                )

        if all(p.dialect == CANONICAL_DIALECT for p in prologues):
            ctx.status.prologue = PrologueStatus.CANONICAL
        else:
            ctx.status.prologue = PrologueStatus.LEGACY
        logger.info("%s: %d prologue(s), %s", ctx.path, len(prologues), ctx.status.prologue.value)
