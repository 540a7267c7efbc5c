# topmark:header:start
#
#   project      : ProlMark
#   file         : writer.py
#   file_relpath : src/prolmark/pipeline/steps/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Writer step: persist the updated image.

Writes happen only when ``config.apply_changes`` is set; otherwise the file is
marked as previewed. The updated image is written back byte for byte (no
newline translation) so untouched lines keep their original terminators.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from prolmark.config.logging import get_logger
from prolmark.pipeline.status import ComparisonStatus, WriteStatus
from prolmark.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from prolmark.config.logging import ProlmarkLogger
    from prolmark.pipeline.context import ProcessingContext

logger: ProlmarkLogger = get_logger(__name__)


class WriterStep(BaseStep):
    """Write ``ctx.updated_lines`` to ``ctx.path``.

    Axis written: ``write``.
    """

    axis = "write"

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Run only after comparison."""
        return ctx.status.comparison != ComparisonStatus.PENDING

    def run(self, ctx: ProcessingContext) -> None:
        """Write the file, or record why it was not written."""
        if ctx.status.comparison != ComparisonStatus.CHANGED or ctx.updated_lines is None:
            ctx.status.write = WriteStatus.SKIPPED
            return
        if not ctx.config.apply_changes:
            ctx.status.write = WriteStatus.PREVIEWED
            return
        try:
            with ctx.path.open("w", encoding="utf-8", newline="") as fh:
                fh.write("".join(ctx.updated_lines))
        except OSError as e:
            logger.error("Failed to write %s: %s", ctx.path, e)
            ctx.status.write = WriteStatus.FAILED
            ctx.add_error(f"Write failed: {e}")
            return
        ctx.status.write = WriteStatus.WRITTEN
        logger.info("Converted prologue(s) written to %s", ctx.path)
