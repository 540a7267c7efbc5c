# topmark:header:start
#
#   project      : ProlMark
#   file         : reader.py
#   file_relpath : src/prolmark/pipeline/steps/reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""File reader step.

Loads the file as UTF-8 text without newline translation, so every line keeps
its original terminator (``\n``, ``\r\n`` or ``\r``). The dominant terminator
is recorded on the context; rendered prologue lines use it so that a converted
file does not end up with mixed line endings.

Filesystem problems are reported on the ``fs`` axis and halt the pipeline for
that file; they are not raised.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from prolmark.config.logging import get_logger
from prolmark.pipeline.status import FsStatus
from prolmark.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from prolmark.config.logging import ProlmarkLogger
    from prolmark.pipeline.context import ProcessingContext

logger: ProlmarkLogger = get_logger(__name__)


def newline_histogram(lines: list[str]) -> dict[str, int]:
    """Count line terminators by kind."""
    hist: dict[str, int] = {"\n": 0, "\r\n": 0, "\r": 0}
    for ln in lines:
        if ln.endswith("\r\n"):
            hist["\r\n"] += 1
        elif ln.endswith("\n"):
            hist["\n"] += 1
        elif ln.endswith("\r"):
            hist["\r"] += 1
    return hist


def dominant_newline(lines: list[str]) -> str:
    """Return the most frequent terminator in ``lines`` (LF when there is none).

    Ties prefer LF, then CRLF.
    """
    hist = newline_histogram(lines)
    best = max(hist.values())
    if best == 0:
        return "\n"
    for nl in ("\n", "\r\n", "\r"):
        if hist[nl] == best:
            return nl
    return "\n"


class ReaderStep(BaseStep):
    """Load the file image and detect its newline style.

    Axis written: ``fs``.
    """

    axis = "fs"

    def run(self, ctx: ProcessingContext) -> None:
        """Read ``ctx.path`` into ``ctx.lines``."""
        path = ctx.path
        if not path.exists():
            ctx.status.fs = FsStatus.NOT_FOUND
            ctx.add_error(f"File not found: {path}")
            ctx.request_halt(reason="not found", at_step=self.name)
            return
        if not path.is_file():
            ctx.status.fs = FsStatus.NOT_A_FILE
            ctx.add_error(f"Not a regular file: {path}")
            ctx.request_halt(reason="not a file", at_step=self.name)
            return

        try:
            with path.open("r", encoding="utf-8", newline="") as fh:
                lines = fh.readlines()
        except PermissionError as e:
            ctx.status.fs = FsStatus.NO_READ_PERMISSION
            ctx.add_error(f"Permission denied: {e}")
            ctx.request_halt(reason="no read permission", at_step=self.name)
            return
        except UnicodeDecodeError as e:
            logger.warning("Cannot decode %s as UTF-8: %s", path, e)
            ctx.status.fs = FsStatus.UNICODE_DECODE_ERROR
            ctx.add_error(f"Cannot decode as UTF-8: {e}")
            ctx.request_halt(reason="unicode decode error", at_step=self.name)
            return
        except OSError as e:
            logger.error("Error reading %s: %s", path, e)
            ctx.status.fs = FsStatus.UNREADABLE
            ctx.add_error(f"Read error: {e}")
            ctx.request_halt(reason="unreadable", at_step=self.name)
            return

        if not lines:
            ctx.status.fs = FsStatus.EMPTY
            ctx.request_halt(reason="empty file", at_step=self.name)
            return

        ctx.lines = lines
        ctx.newline_style = dominant_newline(ctx.lines)
        ctx.ends_with_newline = ctx.lines[-1].endswith(("\n", "\r"))
        ctx.status.fs = FsStatus.OK
        logger.trace(
            "Read %d line(s) from %s (newline %r)", len(ctx.lines), path, ctx.newline_style
        )
