# topmark:header:start
#
#   project      : ProlMark
#   file         : context.py
#   file_relpath : src/prolmark/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-file processing context shared by the pipeline steps.

A `ProcessingContext` is bootstrapped for every file, threaded through the
steps of a pipeline and finally inspected by the CLI. Steps mutate it in place;
each step only writes the status axis it owns (see [`prolmark.pipeline.status`][]).

Flow control:
    A step may request that the remaining steps be skipped through
    `ProcessingContext.request_halt`. Halting is not an error: a file without
    any prologue halts right after recognition.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from prolmark.config.logging import get_logger
from prolmark.constants import CANONICAL_DIALECT
from prolmark.engine import Entry, iter_prologues
from prolmark.pipeline.status import (
    ComparisonStatus,
    FsStatus,
    PatchStatus,
    PrologueStatus,
    RenderStatus,
    WriteStatus,
)
from prolmark.rendering.payloads import prologue_payload

if TYPE_CHECKING:
    from pathlib import Path

    from prolmark.config.logging import ProlmarkLogger
    from prolmark.config.model import Config
    from prolmark.prologue.model import Prologue

logger: ProlmarkLogger = get_logger(__name__)


@dataclass
class ProcessingStatus:
    """Current status of every pipeline axis for one file."""

    fs: FsStatus = FsStatus.PENDING
    prologue: PrologueStatus = PrologueStatus.PENDING
    render: RenderStatus = RenderStatus.PENDING
    comparison: ComparisonStatus = ComparisonStatus.PENDING
    patch: PatchStatus = PatchStatus.PENDING
    write: WriteStatus = WriteStatus.PENDING

    def to_dict(self) -> dict[str, str]:
        """Return ``{axis: member name}`` for machine output."""
        return {
            "fs": self.fs.name,
            "prologue": self.prologue.name,
            "render": self.render.name,
            "comparison": self.comparison.name,
            "patch": self.patch.name,
            "write": self.write.name,
        }


@dataclass
class FlowControl:
    """Execution flow control for the current file."""

    halt: bool = False
    reason: str = ""
    at_step: str = ""


@dataclass
class ProcessingContext:
    """Mutable state for processing one file.

    Attributes:
        path (Path): The file being processed.
        config (Config): Frozen runtime configuration.
        lines (list[str]): Original file image, line endings preserved.
        newline_style (str): Dominant line terminator (``"\\n"``, ``"\\r\\n"`` or ``"\\r"``).
        ends_with_newline (bool): Whether the last line carries a terminator.
        entries (list[Entry]): Recognition output (plain lines and entities).
        updated_lines (list[str] | None): Rewritten file image, when rendered.
        diff (str | None): Unified diff between ``lines`` and ``updated_lines``.
        status (ProcessingStatus): Per-axis status.
        flow (FlowControl): Early-exit request, if any.
        steps (list[str]): Names of the steps that ran, in order.
        diagnostics (list[tuple[str, str]]): ``(level, message)`` pairs for the user.
    """

    path: Path
    config: Config
    lines: list[str] = field(default_factory=lambda: [])
    newline_style: str = "\n"
    ends_with_newline: bool = False
    entries: list[Entry] = field(default_factory=lambda: [])
    updated_lines: list[str] | None = None
    diff: str | None = None
    status: ProcessingStatus = field(default_factory=ProcessingStatus)
    flow: FlowControl = field(default_factory=FlowControl)
    steps: list[str] = field(default_factory=lambda: [])
    diagnostics: list[tuple[str, str]] = field(default_factory=lambda: [])

    @classmethod
    def bootstrap(cls, *, path: Path, config: Config) -> ProcessingContext:
        """Create a fresh context for ``path``."""
        return cls(path=path, config=config)

    # --- derived views ---------------------------------------------------------

    @property
    def prologues(self) -> list[Prologue]:
        """The completed entities found in this file, in order."""
        return list(iter_prologues(self.entries))

    @property
    def is_halted(self) -> bool:
        """True once a step requested an early exit."""
        return self.flow.halt

    @property
    def needs_conversion(self) -> bool:
        """True when the file holds a non-canonical prologue, or when normalizing."""
        prologues = self.prologues
        if not prologues:
            return False
        if self.config.normalize:
            return True
        return any(p.dialect != CANONICAL_DIALECT for p in prologues)

    @property
    def would_change(self) -> bool:
        """True when the updated image differs from the original."""
        return self.status.comparison == ComparisonStatus.CHANGED

    # --- mutation helpers ------------------------------------------------------

    def request_halt(self, *, reason: str, at_step: str) -> None:
        """Skip the remaining steps for this file."""
        self.flow = FlowControl(halt=True, reason=reason, at_step=at_step)
        logger.debug("Pipeline halted for %s at %s: %s", self.path, at_step, reason)

    def add_info(self, message: str) -> None:
        """Record an informational message for the user."""
        self.diagnostics.append(("info", message))

    def add_warning(self, message: str) -> None:
        """Record a warning for the user."""
        self.diagnostics.append(("warning", message))

    def add_error(self, message: str) -> None:
        """Record an error for the user."""
        self.diagnostics.append(("error", message))

    # --- serialization ---------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable summary of this file's processing."""
        return {
            "path": str(self.path),
            "status": self.status.to_dict(),
            "would_change": self.would_change,
            "prologues": [prologue_payload(p) for p in self.prologues],
            "diagnostics": [{"level": lvl, "message": msg} for lvl, msg in self.diagnostics],
        }
