# topmark:header:start
#
#   project      : ProlMark
#   file         : base.py
#   file_relpath : src/prolmark/dialects/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dialect recognizer base class: the per-dialect line classification state machine.

A *dialect recognizer* consumes source lines one at a time. While idle it tests
each line against the dialect's start predicate; once a block has started it
classifies every following line until the block ends, populating a
[`Prologue`][prolmark.prologue.model.Prologue] as it goes.

States:
    - ``IDLE``: no open entity; lines are returned unchanged unless they match
      the start predicate, in which case the start line is absorbed.
    - ``IN_PROLOGUE``: an entity is open but no section is active; content lands
      in the pending buffer.
    - ``IN_SECTION``: content lands in the active section's buffer.

Line classes (tested in this order while a block is open):
    1. *Implicit terminator*: a legacy variable-declaration heading such as
       ``*  Status:``. The entity is closed and the line is handed back so that
       the caller reproduces it as ordinary code.
    2. *Explicit terminator*: ``*-``. The entity is closed; the marker is consumed.
    3. *Section header*: ``*  Words:``. Any open section is flushed first.
    4. *Comment content*: ``*`` followed by whitespace. Between two and five
       spaces of indentation are stripped.
    5. *Anything else*: stored trimmed; a bare comment character becomes ``""``.

Inside a ``History`` section a content line reading ``endhistory`` flushes the
section and is dropped; the following lines start a fresh pending buffer, so
anything before the next section header ends up in ``orphan_lines``.
An implicit terminator must end at its colon: trailing whitespace after the
colon makes the line an ordinary section header.

Ownership:
    The pending buffer belongs to the recognizer and is replaced (never
    cleared in place) on every flush. The entity is handed over on close and no
    reference is kept afterwards.

Stream exhaustion:
    Reaching the end of input with an open entity is not an error, but nothing
    happens automatically: callers must call [`close`][prolmark.dialects.base.DialectRecognizer.close]
    or the buffered content is lost.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import TYPE_CHECKING, ClassVar, Final, NamedTuple

from prolmark.config.logging import get_logger
from prolmark.prologue.model import Prologue, normalize_section_name

if TYPE_CHECKING:
    from prolmark.config.logging import ProlmarkLogger

logger: ProlmarkLogger = get_logger(__name__)

# Legacy headings that open the variable-declaration region of a routine. They
# are not part of a modern prologue, so meeting one ends the block.
IMPLICIT_TERMINATORS: Final[tuple[str, ...]] = (
    r"Type Definitions",
    r"Global constants",
    r"Import",
    r"Export",
    r"Status",
)

# Sentinel closing the History section of some legacy prologues.
ENDHISTORY_RE: Final[re.Pattern[str]] = re.compile(r"^\s*endhistory\s*$", re.IGNORECASE)

# Bounded run of indentation removed from content lines.
_CONTENT_INDENT_RE: Final[re.Pattern[str]] = re.compile(r"^\s{2,5}")


class RecognizerState(str, Enum):
    """Coarse state of a dialect recognizer."""

    IDLE = "idle"
    IN_PROLOGUE = "in prologue"
    IN_SECTION = "in section"


@dataclass(frozen=True)
class StartMatch:
    """Fields captured from a prologue start line."""

    comment_char: str
    title: str = ""
    purpose: str = ""


class LinePatterns(NamedTuple):
    """Compiled classification patterns for one comment character."""

    implicit_terminator: re.Pattern[str]
    explicit_terminator: re.Pattern[str]
    section_header: re.Pattern[str]
    content: re.Pattern[str]


@lru_cache(maxsize=8)
def line_patterns(comment_char: str) -> LinePatterns:
    """Return the classification patterns for ``comment_char`` (cached)."""
    c = re.escape(comment_char)
    terminators = "|".join(IMPLICIT_TERMINATORS)
    return LinePatterns(
        implicit_terminator=re.compile(
            rf"^\s*{c}\s+(?:{terminators})\s*:$",
            re.IGNORECASE,
        ),
        explicit_terminator=re.compile(rf"^\s*{c}-\s*$"),
        section_header=re.compile(rf"^\s*{c}\s+([A-Za-z][A-Za-z\s]*?)\s*:\s*$"),
        content=re.compile(rf"^\s*{c}(\s+.*)$"),
    )


def _chomp(line: str) -> str:
    return line.rstrip("\r\n")


def _is_blank(line: str) -> bool:
    return not line.strip()


class DialectRecognizer:
    """Base class for dialect-specific prologue recognizers.

    Subclasses provide ``name``, ``description`` and a start predicate, either by
    setting ``start_re`` (a pattern with the named groups ``cchar``, ``title`` and
    optionally ``purpose``) or by overriding [`match_start`][prolmark.dialects.base.DialectRecognizer.match_start].
    They may also override ``_commit_section`` to route a section into entity
    fields instead of the section list.

    Attributes:
        name (str): Dialect tag, copied into ``Prologue.dialect``.
        description (str): One-line description shown by the CLI.
        canonical (bool): True for the dialect the serializer emits.
        source (str | None): Input identifier, copied into new entities for
            diagnostics.
    """

    name: ClassVar[str] = ""
    description: ClassVar[str] = ""
    canonical: ClassVar[bool] = False
    start_re: ClassVar[re.Pattern[str] | None] = None

    def __init__(self, *, source: str | None = None) -> None:
        self.source = source
        self._prologue: Prologue | None = None
        self._section: str | None = None
        self._pending: list[str] = []

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, state={self.state.name})"

    # --- read-only views -------------------------------------------------------

    @property
    def state(self) -> RecognizerState:
        """Current state of the machine."""
        if self._prologue is None:
            return RecognizerState.IDLE
        if self._section is None:
            return RecognizerState.IN_PROLOGUE
        return RecognizerState.IN_SECTION

    @property
    def prologue(self) -> Prologue | None:
        """The entity currently being populated, if any."""
        return self._prologue

    @property
    def section(self) -> str | None:
        """Name of the active section, if any."""
        return self._section

    @property
    def pending(self) -> tuple[str, ...]:
        """Snapshot of the content buffered since the last flush."""
        return tuple(self._pending)

    # --- start predicate -------------------------------------------------------

    def match_start(self, line: str) -> StartMatch | None:
        """Return the captured start fields if ``line`` opens a prologue.

        Args:
            line (str): Source line, with or without its line terminator.

        Returns:
            StartMatch | None: Captured fields, or None when the line does not
            start a prologue in this dialect.
        """
        if self.start_re is None:
            return None
        m = self.start_re.match(_chomp(line))
        if m is None:
            return None
        groups = m.groupdict()
        title = (groups.get("title") or "").strip()
        purpose = (groups.get("purpose") or "").strip()
        return StartMatch(comment_char=groups["cchar"], title=title, purpose=purpose)

    def is_start(self, line: str) -> bool:
        """Return True if ``line`` would open a prologue in this dialect."""
        return self.match_start(line) is not None

    # --- line consumption ------------------------------------------------------

    def push_line(self, line: str) -> tuple[str | None, Prologue | None]:
        """Consume one source line.

        Args:
            line (str): Source line, with or without its line terminator.

        Returns:
            tuple[str | None, Prologue | None]: The line to pass through (None
            when the line belongs to the prologue) and the completed entity
            (None unless this line closed a block).
        """
        if self._prologue is None:
            start = self.match_start(line)
            if start is None:
                return line, None
            self._open(start, line)
            return None, None
        return self._classify(line, self._prologue.comment_char)

    def flush_section(self) -> None:
        """Commit the active section into the entity.

        Trailing blank entries are trimmed (interior blanks are kept), the
        section is stored, and the buffer and active-section marker are reset.
        Does nothing when no section is open.
        """
        prologue, section = self._prologue, self._section
        if section is None or prologue is None:
            return
        lines = self._pending
        end = len(lines)
        while end > 0 and _is_blank(lines[end - 1]):
            end -= 1
        logger.trace("Flushing section %r (%d lines)", section, end)
        self._commit_section(prologue, section, lines[:end])
        self._section = None
        self._pending = []

    def close(self) -> Prologue | None:
        """Force-flush the open entity at end of input and return it.

        Returns:
            Prologue | None: The (possibly incomplete) entity, or None when no
            block is open.
        """
        if self._prologue is None:
            return None
        logger.debug(
            "Forced flush of unterminated %s prologue %r",
            self.name,
            self._prologue.title,
        )
        return self._finish()

    # --- hooks -----------------------------------------------------------------

    def _commit_section(self, prologue: Prologue, name: str, lines: list[str]) -> None:
        """Store a flushed section. Dialects may route some sections elsewhere."""
        prologue.add_section(name, lines)

    # --- internals -------------------------------------------------------------

    def _open(self, start: StartMatch, line: str) -> None:
        logger.debug(
            "Starting %s prologue with comment char %s (%s)",
            self.name,
            start.comment_char,
            _chomp(line).strip(),
        )
        self._prologue = Prologue(
            comment_char=start.comment_char,
            title=start.title,
            purpose=start.purpose,
            dialect=self.name,
            source=self.source,
        )
        self._section = None
        self._pending = []

    def _finish(self) -> Prologue:
        self.flush_section()
        self._adopt_orphans()
        prologue = self._prologue
        if prologue is None:
            raise RuntimeError(f"{self.name}: no open prologue to finish")
        self._prologue = None
        return prologue

    def _adopt_orphans(self) -> None:
        """Move content buffered outside any section into ``orphan_lines``."""
        if self._section is not None or self._prologue is None:
            return
        lines = self._pending
        start, end = 0, len(lines)
        while start < end and _is_blank(lines[start]):
            start += 1
        while end > start and _is_blank(lines[end - 1]):
            end -= 1
        if start < end:
            logger.debug(
                "Prologue %r: %d line(s) of content outside any section",
                self._prologue.title,
                end - start,
            )
            self._prologue.orphan_lines.extend(lines[start:end])
        self._pending = []

    def _classify(self, line: str, comment_char: str) -> tuple[str | None, Prologue | None]:
        patterns = line_patterns(comment_char)
        text = _chomp(line)

        if patterns.implicit_terminator.match(text):
            logger.debug("End of prologue detected at implicit terminator: %s", text.strip())
            return line, self._finish()

        if patterns.explicit_terminator.match(text):
            logger.debug("End of prologue detected")
            return None, self._finish()

        m = patterns.section_header.match(text)
        if m is not None:
            self.flush_section()
            self._adopt_orphans()
            self._section = normalize_section_name(m.group(1))
            logger.trace("Opening section %r", self._section)
            return None, None

        m = patterns.content.match(text)
        if m is not None:
            content = _CONTENT_INDENT_RE.sub("", m.group(1), count=1).rstrip()
            if self._section == "History" and ENDHISTORY_RE.match(content):
                logger.trace("endhistory sentinel closes the History section")
                self.flush_section()
                return None, None
            self._pending.append(content)
            return None, None

        content = text.strip()
        if content == comment_char:
            content = ""
        self._pending.append(content)
        return None, None
