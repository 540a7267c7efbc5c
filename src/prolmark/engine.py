# topmark:header:start
#
#   project      : ProlMark
#   file         : engine.py
#   file_relpath : src/prolmark/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Prologue recognition engine: multi-dialect dispatch over a stream of lines.

`PrologueParser` owns an ordered list of dialect recognizers and decides, per
contiguous run of lines, which one is authoritative:

- While a recognizer owns an open block, every line is routed to it and its
  output is forwarded. The owner is released once it emits a completed entity.
- Without an owner, each candidate's start predicate is tried in priority
  order; the first match takes ownership and absorbs the line. When nothing
  matches, the line passes through unchanged.

The output is a single ordered sequence of *entries*: plain lines (to be
reproduced verbatim) and completed [`Prologue`][prolmark.prologue.model.Prologue]
entities (to be replaced by their canonical rendering). When a line both closes
a block and must be reproduced (implicit terminators), the entity comes first.

The engine performs no I/O and raises nothing for malformed input; failure to
recognize is simply a pass-through.

Example:
    ```python
    from prolmark.engine import parse_lines

    entries = parse_lines(path.read_text().splitlines(keepends=True))
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator, Sequence, TypeAlias, Union

from prolmark.config.logging import get_logger
from prolmark.dialects.registry import DialectRegistry
from prolmark.prologue.model import Prologue

if TYPE_CHECKING:
    from prolmark.config.logging import ProlmarkLogger
    from prolmark.dialects.base import DialectRecognizer

logger: ProlmarkLogger = get_logger(__name__)

Entry: TypeAlias = Union[str, Prologue]


class ParserClosedError(RuntimeError):
    """Raised when lines are pushed into a parser that was already closed."""


class PrologueParser:
    """Dispatch lines to the first dialect recognizer whose start predicate matches.

    Args:
        dialects (Iterable[str] | None): Dialect names in priority order. When
            None, the built-in default order is used.
        source (str | None): Input identifier used for diagnostics only.
        recognizers (Sequence[DialectRecognizer] | None): Pre-built recognizers
            (overrides ``dialects``); mostly useful in tests.

    Raises:
        UnknownDialectError: If a dialect name is not registered.
    """

    def __init__(
        self,
        dialects: Iterable[str] | None = None,
        *,
        source: str | None = None,
        recognizers: Sequence[DialectRecognizer] | None = None,
    ) -> None:
        self.source = source
        if recognizers is not None:
            self._candidates: tuple[DialectRecognizer, ...] = tuple(recognizers)
        else:
            self._candidates = tuple(DialectRegistry.resolve(dialects, source=source))
        self._owner: DialectRecognizer | None = None
        self._closed = False
        logger.debug(
            "Prologue parser for %s with dialects: %s",
            source or "<stream>",
            ", ".join(r.name for r in self._candidates),
        )

    @property
    def dialects(self) -> tuple[str, ...]:
        """Names of the candidate dialects, in priority order."""
        return tuple(r.name for r in self._candidates)

    @property
    def owner(self) -> DialectRecognizer | None:
        """The recognizer currently owning an open block, if any."""
        return self._owner

    @property
    def closed(self) -> bool:
        """True once `close()` has been called."""
        return self._closed

    def push_line(self, line: str) -> list[Entry]:
        """Feed one line and return the entries it produces (zero, one or two).

        Args:
            line (str): Source line, with or without its line terminator.

        Returns:
            list[Entry]: Produced entries, entity first when both are present.

        Raises:
            ParserClosedError: If the parser was already closed.
        """
        if self._closed:
            raise ParserClosedError("Cannot push lines into a closed PrologueParser")

        if self._owner is not None:
            out_line, prologue = self._owner.push_line(line)
            entries: list[Entry] = []
            if prologue is not None:
                self._owner = None
                entries.append(prologue)
            if out_line is not None:
                entries.append(out_line)
            return entries

        for recognizer in self._candidates:
            if recognizer.is_start(line):
                logger.trace("Dialect %s takes ownership at: %s", recognizer.name, line.rstrip())
                recognizer.push_line(line)
                self._owner = recognizer
                return []
        return [line]

    def close(self) -> list[Entry]:
        """Finalize the stream, force-flushing any block that is still open.

        Returns:
            list[Entry]: The best-effort entity of an unterminated block, if any.
        """
        if self._closed:
            return []
        self._closed = True
        if self._owner is None:
            return []
        prologue = self._owner.close()
        self._owner = None
        return [] if prologue is None else [prologue]

    def parse(self, lines: Iterable[str]) -> list[Entry]:
        """Feed all ``lines`` then close the parser.

        Args:
            lines (Iterable[str]): Source lines in order.

        Returns:
            list[Entry]: The complete entry sequence.
        """
        entries: list[Entry] = []
        for line in lines:
            entries.extend(self.push_line(line))
        entries.extend(self.close())
        return entries


def parse_lines(
    lines: Iterable[str],
    *,
    dialects: Iterable[str] | None = None,
    source: str | None = None,
) -> list[Entry]:
    """Run a fresh `PrologueParser` over ``lines`` and return the entry sequence."""
    return PrologueParser(dialects, source=source).parse(lines)


def iter_prologues(entries: Iterable[Entry]) -> Iterator[Prologue]:
    """Yield the completed entities contained in an entry sequence."""
    for entry in entries:
        if isinstance(entry, Prologue):
            yield entry
