# topmark:header:start
#
#   project      : ProlMark
#   file         : starlse.py
#   file_relpath : src/prolmark/rendering/starlse.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Serializer for the canonical STARLSE prologue layout.

The rendered block looks like::

    *+
    *  Name:
    *     KPG1_AXBN

    *  Purpose:
    *     Determines the number of an axis with given label.

    *  Arguments:
    *     NDIM = INTEGER (Given)
    *        Number of axes.

    *-

Layout rules:
    - Headings are the comment character, two spaces, the section name and a
      colon.
    - Content lines are indented by five spaces after the comment character;
      deeper indentation kept by the recognizer is preserved on top of that.
    - Blank content lines render as the bare comment character.
    - Sections are separated by an empty line (``#`` for script comments, so
      the block stays a single comment run).
    - Sections are emitted in stored order. Sections whose content is only
      ``{placeholders}`` are skipped unless ``Prologue.write_defaults`` is set.
    - Content found outside any section is emitted under ``Notes`` right after
      the purpose.

The recognizer for the ``starlse`` dialect reads this layout back into an equal
entity (same title, purpose and sections).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from prolmark.config.logging import get_logger
from prolmark.prologue.defaults import is_default_content
from prolmark.prologue.model import Prologue

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from prolmark.config.logging import ProlmarkLogger
    from prolmark.engine import Entry

logger: ProlmarkLogger = get_logger(__name__)

HEADING_INDENT: Final[str] = "  "
CONTENT_INDENT: Final[str] = "     "
ORPHAN_SECTION: Final[str] = "Notes"


def _separator(comment_char: str) -> str:
    return comment_char if comment_char == "#" else ""


def render_prologue(prologue: Prologue, *, newline: str = "\n") -> list[str]:
    """Render a prologue entity as a canonical STARLSE block.

    Args:
        prologue (Prologue): The entity to render.
        newline (str): Line terminator appended to every rendered line.

    Returns:
        list[str]: The rendered lines, each ending with ``newline``.
    """
    cc = prologue.comment_char
    sep = _separator(cc)
    out: list[str] = [f"{cc}+"]

    def emit(name: str, lines: list[str]) -> None:
        out.append(f"{cc}{HEADING_INDENT}{name}:")
        for line in lines:
            out.append(f"{cc}{CONTENT_INDENT}{line}" if line else cc)
        out.append(sep)

    emit("Name", [prologue.title] if prologue.title else [])
    emit("Purpose", [prologue.purpose] if prologue.purpose else [])

    if prologue.orphan_lines:
        logger.warning(
            "Prologue %r in %s has content outside any section; rendering it under %s",
            prologue.title,
            prologue.source or "<stream>",
            ORPHAN_SECTION,
        )
        emit(ORPHAN_SECTION, prologue.orphan_lines)

    for section in prologue.sections:
        if not prologue.write_defaults and is_default_content(section.lines):
            logger.debug("Skipping default-only section %r", section.name)
            continue
        emit(section.name, section.lines)

    out.append(f"{cc}-")
    return [line + newline for line in out]


def render_entries(
    entries: Iterable[Entry],
    *,
    newline: str = "\n",
    prepare: Callable[[Prologue], object] | None = None,
) -> list[str]:
    """Rebuild a file image from an entry sequence.

    Plain lines are reproduced verbatim; entities are replaced by their
    canonical rendering.

    Args:
        entries (Iterable[Entry]): Output of the recognition engine.
        newline (str): Line terminator for rendered prologue lines.
        prepare (Callable[[Prologue], object] | None): Optional hook run on each
            entity before rendering (e.g. default guessing).

    Returns:
        list[str]: The rebuilt lines.
    """
    out: list[str] = []
    for entry in entries:
        if isinstance(entry, Prologue):
            if prepare is not None:
                prepare(entry)
            out.extend(render_prologue(entry, newline=newline))
        else:
            out.append(entry)
    return out
