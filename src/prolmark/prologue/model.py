# topmark:header:start
#
#   project      : ProlMark
#   file         : model.py
#   file_relpath : src/prolmark/prologue/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structured in-memory representation of a recognized prologue.

A `Prologue` is created by a dialect recognizer when it detects a start line,
populated while that recognizer owns it, and handed to the caller once the
block is closed. From then on the recognition engine keeps no reference:
collaborators (default guessing, the serializer) may mutate it freely.

Sections:
    Sections are kept as an ordered list of `Section` entries rather than a
    mapping. Re-opening a section name that was already flushed appends a new
    entry; nothing is merged.

Section names:
    Names are normalized when stored (see `normalize_section_name`) so that
    ``"GLOBAL  variables"`` and ``"Global Variables"`` compare equal, and known
    legacy synonyms map onto their canonical spelling.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Final

# Words kept lowercase inside a section name (unless they lead the name).
_MINOR_WORDS: Final[frozenset[str]] = frozenset({"of", "and", "to", "the", "in", "for"})

# Acronyms written in upper case in canonical headings (e.g. "ADAM Parameters").
_ACRONYMS: Final[frozenset[str]] = frozenset(
    {"ADAM", "AST", "ARY", "FITS", "GRP", "HDS", "ICL", "IDL", "NDF", "SSE"}
)

# Legacy section names and their canonical replacement (after case normalization).
SECTION_SYNONYMS: Final[dict[str, str]] = {
    "Parameters": "Arguments",
    "Author": "Authors",
    "Deficiencies": "Implementation Deficiencies",
}

_WS_RE: Final[re.Pattern[str]] = re.compile(r"\s+")


def normalize_section_name(raw: str) -> str:
    """Return the canonical spelling of a section name.

    Collapses internal whitespace, title-cases every word except a handful of
    minor words and the known acronyms in `_ACRONYMS` (always upper case), then
    applies `SECTION_SYNONYMS`.

    Args:
        raw (str): Section name as found in the source (without the colon).

    Returns:
        str: The normalized section name.
    """
    words: list[str] = _WS_RE.split(raw.strip())
    cased: list[str] = []
    for i, word in enumerate(words):
        lower = word.lower()
        if word.upper() in _ACRONYMS:
            cased.append(word.upper())
        elif i > 0 and lower in _MINOR_WORDS:
            cased.append(lower)
        else:
            cased.append(lower[:1].upper() + lower[1:])
    name = " ".join(cased)
    return SECTION_SYNONYMS.get(name, name)


@dataclass
class Section:
    """A named, ordered group of content lines inside a prologue."""

    name: str
    lines: list[str] = field(default_factory=list)


@dataclass
class Prologue:
    """Structured content of one prologue block.

    Attributes:
        comment_char (str): Character prefixing the comment lines of the block
            (``*`` for Fortran/C sources, ``#`` for scripts).
        title (str): Routine name. Mandatory for a recognized block.
        purpose (str): One-line summary of the routine. May be empty.
        dialect (str): Name of the recognizer that produced this entity.
        sections (list[Section]): Sections in first-encounter order.
        orphan_lines (list[str]): Non-blank content found while no section was
            open. Kept apart so the serializer can decide where it goes.
        write_defaults (bool): Whether sections holding only placeholder
            content are rendered. Set by the caller, never by the engine.
        source (str | None): Identifier of the input (usually a path); used for
            diagnostics only.
    """

    comment_char: str
    title: str = ""
    purpose: str = ""
    dialect: str = ""
    sections: list[Section] = field(default_factory=list)
    orphan_lines: list[str] = field(default_factory=list)
    write_defaults: bool = False
    source: str | None = None

    @property
    def is_recognized(self) -> bool:
        """True when the entity carries the mandatory title."""
        return bool(self.title)

    @property
    def has_orphans(self) -> bool:
        """True when content was collected outside of any section."""
        return bool(self.orphan_lines)

    def add_section(self, name: str, lines: list[str]) -> Section:
        """Append a new section; an existing section with the same name is left alone.

        Args:
            name (str): Section name; normalized before storage.
            lines (list[str]): Content lines. The list is copied.

        Returns:
            Section: The section that was appended.
        """
        section = Section(name=normalize_section_name(name), lines=list(lines))
        self.sections.append(section)
        return section

    def section(self, name: str) -> Section | None:
        """Return the first section called ``name`` (normalized), or None."""
        wanted = normalize_section_name(name)
        for section in self.sections:
            if section.name == wanted:
                return section
        return None

    def has_section(self, name: str) -> bool:
        """Return True if at least one section called ``name`` exists."""
        return self.section(name) is not None

    def content(self, name: str) -> list[str] | None:
        """Return the lines of the first section called ``name``, or None."""
        section = self.section(name)
        return None if section is None else section.lines

    def section_names(self) -> list[str]:
        """Return section names in stored order (duplicates included)."""
        return [s.name for s in self.sections]

    def insert_section(self, index: int, name: str, lines: list[str]) -> Section:
        """Insert a new section at ``index`` in the ordered section list."""
        section = Section(name=normalize_section_name(name), lines=list(lines))
        self.sections.insert(index, section)
        return section
