# topmark:header:start
#
#   project      : ProlMark
#   file         : defaults.py
#   file_relpath : src/prolmark/prologue/defaults.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Default content for completed prologues.

Legacy prologues often lack fields the canonical layout expects. The helpers in
this module fill the gaps on an entity *after* the engine emitted it:

- an empty title is guessed from the file name,
- a missing ``Language`` section is guessed from the file suffix,
- missing ``Authors``, ``History`` and ``Bugs`` sections get placeholder
  content (``{enter_new_authors_here}`` and friends).

Placeholder-only sections are only rendered when ``Prologue.write_defaults`` is
set; see [`is_default_content`][prolmark.prologue.defaults.is_default_content].
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import TYPE_CHECKING, Final

from prolmark.config.logging import get_logger

if TYPE_CHECKING:
    from prolmark.config.logging import ProlmarkLogger
    from prolmark.prologue.model import Prologue

logger: ProlmarkLogger = get_logger(__name__)

_PLACEHOLDER_RE: Final[re.Pattern[str]] = re.compile(r"^\{[^{}]*\}$")

# Placeholder content per standard section.
DEFAULT_CONTENT: Final[dict[str, tuple[str, ...]]] = {
    "Language": ("{routine_language}",),
    "Authors": ("{enter_new_authors_here}",),
    "History": ("{enter_changes_here}",),
    "Bugs": ("{note_any_bugs_here}",),
}

# Sections appended (in this order) when missing.
TRAILING_DEFAULT_SECTIONS: Final[tuple[str, ...]] = ("Authors", "History", "Bugs")

_LANGUAGE_BY_SUFFIX: Final[dict[str, str]] = {
    ".f": "Starlink Fortran 77",
    ".for": "Starlink Fortran 77",
    ".gen": "Starlink Fortran 77",
    ".c": "Starlink ANSI C",
    ".h": "Starlink ANSI C",
    ".pl": "Perl 5",
    ".pm": "Perl 5",
    ".sh": "Bourne shell",
    ".csh": "C shell",
    ".tcl": "Tcl",
}

_FORTRAN_SUFFIXES: Final[frozenset[str]] = frozenset({".f", ".for", ".gen"})


def is_default_content(lines: list[str]) -> bool:
    """Return True when every non-blank line is a ``{placeholder}``.

    An empty section is *not* default content: it is rendered as-is.
    """
    text = [line.strip() for line in lines if line.strip()]
    return bool(text) and all(_PLACEHOLDER_RE.match(line) for line in text)


def guess_language(path: Path | str) -> str | None:
    """Return the implementation language suggested by the file suffix, if known."""
    return _LANGUAGE_BY_SUFFIX.get(Path(path).suffix.lower())


def guess_title(path: Path | str) -> str:
    """Return a routine name derived from the file name.

    Fortran routine names are conventionally upper case.
    """
    p = Path(path)
    stem = p.stem
    if p.suffix.lower() in _FORTRAN_SUFFIXES:
        return stem.upper()
    return stem


def guess_defaults(prologue: Prologue, *, path: Path | str | None = None) -> Prologue:
    """Fill missing mandatory content on a completed prologue.

    Args:
        prologue (Prologue): A completed entity; mutated in place.
        path (Path | str | None): File the prologue came from, used to guess the
            title and language. Falls back to ``prologue.source``.

    Returns:
        Prologue: The same entity, for chaining.
    """
    origin = path if path is not None else prologue.source

    if not prologue.title and origin:
        prologue.title = guess_title(origin)
        logger.info("Guessed routine name %r from %s", prologue.title, origin)

    if not prologue.has_section("Language"):
        language = guess_language(origin) if origin else None
        content = [language] if language else list(DEFAULT_CONTENT["Language"])
        prologue.insert_section(0, "Language", content)

    for name in TRAILING_DEFAULT_SECTIONS:
        if not prologue.has_section(name):
            prologue.add_section(name, list(DEFAULT_CONTENT[name]))

    return prologue
