# topmark:header:start
#
#   project      : ProlMark
#   file         : payloads.py
#   file_relpath : src/prolmark/rendering/payloads.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON-friendly payloads for machine output (``--format json`` / ``ndjson``)."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypedDict

if TYPE_CHECKING:
    from prolmark.prologue.model import Prologue


class SectionPayload(TypedDict):
    """Serializable shape of one section."""

    name: str
    lines: list[str]


class ProloguePayload(TypedDict):
    """Serializable shape of one prologue entity."""

    source: str | None
    dialect: str
    comment_char: str
    title: str
    purpose: str
    recognized: bool
    sections: list[SectionPayload]
    orphan_lines: list[str]


def prologue_payload(prologue: Prologue) -> ProloguePayload:
    """Return a JSON-serializable mapping describing ``prologue``."""
    return {
        "source": prologue.source,
        "dialect": prologue.dialect,
        "comment_char": prologue.comment_char,
        "title": prologue.title,
        "purpose": prologue.purpose,
        "recognized": prologue.is_recognized,
        "sections": [{"name": s.name, "lines": list(s.lines)} for s in prologue.sections],
        "orphan_lines": list(prologue.orphan_lines),
    }
