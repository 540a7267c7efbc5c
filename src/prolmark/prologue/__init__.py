# topmark:header:start
#
#   project      : ProlMark
#   file         : __init__.py
#   file_relpath : src/prolmark/prologue/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Prologue entity and the helpers that operate on completed entities."""

from __future__ import annotations

from prolmark.prologue.model import Prologue, Section, normalize_section_name

__all__ = [
    "Prologue",
    "Section",
    "normalize_section_name",
]
