# topmark:header:start
#
#   project      : ProlMark
#   file         : __init__.py
#   file_relpath : src/prolmark/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering helpers for ProlMark.

This package turns completed prologue entities into text: the canonical STARLSE
block used when rewriting files, machine payloads for ``--format json``, and
the color-aware enum used by status reporting.

Public modules:
    - prolmark.rendering.starlse
    - prolmark.rendering.payloads
    - prolmark.rendering.colored_enum
"""

from __future__ import annotations
