# topmark:header:start
#
#   project      : ProlMark
#   file         : starlse.py
#   file_relpath : src/prolmark/dialects/starlse.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Recognizer for canonical STARLSE prologues.

STARLSE is the target layout of the conversion tools. The start marker stands
alone on its line and the routine name and purpose live in their own sections::

    *+
    *  Name:
    *     KPG1_AXBN

    *  Purpose:
    *     Determines the number of an axis with given label.

    *  Arguments:
    *     ...
    *-

Recognizing the canonical layout lets already-converted files round-trip and
lets ``--normalize`` re-render them.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, ClassVar

from prolmark.dialects.base import DialectRecognizer
from prolmark.dialects.registry import register_dialect

if TYPE_CHECKING:
    from prolmark.prologue.model import Prologue


@register_dialect("starlse")
class StarlseRecognizer(DialectRecognizer):
    """Recognizer for ``*+`` / ``*-`` delimited STARLSE prologues.

    The ``Name`` and ``Purpose`` sections populate ``Prologue.title`` and
    ``Prologue.purpose`` instead of being stored as sections.
    """

    name = "starlse"
    description = "Canonical STARLSE prologue ('*+' marker, Name/Purpose sections)"
    canonical = True

    start_re: ClassVar[re.Pattern[str] | None] = re.compile(r"^\s*(?P<cchar>[*#])\+\s*$")

    def _commit_section(self, prologue: Prologue, name: str, lines: list[str]) -> None:
        text = [line.strip() for line in lines if line.strip()]
        if name == "Name":
            prologue.title = text[0] if text else ""
        elif name == "Purpose":
            prologue.purpose = " ".join(text)
        else:
            super()._commit_section(prologue, name, lines)
