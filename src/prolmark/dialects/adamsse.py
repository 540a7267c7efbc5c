# topmark:header:start
#
#   project      : ProlMark
#   file         : adamsse.py
#   file_relpath : src/prolmark/dialects/adamsse.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Recognizer for old-style ADAM/SSE prologues.

An ADAM/SSE prologue opens with the routine name and purpose on a single line
and usually runs straight into the variable declarations of the routine::

    *+  KPG1_AXBN - Determines the number of an axis with given label
    *    Description :
    *     Looks up the axis ...
    *    Authors :
    *     MJC: Malcolm J. Currie (STARLINK)
    *    Type Definitions :
          IMPLICIT NONE

The block therefore ends either at ``*-`` or, more often, at the first legacy
declaration heading (``Type Definitions``, ``Global constants``, ``Import``,
``Export`` or ``Status``), which is handed back as ordinary code.
"""

from __future__ import annotations

import re
from typing import ClassVar

from prolmark.dialects.base import DialectRecognizer
from prolmark.dialects.registry import register_dialect


@register_dialect("adamsse")
class AdamSseRecognizer(DialectRecognizer):
    """Recognizer for ``*+ name - purpose`` style prologues (``*`` or ``#`` comments)."""

    name = "adamsse"
    description = "Old-style ADAM/SSE prologue ('*+ NAME - purpose' start line)"

    # Normal prologue start:  *+ title - purpose
    start_re: ClassVar[re.Pattern[str] | None] = re.compile(
        r"^\s*(?P<cchar>[*#])\+\s*(?P<title>\w+)\s*-\s*(?P<purpose>.*?)\s*$"
    )
