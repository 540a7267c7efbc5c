# topmark:header:start
#
#   project      : ProlMark
#   file         : __init__.py
#   file_relpath : src/prolmark/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ProlMark subcommands: ``convert``, ``list``, ``dialects`` and ``version``."""

from __future__ import annotations
