# topmark:header:start
#
#   project      : ProlMark
#   file         : __init__.py
#   file_relpath : src/prolmark/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click command-line interface for ProlMark."""

from __future__ import annotations
