# topmark:header:start
#
#   project      : ProlMark
#   file         : __init__.py
#   file_relpath : src/prolmark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ProlMark package.

ProlMark recognizes legacy documentation prologues embedded as comments at the
top of source routines, extracts their structured content, and rewrites them in
the canonical STARLSE layout while leaving the surrounding code untouched.
"""

from __future__ import annotations
