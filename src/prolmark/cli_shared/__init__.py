# topmark:header:start
#
#   project      : ProlMark
#   file         : __init__.py
#   file_relpath : src/prolmark/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework-agnostic CLI helpers (exit codes, console protocol, output options)."""

from __future__ import annotations
