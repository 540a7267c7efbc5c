# topmark:header:start
#
#   project      : ProlMark
#   file         : utils.py
#   file_relpath : src/prolmark/cli_shared/utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output-format and color helpers shared by CLI commands."""

from __future__ import annotations

import os
import sys
from enum import Enum


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
      DEFAULT: Human-friendly text; may include ANSI color.
      JSON: A single JSON document.
      NDJSON: One JSON object per line.
      MARKDOWN: Markdown tables and headings.

    Machine formats (``JSON`` and ``NDJSON``) never include color or diffs.
    """

    DEFAULT = "default"
    JSON = "json"
    NDJSON = "ndjson"
    MARKDOWN = "markdown"


class ColorMode(Enum):
    """User intent for colorized terminal output (``--color``)."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
      1. Machine formats (``json``/``ndjson``) → False.
      2. ``--color always`` → True; ``--color never`` → False.
      3. ``FORCE_COLOR`` (set, not ``"0"``) → True; ``NO_COLOR`` (set) → False.
      4. Otherwise whether stdout is a TTY.

    Args:
      cli_mode (ColorMode | None): Parsed ``--color`` value; None when not given.
      output_format (str | None): Output format name, if known.
      stdout_isatty (bool | None): Override for TTY detection (tests).

    Returns:
      bool: True if ANSI color should be emitted.
    """
    if output_format and output_format.lower() in {"json", "ndjson"}:
        return False

    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False

    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)
