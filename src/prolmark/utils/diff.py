# topmark:header:start
#
#   project      : ProlMark
#   file         : diff.py
#   file_relpath : src/prolmark/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Colorized preview of unified diffs for logging and CLI display."""

from __future__ import annotations

from typing import Sequence

from yachalk import chalk


def _color_line(line: str) -> str:
    # Show control characters explicitly so CRLF changes stay visible.
    content = line.replace("\r", "\\r").replace("\n", "\\n")
    if line.startswith(("+++", "---")):
        return chalk.bold.white(content)
    if line.startswith("+"):
        return chalk.bold.green(content)
    if line.startswith("-"):
        return chalk.bold.red(content)
    if line.startswith("@@"):
        return chalk.cyan(content)
    return chalk.white(content)


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch (Sequence[str] | str): The diff as a sequence of lines or one string.
        show_line_numbers (bool): Prefix each line with a 4-digit line number.

    Returns:
        str: The colorized preview, one line per diff line.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = list(patch)

    if show_line_numbers:
        return "".join(f"{i:04d}|{_color_line(line)}\n" for i, line in enumerate(lines, 1))
    return "".join(f"{_color_line(line)}\n" for line in lines)
