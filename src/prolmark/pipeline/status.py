# topmark:header:start
#
#   project      : ProlMark
#   file         : status.py
#   file_relpath : src/prolmark/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Status enums for each axis of the ProlMark pipeline.

Every step writes to the axes it owns only:

    fs          ReaderStep
    prologue    RecognizerStep
    render      RendererStep
    comparison  ComparerStep
    patch       PatcherStep
    write       WriterStep

Values are human-readable labels used by the CLI; compare members with ``==``.
"""

from __future__ import annotations

from yachalk import chalk

from prolmark.rendering.colored_enum import ColoredStrEnum


class FsStatus(ColoredStrEnum):
    """Outcome of locating and reading the file."""

    PENDING = ("pending", chalk.gray)
    OK = ("ok", chalk.green)
    EMPTY = ("empty file", chalk.yellow)
    NOT_FOUND = ("not found", chalk.red)
    NOT_A_FILE = ("not a regular file", chalk.red)
    NO_READ_PERMISSION = ("no read permission", chalk.red_bright)
    UNREADABLE = ("read error", chalk.red_bright)
    UNICODE_DECODE_ERROR = ("Unicode decode error", chalk.yellow)


class PrologueStatus(ColoredStrEnum):
    """Outcome of prologue recognition."""

    PENDING = ("recognition pending", chalk.gray)
    NONE = ("no prologue", chalk.blue)
    CANONICAL = ("canonical prologue(s)", chalk.green)
    LEGACY = ("legacy prologue(s)", chalk.yellow)


class RenderStatus(ColoredStrEnum):
    """Whether an updated file image was rendered."""

    PENDING = ("rendering pending", chalk.gray)
    RENDERED = ("prologues rendered", chalk.blue)
    SKIPPED = ("rendering skipped", chalk.yellow)


class ComparisonStatus(ColoredStrEnum):
    """Result of comparing the original and the updated file image."""

    PENDING = ("comparison pending", chalk.gray)
    CHANGED = ("changes found", chalk.red)
    UNCHANGED = ("no changes found", chalk.green)
    SKIPPED = ("comparison skipped", chalk.yellow)


class PatchStatus(ColoredStrEnum):
    """Whether a unified diff was generated."""

    PENDING = ("patch pending", chalk.gray)
    GENERATED = ("patch generated", chalk.green)
    SKIPPED = ("patch skipped", chalk.yellow)


class WriteStatus(ColoredStrEnum):
    """Outcome of writing the updated image back."""

    PENDING = ("write pending", chalk.gray)
    PREVIEWED = ("previewed (dry run)", chalk.blue)
    WRITTEN = ("written", chalk.green)
    SKIPPED = ("write skipped", chalk.yellow)
    FAILED = ("write failed", chalk.red_bright)
