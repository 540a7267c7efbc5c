# topmark:header:start
#
#   project      : ProlMark
#   file         : exit_codes.py
#   file_relpath : src/prolmark/cli_shared/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the ProlMark CLI.

ProlMark follows the BSD ``sysexits`` convention where practical. The one
deliberate divergence is ``WOULD_CHANGE = 2``, returned by a dry-run
``convert`` when at least one file would be rewritten. Click also uses 2 for
usage errors, so tests must check ``result.exception`` to tell them apart.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the ProlMark CLI.

    Attributes:
        SUCCESS: Nothing to do, or all requested changes were written.
        FAILURE: Generic failure.
        WOULD_CHANGE: Dry run: files would change with ``--apply``.
        USAGE_ERROR: Invalid invocation (``EX_USAGE``).
        ENCODING_ERROR: A file is not valid UTF-8 (``EX_DATAERR``).
        FILE_NOT_FOUND: An input path does not exist (``EX_NOINPUT``).
        PIPELINE_ERROR: Internal processing failure (``EX_SOFTWARE``).
        IO_ERROR: Reading or writing a file failed (``EX_IOERR``).
        PERMISSION_DENIED: Insufficient permissions (``EX_NOPERM``).
        CONFIG_ERROR: Invalid configuration (``EX_CONFIG``).
        UNEXPECTED_ERROR: Last-resort bucket for unknown errors.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see module docstring

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    PIPELINE_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
