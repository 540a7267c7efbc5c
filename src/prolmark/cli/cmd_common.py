# topmark:header:start
#
#   project      : ProlMark
#   file         : cmd_common.py
#   file_relpath : src/prolmark/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common plumbing for Click commands.

Config resolution, file-list expansion, pipeline execution and exit-code
mapping live here so that command bodies only deal with presentation.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Iterable

import click

from prolmark.cli.console import get_console_safely
from prolmark.cli.errors import ProlmarkConfigError, ProlmarkUsageError
from prolmark.cli_shared.exit_codes import ExitCode
from prolmark.config.logging import get_logger
from prolmark.config.model import MutableConfig
from prolmark.dialects.registry import DialectRegistry, UnknownDialectError
from prolmark.pipeline.runner import process_files
from prolmark.pipeline.status import FsStatus
from prolmark.prologue.defaults import guess_language

if TYPE_CHECKING:
    from prolmark.config.model import Config
    from prolmark.pipeline.context import ProcessingContext

logger = get_logger(__name__)

# Filesystem outcomes that make a command exit non-zero.
_FS_EXIT_CODES: dict[FsStatus, ExitCode] = {
    FsStatus.NOT_FOUND: ExitCode.FILE_NOT_FOUND,
    FsStatus.NOT_A_FILE: ExitCode.FILE_NOT_FOUND,
    FsStatus.NO_READ_PERMISSION: ExitCode.PERMISSION_DENIED,
    FsStatus.UNREADABLE: ExitCode.IO_ERROR,
    FsStatus.UNICODE_DECODE_ERROR: ExitCode.ENCODING_ERROR,
}


def get_effective_verbosity(ctx: click.Context, config: Config | None = None) -> int:
    """Return the program-output verbosity for this command.

    A non-zero ``config.verbosity_level`` wins over the group-level ``-v/-q``.
    """
    if config is not None and config.verbosity_level:
        return int(config.verbosity_level)
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return int(obj.get("verbosity_level", 0))


def build_config(
    *,
    ctx: click.Context,
    no_config: bool,
    config_paths: Iterable[str],
    dialects: Iterable[str],
    write_defaults: bool,
    normalize: bool = False,
    apply_changes: bool = False,
) -> Config:
    """Merge config layers with the CLI flags and freeze the result.

    Flags that are off do not override the configured value.

    Raises:
        ProlmarkUsageError: If ``--dialect`` names an unknown dialect.
        ProlmarkConfigError: If a config file names an unknown dialect.
    """
    draft: MutableConfig = MutableConfig.load_merged(
        extra_config_files=[Path(p) for p in config_paths],
        no_config=no_config,
    )
    cli_dialects = list(dialects)
    try:
        draft.dialects = list(DialectRegistry.validate(draft.dialects))
    except UnknownDialectError as e:
        raise ProlmarkConfigError(f"Invalid 'dialects' setting: {e}") from e
    try:
        cli_dialects = list(DialectRegistry.validate(cli_dialects))
    except UnknownDialectError as e:
        raise ProlmarkUsageError(str(e)) from e

    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    draft.apply_cli_args(
        {
            "dialects": cli_dialects,
            "write_defaults": True if write_defaults else None,
            "normalize": True if normalize else None,
            "apply_changes": apply_changes,
            "verbosity_level": obj.get("verbosity_level"),
        }
    )
    config = draft.freeze()
    logger.debug("Effective config: %s", config)
    return config


def resolve_file_list(paths: Iterable[Path]) -> list[Path]:
    """Expand the positional paths into the list of files to process.

    Files are kept as given (even when missing, so the reader can report them).
    Directories are walked recursively; only files with a known source suffix
    are kept, and hidden entries are skipped.
    """
    files: list[Path] = []
    seen: set[Path] = set()
    for path in paths:
        if path.is_dir():
            candidates = sorted(
                p
                for p in path.rglob("*")
                if p.is_file()
                and not any(part.startswith(".") for part in p.relative_to(path).parts)
                and guess_language(p) is not None
            )
        else:
            candidates = [path]
        for candidate in candidates:
            if candidate not in seen:
                seen.add(candidate)
                files.append(candidate)
    return files


def exit_if_no_files(file_list: list[Path]) -> bool:
    """Print a friendly message and return True if there is nothing to process."""
    if not file_list:
        console = get_console_safely()
        console.print(console.styled("\nℹ️  No files to process.\n", fg="blue"))
        return True
    return False


def run_pipeline(
    file_list: list[Path],
    *,
    pipeline_name: str,
    config: Config,
) -> list[ProcessingContext]:
    """Run the named pipeline for every file."""
    return process_files(file_list, pipeline_name=pipeline_name, config=config)


def error_exit_code(results: Iterable[ProcessingContext]) -> ExitCode | None:
    """Return the exit code for the first file that could not be read, if any."""
    for r in results:
        code = _FS_EXIT_CODES.get(r.status.fs)
        if code is not None:
            return code
    return None


def maybe_exit_on_error(results: list[ProcessingContext]) -> None:
    """Exit with the mapped error code if any file could not be read."""
    code = error_exit_code(results)
    if code is not None:
        click.get_current_context().exit(code)
