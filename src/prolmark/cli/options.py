# topmark:header:start
#
#   project      : ProlMark
#   file         : options.py
#   file_relpath : src/prolmark/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable Click options and their resolution logic.

Commands stay thin by stacking these decorators; the resolved values end up
either on ``ctx.obj`` (group-level options) or in the command's keyword
arguments.
"""

from __future__ import annotations

from typing import Callable, ParamSpec, TypeVar

import click

from prolmark.cli.cli_types import EnumChoiceParam
from prolmark.cli.errors import ProlmarkUsageError
from prolmark.cli_shared.utils import ColorMode, OutputFormat

P = ParamSpec("P")
R = TypeVar("R")

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v``/``-q`` counts.

    Returns:
        int: ``verbose_count`` when verbose, ``-quiet_count`` when quiet, else 0.

    Raises:
        ProlmarkUsageError: If both flags are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ProlmarkUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count > 0:
        return verbose_count
    return -quiet_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase output detail. Repeat for more.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Reduce output. Repeat for less.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` (auto/always/never) and ``--no-color``."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config FILE`` (repeatable) and ``--no-config``."""
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore prolmark.toml and [tool.prolmark] in pyproject.toml.",
    )(f)
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge.",
    )(f)
    return f


def common_recognition_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--dialect NAME`` (repeatable, priority order) and ``--write-defaults``."""
    f = click.option(
        "--dialect",
        "dialects",
        multiple=True,
        metavar="NAME",
        help="Dialect to try, in priority order (repeatable). See 'prolmark dialects'.",
    )(f)
    f = click.option(
        "--write-defaults",
        "write_defaults",
        is_flag=True,
        help="Also render sections that only hold placeholder content.",
    )(f)
    return f


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--format``."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)
