# topmark:header:start
#
#   project      : ProlMark
#   file         : main.py
#   file_relpath : src/prolmark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ProlMark command-line entry point.

Group-level options (verbosity, color) are resolved once and stored on
``ctx.obj`` together with the console; subcommands read them from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from prolmark.cli.commands.convert import convert_command
from prolmark.cli.commands.dialects import dialects_command
from prolmark.cli.commands.list import list_command
from prolmark.cli.commands.version import version_command
from prolmark.cli.console import ClickConsole
from prolmark.cli.options import (
    CONTEXT_SETTINGS,
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from prolmark.cli_shared.utils import ColorMode, resolve_color_mode
from prolmark.config.logging import get_logger, resolve_env_log_level, setup_logging
from prolmark.dialects import register_all_dialects

if TYPE_CHECKING:
    from prolmark.cli_shared.console_api import ConsoleLike

logger = get_logger(__name__)

register_all_dialects()


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize verbosity, logging, color and the console on ``ctx.obj``.

    Args:
        ctx (click.Context): Current Click context.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit ``--color`` value, if any.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is driven by the environment, not by -v.
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="ProlMark: recognize legacy source prologues and convert them to STARLSE.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the ProlMark CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'prolmark convert [PATHS...]' to preview conversions.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)
cli.add_command(dialects_command)
cli.add_command(list_command)
cli.add_command(convert_command)

if __name__ == "__main__":
    cli()
