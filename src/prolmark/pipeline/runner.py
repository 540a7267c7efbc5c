# topmark:header:start
#
#   project      : ProlMark
#   file         : runner.py
#   file_relpath : src/prolmark/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run a pipeline over one file, or over many."""

from __future__ import annotations

from typing import TYPE_CHECKING

from prolmark.config.logging import get_logger
from prolmark.pipeline.context import ProcessingContext
from prolmark.pipeline.pipelines import get_pipeline

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

    from prolmark.config.logging import ProlmarkLogger
    from prolmark.config.model import Config
    from prolmark.pipeline.steps.base import BaseStep

logger: ProlmarkLogger = get_logger(__name__)


def run(ctx: ProcessingContext, steps: Sequence[BaseStep]) -> ProcessingContext:
    """Execute the steps sequentially on ``ctx``.

    Args:
        ctx (ProcessingContext): Mutable processing context.
        steps (Sequence[BaseStep]): Ordered step sequence.

    Returns:
        ProcessingContext: The final context.
    """
    for step in steps:
        ctx = step(ctx)
    return ctx


def process_files(
    paths: Iterable[Path],
    *,
    pipeline_name: str,
    config: Config,
) -> list[ProcessingContext]:
    """Run the named pipeline for every path and return the contexts in order."""
    steps = get_pipeline(pipeline_name)
    logger.debug("Running pipeline %r with dialects %s", pipeline_name, config.dialects)
    return [run(ProcessingContext.bootstrap(path=p, config=config), steps) for p in paths]
