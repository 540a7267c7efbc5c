# topmark:header:start
#
#   project      : ProlMark
#   file         : base.py
#   file_relpath : src/prolmark/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for class-based pipeline steps.

The runner invokes steps as callables:

    ctx = step(ctx)  # internally: may_proceed → run? → record

Subclasses override `may_proceed` and `run`; they should not log their own
start/finish since `BaseStep.__call__` already does.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from prolmark.config.logging import get_logger

if TYPE_CHECKING:
    from prolmark.config.logging import ProlmarkLogger
    from prolmark.pipeline.context import ProcessingContext

logger: ProlmarkLogger = get_logger(__name__)


class BaseStep:
    """Reusable foundation for pipeline steps.

    Attributes:
        name (str): Stable step identifier for logs and ``ctx.steps``.
        axis (str): The status axis this step writes.
    """

    axis: str = ""

    def __init__(self) -> None:
        self.name: str = self.__class__.__name__

    def __repr__(self) -> str:
        return f"{self.name}()"

    def __call__(self, ctx: ProcessingContext) -> ProcessingContext:
        """Run the step lifecycle on ``ctx`` and return it."""
        ctx.steps.append(self.name)
        if ctx.is_halted:
            logger.debug("%s: skipped (halted at %s)", self.name, ctx.flow.at_step)
            return ctx
        if not self.may_proceed(ctx):
            logger.debug("%s: may not proceed for %s", self.name, ctx.path)
            return ctx
        logger.debug("%s: running for %s", self.name, ctx.path)
        self.run(ctx)
        return ctx

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Return whether the step should run given the current context."""
        return True

    def run(self, ctx: ProcessingContext) -> None:
        """Perform the step's work, mutating ``ctx`` in place."""
        raise NotImplementedError
