# topmark:header:start
#
#   project      : ProlMark
#   file         : pipelines.py
#   file_relpath : src/prolmark/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Named pipeline variants (immutable step sequences).

Overview:
    - ``list``: read → recognize
    - ``convert``: list + render → compare
    - ``convert_patch``: convert + patch
    - ``convert_apply``: convert + write
    - ``convert_apply_patch``: convert + patch → write

The writer only touches the file system when ``config.apply_changes`` is set,
so the ``*_apply`` variants double as dry-run previews.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from prolmark.pipeline.steps import comparer, patcher, reader, recognizer, renderer, writer

if TYPE_CHECKING:
    from prolmark.pipeline.steps.base import BaseStep

LIST_PIPELINE: Final[tuple[BaseStep, ...]] = (
    reader.ReaderStep(),
    recognizer.RecognizerStep(),
)

CONVERT_PIPELINE: Final[tuple[BaseStep, ...]] = LIST_PIPELINE + (
    renderer.RendererStep(),
    comparer.ComparerStep(),
)

CONVERT_PATCH_PIPELINE: Final[tuple[BaseStep, ...]] = CONVERT_PIPELINE + (
    patcher.PatcherStep(),
)

CONVERT_APPLY_PIPELINE: Final[tuple[BaseStep, ...]] = CONVERT_PIPELINE + (
    writer.WriterStep(),
)

CONVERT_APPLY_PATCH_PIPELINE: Final[tuple[BaseStep, ...]] = CONVERT_PIPELINE + (
    patcher.PatcherStep(),
    writer.WriterStep(),
)

PIPELINES: Final[dict[str, tuple[BaseStep, ...]]] = {
    "list": LIST_PIPELINE,
    "convert": CONVERT_PIPELINE,
    "convert_patch": CONVERT_PATCH_PIPELINE,
    "convert_apply": CONVERT_APPLY_PIPELINE,
    "convert_apply_patch": CONVERT_APPLY_PATCH_PIPELINE,
}


def get_pipeline(name: str) -> tuple[BaseStep, ...]:
    """Return the step sequence registered under ``name``.

    Raises:
        KeyError: If ``name`` is not a known pipeline.
    """
    try:
        return PIPELINES[name]
    except KeyError:
        raise KeyError(f"Unknown pipeline: {name!r} (known: {', '.join(PIPELINES)})") from None


def select_convert_pipeline(*, diff: bool, apply_changes: bool) -> str:
    """Return the name of the convert pipeline matching the CLI intent."""
    if apply_changes:
        return "convert_apply_patch" if diff else "convert_apply"
    return "convert_patch" if diff else "convert"
