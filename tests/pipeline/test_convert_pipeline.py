# topmark:header:start
#
#   project      : ProlMark
#   file         : test_convert_pipeline.py
#   file_relpath : tests/pipeline/test_convert_pipeline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""End-to-end pipeline runs: list, convert, patch and apply."""

from __future__ import annotations

from pathlib import Path

import pytest

from prolmark.pipeline.pipelines import PIPELINES, get_pipeline, select_convert_pipeline
from prolmark.pipeline.runner import process_files
from prolmark.pipeline.status import (
    ComparisonStatus,
    PatchStatus,
    PrologueStatus,
    RenderStatus,
    WriteStatus,
)
from tests.conftest import (
    ADAMSSE_FORTRAN,
    ADAMSSE_SCRIPT,
    STARLSE_FORTRAN,
    make_config,
    mark_pipeline,
    parametrize,
)


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_bytes(text.encode("utf-8"))
    return path


@parametrize(
    "diff, apply_changes, expected",
    [
        (False, False, "convert"),
        (True, False, "convert_patch"),
        (False, True, "convert_apply"),
        (True, True, "convert_apply_patch"),
    ],
)
def test_select_convert_pipeline(diff: bool, apply_changes: bool, expected: str) -> None:
    assert select_convert_pipeline(diff=diff, apply_changes=apply_changes) == expected
    assert expected in PIPELINES


def test_get_pipeline_unknown_name() -> None:
    with pytest.raises(KeyError):
        get_pipeline("strip")


@mark_pipeline
def test_list_pipeline_recognizes_without_rendering(tmp_path: Path) -> None:
    path = _write(tmp_path, "kpg1_axbn.f", ADAMSSE_FORTRAN)
    (ctx,) = process_files([path], pipeline_name="list", config=make_config())

    assert ctx.status.prologue == PrologueStatus.LEGACY
    assert ctx.status.render == RenderStatus.PENDING
    assert [p.title for p in ctx.prologues] == ["KPG1_AXBN"]
    assert ctx.steps == ["ReaderStep", "RecognizerStep"]


@mark_pipeline
def test_convert_legacy_file_dry_run(tmp_path: Path) -> None:
    path = _write(tmp_path, "kpg1_axbn.f", ADAMSSE_FORTRAN)
    (ctx,) = process_files([path], pipeline_name="convert_apply_patch", config=make_config())

    assert ctx.status.render == RenderStatus.RENDERED
    assert ctx.status.comparison == ComparisonStatus.CHANGED
    assert ctx.would_change
    assert ctx.updated_lines is not None
    assert "".join(ctx.updated_lines) == STARLSE_FORTRAN
    assert ctx.status.patch == PatchStatus.GENERATED
    assert ctx.diff is not None and "+*  Name:\n" in ctx.diff
    # Not applied: the file is untouched.
    assert ctx.status.write == WriteStatus.PREVIEWED
    assert path.read_text(encoding="utf-8") == ADAMSSE_FORTRAN


@mark_pipeline
def test_convert_apply_writes_file(tmp_path: Path) -> None:
    path = _write(tmp_path, "kpg1_axbn.f", ADAMSSE_FORTRAN)
    (ctx,) = process_files(
        [path], pipeline_name="convert_apply", config=make_config(apply_changes=True)
    )

    assert ctx.status.write == WriteStatus.WRITTEN
    assert path.read_text(encoding="utf-8") == STARLSE_FORTRAN


@mark_pipeline
def test_convert_preserves_crlf(tmp_path: Path) -> None:
    """Rendered lines use the file's dominant newline style."""
    path = _write(tmp_path, "kpg1_axbn.f", ADAMSSE_FORTRAN.replace("\n", "\r\n"))
    process_files([path], pipeline_name="convert_apply", config=make_config(apply_changes=True))

    assert path.read_bytes() == STARLSE_FORTRAN.replace("\n", "\r\n").encode("utf-8")


@mark_pipeline
def test_canonical_file_is_left_alone(tmp_path: Path) -> None:
    path = _write(tmp_path, "kpg1_axbn.f", STARLSE_FORTRAN)
    (ctx,) = process_files([path], pipeline_name="convert_apply", config=make_config())

    assert ctx.status.prologue == PrologueStatus.CANONICAL
    assert ctx.status.render == RenderStatus.SKIPPED
    assert ctx.status.comparison == ComparisonStatus.UNCHANGED
    assert ctx.status.write == WriteStatus.SKIPPED
    assert not ctx.would_change


@mark_pipeline
def test_normalize_rerenders_canonical_file(tmp_path: Path) -> None:
    """Normalizing an already canonical rendering is a no-op."""
    path = _write(tmp_path, "kpg1_axbn.f", STARLSE_FORTRAN)
    (ctx,) = process_files([path], pipeline_name="convert", config=make_config(normalize=True))

    assert ctx.status.render == RenderStatus.RENDERED
    assert ctx.status.comparison == ComparisonStatus.UNCHANGED


@mark_pipeline
def test_file_without_prologue_halts_after_recognition(tmp_path: Path) -> None:
    path = _write(tmp_path, "plain.f", "      PROGRAM MAIN\n      END\n")
    (ctx,) = process_files([path], pipeline_name="convert_apply_patch", config=make_config())

    assert ctx.status.prologue == PrologueStatus.NONE
    assert ctx.is_halted
    assert ctx.flow.at_step == "RecognizerStep"
    assert ctx.status.comparison == ComparisonStatus.PENDING
    assert ctx.diff is None


@mark_pipeline
def test_write_defaults_keeps_placeholders(tmp_path: Path) -> None:
    path = _write(tmp_path, "mkdist.sh", ADAMSSE_SCRIPT)
    (ctx,) = process_files([path], pipeline_name="convert", config=make_config(write_defaults=True))

    assert ctx.updated_lines is not None
    text = "".join(ctx.updated_lines)
    assert "#  Language:\n#     Bourne shell\n" in text
    assert "#  Bugs:\n#     {note_any_bugs_here}\n" in text
    assert text.startswith("#!/bin/sh\n#+\n#  Name:\n#     mkdist\n#\n")
    assert text.endswith("#-\ntar cf dist.tar `cat MANIFEST`\n")


@mark_pipeline
def test_dialect_restriction_skips_legacy_blocks(tmp_path: Path) -> None:
    path = _write(tmp_path, "kpg1_axbn.f", ADAMSSE_FORTRAN)
    (ctx,) = process_files(
        [path], pipeline_name="convert", config=make_config(dialects=["starlse"])
    )
    assert ctx.status.prologue == PrologueStatus.NONE


@mark_pipeline
def test_orphans_and_missing_title_are_reported(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "loose.f",
        "*+\n*     Loose remark.\n*  Purpose:\n*     Something.\n*-\n",
    )
    (ctx,) = process_files([path], pipeline_name="list", config=make_config())

    warnings = [msg for level, msg in ctx.diagnostics if level == "warning"]
    assert any("without a routine name" in msg for msg in warnings)
    assert any("outside any section" in msg for msg in warnings)


@mark_pipeline
def test_to_dict_is_json_ready(tmp_path: Path) -> None:
    path = _write(tmp_path, "kpg1_axbn.f", ADAMSSE_FORTRAN)
    (ctx,) = process_files([path], pipeline_name="convert", config=make_config())
    data = ctx.to_dict()

    assert data["path"] == str(path)
    assert data["would_change"] is True
    assert data["status"]["prologue"] == "LEGACY"
    assert data["prologues"][0]["dialect"] == "adamsse"
