# topmark:header:start
#
#   project      : ProlMark
#   file         : test_convert.py
#   file_relpath : tests/cli/test_convert.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI: ``convert`` dry run, apply, diffs and machine output."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from prolmark.cli_shared.exit_codes import ExitCode
from tests.cli.conftest import (
    assert_SUCCESS,
    assert_USAGE_ERROR,
    assert_WOULD_CHANGE,
    run_cli_in,
)
from tests.conftest import ADAMSSE_FORTRAN, STARLSE_FORTRAN, mark_cli

if TYPE_CHECKING:
    from pathlib import Path


def _legacy(tmp_path: Path, name: str = "kpg1_axbn.f") -> Path:
    path = tmp_path / name
    path.write_text(ADAMSSE_FORTRAN, encoding="utf-8")
    return path


@mark_cli
def test_dry_run_reports_would_change(tmp_path: Path) -> None:
    """Without --apply nothing is written and the exit code signals pending changes."""
    path = _legacy(tmp_path)
    result = run_cli_in(tmp_path, ["--no-color", "convert", "kpg1_axbn.f"])

    assert_WOULD_CHANGE(result)
    assert "prolmark convert --apply kpg1_axbn.f" in result.output
    assert path.read_text(encoding="utf-8") == ADAMSSE_FORTRAN


@mark_cli
def test_apply_writes_and_second_run_is_clean(tmp_path: Path) -> None:
    path = _legacy(tmp_path)

    result = run_cli_in(tmp_path, ["--no-color", "convert", "--apply", "kpg1_axbn.f"])
    assert_SUCCESS(result)
    assert "Converted prologues in 1 file(s)." in result.output
    assert path.read_text(encoding="utf-8") == STARLSE_FORTRAN

    again = run_cli_in(tmp_path, ["--no-color", "convert", "kpg1_axbn.f"])
    assert_SUCCESS(again)


@mark_cli
def test_apply_with_nothing_to_do(tmp_path: Path) -> None:
    (tmp_path / "done.f").write_text(STARLSE_FORTRAN, encoding="utf-8")
    result = run_cli_in(tmp_path, ["--no-color", "convert", "--apply", "done.f"])

    assert_SUCCESS(result)
    assert "No changes to apply." in result.output


@mark_cli
def test_diff_shows_unified_patch(tmp_path: Path) -> None:
    _legacy(tmp_path)
    result = run_cli_in(tmp_path, ["--no-color", "convert", "--diff", "kpg1_axbn.f"])

    assert_WOULD_CHANGE(result)
    assert "--- kpg1_axbn.f (current)" in result.output
    assert "+*  Name:" in result.output
    assert "-*+  KPG1_AXBN - Determines the number of an axis with given label" in result.output


@mark_cli
def test_json_output(tmp_path: Path) -> None:
    _legacy(tmp_path)
    result = run_cli_in(tmp_path, ["convert", "--format", "json", "kpg1_axbn.f"])

    assert_WOULD_CHANGE(result)
    payload = json.loads(result.output)
    assert len(payload) == 1
    assert payload[0]["would_change"] is True
    assert payload[0]["prologues"][0]["title"] == "KPG1_AXBN"
    assert payload[0]["prologues"][0]["dialect"] == "adamsse"


@mark_cli
def test_ndjson_output_one_object_per_file(tmp_path: Path) -> None:
    _legacy(tmp_path, "a.f")
    (tmp_path / "b.f").write_text(STARLSE_FORTRAN, encoding="utf-8")
    result = run_cli_in(tmp_path, ["convert", "--format", "ndjson", "a.f", "b.f"])

    assert_WOULD_CHANGE(result)
    rows = [json.loads(line) for line in result.output.splitlines() if line.strip()]
    assert [row["would_change"] for row in rows] == [True, False]


@mark_cli
def test_markdown_output(tmp_path: Path) -> None:
    _legacy(tmp_path)
    result = run_cli_in(tmp_path, ["convert", "--format", "markdown", "kpg1_axbn.f"])

    assert_WOULD_CHANGE(result)
    assert "| File | Outcome |" in result.output
    assert "| `kpg1_axbn.f` | would convert |" in result.output


@mark_cli
def test_summary_counts(tmp_path: Path) -> None:
    _legacy(tmp_path, "a.f")
    (tmp_path / "b.f").write_text("      END\n", encoding="utf-8")
    result = run_cli_in(tmp_path, ["--no-color", "convert", "--summary", "a.f", "b.f"])

    assert_WOULD_CHANGE(result)
    assert "Summary by outcome:" in result.output
    assert "would convert" in result.output
    assert "no prologue" in result.output


@mark_cli
def test_diff_with_machine_format_is_usage_error(tmp_path: Path) -> None:
    _legacy(tmp_path)
    result = run_cli_in(tmp_path, ["convert", "--diff", "--format", "json", "kpg1_axbn.f"])
    assert_USAGE_ERROR(result)


@mark_cli
def test_no_paths_is_usage_error(tmp_path: Path) -> None:
    assert_USAGE_ERROR(run_cli_in(tmp_path, ["convert"]))


@mark_cli
def test_unknown_dialect_is_usage_error(tmp_path: Path) -> None:
    _legacy(tmp_path)
    result = run_cli_in(tmp_path, ["convert", "--dialect", "fortran66", "kpg1_axbn.f"])
    assert_USAGE_ERROR(result)
    assert "fortran66" in result.output


@mark_cli
def test_missing_file_exit_code(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "convert", "absent.f"])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output


@mark_cli
def test_invalid_utf8_exit_code(tmp_path: Path) -> None:
    (tmp_path / "latin1.f").write_bytes(b"*+  FOO - caf\xe9\n")
    result = run_cli_in(tmp_path, ["--no-color", "convert", "latin1.f"])
    assert result.exit_code == ExitCode.ENCODING_ERROR, result.output


@mark_cli
def test_file_without_prologue_succeeds(tmp_path: Path) -> None:
    (tmp_path / "plain.f").write_text("      PROGRAM MAIN\n      END\n", encoding="utf-8")
    assert_SUCCESS(run_cli_in(tmp_path, ["--no-color", "convert", "plain.f"]))


@mark_cli
def test_directory_expansion_keeps_known_sources(tmp_path: Path) -> None:
    """Directories are walked; unknown suffixes and hidden entries are skipped."""
    src = tmp_path / "src"
    (src / ".hidden").mkdir(parents=True)
    _legacy(src, "kpg1_axbn.f")
    _legacy(src / ".hidden", "skip.f")
    (src / "README.txt").write_text(ADAMSSE_FORTRAN, encoding="utf-8")

    result = run_cli_in(tmp_path, ["convert", "--format", "json", "src"])

    assert_WOULD_CHANGE(result)
    payload = json.loads(result.output)
    assert [entry["path"] for entry in payload] == [str(src.relative_to(tmp_path) / "kpg1_axbn.f")]


@mark_cli
def test_write_defaults_flag(tmp_path: Path) -> None:
    path = _legacy(tmp_path)
    result = run_cli_in(
        tmp_path, ["--no-color", "convert", "--apply", "--write-defaults", "kpg1_axbn.f"]
    )

    assert_SUCCESS(result)
    assert "*  Bugs:\n*     {note_any_bugs_here}\n" in path.read_text(encoding="utf-8")


@mark_cli
def test_normalize_on_canonical_file_changes_nothing(tmp_path: Path) -> None:
    (tmp_path / "done.f").write_text(STARLSE_FORTRAN, encoding="utf-8")
    assert_SUCCESS(run_cli_in(tmp_path, ["--no-color", "convert", "--normalize", "done.f"]))
