# topmark:header:start
#
#   project      : ProlMark
#   file         : test_list.py
#   file_relpath : tests/cli/test_list.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI: ``list`` command output."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from prolmark.cli_shared.exit_codes import ExitCode
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli_in
from tests.conftest import ADAMSSE_FORTRAN, ADAMSSE_SCRIPT, mark_cli

if TYPE_CHECKING:
    from pathlib import Path


def _files(tmp_path: Path) -> None:
    (tmp_path / "kpg1_axbn.f").write_text(ADAMSSE_FORTRAN, encoding="utf-8")
    (tmp_path / "mkdist.sh").write_text(ADAMSSE_SCRIPT, encoding="utf-8")


@mark_cli
def test_list_default_output(tmp_path: Path) -> None:
    _files(tmp_path)
    result = run_cli_in(tmp_path, ["--no-color", "list", "kpg1_axbn.f", "mkdist.sh"])

    assert_SUCCESS(result)
    assert "KPG1_AXBN - Determines the number of an axis with given label [adamsse]" in (
        result.output
    )
    assert "sections: Description, Arguments, Authors, History" in result.output
    assert "mkdist - Build a distribution tarball [adamsse]" in result.output


@mark_cli
def test_list_verbose_shows_canonical_rendering(tmp_path: Path) -> None:
    _files(tmp_path)
    result = run_cli_in(tmp_path, ["--no-color", "-v", "list", "mkdist.sh"])

    assert_SUCCESS(result)
    assert "    #  Name:" in result.output
    assert "    #     mkdist" in result.output


@mark_cli
def test_list_does_not_modify_files(tmp_path: Path) -> None:
    _files(tmp_path)
    run_cli_in(tmp_path, ["list", "kpg1_axbn.f"])
    assert (tmp_path / "kpg1_axbn.f").read_text(encoding="utf-8") == ADAMSSE_FORTRAN


@mark_cli
def test_list_json(tmp_path: Path) -> None:
    _files(tmp_path)
    result = run_cli_in(tmp_path, ["list", "--format", "json", "kpg1_axbn.f"])

    assert_SUCCESS(result)
    payload = json.loads(result.output)
    assert payload[0]["path"] == "kpg1_axbn.f"
    prologue = payload[0]["prologues"][0]
    assert prologue["title"] == "KPG1_AXBN"
    assert [s["name"] for s in prologue["sections"]] == [
        "Description",
        "Arguments",
        "Authors",
        "History",
    ]


@mark_cli
def test_list_ndjson_one_line_per_prologue(tmp_path: Path) -> None:
    _files(tmp_path)
    result = run_cli_in(tmp_path, ["list", "--format", "ndjson", "kpg1_axbn.f", "mkdist.sh"])

    assert_SUCCESS(result)
    rows = [json.loads(line) for line in result.output.splitlines() if line.strip()]
    assert [(row["path"], row["title"]) for row in rows] == [
        ("kpg1_axbn.f", "KPG1_AXBN"),
        ("mkdist.sh", "mkdist"),
    ]


@mark_cli
def test_list_markdown(tmp_path: Path) -> None:
    _files(tmp_path)
    result = run_cli_in(tmp_path, ["list", "--format", "markdown", "mkdist.sh"])

    assert_SUCCESS(result)
    assert "| File | Name | Purpose | Dialect | Sections |" in result.output
    row = "| `mkdist.sh` | mkdist | Build a distribution tarball | adamsse | Description, Authors |"
    assert row in result.output


@mark_cli
def test_list_requires_paths(tmp_path: Path) -> None:
    assert_USAGE_ERROR(run_cli_in(tmp_path, ["list"]))


@mark_cli
def test_list_missing_file(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "list", "absent.f"])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
