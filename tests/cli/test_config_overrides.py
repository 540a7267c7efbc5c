# topmark:header:start
#
#   project      : ProlMark
#   file         : test_config_overrides.py
#   file_relpath : tests/cli/test_config_overrides.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI: project config discovery and precedence of command-line flags."""

from __future__ import annotations

from typing import TYPE_CHECKING

from prolmark.cli_shared.exit_codes import ExitCode
from tests.cli.conftest import assert_SUCCESS, assert_WOULD_CHANGE, run_cli_in
from tests.conftest import ADAMSSE_FORTRAN, mark_cli

if TYPE_CHECKING:
    from pathlib import Path


def _setup(tmp_path: Path, config_text: str, name: str = "prolmark.toml") -> None:
    (tmp_path / name).write_text(config_text, encoding="utf-8")
    (tmp_path / "kpg1_axbn.f").write_text(ADAMSSE_FORTRAN, encoding="utf-8")


@mark_cli
def test_config_dialects_limit_recognition(tmp_path: Path) -> None:
    """With only the canonical dialect configured, legacy blocks are not seen."""
    _setup(tmp_path, 'dialects = ["starlse"]\n')
    assert_SUCCESS(run_cli_in(tmp_path, ["--no-color", "convert", "kpg1_axbn.f"]))


@mark_cli
def test_cli_dialect_overrides_config(tmp_path: Path) -> None:
    _setup(tmp_path, 'dialects = ["starlse"]\n')
    result = run_cli_in(tmp_path, ["--no-color", "convert", "--dialect", "adamsse", "kpg1_axbn.f"])
    assert_WOULD_CHANGE(result)


@mark_cli
def test_no_config_ignores_project_files(tmp_path: Path) -> None:
    _setup(tmp_path, '[tool.prolmark]\ndialects = ["starlse"]\n', name="pyproject.toml")
    result = run_cli_in(tmp_path, ["--no-color", "convert", "--no-config", "kpg1_axbn.f"])
    assert_WOULD_CHANGE(result)


@mark_cli
def test_explicit_config_file(tmp_path: Path) -> None:
    _setup(tmp_path, "write_defaults = true\n", name="extra.toml")
    result = run_cli_in(
        tmp_path, ["--no-color", "convert", "--config", "extra.toml", "--apply", "kpg1_axbn.f"]
    )
    assert_SUCCESS(result)
    assert "{note_any_bugs_here}" in (tmp_path / "kpg1_axbn.f").read_text(encoding="utf-8")


@mark_cli
def test_unknown_dialect_in_config_is_config_error(tmp_path: Path) -> None:
    _setup(tmp_path, 'dialects = ["nope"]\n')
    result = run_cli_in(tmp_path, ["--no-color", "convert", "kpg1_axbn.f"])
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
