# topmark:header:start
#
#   project      : ProlMark
#   file         : test_starlse.py
#   file_relpath : tests/dialects/test_starlse.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""STARLSE recognizer: canonical blocks with Name/Purpose sections."""

from __future__ import annotations

from prolmark.dialects.starlse import StarlseRecognizer
from prolmark.prologue.model import Prologue
from tests.conftest import parametrize

CANONICAL_BLOCK = """\
*+
*  Name:
*     KPG1_AXBN

*  Purpose:
*     Determines the number of an axis
*     with given label.

*  Language:
*     Starlink Fortran 77

*  Arguments:
*     NDIM = INTEGER (Given)
*        Number of axes.
*
*     LABEL = CHARACTER * ( * ) (Given)
*        The label.

*-
"""


def _parse(text: str) -> Prologue:
    r = StarlseRecognizer(source="kpg1_axbn.f")
    prologue: Prologue | None = None
    for line in text.splitlines(keepends=True):
        out_line, done = r.push_line(line)
        assert out_line is None
        prologue = done or prologue
    assert prologue is not None
    return prologue


@parametrize("line", ["*+", "*+\n", "  *+  \r\n", "#+\n"])
def test_start_predicate_matches_bare_marker(line: str) -> None:
    assert StarlseRecognizer().is_start(line)


@parametrize("line", ["*+  FOO - bar\n", "* +\n", "*-\n", "++\n"])
def test_start_predicate_rejects_titled_marker(line: str) -> None:
    """Legacy one-line starts belong to another dialect."""
    assert not StarlseRecognizer().is_start(line)


def test_name_and_purpose_populate_fields() -> None:
    """Name and Purpose are routed into the entity, not stored as sections."""
    prologue = _parse(CANONICAL_BLOCK)

    assert prologue.dialect == "starlse"
    assert prologue.title == "KPG1_AXBN"
    assert prologue.purpose == "Determines the number of an axis with given label."
    assert prologue.section_names() == ["Language", "Arguments"]


def test_blank_separator_lines_do_not_leak_into_sections() -> None:
    """Blank separators are trimmed; interior blank comment lines survive."""
    prologue = _parse(CANONICAL_BLOCK)
    assert prologue.content("Language") == ["Starlink Fortran 77"]
    assert prologue.content("Arguments") == [
        "NDIM = INTEGER (Given)",
        "   Number of axes.",
        "",
        "LABEL = CHARACTER * ( * ) (Given)",
        "   The label.",
    ]


def test_hash_separators_are_blank() -> None:
    """Script blocks separate sections with a bare ``#``."""
    prologue = _parse("#+\n#  Name:\n#     mkdist\n#\n#  Purpose:\n#     Build it\n#\n#-\n")
    assert prologue.comment_char == "#"
    assert prologue.title == "mkdist"
    assert prologue.purpose == "Build it"
    assert prologue.sections == []


def test_missing_name_leaves_title_empty() -> None:
    """A canonical block without a Name section is not recognized."""
    prologue = _parse("*+\n*  Purpose:\n*     Something.\n*-\n")
    assert not prologue.is_recognized
