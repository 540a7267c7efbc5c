# topmark:header:start
#
#   project      : ProlMark
#   file         : test_registry.py
#   file_relpath : tests/dialects/test_registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dialect registry: ordering, validation and overlay registration."""

from __future__ import annotations

import re
from typing import ClassVar

import pytest

from prolmark.dialects.adamsse import AdamSseRecognizer
from prolmark.dialects.base import DialectRecognizer
from prolmark.dialects.registry import DialectRegistry, UnknownDialectError
from prolmark.dialects.starlse import StarlseRecognizer


class _PercentRecognizer(DialectRecognizer):
    name = "percent"
    description = "Test dialect using '%+ NAME' starts"
    start_re: ClassVar[re.Pattern[str] | None] = re.compile(r"^(?P<cchar>%)\+\s*(?P<title>\w+)$")


def test_builtin_names_in_default_order() -> None:
    """Built-ins are listed canonical dialect first."""
    names = DialectRegistry.names()
    assert names[:2] == ("starlse", "adamsse")
    assert DialectRegistry.default_order() == ("starlse", "adamsse")


def test_get_returns_recognizer_classes() -> None:
    assert DialectRegistry.get("adamsse") is AdamSseRecognizer
    assert DialectRegistry.get("starlse") is StarlseRecognizer
    assert DialectRegistry.get("missing") is None
    assert DialectRegistry.is_registered("adamsse")
    assert "starlse" in DialectRegistry.as_mapping()


def test_iter_meta_flags_the_canonical_dialect() -> None:
    meta = {m.name: m for m in DialectRegistry.iter_meta()}
    assert meta["starlse"].canonical
    assert not meta["adamsse"].canonical
    assert meta["adamsse"].description


def test_validate_is_case_insensitive_and_dedupes() -> None:
    """Names are matched case-insensitively; repeats keep the first position."""
    assert DialectRegistry.validate(["ADAMSSE", " starlse ", "adamsse"]) == (
        "adamsse",
        "starlse",
    )


def test_validate_rejects_unknown_names() -> None:
    with pytest.raises(UnknownDialectError) as excinfo:
        DialectRegistry.validate(["starlse", "nope"])
    assert excinfo.value.name == "nope"
    assert "starlse" in excinfo.value.known
    assert isinstance(excinfo.value, ValueError)


def test_resolve_builds_fresh_instances_in_order() -> None:
    """Recognizers are stateful, so every resolve returns new instances."""
    first = DialectRegistry.resolve(["adamsse", "starlse"], source="x.f")
    second = DialectRegistry.resolve(["adamsse", "starlse"])

    assert [r.name for r in first] == ["adamsse", "starlse"]
    assert all(r.source == "x.f" for r in first)
    assert first[0] is not second[0]


def test_resolve_defaults_to_builtin_order() -> None:
    assert [r.name for r in DialectRegistry.resolve()] == ["starlse", "adamsse"]


def test_overlay_register_and_unregister() -> None:
    """Overlay registrations are visible until removed."""
    DialectRegistry.register("percent", _PercentRecognizer)
    try:
        assert DialectRegistry.names()[-1] == "percent"
        assert DialectRegistry.default_order() == ("starlse", "adamsse")
        with pytest.raises(ValueError):
            DialectRegistry.register("percent", _PercentRecognizer)
    finally:
        assert DialectRegistry.unregister("percent") is True
    assert not DialectRegistry.is_registered("percent")


def test_unregister_unknown_returns_false() -> None:
    assert DialectRegistry.unregister("never-registered") is False
