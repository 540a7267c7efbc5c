# topmark:header:start
#
#   project      : ProlMark
#   file         : io.py
#   file_relpath : src/prolmark/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render TOML configuration sources.

ProlMark reads its settings from ``prolmark.toml`` or from the
``[tool.prolmark]`` table of ``pyproject.toml``. Parsing is done with `tomlkit`
and returned as plain `dict` structures; the getters below extract typed values
and log (rather than raise) on shape mistakes so that a bad key never aborts a
bulk conversion.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from prolmark.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from prolmark.config.logging import ProlmarkLogger

logger: ProlmarkLogger = get_logger(__name__)

TomlTable = dict[str, Any]


class Toml:
    """TOML keys used by ProlMark configuration."""

    KEY_DIALECTS = "dialects"
    KEY_WRITE_DEFAULTS = "write_defaults"
    KEY_NORMALIZE = "normalize"


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``prolmark.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content, or an empty dict on failure.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def to_toml(data: TomlTable) -> str:
    """Render a plain dict as TOML text."""
    return tomlkit.dumps(data)


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean from a TOML table.

    Returns None when the key is missing or the value is not a boolean.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    logger.warning("Expected a boolean for %r, got %r; ignoring", key, value)
    return None


def get_string_list(table: TomlTable, key: str) -> list[str]:
    """Extract a list of strings from a TOML table.

    A single string is accepted and wrapped. Non-string items are dropped with a
    warning.
    """
    value: Any | None = table.get(key)
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        logger.warning("Expected a list of strings for %r, got %r; ignoring", key, value)
        return []
    result: list[str] = []
    for item in cast("list[Any]", value):
        if isinstance(item, str):
            result.append(item)
        else:
            logger.warning("Ignoring non-string entry %r in %r", item, key)
    return result
