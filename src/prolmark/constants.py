# topmark:header:start
#
#   project      : ProlMark
#   file         : constants.py
#   file_relpath : src/prolmark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ProlMark Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

PROLMARK_VERSION: str = get_version("prolmark")

# Name of the stand-alone config file discovered in the working directory.
PROLMARK_TOML_NAME: str = "prolmark.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "prolmark"

# Environment variable consulted for the internal log level.
LOG_LEVEL_ENV_VAR: str = "PROLMARK_LOG_LEVEL"

# Dialect names known at build time. The canonical dialect is the rendering target.
CANONICAL_DIALECT: str = "starlse"
DEFAULT_DIALECT_ORDER: tuple[str, ...] = ("starlse", "adamsse")

VALUE_NOT_SET: str = "<not set>"
