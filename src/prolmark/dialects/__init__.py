# topmark:header:start
#
#   project      : ProlMark
#   file         : __init__.py
#   file_relpath : src/prolmark/dialects/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dialect recognizers.

Each module in this package defines one recognizer class and registers it with
[`register_dialect`][prolmark.dialects.registry.register_dialect]. Call
`register_all_dialects()` to import them all.
"""

from __future__ import annotations

import importlib
import pkgutil
from pathlib import Path

from prolmark.config.logging import get_logger

logger = get_logger(__name__)

# Modules in this package that hold infrastructure rather than a dialect.
_NON_DIALECT_MODULES: frozenset[str] = frozenset({"base", "registry"})


def register_all_dialects() -> None:
    """Import all dialect modules in the current package."""
    package_dir = Path(__file__).parent
    for module_info in pkgutil.iter_modules([str(package_dir)]):
        if module_info.ispkg or module_info.name in _NON_DIALECT_MODULES:
            continue
        # Importing the module runs its @register_dialect decorator
        importlib.import_module(f"{__name__}.{module_info.name}")
        logger.trace("Loaded dialect module: %s", module_info.name)
