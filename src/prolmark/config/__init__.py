# topmark:header:start
#
#   project      : ProlMark
#   file         : __init__.py
#   file_relpath : src/prolmark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ProlMark configuration: logging setup, TOML I/O and the layered `Config` model.

The submodules are kept import-light so that low-level modules (the recognition
engine, the dialects) can depend on `prolmark.config.logging` without pulling in
the configuration model. Import the model explicitly:

    ```python
    from prolmark.config.model import Config, MutableConfig
    ```
"""

from __future__ import annotations
