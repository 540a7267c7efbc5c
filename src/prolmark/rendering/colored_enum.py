# topmark:header:start
#
#   project      : ProlMark
#   file         : colored_enum.py
#   file_relpath : src/prolmark/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""String enum carrying a colorizer for terminal output.

Pipeline statuses are `ColoredStrEnum` members: the enum value is the
human-readable label, and `.color` decorates text for the console. Any callable
with the `Colorizer` signature works; in practice a yachalk style is used:

    ```python
    from yachalk import chalk

    class FileStatus(ColoredStrEnum):
        CONVERTED = ("converted", chalk.green)

    FileStatus.CONVERTED.color(FileStatus.CONVERTED.value)
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable that decorates a string for display (compatible with ``ChalkBuilder``)."""

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Return ``args`` joined by ``sep`` and decorated."""
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose value is a plain string and whose members carry a colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Store ``text`` as the enum value and keep ``color`` on the member."""
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """The textual label of the member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """The colorizer associated with the member."""
        return self._color

    @property
    def colored(self) -> str:
        """The label, decorated by the member's colorizer."""
        return self._color(self._value_)
