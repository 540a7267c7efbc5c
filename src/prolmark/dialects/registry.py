# topmark:header:start
#
#   project      : ProlMark
#   file         : registry.py
#   file_relpath : src/prolmark/dialects/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry of dialect recognizers.

Built-in recognizers register themselves at import time with the
`register_dialect` class decorator. The `DialectRegistry` facade exposes a
composed, read-only view (built-ins + overlay registrations − removals) and
builds fresh, ordered recognizer lists for the dispatcher.

Notes:
    * The registry stores recognizer *classes*: recognizers are stateful, so
      every parse gets its own instances (see `DialectRegistry.resolve`).
    * `register()` / `unregister()` apply overlay-only changes; they do not
      mutate the mapping populated by the decorators.
    * `names()` lists the built-in default order first
      (`prolmark.constants.DEFAULT_DIALECT_ORDER`), then any other dialect in
      registration order.
"""

from __future__ import annotations

from dataclasses import dataclass
from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING, Iterable, Iterator, Mapping

from prolmark.config.logging import get_logger
from prolmark.constants import DEFAULT_DIALECT_ORDER

if TYPE_CHECKING:
    from collections.abc import Callable

    from prolmark.config.logging import ProlmarkLogger
    from prolmark.dialects.base import DialectRecognizer

logger: ProlmarkLogger = get_logger(__name__)


class UnknownDialectError(ValueError):
    """Raised when a dialect name is not registered."""

    def __init__(self, name: str, known: Iterable[str]) -> None:
        self.name = name
        self.known = tuple(known)
        super().__init__(f"Unknown dialect: {name!r} (known: {', '.join(self.known)})")


_registry: dict[str, type[DialectRecognizer]] = {}


def register_dialect(
    name: str,
) -> Callable[[type[DialectRecognizer]], type[DialectRecognizer]]:
    """Class decorator to register a DialectRecognizer under ``name``.

    Args:
        name (str): Dialect name (also used as ``Prologue.dialect``).

    Returns:
        Callable[[type[DialectRecognizer]], type[DialectRecognizer]]: A decorator
            that registers the class and returns it unchanged.
    """

    def decorator(cls: type[DialectRecognizer]) -> type[DialectRecognizer]:
        """Register ``cls`` in the built-in mapping.

        Raises:
            ValueError: If a recognizer is already registered under ``name``.
        """
        logger.debug("Registering dialect recognizer %s as %r", cls.__name__, name)
        if name in _registry:
            raise ValueError(f"Dialect '{name}' already has a registered recognizer.")
        _registry[name] = cls
        return cls

    return decorator


def get_dialect_registry() -> dict[str, type[DialectRecognizer]]:
    """Return the built-in mapping of dialect names to recognizer classes."""
    return _registry


@dataclass(frozen=True)
class DialectMeta:
    """Stable, serializable metadata about a registered dialect."""

    name: str
    description: str = ""
    canonical: bool = False


class DialectRegistry:
    """Read-oriented facade over the registered dialects with optional mutation hooks."""

    _lock = RLock()
    _overrides: dict[str, type[DialectRecognizer]] = {}
    _removals: set[str] = set()

    @classmethod
    def _compose(cls) -> dict[str, type[DialectRecognizer]]:
        """Compose the built-in registry with local overrides/removals, in listing order."""
        from prolmark.dialects import register_all_dialects

        register_all_dialects()
        base = dict(_get_ordered(_registry))
        base.update(cls._overrides)
        for name in cls._removals:
            base.pop(name, None)
        return base

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """Return all registered dialect names, default order first."""
        with cls._lock:
            return tuple(cls._compose().keys())

    @classmethod
    def default_order(cls) -> tuple[str, ...]:
        """Return the built-in dialect order, restricted to registered names."""
        with cls._lock:
            composed = cls._compose()
            return tuple(name for name in DEFAULT_DIALECT_ORDER if name in composed)

    @classmethod
    def is_registered(cls, name: str) -> bool:
        """Return True if a recognizer is registered under ``name``."""
        with cls._lock:
            return name in cls._compose()

    @classmethod
    def get(cls, name: str) -> type[DialectRecognizer] | None:
        """Return the recognizer class registered under ``name``, or None."""
        with cls._lock:
            return cls._compose().get(name)

    @classmethod
    def as_mapping(cls) -> Mapping[str, type[DialectRecognizer]]:
        """Return a read-only mapping of dialect names to recognizer classes."""
        with cls._lock:
            return MappingProxyType(cls._compose())

    @classmethod
    def iter_meta(cls) -> Iterator[DialectMeta]:
        """Iterate over stable metadata for registered dialects.

        Yields:
            DialectMeta: Serializable metadata about each dialect.
        """
        with cls._lock:
            for name, recognizer_cls in cls._compose().items():
                yield DialectMeta(
                    name=name,
                    description=recognizer_cls.description,
                    canonical=recognizer_cls.canonical,
                )

    @classmethod
    def validate(cls, names: Iterable[str]) -> tuple[str, ...]:
        """Check dialect names and drop duplicates, keeping the first occurrence.

        Args:
            names (Iterable[str]): Requested dialect names, in priority order.

        Returns:
            tuple[str, ...]: The de-duplicated names in the requested order.

        Raises:
            UnknownDialectError: If a name is not registered.
        """
        with cls._lock:
            composed = cls._compose()
            seen: list[str] = []
            for name in names:
                key = name.strip()
                if key not in composed:
                    key = key.lower()
                if key not in composed:
                    raise UnknownDialectError(name, composed.keys())
                if key in seen:
                    logger.warning("Dialect %r listed more than once; keeping the first", key)
                    continue
                seen.append(key)
            return tuple(seen)

    @classmethod
    def resolve(
        cls,
        names: Iterable[str] | None = None,
        *,
        source: str | None = None,
    ) -> list[DialectRecognizer]:
        """Instantiate fresh recognizers in priority order.

        Args:
            names (Iterable[str] | None): Dialect names in priority order. When
                None, the built-in default order is used.
            source (str | None): Input identifier passed to every recognizer.

        Returns:
            list[DialectRecognizer]: One new recognizer per requested dialect.

        Raises:
            UnknownDialectError: If a name is not registered.
        """
        with cls._lock:
            ordered = cls.validate(cls.default_order() if names is None else names)
            composed = cls._compose()
            return [composed[name](source=source) for name in ordered]

    # Optional: mutation
    @classmethod
    def register(cls, name: str, recognizer_class: type[DialectRecognizer]) -> None:
        """Register a recognizer class under ``name`` (overlay only).

        Raises:
            ValueError: If ``name`` is already registered.

        Notes:
            - This mutates process-global state. Prefer temporary usage in tests
              with try/finally.
        """
        with cls._lock:
            if name in cls._compose():
                raise ValueError(f"Dialect '{name}' already has a registered recognizer.")
            cls._removals.discard(name)
            cls._overrides[name] = recognizer_class

    @classmethod
    def unregister(cls, name: str) -> bool:
        """Unregister a dialect by name.

        Returns:
            bool: True if removed, else False.
        """
        with cls._lock:
            existed = False
            if name in cls._overrides:
                cls._overrides.pop(name, None)
                existed = True
            if name in cls._compose():
                cls._removals.add(name)
                existed = True
            return existed


def _get_ordered(
    registry: Mapping[str, type[DialectRecognizer]],
) -> list[tuple[str, type[DialectRecognizer]]]:
    """Return registry items with the default order first, then registration order."""
    head = [(name, registry[name]) for name in DEFAULT_DIALECT_ORDER if name in registry]
    tail = [(name, cls) for name, cls in registry.items() if name not in DEFAULT_DIALECT_ORDER]
    return head + tail
