# topmark:header:start
#
#   project      : ProlMark
#   file         : model.py
#   file_relpath : src/prolmark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot used by pipeline steps.
    - `MutableConfig`: a mutable builder used during discovery/merge; it can be
      frozen into `Config` and thawed back for edits.

Merge order (lowest → highest precedence):
    1) Built-in defaults
    2) ``pyproject.toml`` (``[tool.prolmark]``) then ``prolmark.toml`` in the
       working directory
    3) Extra config files passed explicitly via ``--config`` (in order)
    4) CLI arguments
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Iterable

from prolmark.config.io import (
    Toml,
    TomlTable,
    get_bool_value_or_none,
    get_string_list,
    load_toml_dict,
    to_toml,
)
from prolmark.config.logging import get_logger
from prolmark.constants import (
    DEFAULT_DIALECT_ORDER,
    PROLMARK_TOML_NAME,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
)

if TYPE_CHECKING:
    from prolmark.config.logging import ProlmarkLogger

# Generic mapping accepted by `MutableConfig.apply_cli_args` (CLI kwargs or plain dicts).
ArgsLike = Mapping[str, Any]

logger: ProlmarkLogger = get_logger(__name__)

CLI_OVERRIDE_STR = "<CLI overrides>"


@dataclass(frozen=True)
class Config:
    """Immutable runtime configuration for ProlMark.

    Attributes:
        dialects (tuple[str, ...]): Dialect names in priority order.
        write_defaults (bool): Render sections holding only placeholder content.
        normalize (bool): Re-render prologues that are already canonical.
        apply_changes (bool): Write changes back (False = dry run).
        verbosity_level (int): 0 = terse, 1+ = verbose reporting.
        config_files (tuple[Path | str, ...]): Sources that contributed to this config.
    """

    dialects: tuple[str, ...]
    write_defaults: bool
    normalize: bool
    apply_changes: bool
    verbosity_level: int
    config_files: tuple[Path | str, ...]

    def to_toml_dict(self) -> TomlTable:
        """Return the persisted keys of this config as a TOML-ready dict."""
        return {
            Toml.KEY_DIALECTS: list(self.dialects),
            Toml.KEY_WRITE_DEFAULTS: self.write_defaults,
            Toml.KEY_NORMALIZE: self.normalize,
        }

    def to_toml(self) -> str:
        """Render the persisted keys of this config as TOML text."""
        return to_toml(self.to_toml_dict())

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            dialects=list(self.dialects),
            write_defaults=self.write_defaults,
            normalize=self.normalize,
            apply_changes=self.apply_changes,
            verbosity_level=self.verbosity_level,
            config_files=list(self.config_files),
        )


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Tri-state fields (``None``) mean "inherit from the lower layer"; they take
    their built-in default on `freeze`.
    """

    dialects: list[str] = field(default_factory=lambda: [])
    write_defaults: bool | None = None
    normalize: bool | None = None
    apply_changes: bool | None = None
    verbosity_level: int | None = None
    config_files: list[Path | str] = field(default_factory=lambda: [])

    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`."""
        return Config(
            dialects=tuple(self.dialects) if self.dialects else DEFAULT_DIALECT_ORDER,
            write_defaults=bool(self.write_defaults),
            normalize=bool(self.normalize),
            apply_changes=bool(self.apply_changes),
            verbosity_level=self.verbosity_level or 0,
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return the built-in defaults."""
        return cls(
            dialects=list(DEFAULT_DIALECT_ORDER),
            write_defaults=False,
            normalize=False,
            apply_changes=False,
            verbosity_level=0,
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Build a draft from a parsed TOML table.

        Args:
            data (TomlTable): The ``prolmark`` table (top level of ``prolmark.toml``).
            config_file (Path | None): Originating file, recorded for provenance.

        Returns:
            MutableConfig: The draft; unset keys stay ``None``/empty.
        """
        known = {Toml.KEY_DIALECTS, Toml.KEY_WRITE_DEFAULTS, Toml.KEY_NORMALIZE}
        for key in data:
            if key not in known:
                logger.warning("Unknown config key %r in %s", key, config_file or "<dict>")
        return cls(
            dialects=get_string_list(data, Toml.KEY_DIALECTS),
            write_defaults=get_bool_value_or_none(data, Toml.KEY_WRITE_DEFAULTS),
            normalize=get_bool_value_or_none(data, Toml.KEY_NORMALIZE),
            config_files=[config_file] if config_file is not None else [],
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``prolmark.toml`` and ``pyproject.toml``; for the latter the
        ``[tool.prolmark]`` table is extracted.

        Returns:
            MutableConfig | None: The draft, or None when ``pyproject.toml`` has no
            ``[tool.prolmark]`` table.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            tool_section: Any = toml_data.get("tool", {}).get(PYPROJECT_TOOL_SECTION, {})
            if not isinstance(tool_section, dict) or not tool_section:
                logger.debug("[tool.%s] section missing in %s", PYPROJECT_TOOL_SECTION, path)
                return None
            toml_data = tool_section

        return cls.from_toml_dict(toml_data, config_file=path)

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return the config files found in ``start``.

        ``pyproject.toml`` comes first so that ``prolmark.toml`` wins when both
        are present.
        """
        found: list[Path] = []
        for name in (PYPROJECT_TOML_NAME, PROLMARK_TOML_NAME):
            candidate = start / name
            if candidate.is_file():
                found.append(candidate)
        return found

    @classmethod
    def load_merged(
        cls,
        *,
        cwd: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft.

        Args:
            cwd (Path | None): Directory searched for project config files
                (defaults to the current working directory).
            extra_config_files (Iterable[Path] | None): Explicit files merged
                after discovery, in the given order.
            no_config (bool): Skip discovery of project config files.

        Returns:
            MutableConfig: A draft ready for CLI overrides and `freeze`.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            for cfg_path in cls.discover_local_config_files(cwd or Path.cwd()):
                mc: MutableConfig | None = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            mc = cls.from_toml_file(Path(extra))
            if mc is not None:
                draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        return MutableConfig(
            dialects=other.dialects or self.dialects,
            write_defaults=other.write_defaults
            if other.write_defaults is not None
            else self.write_defaults,
            normalize=other.normalize if other.normalize is not None else self.normalize,
            apply_changes=other.apply_changes
            if other.apply_changes is not None
            else self.apply_changes,
            verbosity_level=other.verbosity_level
            if other.verbosity_level is not None
            else self.verbosity_level,
            config_files=self.config_files + other.config_files,
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Update fields from an arguments mapping (CLI or API).

        Only keys present with a non-None value override the draft; an empty
        ``dialects`` sequence keeps the configured order.
        """
        logger.debug("Applying CLI arguments to MutableConfig: %s", args)
        self.config_files.append(CLI_OVERRIDE_STR)

        dialects = args.get("dialects")
        if dialects:
            self.dialects = list(dialects)
        for key in ("write_defaults", "normalize", "apply_changes", "verbosity_level"):
            value = args.get(key)
            if value is not None:
                setattr(self, key, value)
        return self
