# topmark:header:start
#
#   project      : Akaer
#   file         : model.py
#   file_relpath : src/akaer/config/model.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot read by the alias engine.
    - `MutableConfig`: a mutable builder used while layering defaults, the
      configuration file and CLI overrides; it can be frozen into `Config`
      and thawed back for edits.

Layering (last wins):
    1. runtime defaults (`akaer.config.io.load_defaults_dict`);
    2. the configuration file (explicit ``--config`` or ``~/.akaer.toml``);
    3. CLI overrides (`MutableConfig.apply_cli_args`).

Tri-state fields:
    On the mutable side ``None`` means "not set here, inherit from the layer
    below". `MutableConfig.freeze` fills any remaining ``None`` with the
    built-in defaults, so a frozen `Config` is always complete.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from akaer.config.io import (
    get_bool_value_or_none,
    get_int_value_or_none,
    get_string_list_value_or_none,
    get_string_value_or_none,
    load_defaults_dict,
    load_toml_dict,
)
from akaer.config.keys import Toml
from akaer.config.logging import get_logger, parse_log_level
from akaer.constants import (
    DEFAULT_ADD_COMMAND,
    DEFAULT_ALIAS_COUNT,
    DEFAULT_INTERFACE,
    DEFAULT_LOG_FILE,
    DEFAULT_REMOVE_COMMAND,
    DEFAULT_START_ADDRESS,
    USER_CONFIG_FILE_NAME,
)

if TYPE_CHECKING:
    from akaer.config.io import TomlTable
    from akaer.config.logging import AkaerLogger

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: AkaerLogger = get_logger(__name__)

# Marker recorded in `config_files` when CLI overrides were applied.
CLI_OVERRIDE_STR = "<CLI overrides>"


class ConfigLoadError(ValueError):
    """Raised when an explicitly requested configuration file cannot be loaded."""


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for Akaer.

    Attributes:
        interface (str): The network interface to manage.
        addresses (tuple[str, ...]): Explicit addresses; empty means "generate".
        start_address (str): First address of the generated sequence.
        aliases (int): Number of addresses to generate (non-positive means the default).
        add_command (str): Template of the command adding one alias.
        remove_command (str): Template of the command removing one alias.
        log_file (str): ``"STDOUT"``, ``"STDERR"`` or a file path.
        log_level (int): Minimum logging severity.
        dry_run (bool): Only log what would be done.
        quiet (bool): Suppress informational, warning and error messages.
        config_files (tuple[Path | str, ...]): Provenance of the merged values.
    """

    interface: str
    addresses: tuple[str, ...]
    start_address: str
    aliases: int
    add_command: str
    remove_command: str
    log_file: str
    log_level: int
    dry_run: bool
    quiet: bool
    config_files: tuple[Path | str, ...] = ()

    def to_toml_dict(self) -> TomlTable:
        """Convert this immutable Config into a TOML-serializable dict.

        Returns:
            TomlTable: the TOML-serializable dict representing the Config
        """
        return {
            Toml.KEY_INTERFACE: self.interface,
            Toml.KEY_ADDRESSES: list(self.addresses),
            Toml.KEY_START_ADDRESS: self.start_address,
            Toml.KEY_ALIASES: self.aliases,
            Toml.KEY_ADD_COMMAND: self.add_command,
            Toml.KEY_REMOVE_COMMAND: self.remove_command,
            Toml.KEY_LOG_FILE: self.log_file,
            Toml.KEY_LOG_LEVEL: logging.getLevelName(self.log_level),
            Toml.KEY_DRY_RUN: self.dry_run,
            Toml.KEY_QUIET: self.quiet,
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            interface=self.interface,
            addresses=list(self.addresses),
            start_address=self.start_address,
            aliases=self.aliases,
            add_command=self.add_command,
            remove_command=self.remove_command,
            log_file=self.log_file,
            log_level=self.log_level,
            dry_run=self.dry_run,
            quiet=self.quiet,
            config_files=list(self.config_files),
        )


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableConfig:
    """Mutable configuration used while merging layers.

    All value fields are tri-state: ``None`` means "not set in this layer".
    See `Config` for the meaning of each field.
    """

    interface: str | None = None
    addresses: list[str] | None = None
    start_address: str | None = None
    aliases: int | None = None
    add_command: str | None = None
    remove_command: str | None = None
    log_file: str | None = None
    log_level: int | None = None
    dry_run: bool | None = None
    quiet: bool | None = None

    # Provenance
    config_files: list[Path | str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this mutable builder into an immutable Config.

        Fields still unset fall back to the built-in defaults.
        """
        return Config(
            interface=self.interface if self.interface is not None else DEFAULT_INTERFACE,
            addresses=tuple(self.addresses or ()),
            start_address=self.start_address
            if self.start_address is not None
            else DEFAULT_START_ADDRESS,
            aliases=self.aliases if self.aliases is not None else DEFAULT_ALIAS_COUNT,
            add_command=self.add_command if self.add_command is not None else DEFAULT_ADD_COMMAND,
            remove_command=self.remove_command
            if self.remove_command is not None
            else DEFAULT_REMOVE_COMMAND,
            log_file=self.log_file if self.log_file is not None else DEFAULT_LOG_FILE,
            log_level=self.log_level if self.log_level is not None else logging.INFO,
            dry_run=bool(self.dry_run),
            quiet=bool(self.quiet),
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Create a builder from a parsed TOML table.

        Unknown keys are logged and ignored; values of the wrong type are
        logged and left unset.

        Args:
            data (TomlTable): The parsed TOML table.
            config_file (Path | None): The file the table was read from, if any.

        Returns:
            MutableConfig: The populated builder.
        """
        known: set[str] = {v for k, v in vars(Toml).items() if k.startswith("KEY_")}
        for key in data:
            if key not in known:
                logger.warning("Ignoring unknown configuration key '%s' in %s", key, config_file)

        log_level: int | None = None
        raw_level: Any = data.get(Toml.KEY_LOG_LEVEL)
        if raw_level is not None:
            log_level = parse_log_level(raw_level)
            if log_level is None:
                logger.warning("Ignoring invalid log level %r in %s", raw_level, config_file)

        return cls(
            interface=get_string_value_or_none(data, Toml.KEY_INTERFACE),
            addresses=get_string_list_value_or_none(data, Toml.KEY_ADDRESSES),
            start_address=get_string_value_or_none(data, Toml.KEY_START_ADDRESS),
            aliases=get_int_value_or_none(data, Toml.KEY_ALIASES),
            add_command=get_string_value_or_none(data, Toml.KEY_ADD_COMMAND),
            remove_command=get_string_value_or_none(data, Toml.KEY_REMOVE_COMMAND),
            log_file=get_string_value_or_none(data, Toml.KEY_LOG_FILE),
            log_level=log_level,
            dry_run=get_bool_value_or_none(data, Toml.KEY_DRY_RUN),
            quiet=get_bool_value_or_none(data, Toml.KEY_QUIET),
            config_files=[config_file] if config_file is not None else [],
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The builder, or None if the file cannot be read or parsed.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)

        toml_data: TomlTable | None = load_toml_dict(path)
        if toml_data is None:
            return None

        draft: MutableConfig = cls.from_toml_dict(toml_data, config_file=path)
        logger.debug("Generated MutableConfig: %s", draft)
        return draft

    @classmethod
    def discover_user_config_file(cls) -> Path | None:
        """Return ``~/.akaer.toml`` if it exists."""
        candidate: Path = Path.home() / USER_CONFIG_FILE_NAME
        return candidate if candidate.is_file() else None

    @classmethod
    def load_merged(cls, config_file: Path | None = None) -> MutableConfig:
        """Return defaults merged with the configuration file.

        Args:
            config_file (Path | None): Explicit configuration file. When None,
                the user configuration file is used if present.

        Returns:
            MutableConfig: The merged builder (CLI overrides not yet applied).

        Raises:
            ConfigLoadError: If the configuration file cannot be read or parsed.
        """
        draft: MutableConfig = cls.from_defaults()

        path: Path | None = config_file or cls.discover_user_config_file()
        if path is None:
            return draft

        layer: MutableConfig | None = cls.from_toml_file(path)
        if layer is None:
            raise ConfigLoadError(f"Cannot load the configuration file {path}.")
        return draft.merge_with(layer)

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft.

        Args:
            other (MutableConfig): The config whose values override those of this draft.

        Returns:
            MutableConfig: A new mutable configuration representing the merged result.
        """

        def pick(name: str) -> Any:
            value: Any = getattr(other, name)
            return value if value is not None else getattr(self, name)

        return MutableConfig(
            interface=pick("interface"),
            addresses=pick("addresses"),
            start_address=pick("start_address"),
            aliases=pick("aliases"),
            add_command=pick("add_command"),
            remove_command=pick("remove_command"),
            log_file=pick("log_file"),
            log_level=pick("log_level"),
            dry_run=pick("dry_run"),
            quiet=pick("quiet"),
            config_files=self.config_files + other.config_files,
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Update fields from an arguments mapping (CLI or API).

        Keys that are missing or ``None`` are ignored, so only options the user
        actually passed override the lower layers. ``log_level`` may be a level
        name or number.

        Args:
            args (ArgsLike): Parsed arguments mapping (from CLI or API).

        Returns:
            MutableConfig: This builder, updated in place.
        """
        logger.debug("Applying CLI arguments to MutableConfig: %s", args)

        overrides: dict[str, Any] = {k: v for k, v in args.items() if v is not None}
        if not overrides:
            return self

        self.config_files.append(CLI_OVERRIDE_STR)

        for name in ("interface", "start_address", "add_command", "remove_command", "log_file"):
            if name in overrides:
                setattr(self, name, str(overrides[name]))
        if "addresses" in overrides and overrides["addresses"]:
            self.addresses = [str(a) for a in overrides["addresses"]]
        if "aliases" in overrides:
            self.aliases = int(overrides["aliases"])
        if "log_level" in overrides:
            level: int | None = parse_log_level(overrides["log_level"])
            if level is None:
                logger.warning("Ignoring invalid log level %r", overrides["log_level"])
            else:
                self.log_level = level
        if "dry_run" in overrides:
            self.dry_run = bool(overrides["dry_run"])
        if "quiet" in overrides:
            self.quiet = bool(overrides["quiet"])

        return self
