"""
Configuration Manager for compact-semver.

This module provides the ConfigManager class for loading, validating,
and accessing configuration from multiple sources (YAML, JSON, TOML,
environment variables).
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dynaconf import Dynaconf
from pydantic import ValidationError

from compact_semver.config.defaults import DEFAULT_CONFIG
from compact_semver.config.models import CodecConfig, SemverConfig

DEFAULT_SETTINGS_FILES = [
    "csemver.yaml",
    "csemver.json",
    "csemver.toml",
]


@dataclass
class ValidationResult:
    """Result of configuration validation."""

    is_valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def _lower_keys(value: Any) -> Any:
    """Recursively lower-case mapping keys (dynaconf upper-cases top-level keys)."""
    if isinstance(value, dict):
        return {str(k).lower(): _lower_keys(v) for k, v in value.items()}
    return value


class ConfigManager:
    """
    Configuration manager for compact-semver.

    Handles loading configuration from multiple sources with proper precedence:
    CLI args > Environment variables > Config file > Defaults

    Usage:
        manager = ConfigManager()
        manager.load(Path("csemver.yaml"))
        width = manager.get("codec.width")
    """

    def __init__(self) -> None:
        """Initialize the configuration manager."""
        self._settings: Optional[Dynaconf] = None
        self._config_file: Optional[Path] = None
        self._loaded = False

    def load(self, config_path: Optional[Path] = None) -> None:
        """
        Load configuration from file and environment.

        Args:
            config_path: Optional path to configuration file (YAML, JSON or TOML).
                        If not provided, searches for default config files.
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            settings_files = [str(config_path)]
            self._config_file = config_path
        else:
            settings_files = list(DEFAULT_SETTINGS_FILES)

        self._settings = Dynaconf(
            envvar_prefix="CSEMVER",
            settings_files=settings_files,
            environments=False,
            load_dotenv=True,
            merge_enabled=True,
            default_settings_paths=[],
        )

        self._apply_defaults()
        self._loaded = True

    def _apply_defaults(self) -> None:
        """Apply default values for missing configuration keys."""
        if self._settings is None:
            return

        def apply_nested(defaults: dict, prefix: str = "") -> None:
            for key, value in defaults.items():
                full_key = f"{prefix}.{key}" if prefix else key
                if isinstance(value, dict):
                    apply_nested(value, full_key)
                elif not self._settings.exists(full_key):
                    self._settings.set(full_key, value)

        apply_nested(DEFAULT_CONFIG)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            key: Configuration key (supports dot notation, e.g., "codec.width")
            default: Default value if key doesn't exist

        Returns:
            Configuration value or default
        """
        if not self._loaded:
            self.load()

        if self._settings is None:
            return default

        return self._settings.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            key: Configuration key (supports dot notation)
            value: Value to set
        """
        if not self._loaded:
            self.load()

        if self._settings is not None:
            self._settings.set(key, value)

    def validate(self, strict: bool = False) -> ValidationResult:
        """
        Validate the current configuration against the schema.

        Args:
            strict: If True, treat warnings as errors

        Returns:
            ValidationResult with validation status and any errors/warnings
        """
        if not self._loaded:
            self.load()

        errors: list[str] = []
        warnings: list[str] = []

        config_dict = self.to_dict()
        try:
            SemverConfig.model_validate(config_dict)
        except ValidationError as e:
            for err in e.errors():
                location = ".".join(str(part) for part in err["loc"])
                errors.append(f"{location}: {err['msg']}")

        known_sections = set(SemverConfig.model_fields)
        for section in config_dict:
            if section not in known_sections:
                warnings.append(f"Unknown configuration section: {section}")

        is_valid = len(errors) == 0
        if strict:
            is_valid = is_valid and len(warnings) == 0

        return ValidationResult(is_valid=is_valid, errors=errors, warnings=warnings)

    def to_dict(self) -> dict:
        """
        Export the current configuration as a dictionary.

        Returns:
            Dictionary representation of the configuration
        """
        if not self._loaded:
            self.load()

        if self._settings is None:
            return DEFAULT_CONFIG.copy()

        return _lower_keys(dict(self._settings.as_dict()))

    def to_model(self) -> SemverConfig:
        """
        Return the validated configuration model.

        Raises:
            pydantic.ValidationError: If the configuration is invalid
        """
        return SemverConfig.model_validate(self.to_dict())

    def codec_settings(self) -> CodecConfig:
        """Return the validated codec section."""
        return self.to_model().codec

    @property
    def config_file(self) -> Optional[Path]:
        """Return the path to the loaded configuration file."""
        return self._config_file

    @property
    def is_loaded(self) -> bool:
        """Return whether configuration has been loaded."""
        return self._loaded

