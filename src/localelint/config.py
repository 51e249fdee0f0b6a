"""Configuration management for localelint using Pydantic models."""

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

CONFIG_FILE_NAME = ".localelint.json"


class ConfigError(ValueError):
    """Raised when a configuration file cannot be loaded."""


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class RulesConfig(BaseModel):
    """Rule toggles section.

    Every rule of the default set is listed here so it can be switched on or
    off without code changes. The defaults reproduce the established checks.
    """
    document_root: bool = Field(alias="documentRoot", default=True)
    required_fields: bool = Field(alias="requiredFields", default=True)
    metadata_fields: bool = Field(alias="metadataFields", default=True)
    metadata_object: bool = Field(alias="metadataObject", default=False)
    timestamp_format: bool = Field(alias="timestampFormat", default=True)
    strings_shape: bool = Field(alias="stringsShape", default=True)
    placeholder_consistency: bool = Field(alias="placeholderConsistency", default=False)

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    def is_enabled(self, rule_name: str) -> bool | None:
        """Return the toggle for a rule name, or None for unknown rules."""
        if rule_name not in type(self).model_fields:
            return None
        return getattr(self, rule_name)


class DiscoveryConfig(BaseModel):
    """Candidate file discovery section."""
    include: list[str] = Field(default_factory=lambda: ["**/*.json"])
    exclude: list[str] = Field(default_factory=lambda: [
        "node_modules/**",
        ".git/**",
    ])
    suffix: str = ".json"

    @field_validator("suffix")
    @classmethod
    def validate_suffix(cls, v):
        if not v.startswith("."):
            raise ValueError(f"suffix must start with '.', got: {v}")
        return v

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class OutputConfig(BaseModel):
    """Output configuration section."""
    results_file: str = Field(alias="resultsFile", default="validation-results.json")
    jobs: int = 1

    @field_validator("jobs")
    @classmethod
    def validate_jobs(cls, v):
        if v < 1:
            raise ValueError("jobs must be >= 1")
        return v

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN

    model_config = ConfigDict(use_enum_values=True, extra="forbid")


class LocalelintConfig(BaseModel):
    """Complete localelint configuration model."""
    rules: RulesConfig = Field(default_factory=RulesConfig)
    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


def load_config(config_path: str | Path | None = None) -> LocalelintConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .localelint.json

    Returns:
        LocalelintConfig: Loaded and validated configuration

    Raises:
        ConfigError: If the configuration file is invalid
    """
    if config_path is None:
        config_path = find_config_file()
    else:
        config_path = Path(config_path)

    if config_path and config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in config file {config_path}: {e}") from e

        if not isinstance(config_data, dict):
            raise ConfigError(f"Failed to load config from {config_path}: top level must be an object")

        try:
            return LocalelintConfig(**config_data)
        except ValueError as e:
            raise ConfigError(f"Failed to load config from {config_path}: {e}") from e

    return create_default_config()


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .localelint.json by searching up the directory tree.

    Args:
        start_dir: Directory to start search from (default: current directory)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = Path(start_dir).resolve()

    while True:
        config_file = current / CONFIG_FILE_NAME
        if config_file.exists():
            return config_file

        parent = current.parent
        if parent == current:  # Reached root directory
            break
        current = parent

    return None


def create_default_config() -> LocalelintConfig:
    """Create default configuration."""
    return LocalelintConfig()
