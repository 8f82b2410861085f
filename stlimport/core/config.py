"""Configuration management for stlimport using Pydantic."""

from pathlib import Path
from typing import Literal, Optional

import tomli
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from stlimport.core.exceptions import ConfigurationError


class ImportConfig(BaseModel):
    """Configuration for the sniff-then-decode import policy."""

    model_config = ConfigDict(frozen=True)

    min_probability: float = Field(
        0.5,
        ge=0,
        le=1,
        description="Minimum sniffer probability before a file is decoded",
    )
    show_progress: bool = Field(
        False, description="Show a progress bar while decoding triangles"
    )


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    model_config = ConfigDict(frozen=True)

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO", description="Logging level"
    )
    format: Literal["json", "console", "plain"] = Field(
        "console", description="Log format"
    )
    colorize: bool = Field(True, description="Colorize console output on a TTY")
    add_caller_info: bool = Field(
        False, description="Add filename, line number and function to records"
    )
    timestamp_format: str = Field("iso", description="structlog timestamp format")
    log_file: Optional[Path] = Field(None, description="Optional JSON log file")


class Config(BaseModel):
    """Main configuration for stlimport."""

    model_config = ConfigDict(frozen=True)

    importer: ImportConfig = Field(
        default_factory=ImportConfig, description="Import configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    @classmethod
    def from_toml(cls, path: Path | str) -> "Config":
        """Load configuration from TOML file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ConfigurationError: If the TOML or its values are invalid
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path, "rb") as f:
            try:
                data = tomli.load(f)
            except tomli.TOMLDecodeError as e:
                raise ConfigurationError(
                    f"Invalid TOML in '{path}': {e}", details={"path": str(path)}
                ) from e

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Create configuration from dictionary.

        Raises:
            ConfigurationError: If a value fails validation
        """
        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e.error_count()} error(s)",
                details={"errors": e.errors()},
            ) from e

    def to_dict(self) -> dict:
        """Convert configuration to a TOML-serializable dictionary."""
        return self.model_dump(mode="json", exclude_none=True)

    def save_toml(self, path: Path | str) -> None:
        """Save configuration to TOML file."""
        import tomli_w

        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "wb") as f:
            tomli_w.dump(self.to_dict(), f)


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()


def load_config(path: Optional[Path | str] = None) -> Config:
    """Load configuration from file or return defaults.

    Args:
        path: Optional path to configuration file

    Returns:
        Config instance
    """
    if path:
        return Config.from_toml(path)
    return get_default_config()
