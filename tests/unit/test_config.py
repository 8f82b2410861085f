"""Unit tests for configuration loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from stlimport.core.config import (
    Config,
    ImportConfig,
    LoggingConfig,
    get_default_config,
    load_config,
)
from stlimport.core.exceptions import ConfigurationError


class TestConfig:
    """Test configuration models."""

    def test_defaults(self):
        config = get_default_config()

        assert config.importer.min_probability == 0.5
        assert config.importer.show_progress is False
        assert config.logging.level == "INFO"
        assert config.logging.format == "console"

    def test_frozen(self):
        config = ImportConfig()

        with pytest.raises(ValidationError):
            config.min_probability = 0.9

    @pytest.mark.parametrize("value", [-0.1, 1.5])
    def test_probability_range(self, value: float):
        with pytest.raises(ValidationError):
            ImportConfig(min_probability=value)

    def test_from_dict(self):
        config = Config.from_dict({"importer": {"min_probability": 0.9}})

        assert config.importer.min_probability == 0.9
        assert config.logging == LoggingConfig()

    def test_from_dict_invalid(self):
        with pytest.raises(ConfigurationError) as exc_info:
            Config.from_dict({"logging": {"level": "LOUD"}})

        assert exc_info.value.details["errors"]

    def test_toml_round_trip(self, temp_dir: Path):
        path = temp_dir / "nested" / "config.toml"
        config = Config(
            importer={"min_probability": 0.25, "show_progress": True},
            logging={"format": "json"},
        )

        config.save_toml(path)
        loaded = Config.from_toml(path)

        assert loaded == config

    def test_from_toml(self, temp_dir: Path):
        path = temp_dir / "config.toml"
        path.write_text('[importer]\nmin_probability = 0.75\n\n[logging]\nlevel = "DEBUG"\n')

        config = load_config(path)

        assert config.importer.min_probability == 0.75
        assert config.logging.level == "DEBUG"

    def test_from_toml_missing(self, temp_dir: Path):
        with pytest.raises(FileNotFoundError):
            Config.from_toml(temp_dir / "missing.toml")

    def test_from_toml_invalid(self, temp_dir: Path):
        path = temp_dir / "broken.toml"
        path.write_text("[importer\nmin_probability = ")

        with pytest.raises(ConfigurationError):
            Config.from_toml(path)

    def test_load_config_defaults(self):
        assert load_config() == Config()
