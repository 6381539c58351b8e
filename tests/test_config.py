"""Tests for configuration system."""

from pathlib import Path

import pydantic
import pytest

from cells.config import CellsConfig, LoggingConfig, OrderPolicy, load_config


class TestCellsConfig:
    """Tests for the configuration models."""

    def test_defaults(self) -> None:
        """Test default configuration values."""
        config = CellsConfig()
        assert config.order_policy is OrderPolicy.VERBATIM
        assert config.logging.level == "INFO"
        assert not config.logging.json_output

    def test_frozen(self) -> None:
        """Test that configuration is immutable."""
        config = CellsConfig()
        with pytest.raises(pydantic.ValidationError):
            config.order_policy = OrderPolicy.STRICT  # type: ignore[misc]

    def test_level_normalized(self) -> None:
        """Test that log level names are upper-cased."""
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_invalid_level(self) -> None:
        """Test that unknown log levels are rejected."""
        with pytest.raises(ValueError, match="level must be one of"):
            LoggingConfig(level="LOUD")

    def test_unknown_key_rejected(self) -> None:
        """Test that unknown settings are rejected."""
        with pytest.raises(pydantic.ValidationError):
            CellsConfig.model_validate({"order": "strict"})


class TestLoadConfig:
    """Tests for YAML configuration loading."""

    def test_load(self, tmp_path: Path) -> None:
        """Test loading a complete configuration file."""
        path = tmp_path / "cells.yaml"
        path.write_text("order_policy: strict\nlogging:\n  level: debug\n  json_output: true\n")
        config = load_config(path)
        assert config.order_policy is OrderPolicy.STRICT
        assert config.logging.level == "DEBUG"
        assert config.logging.json_output

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        """Test that an empty file yields the default configuration."""
        path = tmp_path / "cells.yaml"
        path.write_text("")
        assert load_config(path) == CellsConfig()

    def test_env_interpolation(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test ${VAR} interpolation from the environment."""
        monkeypatch.setenv("CELLS_ORDER_POLICY", "strict")
        path = tmp_path / "cells.yaml"
        path.write_text("order_policy: ${CELLS_ORDER_POLICY:verbatim}\n")
        assert load_config(path).order_policy is OrderPolicy.STRICT

    def test_env_default(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that the ${VAR:default} fallback is used when unset."""
        monkeypatch.delenv("CELLS_ORDER_POLICY", raising=False)
        path = tmp_path / "cells.yaml"
        path.write_text("order_policy: ${CELLS_ORDER_POLICY:verbatim}\n")
        assert load_config(path).order_policy is OrderPolicy.VERBATIM

    def test_non_mapping_rejected(self, tmp_path: Path) -> None:
        """Test that a YAML list is not accepted as configuration."""
        path = tmp_path / "cells.yaml"
        path.write_text("- strict\n")
        with pytest.raises(ValueError, match="must contain a mapping"):
            load_config(path)

    def test_invalid_policy(self, tmp_path: Path) -> None:
        """Test that an unknown order policy is rejected."""
        path = tmp_path / "cells.yaml"
        path.write_text("order_policy: loose\n")
        with pytest.raises(pydantic.ValidationError):
            load_config(path)
