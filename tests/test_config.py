"""Tests for configuration loading."""

import pytest
import yaml
from pydantic import ValidationError

from spider_rules.config import Config, load_config
from spider_rules.models.variant import GameVariant


class TestLoadConfig:
    """Tests for load_config function."""

    def test_defaults(self):
        """Test default configuration."""
        config = load_config()

        assert config.game.variant is GameVariant.TWO_SUIT
        assert config.assets.card_dir == "src/assets/cards"
        assert config.assets.extension == "svg"
        assert config.logging.level == "INFO"

    def test_missing_file(self, tmp_path):
        """Test a missing file falls back to defaults."""
        config = load_config(tmp_path / "missing.yaml")
        assert config == Config()

    def test_empty_file(self, tmp_path):
        """Test an empty file falls back to defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert load_config(path).game.variant is GameVariant.TWO_SUIT

    def test_overrides(self, tmp_path):
        """Test YAML values override defaults."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "game:\n"
            "  variant: four-suit\n"
            "assets:\n"
            "  card_dir: static/cards\n"
            "  extension: png\n"
            "logging:\n"
            "  level: DEBUG\n"
        )

        config = load_config(str(path))

        assert config.game.variant is GameVariant.FOUR_SUIT
        assert config.assets.card_dir == "static/cards"
        assert config.assets.extension == "png"
        assert config.logging.level == "DEBUG"

    def test_invalid_variant(self, tmp_path):
        """Test an unknown variant is rejected at load time."""
        path = tmp_path / "config.yaml"
        path.write_text("game:\n  variant: bogus-mode\n")

        with pytest.raises(ValidationError, match="bogus-mode"):
            load_config(path)

    def test_level_is_normalized(self, tmp_path):
        """Test level names are case-insensitive."""
        path = tmp_path / "config.yaml"
        path.write_text("logging:\n  level: warning\n")

        assert load_config(path).logging.level == "WARNING"

    def test_invalid_level(self, tmp_path):
        """Test an unknown logging level is rejected at load time."""
        path = tmp_path / "config.yaml"
        path.write_text("logging:\n  level: LOUD\n")

        with pytest.raises(ValidationError, match="LOUD"):
            load_config(path)

    def test_malformed_yaml(self, tmp_path):
        """Test broken YAML surfaces as a YAML error."""
        path = tmp_path / "config.yaml"
        path.write_text("game: [unclosed\n")

        with pytest.raises(yaml.YAMLError):
            load_config(path)

    def test_non_mapping(self, tmp_path):
        """Test a top-level list is rejected."""
        path = tmp_path / "config.yaml"
        path.write_text("- two-suit\n")

        with pytest.raises(ValueError, match="mapping"):
            load_config(path)
