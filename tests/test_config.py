"""Comprehensive tests for configuration module."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from snapgram.config import CardConfig, ExportConfig, FormatConfig, SnapgramConfig


class TestCardConfig:
    """Test card configuration."""

    def test_defaults(self):
        """Test default card settings."""
        config = CardConfig()
        assert config.font_size == 14
        assert config.theme == "midnight"
        assert config.scale == 2
        assert config.padding == 32
        assert config.font_name is None
        assert config.line_numbers is False

    def test_validation(self):
        """Test range validation."""
        CardConfig(font_size=8)
        CardConfig(font_size=24)

        with pytest.raises(ValueError, match="between 8 and 24"):
            CardConfig(font_size=30)

        with pytest.raises(ValueError, match="Scale"):
            CardConfig(scale=0)

        with pytest.raises(ValueError, match="negative"):
            CardConfig(padding=-5)

    def test_from_env(self):
        """Test loading card settings from the environment."""
        env = {
            "SNAPGRAM_FONT_SIZE": "20",
            "SNAPGRAM_THEME": "candy",
            "SNAPGRAM_SCALE": "3",
            "SNAPGRAM_PADDING": "12",
            "SNAPGRAM_FONT_NAME": "Fira Code",
            "SNAPGRAM_LINE_NUMBERS": "yes",
        }
        with patch.dict(os.environ, env):
            config = CardConfig.from_env()
        assert config.font_size == 20
        assert config.theme == "candy"
        assert config.scale == 3
        assert config.padding == 12
        assert config.font_name == "Fira Code"
        assert config.line_numbers is True

    def test_from_env_empty_font_name(self):
        """Test an empty font name means the Pygments default."""
        with patch.dict(os.environ, {"SNAPGRAM_FONT_NAME": ""}):
            assert CardConfig.from_env().font_name is None


class TestExportConfig:
    """Test export configuration."""

    def test_defaults(self):
        """Test exports go to the working directory by default."""
        config = ExportConfig()
        assert config.output_dir == Path.cwd()
        assert config.filename_prefix == "snapgram"

    def test_prefix_validation(self):
        """Test bad filename prefixes are rejected."""
        with pytest.raises(ValueError, match="cannot be empty"):
            ExportConfig(filename_prefix="  ")
        with pytest.raises(ValueError, match="separators"):
            ExportConfig(filename_prefix="a/b")

    def test_from_env(self, tmp_path):
        """Test loading export settings from the environment."""
        env = {"SNAPGRAM_OUTPUT_DIR": str(tmp_path), "SNAPGRAM_FILENAME_PREFIX": "shot"}
        with patch.dict(os.environ, env):
            config = ExportConfig.from_env()
        assert config.output_dir == tmp_path
        assert config.filename_prefix == "shot"

    def test_string_output_dir_is_converted(self, tmp_path):
        """Test the output directory is always a Path."""
        assert isinstance(ExportConfig(output_dir=str(tmp_path)).output_dir, Path)


class TestFormatConfig:
    """Test formatting configuration."""

    def test_from_env(self):
        """Test formatting can be disabled from the environment."""
        with patch.dict(os.environ, {"SNAPGRAM_FORMAT": "false", "SNAPGRAM_INDENT_WIDTH": "4"}):
            config = FormatConfig.from_env()
        assert config.enabled is False
        assert config.indent_width == 4

    def test_indent_validation(self):
        """Test indent widths outside 1-8 are rejected."""
        with pytest.raises(ValueError, match="Indent width"):
            FormatConfig(indent_width=0)


class TestSnapgramConfig:
    """Test the aggregate configuration."""

    def test_from_env_defaults(self):
        """Test all sections load with defaults."""
        config = SnapgramConfig.from_env()
        assert config.card == CardConfig()
        assert config.format == FormatConfig()
        assert config.export.filename_prefix == "snapgram"

    def test_invalid_env_value(self):
        """Test an out of range environment value raises."""
        with patch.dict(os.environ, {"SNAPGRAM_SCALE": "9"}):
            with pytest.raises(ValueError):
                SnapgramConfig.from_env()
