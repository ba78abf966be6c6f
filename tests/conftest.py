"""Shared pytest fixtures for all tests."""

import os

import pytest
from PIL import Image
from pygments.formatters import ImageFormatter
from pygments.formatters.img import FontNotFound

from snapgram.config import CardConfig, ExportConfig, FormatConfig, SnapgramConfig
from snapgram.language_detection import LanguageDetector


@pytest.fixture(autouse=True)
def clean_snapgram_env(monkeypatch):
    """Keep SNAPGRAM_* variables from the developer's shell out of the tests."""
    for name in list(os.environ):
        if name.startswith("SNAPGRAM_"):
            monkeypatch.delenv(name)


@pytest.fixture
def detector():
    """Create a detector with the default rule table."""
    return LanguageDetector()


@pytest.fixture
def snapgram_config(tmp_path):
    """Create a configuration that exports into a temporary directory."""
    return SnapgramConfig(
        card=CardConfig(font_size=14, theme="midnight", scale=1, padding=16),
        export=ExportConfig(output_dir=tmp_path, filename_prefix="test"),
        format=FormatConfig(enabled=True, indent_width=2),
    )


@pytest.fixture
def code_image():
    """A solid stand-in for a rasterized code block."""
    return Image.new("RGBA", (100, 40), (200, 0, 0, 255))


@pytest.fixture
def monospace_font():
    """Skip tests that rasterize real text when no monospace font is installed."""
    try:
        ImageFormatter()
    except (FontNotFound, OSError) as e:
        # OSError covers hosts without fontconfig, where fc-list itself is missing.
        pytest.skip(f"No monospace font available for Pygments: {e}")
