"""Configuration for snapgram."""

import os
from dataclasses import dataclass, field
from pathlib import Path

FONT_SIZE_MIN = 8
FONT_SIZE_MAX = 24
SCALE_MIN = 1
SCALE_MAX = 4

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


@dataclass
class CardConfig:
    """Configuration for the rendered card."""

    font_size: int = 14
    theme: str = "midnight"
    scale: int = 2
    padding: int = 32
    font_name: str | None = None
    line_numbers: bool = False

    def __post_init__(self):
        """Validate card dimensions."""
        self.font_size = self.validate_font_size(self.font_size)
        if not SCALE_MIN <= self.scale <= SCALE_MAX:
            raise ValueError(f"Scale must be between {SCALE_MIN} and {SCALE_MAX}")
        if self.padding < 0:
            raise ValueError("Padding cannot be negative")

    @staticmethod
    def validate_font_size(font_size: int) -> int:
        """
        Validate a font size in logical pixels.

        Args:
            font_size: Requested font size

        Returns:
            The font size

        Raises:
            ValueError: If the size is outside the supported range
        """
        if not FONT_SIZE_MIN <= font_size <= FONT_SIZE_MAX:
            raise ValueError(
                f"Font size must be between {FONT_SIZE_MIN} and {FONT_SIZE_MAX} pixels"
            )
        return font_size

    @classmethod
    def from_env(cls) -> "CardConfig":
        """Create configuration from environment variables."""
        return cls(
            font_size=int(os.getenv("SNAPGRAM_FONT_SIZE", "14")),
            theme=os.getenv("SNAPGRAM_THEME", "midnight"),
            scale=int(os.getenv("SNAPGRAM_SCALE", "2")),
            padding=int(os.getenv("SNAPGRAM_PADDING", "32")),
            font_name=os.getenv("SNAPGRAM_FONT_NAME") or None,
            line_numbers=_env_flag("SNAPGRAM_LINE_NUMBERS", False),
        )


@dataclass
class ExportConfig:
    """Configuration for saving and sharing cards."""

    output_dir: Path = field(default_factory=Path.cwd)
    filename_prefix: str = "snapgram"

    def __post_init__(self):
        self.output_dir = Path(self.output_dir).expanduser()
        self.filename_prefix = self.filename_prefix.strip()
        if not self.filename_prefix:
            raise ValueError("Filename prefix cannot be empty")
        if any(sep in self.filename_prefix for sep in ("/", "\\")):
            raise ValueError("Filename prefix cannot contain path separators")

    @classmethod
    def from_env(cls) -> "ExportConfig":
        """Create configuration from environment variables."""
        output_dir = os.getenv("SNAPGRAM_OUTPUT_DIR")
        return cls(
            output_dir=Path(output_dir) if output_dir else Path.cwd(),
            filename_prefix=os.getenv("SNAPGRAM_FILENAME_PREFIX", "snapgram"),
        )


@dataclass
class FormatConfig:
    """Configuration for pretty-printing."""

    enabled: bool = True
    indent_width: int = 2

    def __post_init__(self):
        if not 1 <= self.indent_width <= 8:
            raise ValueError("Indent width must be between 1 and 8")

    @classmethod
    def from_env(cls) -> "FormatConfig":
        """Create configuration from environment variables."""
        return cls(
            enabled=_env_flag("SNAPGRAM_FORMAT", True),
            indent_width=int(os.getenv("SNAPGRAM_INDENT_WIDTH", "2")),
        )


@dataclass
class SnapgramConfig:
    """Main configuration for snapgram."""

    card: CardConfig
    export: ExportConfig
    format: FormatConfig

    @classmethod
    def from_env(cls) -> "SnapgramConfig":
        """Create configuration from environment variables."""
        return cls(
            card=CardConfig.from_env(),
            export=ExportConfig.from_env(),
            format=FormatConfig.from_env(),
        )
