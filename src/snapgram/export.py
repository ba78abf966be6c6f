"""Saving ("download") and sharing rendered cards."""

import logging
import os
import shutil
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Optional

import xxhash

from .config import ExportConfig
from .exceptions import ExportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShareResult:
    """Where the card ended up and whether the native share path was used."""

    path: Path
    method: Literal["share", "download"]


def open_with_system_viewer(path: Path) -> None:
    """
    Hand a file to the platform's default application.

    Raises:
        ExportError: If there is no opener or it fails
    """
    if sys.platform.startswith("win"):
        try:
            os.startfile(str(path))  # type: ignore[attr-defined]
        except OSError as e:
            raise ExportError(f"Could not open {path}: {e}") from e
        return

    if sys.platform == "darwin":
        command = ["open", str(path)]
    else:
        opener = shutil.which("xdg-open")
        if opener is None:
            raise ExportError("No system opener found (xdg-open is not installed)")
        command = [opener, str(path)]

    try:
        subprocess.run(command, check=True, capture_output=True, timeout=10)
    except (OSError, subprocess.SubprocessError) as e:
        raise ExportError(f"Could not open {path}: {e}") from e


class CardExporter:
    """Write card PNGs to disk and optionally present them."""

    def __init__(self, config: Optional[ExportConfig] = None):
        self.config = config or ExportConfig()

    def build_filename(self, png: bytes) -> str:
        """Content addressed name so re-exporting the same card is idempotent."""
        digest = xxhash.xxh64(png).hexdigest()[:12]
        return f"{self.config.filename_prefix}-{digest}.png"

    def download(self, png: bytes, filename: Optional[str] = None) -> Path:
        """
        Save the card into the output directory.

        Args:
            png: Encoded PNG data
            filename: Optional file name; ``.png`` is appended when missing

        Returns:
            Path of the written file

        Raises:
            ExportError: If there is nothing to write or the write fails
        """
        if not png:
            raise ExportError("Nothing to export: image data is empty")

        name = filename or self.build_filename(png)
        if not name.lower().endswith(".png"):
            name = f"{name}.png"
        path = self.config.output_dir / name

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(png)
        except OSError as e:
            raise ExportError(f"Could not write {path}: {e}") from e

        logger.info(f"Saved card to {path} ({len(png)} bytes)")
        return path

    def share(self, png: bytes, filename: Optional[str] = None) -> ShareResult:
        """Save the card and open it natively, settling for the saved file if that fails."""
        path = self.download(png, filename)
        try:
            open_with_system_viewer(path)
        except ExportError as e:
            logger.warning(f"Native share unavailable, card saved to {path}: {e}")
            return ShareResult(path=path, method="download")
        return ShareResult(path=path, method="share")
