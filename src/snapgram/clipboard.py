"""Copy text to the system clipboard through platform command line tools."""

import logging
import shutil
import subprocess

from .exceptions import ClipboardError

logger = logging.getLogger(__name__)

CLIPBOARD_COMMANDS = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)


def copy_to_clipboard(text: str) -> str:
    """
    Copy ``text`` using the first clipboard command that works.

    Returns:
        Name of the command that accepted the text

    Raises:
        ClipboardError: If no command is installed or all of them fail
    """
    for command in CLIPBOARD_COMMANDS:
        executable = shutil.which(command[0])
        if executable is None:
            continue
        # Windows' clip.exe reads UTF-16 with a BOM
        payload = text.encode("utf-16" if command[0] == "clip" else "utf-8")
        try:
            subprocess.run(
                [executable, *command[1:]],
                input=payload,
                check=True,
                capture_output=True,
                timeout=5,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug(f"Clipboard command {command[0]} failed: {e}")
            continue
        logger.info(f"Copied {len(text)} characters with {command[0]}")
        return command[0]

    tried = ", ".join(command[0] for command in CLIPBOARD_COMMANDS)
    raise ClipboardError(f"No working clipboard command found (tried {tried})")
