"""Exception hierarchy for snapgram."""


class SnapgramError(Exception):
    """Base class for all snapgram errors."""


class FormattingError(SnapgramError):
    """Raised by a language formatter that cannot make sense of its input."""


class RenderError(SnapgramError):
    """Raised when a card cannot be rasterized."""


class ExportError(SnapgramError):
    """Raised when a rendered card cannot be saved or shared."""


class ClipboardError(SnapgramError):
    """Raised when no clipboard command accepted the text."""
