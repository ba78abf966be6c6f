"""Code formatting for snapgram."""

from .formatter import CodeFormatter, format_code

__all__ = ["CodeFormatter", "format_code"]
