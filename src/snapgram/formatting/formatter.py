"""Pretty-printing front end that never lets a formatter error escape."""

import logging
from typing import Callable, Dict, Union

from ..language_detection import LanguageTag
from .languages import (
    format_css,
    format_html,
    format_plaintext,
    format_python,
    reindent_brackets,
)

logger = logging.getLogger(__name__)

Printer = Callable[[str, str], str]


def _format_cpp(code: str, indent: str) -> str:
    return reindent_brackets(code, indent, preprocessor=True)


class CodeFormatter:
    """Select a printer for a language tag and apply it safely."""

    PRINTERS: Dict[LanguageTag, Printer] = {
        LanguageTag.CPP: _format_cpp,
        LanguageTag.HTML: format_html,
        LanguageTag.CSS: format_css,
        LanguageTag.TYPESCRIPT: reindent_brackets,
        LanguageTag.JAVASCRIPT: reindent_brackets,
        LanguageTag.JAVA: reindent_brackets,
        LanguageTag.CSHARP: reindent_brackets,
        LanguageTag.PYTHON: format_python,
        LanguageTag.PLAINTEXT: format_plaintext,
    }

    def __init__(self, indent_width: int = 2):
        if indent_width < 1:
            raise ValueError("Indent width must be positive")
        self.indent = " " * indent_width

    def format(self, code: str, language: Union[LanguageTag, str]) -> str:
        """
        Pretty-print ``code`` as ``language``.

        Args:
            code: Raw snippet text
            language: Tag (or tag name) selecting the printer

        Returns:
            The formatted text, or ``code`` unchanged if formatting failed
        """
        if not code or not code.strip():
            return code

        try:
            tag = LanguageTag.from_name(language) if isinstance(language, str) else language
            printer = self.PRINTERS[tag]
            text = code.replace("\r\n", "\n").replace("\r", "\n").expandtabs(len(self.indent))
            formatted = printer(text, self.indent)
        except Exception as e:
            logger.warning(f"Formatting as {language} failed, keeping original text: {e}")
            return code

        logger.debug(f"Formatted {len(code)} chars as {tag.value}")
        return formatted


def format_code(code: str, language: Union[LanguageTag, str], indent_width: int = 2) -> str:
    """Format ``code`` with a throwaway CodeFormatter."""
    return CodeFormatter(indent_width).format(code, language)
