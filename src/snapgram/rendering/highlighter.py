"""Pygments lexer selection keyed by snapgram language tags."""

import logging
from typing import Union

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexer import Lexer
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.util import ClassNotFound

from ..language_detection import LanguageTag

logger = logging.getLogger(__name__)

LEXER_ALIASES = {
    LanguageTag.CPP: "cpp",
    LanguageTag.HTML: "html",
    LanguageTag.CSS: "css",
    LanguageTag.TYPESCRIPT: "typescript",
    LanguageTag.JAVASCRIPT: "javascript",
    LanguageTag.PLAINTEXT: "text",
    LanguageTag.PYTHON: "python",
    LanguageTag.JAVA: "java",
    LanguageTag.CSHARP: "csharp",
}


def get_lexer(language: Union[LanguageTag, str], **options) -> Lexer:
    """
    Return a Pygments lexer for a language tag.

    Unknown tags and lexers missing from the installed Pygments fall back to
    plain text rather than failing.
    """
    try:
        tag = LanguageTag.from_name(language) if isinstance(language, str) else language
        alias = LEXER_ALIASES[tag]
        return get_lexer_by_name(alias, **options)
    except (ValueError, KeyError, ClassNotFound) as e:
        logger.debug(f"No lexer for {language}, using plain text: {e}")
        return TextLexer(**options)


def highlight_terminal(code: str, language: Union[LanguageTag, str], style: str = "monokai") -> str:
    """Highlight ``code`` with 256-colour ANSI escapes for terminal previews."""
    return highlight(code, get_lexer(language), Terminal256Formatter(style=style))
