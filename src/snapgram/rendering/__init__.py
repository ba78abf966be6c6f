"""Highlighting and card rasterization."""

from .card import CardOptions, CardRenderer, RenderedCard
from .highlighter import get_lexer, highlight_terminal
from .themes import THEMES, CardTheme, get_theme

__all__ = [
    "CardOptions",
    "CardRenderer",
    "RenderedCard",
    "CardTheme",
    "THEMES",
    "get_theme",
    "get_lexer",
    "highlight_terminal",
]
