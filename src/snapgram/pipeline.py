"""Detect, format and render a snippet in one place."""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .config import CardConfig, ExportConfig, FormatConfig, SnapgramConfig
from .formatting import CodeFormatter
from .language_detection import LanguageDetector, LanguageTag
from .rendering import CardOptions, CardRenderer, RenderedCard

logger = logging.getLogger(__name__)

AUTO = "auto"


@dataclass(frozen=True)
class PreparedSnippet:
    """A snippet ready to render."""

    source: str
    code: str
    language: LanguageTag
    detected: bool

    @property
    def changed(self) -> bool:
        return self.code != self.source


class SnippetPipeline:
    """Wire the detector, formatter and renderer together."""

    def __init__(
        self,
        config: Optional[SnapgramConfig] = None,
        detector: Optional[LanguageDetector] = None,
        formatter: Optional[CodeFormatter] = None,
        renderer: Optional[CardRenderer] = None,
    ):
        self.config = config or SnapgramConfig(
            card=CardConfig(), export=ExportConfig(), format=FormatConfig()
        )
        self.detector = detector or LanguageDetector()
        self.formatter = formatter or CodeFormatter(self.config.format.indent_width)
        self.renderer = renderer or CardRenderer()

    def resolve_language(
        self, code: str, language: Union[LanguageTag, str, None] = None
    ) -> Tuple[LanguageTag, bool]:
        """
        Pick the language for ``code``.

        Returns:
            (tag, detected) where ``detected`` is True when the tag was guessed

        Raises:
            ValueError: If an explicit language name is not recognised
        """
        if language is None or (isinstance(language, str) and language.strip().lower() == AUTO):
            return self.detector.detect(code), True
        if isinstance(language, LanguageTag):
            return language, False
        return LanguageTag.from_name(language), False

    def prepare(
        self,
        code: str,
        language: Union[LanguageTag, str, None] = None,
        format_code: Optional[bool] = None,
    ) -> PreparedSnippet:
        """Resolve the language and, unless disabled, pretty-print the code."""
        tag, detected = self.resolve_language(code, language)
        should_format = self.config.format.enabled if format_code is None else format_code
        formatted = self.formatter.format(code, tag) if should_format else code
        logger.info(
            f"Prepared snippet: language={tag.value} "
            f"({'detected' if detected else 'selected'}), formatted={should_format}"
        )
        return PreparedSnippet(source=code, code=formatted, language=tag, detected=detected)

    def card_options(self, **overrides) -> CardOptions:
        return CardOptions.from_config(self.config.card, **overrides)

    def render(self, snippet: PreparedSnippet, options: Optional[CardOptions] = None) -> RenderedCard:
        return self.renderer.render(snippet.code, snippet.language, options or self.card_options())
