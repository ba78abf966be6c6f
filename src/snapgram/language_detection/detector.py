"""Rule based source language detection for code snippets."""

import logging
from typing import Iterable, List, Optional, Sequence

from .models import DetectionResult, DetectionRule, LanguageTag
from .rules import DEFAULT_RULES

logger = logging.getLogger(__name__)


class LanguageDetector:
    """
    Guess the language of a snippet from an ordered table of rules.

    Rules are evaluated top to bottom against the trimmed sample and the
    first one that matches decides the language. When nothing matches the
    sample is ``plaintext``. The detector keeps no state between calls, so a
    single instance can be shared freely.
    """

    def __init__(self, rules: Optional[Sequence[DetectionRule]] = None):
        """
        Initialize the detector.

        Args:
            rules: Ordered rule table, defaults to ``DEFAULT_RULES``
        """
        self._rules = tuple(DEFAULT_RULES if rules is None else rules)

    @property
    def rules(self) -> tuple:
        return self._rules

    @staticmethod
    def normalize(sample: Optional[str]) -> str:
        """Trim the sample; ``None`` and non-strings are coerced first."""
        if sample is None:
            return ""
        if not isinstance(sample, str):
            sample = str(sample)
        return sample.strip()

    def explain(self, sample: Optional[str]) -> DetectionResult:
        """
        Detect the language and report which rule decided it.

        Args:
            sample: The snippet to classify

        Returns:
            DetectionResult whose ``rule`` is None for the plaintext fallback
        """
        text = self.normalize(sample)
        if not text:
            return DetectionResult(LanguageTag.PLAINTEXT)

        for rule in self._rules:
            try:
                matched = rule.matches(text)
            except Exception as e:
                logger.warning(f"Detection rule {rule.name} failed, skipping it: {e}")
                continue
            if matched:
                logger.debug(f"Rule {rule.name} matched, language={rule.language.value}")
                return DetectionResult(rule.language, rule.name)

        return DetectionResult(LanguageTag.PLAINTEXT)

    def detect(self, sample: Optional[str]) -> LanguageTag:
        """Return the language tag for ``sample``. Never raises."""
        return self.explain(sample).language

    def detect_batch(self, samples: Iterable[str]) -> List[LanguageTag]:
        """Detect languages for several samples, preserving order."""
        return [self.detect(sample) for sample in samples]


_default_detector = LanguageDetector()


def detect_language(sample: Optional[str]) -> LanguageTag:
    """Detect the language of ``sample`` with the default rule table."""
    return _default_detector.detect(sample)
