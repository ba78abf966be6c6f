"""Language detection module for snapgram."""

from .models import (
    DETECTABLE_LANGUAGES,
    DetectionResult,
    DetectionRule,
    LanguageTag,
)
from .rules import DEFAULT_RULES
from .detector import LanguageDetector, detect_language

__all__ = [
    "LanguageDetector",
    "detect_language",
    "LanguageTag",
    "DetectionRule",
    "DetectionResult",
    "DEFAULT_RULES",
    "DETECTABLE_LANGUAGES",
]
