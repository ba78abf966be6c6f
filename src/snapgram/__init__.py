"""Code Snapgram - turn code snippets into shareable PNG cards."""

__version__ = "0.1.0"

from .language_detection import LanguageDetector, LanguageTag, detect_language
from .formatting import CodeFormatter, format_code
from .pipeline import PreparedSnippet, SnippetPipeline

__all__ = [
    "detect_language",
    "LanguageDetector",
    "LanguageTag",
    "CodeFormatter",
    "format_code",
    "SnippetPipeline",
    "PreparedSnippet",
    "__version__",
]
