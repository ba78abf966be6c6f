"""Data models for language detection."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional


class LanguageTag(str, Enum):
    """Languages known to snapgram.

    The detector only ever produces members of ``DETECTABLE_LANGUAGES``; the
    remaining tags exist so a user can pick them explicitly.
    """

    CPP = "cpp"
    HTML = "html"
    CSS = "css"
    TYPESCRIPT = "typescript"
    JAVASCRIPT = "javascript"
    PLAINTEXT = "plaintext"
    PYTHON = "python"
    JAVA = "java"
    CSHARP = "csharp"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "LanguageTag":
        """
        Resolve a user supplied language name or alias.

        Args:
            name: Tag value or a common alias such as ``ts`` or ``c++``

        Returns:
            The matching LanguageTag

        Raises:
            ValueError: If the name is not a known language
        """
        key = name.strip().lower()
        key = LANGUAGE_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            choices = ", ".join(tag.value for tag in cls)
            raise ValueError(f"Unknown language '{name}'. Choose one of: {choices}") from None


LANGUAGE_ALIASES = {
    "c++": "cpp",
    "cxx": "cpp",
    "htm": "html",
    "ts": "typescript",
    "tsx": "typescript",
    "js": "javascript",
    "jsx": "javascript",
    "node": "javascript",
    "text": "plaintext",
    "txt": "plaintext",
    "py": "python",
    "python3": "python",
    "c#": "csharp",
    "cs": "csharp",
}

DETECTABLE_LANGUAGES = frozenset(
    {
        LanguageTag.CPP,
        LanguageTag.HTML,
        LanguageTag.CSS,
        LanguageTag.TYPESCRIPT,
        LanguageTag.JAVASCRIPT,
        LanguageTag.PLAINTEXT,
    }
)


@dataclass(frozen=True)
class DetectionRule:
    """A named predicate that claims a sample for one language."""

    language: LanguageTag
    name: str
    predicate: Callable[[str], bool]

    def matches(self, sample: str) -> bool:
        return self.predicate(sample)


@dataclass(frozen=True)
class DetectionResult:
    """Outcome of a detection along with the rule that decided it."""

    language: LanguageTag
    rule: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        return self.rule is None

    def __repr__(self) -> str:
        return f"DetectionResult(language='{self.language.value}', rule={self.rule!r})"
