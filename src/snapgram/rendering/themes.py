"""Card themes: a background gradient paired with a Pygments style."""

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class CardTheme:
    """Visual settings for a card."""

    name: str
    style: str
    background: Tuple[str, str]
    title_color: str = "#d0d0d0"


THEMES: Dict[str, CardTheme] = {
    theme.name: theme
    for theme in (
        CardTheme("midnight", "monokai", ("#0f2027", "#2c5364")),
        CardTheme("candy", "dracula", ("#ff758c", "#ff7eb3")),
        CardTheme("ocean", "nord", ("#2193b0", "#6dd5ed")),
        CardTheme("forest", "gruvbox-dark", ("#134e5e", "#71b280")),
        CardTheme("graphite", "github-dark", ("#232526", "#414345")),
        CardTheme("paper", "solarized-light", ("#e0eafc", "#cfdef3"), title_color="#586e75"),
    )
}


def get_theme(name: str) -> CardTheme:
    """
    Look up a theme by name.

    Raises:
        ValueError: If no theme has that name
    """
    try:
        return THEMES[name.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unknown theme '{name}'. Available themes: {', '.join(sorted(THEMES))}"
        ) from None
