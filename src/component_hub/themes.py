"""Theme system: color palettes, category colors, and Textual theme builders."""

from __future__ import annotations

from textual.theme import Theme as TextualTheme

# Fallback for categories loaded from a file that the palette doesn't know
DEFAULT_CATEGORY_COLOR = "#888888"

MONOKAI_THEME: dict[str, str] = {
    "background": "#272822",
    "panel": "#1e1e1e",
    "panel_alt": "#3e3d32",
    "text": "#f8f8f2",
    "muted": "#75715e",
    "accent": "#66d9ef",
    "accent_alt": "#e6db74",
    "green": "#a6e22e",
    "yellow": "#e6db74",
    "orange": "#fd971f",
    "pink": "#f92672",
    "purple": "#ae81ff",
    "highlight": "#49483e",
    "highlight_focus": "#5a5950",
    "selection": "#3d4a32",
    "scrollbar_background": "#3e3d32",
    "scrollbar": "#75715e",
    "scrollbar_active": "#66d9ef",
}

CATPPUCCIN_MOCHA_THEME: dict[str, str] = {
    "background": "#1e1e2e",
    "panel": "#181825",
    "panel_alt": "#313244",
    "text": "#cdd6f4",
    "muted": "#6c7086",
    "accent": "#89b4fa",
    "accent_alt": "#f9e2af",
    "green": "#a6e3a1",
    "yellow": "#f9e2af",
    "orange": "#fab387",
    "pink": "#f38ba8",
    "purple": "#cba6f7",
    "highlight": "#313244",
    "highlight_focus": "#45475a",
    "selection": "#313244",
    "scrollbar_background": "#313244",
    "scrollbar": "#6c7086",
    "scrollbar_active": "#89b4fa",
}

SOLARIZED_DARK_THEME: dict[str, str] = {
    "background": "#002b36",
    "panel": "#073642",
    "panel_alt": "#586e75",
    "text": "#839496",
    "muted": "#586e75",
    "accent": "#268bd2",
    "accent_alt": "#b58900",
    "green": "#859900",
    "yellow": "#b58900",
    "orange": "#cb4b16",
    "pink": "#d33682",
    "purple": "#6c71c4",
    "highlight": "#073642",
    "highlight_focus": "#586e75",
    "selection": "#073642",
    "scrollbar_background": "#073642",
    "scrollbar": "#657b83",
    "scrollbar_active": "#268bd2",
}

THEMES: dict[str, dict[str, str]] = {
    "monokai": MONOKAI_THEME,
    "catppuccin-mocha": CATPPUCCIN_MOCHA_THEME,
    "solarized-dark": SOLARIZED_DARK_THEME,
}
THEME_NAMES: list[str] = list(THEMES.keys())
DEFAULT_THEME_NAME = "monokai"

# Category colors per theme, keyed by palette slot so every theme stays readable
_CATEGORY_SLOTS: dict[str, str] = {
    "UI": "accent",
    "Hooks": "yellow",
    "Providers": "purple",
    "Pages": "green",
}


def category_colors_for(theme_name: str) -> dict[str, str]:
    """Return the category → hex color map for a theme."""
    palette = THEMES.get(theme_name, MONOKAI_THEME)
    return {category: palette[slot] for category, slot in _CATEGORY_SLOTS.items()}


def _build_textual_theme(name: str, colors: dict[str, str]) -> TextualTheme:
    """Convert an app color dict to a Textual Theme with $th-* CSS variables."""
    variables = {
        "th-background": colors["background"],
        "th-panel": colors["panel"],
        "th-panel-alt": colors["panel_alt"],
        "th-highlight": colors["highlight"],
        "th-highlight-focus": colors["highlight_focus"],
        "th-selection": colors["selection"],
        "th-accent": colors["accent"],
        "th-accent-alt": colors["accent_alt"],
        "th-muted": colors["muted"],
        "th-text": colors["text"],
        "th-green": colors["green"],
        "th-scrollbar-bg": colors["scrollbar_background"],
        "th-scrollbar-thumb": colors["scrollbar"],
        "th-scrollbar-active": colors["scrollbar_active"],
    }
    return TextualTheme(
        name=name,
        primary=colors["accent"],
        secondary=colors["accent_alt"],
        accent=colors["green"],
        foreground=colors["text"],
        background=colors["background"],
        surface=colors["panel"],
        panel=colors["panel_alt"],
        warning=colors["orange"],
        error=colors["pink"],
        success=colors["green"],
        dark=True,
        variables=variables,
    )


TEXTUAL_THEMES: dict[str, TextualTheme] = {
    name: _build_textual_theme(name, colors) for name, colors in THEMES.items()
}

# Active palette; markup builders read these at render time
THEME_COLORS: dict[str, str] = MONOKAI_THEME.copy()
CATEGORY_COLORS: dict[str, str] = category_colors_for(DEFAULT_THEME_NAME)


def apply_theme(theme_name: str) -> str:
    """Point THEME_COLORS and CATEGORY_COLORS at a theme, in place.

    Unknown names fall back to the default theme. Returns the name applied.
    """
    if theme_name not in THEMES:
        theme_name = DEFAULT_THEME_NAME
    THEME_COLORS.clear()
    THEME_COLORS.update(THEMES[theme_name])
    CATEGORY_COLORS.clear()
    CATEGORY_COLORS.update(category_colors_for(theme_name))
    return theme_name


def next_theme_name(current: str) -> str:
    """Return the theme after current, wrapping; unknown names restart the cycle."""
    try:
        idx = THEME_NAMES.index(current)
    except ValueError:
        idx = -1
    return THEME_NAMES[(idx + 1) % len(THEME_NAMES)]


def get_category_color(category: str) -> str:
    return CATEGORY_COLORS.get(category, DEFAULT_CATEGORY_COLOR)


__all__ = [
    "CATEGORY_COLORS",
    "CATPPUCCIN_MOCHA_THEME",
    "DEFAULT_CATEGORY_COLOR",
    "DEFAULT_THEME_NAME",
    "MONOKAI_THEME",
    "SOLARIZED_DARK_THEME",
    "TEXTUAL_THEMES",
    "THEMES",
    "THEME_COLORS",
    "THEME_NAMES",
    "apply_theme",
    "category_colors_for",
    "get_category_color",
    "next_theme_name",
]
