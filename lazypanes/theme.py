"""
Theme lookup: semantic color name -> concrete color value.

Colors are Rich/Textual color strings ("green", "#F85149", "default").
"""

from typing import Dict, Mapping, Optional

# Semantic color names to standard Rich colors
DEFAULT_COLORS: Dict[str, str] = {
    "default_text": "default",
    "default_background": "default",
    "options": "blue",
    "selected_line_bg": "blue",
    "active_border": "green",
    "inactive_border": "white",
    "information": "green",
    "app_status": "cyan",
    "search": "green",
}


class Theme:
    """Resolves semantic color names, unknown names pass through unchanged."""

    def __init__(self, overrides: Optional[Mapping[str, str]] = None) -> None:
        self._colors = {**DEFAULT_COLORS, **(overrides or {})}

    def color(self, semantic: str) -> str:
        """
        Get a color string for a semantic color name.

        Args:
            semantic: Semantic color name such as 'options' or 'selected_line_bg'

        Returns:
            Color string usable by Rich and Textual
        """
        return self._colors.get(semantic, semantic)
