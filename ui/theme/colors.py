"""
Color palette for the Loading Spinner GUI

PURPOSE: Centralized color definitions for the spinner window.
CONTEXT: Dark background with the purple-blue accent as the spinner's primary color.
"""

from __future__ import annotations

from config import DEFAULT_SPINNER_COLOR


class ColorPalette:
    """Color palette for the Loading Spinner"""

    # Base colors (Dark theme)
    BACKGROUND_PRIMARY = "#1e1e1e"  # Window background

    # Accent colors
    ACCENT_PRIMARY = DEFAULT_SPINNER_COLOR  # Spinner arc (purple-blue)
