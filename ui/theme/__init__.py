"""
Theme for the Loading Spinner GUI

Provides the color palette shared by the window and the spinner widget.
"""

from .colors import ColorPalette

__all__ = ["ColorPalette"]
