"""
Editor Toolbars - UI Module

Pygame widgets that render option records.
"""

from .toolbar import ToolbarView
from .widgets import OptionButton

__all__ = ["OptionButton", "ToolbarView"]
