"""
Editor Toolbars - Controllers Module

Option state transitions, conditional propagation, and the toolbar registry.
"""

from .activation_engine import ActivationEngine
from .conditional_propagator import propagate
from .editor_state import EditorState
from .icon_resolver import refresh_display, resolve_icon
from .toolbar_registry import ToolbarRegistry

__all__ = [
    "ActivationEngine",
    "EditorState",
    "ToolbarRegistry",
    "propagate",
    "refresh_display",
    "resolve_icon",
]
