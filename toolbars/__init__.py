"""
Editor Toolbars - Package

Toolbar option state coordination for the editor front-end: option records,
activation rules, conditional enablement, and shortcut action dispatch.
"""

from .actions import ActionDispatcher, ActionRegistry
from .controllers import ActivationEngine, ToolbarRegistry
from .data import GroupType, OptionBatch, OptionRecord, Toolbar
from .session import ToolbarSession

__all__ = [
    "ActionDispatcher",
    "ActionRegistry",
    "ActivationEngine",
    "GroupType",
    "OptionBatch",
    "OptionRecord",
    "Toolbar",
    "ToolbarRegistry",
    "ToolbarSession",
]
