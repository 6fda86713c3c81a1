"""
Editor Toolbars - Actions

Shortcut action registration and dispatch.
"""

from .action_registry import ActionRegistry
from .dispatcher import ActionDispatcher

__all__ = ["ActionRegistry", "ActionDispatcher"]
