"""
Editor Toolbars - Session

Owns the toolbar and action registries for one editor session.
"""

from .actions.action_registry import ActionRegistry
from .actions.dispatcher import ActionDispatcher
from .controllers.activation_engine import ActivationEngine
from .controllers.editor_state import EditorState
from .controllers.toolbar_registry import ToolbarRegistry
from .core.constants import VIEW_SETTINGS
from .native import build_native, register_native_actions, sync_settings


class ToolbarSession:
    """Registries for one editor session.

    Created when the editor starts and closed when it ends; closing drops
    every registered toolbar and action handler.
    """

    def __init__(self):
        self.state = EditorState()
        self.actions = ActionRegistry()
        self.dispatcher = ActionDispatcher(self.actions)
        self.engine = ActivationEngine(self.dispatcher)
        self.registry = ToolbarRegistry(self.engine)

        build_native(self.registry)
        register_native_actions(self.actions, self.registry, self.state)
        sync_settings(self.registry, self.state)

    def toggle_selection(self):
        """Select or deselect something; drives the Bounds option."""
        self.state.toggle_selection()
        self.registry.set_option_enabled(VIEW_SETTINGS, "Bounds", self.state.has_selection)
        sync_settings(self.registry, self.state)

    def close(self):
        self.registry.clear()
        self.actions.clear()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
