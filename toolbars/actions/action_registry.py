"""
Editor Toolbars - Action Registry

Maps shortcut action identifiers to handler callables. Any module can
contribute handlers at startup, either directly or with the ``shortcut``
decorator:

    actions = ActionRegistry()

    @actions.shortcut("mesh.vertex")
    def select_vertices():
        ...
"""

from collections.abc import Callable


class ActionRegistry:
    """Registry of shortcut action handlers keyed by identifier."""

    def __init__(self):
        self.handlers: dict[str, list[Callable]] = {}

    def register(self, identifier: str, handler: Callable) -> Callable:
        """
        Register a handler for an identifier.

        Several handlers may share an identifier; they are kept in
        registration order and the dispatcher invokes the first.

        Raises:
            ValueError: If identifier is empty or handler is not callable
        """
        if not identifier or not identifier.strip():
            raise ValueError("Shortcut action identifier cannot be empty")
        if not callable(handler):
            raise ValueError(f"Handler for {identifier!r} is not callable")

        self.handlers.setdefault(identifier, []).append(handler)
        return handler

    def shortcut(self, identifier: str) -> Callable[[Callable], Callable]:
        """Decorator form of register()."""

        def decorator(handler: Callable) -> Callable:
            return self.register(identifier, handler)

        return decorator

    def handlers_for(self, identifier: str) -> list[Callable]:
        """Get handlers registered for an identifier, in registration order."""
        return list(self.handlers.get(identifier, []))

    def unregister(self, identifier: str):
        """Remove every handler for an identifier."""
        self.handlers.pop(identifier, None)

    def clear(self):
        """Remove all handlers."""
        self.handlers.clear()

    def __contains__(self, identifier: str) -> bool:
        return bool(self.handlers.get(identifier))
