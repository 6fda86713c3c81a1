"""
Editor Toolbars - Action Dispatcher

Invokes the shortcut action attached to an activated option. Runs after the
toolbar state is committed; nothing a handler does (including raising) can
roll that state back or reach the caller of the click.
"""

import asyncio
import inspect
import logging

from toolbars.data.option_record import OptionRecord

from .action_registry import ActionRegistry

logger = logging.getLogger(__name__)


class ActionDispatcher:
    """Resolves shortcut action identifiers to handlers and invokes them."""

    def __init__(self, registry: ActionRegistry):
        self.registry = registry
        self.pending: set[asyncio.Future] = set()

    def dispatch(self, record: OptionRecord) -> bool:
        """
        Run the record's shortcut action, if it has one.

        Args:
            record: The option that was just activated

        Returns:
            True if a handler ran without raising
        """
        identifier = record.shortcut_action
        if not identifier or not identifier.strip():
            return False

        handlers = self.registry.handlers_for(identifier)
        if not handlers:
            logger.warning("[Toolbar] No shortcut action found: %s", identifier)
            return False

        if len(handlers) > 1:
            logger.debug(
                "[Toolbar] %d handlers for %s, using the first", len(handlers), identifier
            )

        try:
            result = handlers[0]()
        except Exception:
            logger.warning(
                "[Toolbar] Shortcut action error '%s'", identifier, exc_info=True
            )
            return False

        if inspect.isawaitable(result):
            self._schedule(identifier, result)

        return True

    def _schedule(self, identifier: str, awaitable):
        """Fire-and-forget an async handler on the running loop."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.warning(
                "[Toolbar] Shortcut action '%s' is async but no event loop is running",
                identifier,
            )
            if inspect.iscoroutine(awaitable):
                awaitable.close()
            return

        task = asyncio.ensure_future(awaitable, loop=loop)
        self.pending.add(task)
        task.add_done_callback(lambda done: self._report_task(identifier, done))

    def _report_task(self, identifier: str, task: asyncio.Future):
        self.pending.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.warning(
                "[Toolbar] Shortcut action error '%s'",
                identifier,
                exc_info=(type(error), error, error.__traceback__),
            )
