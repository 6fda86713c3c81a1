"""
Editor Toolbars - Activation Engine

Applies a click (or a programmatic state change) to an option batch. Every
transition ends in the same commit step: the conditional propagator sweeps
the batch, and only then does a click dispatch the option's shortcut action.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from toolbars.data.option_record import GroupType, OptionRecord

from .conditional_propagator import propagate
from .icon_resolver import refresh_display

if TYPE_CHECKING:
    from toolbars.actions.dispatcher import ActionDispatcher
    from toolbars.data.toolbar_data import OptionBatch

logger = logging.getLogger(__name__)


class ActivationEngine:
    """Owns the state transitions for option batches."""

    def __init__(self, dispatcher: ActionDispatcher | None = None):
        self.dispatcher = dispatcher

    def activate(self, batch: OptionBatch, record: OptionRecord) -> bool:
        """
        Handle a click on an option.

        Rules, first match wins:
            1. Exclusive group: deactivate the other group members, activate this one
            2. Single-select batch: only this option stays active
            3. Icon cycle: advance to the next icon, active state untouched
            4. Otherwise: toggle active

        Args:
            batch: Batch the option was created in
            record: The clicked option

        Returns:
            True if the click was applied, False if it was ignored because the
            option is disabled, a separator, or not part of the batch
        """
        if not self._accepts(batch, record):
            return False

        if record.group_type == GroupType.SINGLE_EXCLUSIVE and record.group:
            self._select_in_group(batch, record)
        elif batch.single_select:
            self._select_only(batch, record)
        elif record.icon_cycle:
            record.current_icon_index = (record.current_icon_index + 1) % len(
                record.icon_cycle
            )
            refresh_display(record)
        else:
            record.active = not record.active
            refresh_display(record)

        logger.debug("Activated %r (active=%s)", record.name, record.active)
        self._commit(batch)

        if self.dispatcher is not None:
            self.dispatcher.dispatch(record)

        return True

    def set_active(self, batch: OptionBatch, record: OptionRecord, active: bool) -> bool:
        """
        Force an option on or off from code.

        Ignores the enabled flag and never dispatches actions. Exclusivity
        still applies when forcing on, and the propagator runs afterwards so
        conditional and external rules may immediately undo the change.

        Returns:
            True if applied, False for separators or records outside the batch
        """
        if record.is_separator or not batch.owns(record):
            logger.warning("Cannot set state of %r: not an option of this batch", record.name)
            return False

        if active and record.group_type == GroupType.SINGLE_EXCLUSIVE and record.group:
            self._select_in_group(batch, record)
        elif active and batch.single_select:
            self._select_only(batch, record)
        else:
            record.active = active
            refresh_display(record)

        self._commit(batch)
        return True

    def refresh(self, batch: OptionBatch):
        """Re-run the commit step after an external flag or icon change."""
        for record in batch.options():
            refresh_display(record)
        self._commit(batch)

    def _accepts(self, batch: OptionBatch, record: OptionRecord) -> bool:
        if record.is_separator:
            return False
        if not batch.owns(record):
            logger.warning("Ignoring activation of %r: not an option of this batch", record.name)
            return False
        if not record.enabled:
            logger.debug("Ignoring activation of disabled option %r", record.name)
            return False
        return True

    def _select_in_group(self, batch: OptionBatch, record: OptionRecord):
        for other in batch.options():
            if other is record or other.group != record.group:
                continue
            other.active = False
            refresh_display(other)

        record.active = True
        refresh_display(record)

    def _select_only(self, batch: OptionBatch, record: OptionRecord):
        for other in batch.options():
            other.active = other is record
            refresh_display(other)

    def _commit(self, batch: OptionBatch):
        propagate(batch)
