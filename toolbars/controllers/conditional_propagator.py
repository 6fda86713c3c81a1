"""
Editor Toolbars - Conditional Propagator

Second pass run after every activation: re-derives enabled/active state for
conditional and externally-controlled options and re-syncs the display of
exclusive groups.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from toolbars.data.option_record import GroupType, OptionRecord

from .icon_resolver import refresh_display

if TYPE_CHECKING:
    from toolbars.data.toolbar_data import OptionBatch

logger = logging.getLogger(__name__)


def propagate(batch: OptionBatch):
    """
    Sweep the whole batch until conditional state is settled.

    Chained conditionals (a child whose parent is itself conditional and
    sits later in the batch) can need more than one sweep, so sweeps repeat
    until one makes no change. A sweep only ever clears ``active``, never
    sets it, so the loop is bounded by the batch size.
    """
    for _ in range(len(batch) + 2):
        if not _sweep(batch):
            return
    logger.warning("Conditional state did not settle for batch of %d options", len(batch))


def _sweep(batch: OptionBatch) -> bool:
    """Run one pass over the batch. Returns True if anything changed."""
    changed = False

    for record in batch.options():
        before = _snapshot(record)

        if record.group_type.is_conditional and record.conditional_on:
            _apply_conditional(batch, record)

        if record.group_type == GroupType.EXTERNALLY_CONTROLLED:
            _apply_external(record)

        if record.group_type == GroupType.SINGLE_EXCLUSIVE and record.group:
            for sibling in batch.options():
                if sibling is not record and sibling.group == record.group:
                    sibling_before = _snapshot(sibling)
                    refresh_display(sibling)
                    changed = changed or _snapshot(sibling) != sibling_before

        changed = changed or _snapshot(record) != before

    return changed


def _apply_conditional(batch: OptionBatch, record: OptionRecord):
    parent = batch.find(record.conditional_on)
    if parent is None:
        logger.debug(
            "Option %r depends on unknown option %r; treating it as inactive",
            record.name,
            record.conditional_on,
        )
    parent_active = parent.active if parent is not None else False

    record.enabled = parent_active

    if not parent_active and record.group_type == GroupType.CONDITIONAL_CLEAR_STATE:
        record.active = False
        refresh_display(record)


def _apply_external(record: OptionRecord):
    record.enabled = record.external_enabled

    if not record.external_enabled:
        record.active = False
        refresh_display(record)


def _snapshot(record: OptionRecord) -> tuple:
    return (record.active, record.enabled, record.checked, record.display_icon)
