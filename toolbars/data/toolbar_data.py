"""
Editor Toolbars - Batches and Toolbars

An OptionBatch is the set of records created by one build call. Groups and
conditional references resolve only within their own batch, even when
several batches are shown in the same toolbar.
"""

import logging
from collections.abc import Iterator

from .option_record import GroupType, OptionRecord

logger = logging.getLogger(__name__)


class OptionBatch:
    """Ordered option records created together."""

    def __init__(self, records: list[OptionRecord], single_select: bool = False):
        """
        Validate records and settle their initial display state.

        Args:
            records: Records in display order (separators included)
            single_select: Activating any option deactivates all the others

        Raises:
            ValueError: If records is None, a name is empty or duplicated,
                an icon index is out of range, or an exclusive group starts
                with more than one active option
        """
        if records is None:
            raise ValueError("Option batch requires a list of records")

        seen: set[str] = set()
        active_groups: dict[str, str] = {}
        for record in records:
            record.validate()
            if record.is_separator:
                continue
            if record.name in seen:
                raise ValueError(f"Duplicate option name in batch: {record.name!r}")
            seen.add(record.name)

            if record.group_type == GroupType.SINGLE_EXCLUSIVE and record.group and record.active:
                if record.group in active_groups:
                    raise ValueError(
                        f"Exclusive group {record.group!r} has more than one active option: "
                        f"{active_groups[record.group]!r} and {record.name!r}"
                    )
                active_groups[record.group] = record.name

        for record in records:
            if record.is_separator or not record.group_type.is_conditional:
                continue
            if record.conditional_on and record.conditional_on not in seen:
                logger.warning(
                    "Option %r depends on unknown option %r; it stays disabled",
                    record.name,
                    record.conditional_on,
                )

        self.records: list[OptionRecord] = list(records)
        self.single_select = single_select

        self._settle()

    def _settle(self):
        """Bring display state and conditional invariants in line at creation."""
        from toolbars.controllers.conditional_propagator import propagate
        from toolbars.controllers.icon_resolver import refresh_display

        for record in self.options():
            refresh_display(record)
        propagate(self)

    def __iter__(self) -> Iterator[OptionRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def options(self) -> Iterator[OptionRecord]:
        """Iterate interactive records, skipping separators."""
        return (record for record in self.records if not record.is_separator)

    def find(self, name: str) -> OptionRecord | None:
        """Find an option by name within this batch."""
        for record in self.options():
            if record.name == name:
                return record
        return None

    def owns(self, record: OptionRecord) -> bool:
        """Check whether this exact record object belongs to the batch."""
        return any(candidate is record for candidate in self.records)


class Toolbar:
    """Named collection of batches displayed together."""

    def __init__(self, name: str, batches: list[OptionBatch] | None = None):
        if not name or not name.strip():
            raise ValueError("Toolbar name cannot be empty")

        self.name = name
        self.batches: list[OptionBatch] = list(batches) if batches else []

    def add_batch(self, batch: OptionBatch) -> OptionBatch:
        """Append a batch to the end of the toolbar."""
        if batch is None:
            raise ValueError("Cannot add an empty batch to a toolbar")
        self.batches.append(batch)
        return batch

    def options(self) -> Iterator[OptionRecord]:
        """Iterate every interactive record across all batches."""
        for batch in self.batches:
            yield from batch.options()

    def find_option(self, name: str) -> tuple[OptionBatch, OptionRecord] | None:
        """
        Find an option by name.

        Returns:
            (batch, record) for the first match in batch order, or None
        """
        for batch in self.batches:
            record = batch.find(name)
            if record is not None:
                return batch, record
        return None
