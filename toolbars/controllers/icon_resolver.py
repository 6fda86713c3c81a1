"""
Editor Toolbars - Icon Resolver

Computes the icon an option should currently display.
"""

from toolbars.data.option_record import OptionRecord


def resolve_icon(record: OptionRecord) -> str | None:
    """
    Resolve the icon for a record.

    Precedence: external override, then the icon cycle position, then the
    toggled icon while active (falling back to the base icon).
    """
    if record.override_icon:
        return record.override_icon

    if record.icon_cycle:
        return record.icon_cycle[record.current_icon_index]

    if record.active:
        return record.toggled_icon or record.icon
    return record.icon


def refresh_display(record: OptionRecord):
    """Re-derive the displayed icon and checked flag from logical state."""
    record.display_icon = resolve_icon(record)
    record.checked = record.checkable and record.active
