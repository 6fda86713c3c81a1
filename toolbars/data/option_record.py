"""
Editor Toolbars - Option Record

Per-control data for toolbar options: state, grouping, and icon rules.
"""

from dataclasses import dataclass, field
from enum import Enum


class GroupType(Enum):
    """How an option relates to the other options in its batch."""

    NONE = "none"  # Independent toggle
    SINGLE_EXCLUSIVE = "single_exclusive"  # One active per group, cannot unselect
    SINGLE_TOGGLEABLE = "single_toggleable"  # No rule of its own, toggles like NONE
    CONDITIONAL_PRESERVE_STATE = "conditional_preserve_state"  # Disabled, state kept
    CONDITIONAL_CLEAR_STATE = "conditional_clear_state"  # Disabled and reset
    EXTERNALLY_CONTROLLED = "externally_controlled"  # Availability set by code

    @property
    def is_conditional(self) -> bool:
        return self in (
            GroupType.CONDITIONAL_PRESERVE_STATE,
            GroupType.CONDITIONAL_CLEAR_STATE,
        )


@dataclass
class OptionRecord:
    """One toolbar control.

    Fields above the display block are the logical state; ``checked`` and
    ``display_icon`` are what a renderer shows and are only written by
    ``refresh_display``.
    """

    name: str = ""
    icon: str | None = None
    toggled_icon: str | None = None  # Falls back to icon when unset
    icon_cycle: list[str] = field(default_factory=list)
    current_icon_index: int = 0
    override_icon: str | None = None

    checkable: bool = False
    active: bool = False
    enabled: bool = True

    group: str | None = None
    group_type: GroupType = GroupType.NONE
    conditional_on: str | None = None  # Parent name, conditional types only
    external_enabled: bool = False  # Externally controlled only

    shortcut_action: str | None = None  # e.g. "mesh.vertex"
    is_separator: bool = False

    description: str = ""
    hotkey: str | None = None

    # Display state
    checked: bool = False
    display_icon: str | None = None

    @staticmethod
    def separator() -> "OptionRecord":
        """Create a non-interactive divider."""
        return OptionRecord(is_separator=True, enabled=False)

    @property
    def tooltip(self) -> str:
        """Tooltip text: name, hotkey if any, then description on its own line."""
        text = f"{self.name} [{self.hotkey}]" if self.hotkey else self.name
        if self.description:
            text = f"{text}\n{self.description}"
        return text

    def validate(self):
        """Raise ValueError if the record cannot be placed in a batch."""
        if self.is_separator:
            return

        if not self.name or not self.name.strip():
            raise ValueError("Option name cannot be empty")

        if self.icon_cycle:
            if not 0 <= self.current_icon_index < len(self.icon_cycle):
                raise ValueError(
                    f"Option {self.name!r}: icon index {self.current_icon_index} "
                    f"out of range for cycle of {len(self.icon_cycle)}"
                )
        elif self.current_icon_index != 0:
            raise ValueError(
                f"Option {self.name!r}: icon index must be 0 without an icon cycle"
            )
