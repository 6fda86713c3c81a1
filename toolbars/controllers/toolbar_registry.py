"""
Editor Toolbars - Toolbar Registry

Session-owned mapping from toolbar name to its live batches, plus the
programmatic control surface used by code outside the click path. Every
change made here goes through the ActivationEngine, the same path a click
takes.
"""

import logging

from toolbars.data.option_record import GroupType, OptionRecord
from toolbars.data.toolbar_data import OptionBatch, Toolbar

from .activation_engine import ActivationEngine

logger = logging.getLogger(__name__)


class ToolbarRegistry:
    """Registered toolbars for one editor session."""

    def __init__(self, engine: ActivationEngine):
        self.engine = engine
        self.toolbars: dict[str, Toolbar] = {}

    # Registration

    def register(self, name: str, toolbar: Toolbar):
        """
        Register a toolbar under a name, replacing any previous one.

        Raises:
            ValueError: If name is empty or toolbar is None
        """
        if not name or not name.strip():
            raise ValueError("Toolbar name cannot be null or empty")
        if toolbar is None:
            raise ValueError(f"Cannot register empty toolbar as {name!r}")

        if name in self.toolbars:
            logger.debug("Replacing registered toolbar %r", name)
        self.toolbars[name] = toolbar

    def create_toolbar(
        self,
        name: str,
        records: list[OptionRecord] | None = None,
        single_select: bool = False,
    ) -> Toolbar:
        """
        Create and register a toolbar, optionally with a first batch.

        Raises:
            ValueError: If name is empty or a record is malformed
        """
        toolbar = Toolbar(name)
        if records:
            toolbar.add_batch(OptionBatch(records, single_select=single_select))

        self.register(name, toolbar)
        return toolbar

    def add_options(
        self,
        toolbar_name: str,
        records: list[OptionRecord],
        single_select: bool = False,
    ) -> OptionBatch | None:
        """
        Add a new batch of options to a registered toolbar.

        The batch is its own scope: its groups and conditional references
        never see options from the toolbar's other batches.

        Returns:
            The new batch, or None if the toolbar is not registered

        Raises:
            ValueError: If records is None or a record is malformed
        """
        if records is None:
            raise ValueError(f"Cannot add empty batch to toolbar {toolbar_name!r}")

        toolbar = self.lookup(toolbar_name)
        if toolbar is None:
            logger.warning("Cannot add options: no toolbar named %r", toolbar_name)
            return None

        return toolbar.add_batch(OptionBatch(records, single_select=single_select))

    def lookup(self, name: str) -> Toolbar | None:
        """Get a registered toolbar by name."""
        return self.toolbars.get(name)

    def unregister(self, name: str) -> Toolbar | None:
        """Remove a toolbar, returning it if it was registered."""
        return self.toolbars.pop(name, None)

    def clear(self):
        """Drop every toolbar (end of session)."""
        self.toolbars.clear()

    def names(self) -> list[str]:
        """Registered toolbar names in registration order."""
        return list(self.toolbars)

    def __contains__(self, name: str) -> bool:
        return name in self.toolbars

    def __len__(self) -> int:
        return len(self.toolbars)

    # Programmatic control

    def activate(self, toolbar_name: str, option_name: str) -> bool:
        """Activate an option exactly as a click would, including its action."""
        found = self._find(toolbar_name, option_name)
        if found is None:
            return False

        batch, record = found
        return self.engine.activate(batch, record)

    def set_option_enabled(self, toolbar_name: str, option_name: str, enabled: bool) -> bool:
        """
        Enable or disable an option.

        Externally-controlled options take this as their external flag;
        others get their enabled flag set directly. Conditional options are
        then re-derived from their parent, so enabling one whose parent is
        inactive has no visible effect.

        Returns:
            False if the option was not found or did not end up in the
            requested state
        """
        found = self._find(toolbar_name, option_name)
        if found is None:
            return False

        batch, record = found
        if record.group_type == GroupType.EXTERNALLY_CONTROLLED:
            record.external_enabled = enabled
        else:
            record.enabled = enabled

        self.engine.refresh(batch)
        if record.enabled != enabled:
            logger.debug(
                "Option %r in toolbar %r stays enabled=%s, its state is derived",
                option_name,
                toolbar_name,
                record.enabled,
            )
            return False
        return True

    def set_option_active(self, toolbar_name: str, option_name: str, active: bool) -> bool:
        """Force an option on or off without running its shortcut action."""
        found = self._find(toolbar_name, option_name)
        if found is None:
            return False

        batch, record = found
        return self.engine.set_active(batch, record, active)

    def force_deactivate(self, toolbar_name: str, option_name: str) -> bool:
        """Force an option off."""
        return self.set_option_active(toolbar_name, option_name, False)

    def set_override_icon(
        self, toolbar_name: str, option_name: str, icon: str | None
    ) -> bool:
        """Force an icon on an option, or clear the override with None."""
        found = self._find(toolbar_name, option_name)
        if found is None:
            return False

        batch, record = found
        record.override_icon = icon
        self.engine.refresh(batch)
        return True

    def _find(self, toolbar_name: str, option_name: str) -> tuple[OptionBatch, OptionRecord] | None:
        toolbar = self.lookup(toolbar_name)
        if toolbar is None:
            logger.warning("No toolbar named %r", toolbar_name)
            return None

        found = toolbar.find_option(option_name)
        if found is None:
            logger.warning("No option named %r in toolbar %r", option_name, toolbar_name)
        return found
