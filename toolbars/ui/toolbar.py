"""
Editor Toolbars - Toolbar View

Lays out a registered toolbar as a strip of option buttons and routes their
clicks into the activation engine.
"""

import pygame
from pygame import Rect

from toolbars.controllers.activation_engine import ActivationEngine
from toolbars.core.constants import (
    BUTTON_HEIGHT,
    BUTTON_MIN_WIDTH,
    BUTTON_SPACING,
    BUTTON_TEXT_PADDING,
    COLOR_SEPARATOR,
    COLOR_TEXT,
    COLOR_TOOLBAR,
    LABEL_SPACING,
    SEPARATOR_WIDTH,
    TOOLBAR_HEIGHT,
    TOOLBAR_PADDING,
)
from toolbars.data.option_record import OptionRecord
from toolbars.data.toolbar_data import OptionBatch, Toolbar

from .widgets import OptionButton


class ToolbarView:
    """Manages the buttons and layout for one toolbar."""

    def __init__(
        self,
        toolbar: Toolbar,
        engine: ActivationEngine,
        font: pygame.font.Font,
        y: int = 0,
        screen_width: int = 0,
        label: str | None = None,
    ):
        self.toolbar = toolbar
        self.engine = engine
        self.font = font
        self.y = y
        self.screen_width = screen_width
        self.label = label

        self.buttons: list[OptionButton] = []
        self.separators: list[int] = []  # x positions
        self.label_width = 0
        self.width = 0

        self._create_buttons()

    def _create_buttons(self):
        """Create a button per option with automatic left-to-right layout."""
        self.buttons = []
        self.separators = []
        x = TOOLBAR_PADDING

        if self.label:
            self.label_width = self.font.size(self.label)[0]
            x += self.label_width + LABEL_SPACING

        button_y = self.y + (TOOLBAR_HEIGHT - BUTTON_HEIGHT) // 2
        for batch in self.toolbar.batches:
            for record in batch:
                if record.is_separator:
                    self.separators.append(x + SEPARATOR_WIDTH // 2 - BUTTON_SPACING // 2)
                    x += SEPARATOR_WIDTH
                    continue

                width = self._button_width(record)
                button = OptionButton(
                    Rect(x, button_y, width, BUTTON_HEIGHT),
                    record,
                    lambda batch=batch, record=record: self._on_click(batch, record),
                )
                self.buttons.append(button)
                x += width + BUTTON_SPACING

        self.width = x

    def _button_width(self, record: OptionRecord) -> int:
        """Width that fits every icon the option can show."""
        candidates = [record.name, record.icon, record.toggled_icon, *record.icon_cycle]
        widest = max(self.font.size(text)[0] for text in candidates if text)
        return max(BUTTON_MIN_WIDTH, widest + 2 * BUTTON_TEXT_PADDING)

    def _on_click(self, batch: OptionBatch, record: OptionRecord):
        self.engine.activate(batch, record)

    def rebuild(self):
        """Re-run layout after batches were added to the toolbar."""
        self._create_buttons()

    def handle_events(self, events) -> bool:
        """Delegate events to all buttons. Returns True if a click was handled."""
        handled = False
        for event in events:
            for button in self.buttons:
                if button.handle_event(event):
                    handled = True
        return handled

    def hovered_tooltip(self) -> str | None:
        """Tooltip of the button under the mouse, if any."""
        for button in self.buttons:
            if button.hovered:
                return button.tooltip
        return None

    def render(self, screen):
        """Render toolbar background, label, separators, and buttons."""
        pygame.draw.rect(screen, COLOR_TOOLBAR, (0, self.y, self.screen_width, TOOLBAR_HEIGHT))

        if self.label:
            text = self.font.render(self.label, True, COLOR_TEXT)
            screen.blit(
                text, (TOOLBAR_PADDING, self.y + (TOOLBAR_HEIGHT - text.get_height()) // 2)
            )

        for x in self.separators:
            pygame.draw.line(
                screen, COLOR_SEPARATOR, (x, self.y + 8), (x, self.y + TOOLBAR_HEIGHT - 8)
            )

        for button in self.buttons:
            button.render(screen, self.font)

    def resize(self, screen_width: int):
        """Update background width. Buttons keep their fixed layout."""
        self.screen_width = screen_width
