"""
Editor Toolbars - UI Widgets

Button widget that renders one toolbar option.
"""

import pygame
from pygame import Rect, Surface

from toolbars.core.constants import (
    COLOR_BUTTON,
    COLOR_BUTTON_ACTIVE,
    COLOR_BUTTON_DISABLED,
    COLOR_BUTTON_HOVER,
    COLOR_GRID,
    COLOR_TEXT,
    COLOR_TEXT_DISABLED,
)
from toolbars.data.option_record import OptionRecord


class OptionButton:
    """Clickable control for an option record.

    The button never changes option state itself; it shows the record's
    display state and calls back on clicks while the option is enabled.
    """

    def __init__(self, rect: Rect, record: OptionRecord, callback):
        self.rect = rect
        self.record = record
        self.callback = callback
        self.hovered = False

    @property
    def text(self) -> str:
        return self.record.display_icon or self.record.name

    @property
    def tooltip(self) -> str:
        return self.record.tooltip

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEMOTION:
            self.hovered = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos) and self.record.enabled:
                self.callback()
                return True
        return False

    def background_color(self) -> tuple[int, int, int]:
        if not self.record.enabled:
            return COLOR_BUTTON_DISABLED
        if self.record.checked:
            return COLOR_BUTTON_ACTIVE
        if self.hovered:
            return COLOR_BUTTON_HOVER
        return COLOR_BUTTON

    def render(self, screen: Surface, font: pygame.font.Font):
        pygame.draw.rect(screen, self.background_color(), self.rect)
        pygame.draw.rect(screen, COLOR_GRID, self.rect, 1)

        text_color = COLOR_TEXT if self.record.enabled else COLOR_TEXT_DISABLED
        text_surf = font.render(self.text, True, text_color)
        text_rect = text_surf.get_rect(center=self.rect.center)
        screen.blit(text_surf, text_rect)
