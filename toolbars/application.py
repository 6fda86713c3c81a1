"""
Editor Toolbars - Application

Hosts the native toolbars in a pygame window for one editor session.
"""

import logging

import pygame

from .core.constants import (
    COLOR_BG,
    COLOR_STATUS,
    COLOR_TEXT,
    EDITING_SETTINGS,
    FONT_SIZE,
    FONT_SIZE_SMALL,
    FRAME_RATE,
    MAIN_TOOLS,
    SELECTION_MODES,
    STATUS_HEIGHT,
    TOOLBAR_HEIGHT,
    VIEW_SETTINGS,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
)
from .session import ToolbarSession
from .ui.toolbar import ToolbarView

logger = logging.getLogger(__name__)

TOOLBAR_LABELS = {
    MAIN_TOOLS: "Tools:",
    SELECTION_MODES: "Select:",
    EDITING_SETTINGS: "Editing:",
    VIEW_SETTINGS: "View:",
}


class ToolbarApplication:
    """Main window showing one strip per native toolbar."""

    def __init__(self, session: ToolbarSession):
        pygame.init()

        self.session = session
        self.screen_width = WINDOW_WIDTH
        self.screen_height = WINDOW_HEIGHT
        self.screen = pygame.display.set_mode(
            (self.screen_width, self.screen_height), pygame.RESIZABLE
        )
        pygame.display.set_caption(WINDOW_TITLE)

        self.font = pygame.font.Font(None, FONT_SIZE)
        self.font_small = pygame.font.Font(None, FONT_SIZE_SMALL)

        self.views: list[ToolbarView] = []
        self._create_ui()

        self.running = True
        self.clock = pygame.time.Clock()

    def _create_ui(self):
        """Create a toolbar strip per registered toolbar, stacked vertically."""
        self.views = []
        y = 0
        for name in self.session.registry.names():
            toolbar = self.session.registry.lookup(name)
            view = ToolbarView(
                toolbar,
                self.session.engine,
                self.font,
                y=y,
                screen_width=self.screen_width,
                label=TOOLBAR_LABELS.get(name, f"{name}:"),
            )
            self.views.append(view)
            y += TOOLBAR_HEIGHT

    def run(self):
        """Main loop."""
        while self.running:
            self._handle_events(pygame.event.get())
            self._render()
            self.clock.tick(FRAME_RATE)

        pygame.quit()

    def _handle_events(self, events):
        for event in events:
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h
                for view in self.views:
                    view.resize(self.screen_width)
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
                self.session.toggle_selection()
                logger.info("Selection %s", "set" if self.session.state.has_selection else "cleared")

        for view in self.views:
            view.handle_events(events)

    def _render(self):
        self.screen.fill(COLOR_BG)

        for view in self.views:
            view.render(self.screen)

        self._render_status()

        pygame.display.flip()

    def _render_status(self):
        """Render status bar with the hovered tooltip and current settings."""
        status_y = self.screen_height - STATUS_HEIGHT
        pygame.draw.rect(
            self.screen, COLOR_STATUS, (0, status_y, self.screen_width, STATUS_HEIGHT)
        )

        state = self.session.state
        text = (
            f"Tool: {state.active_tool}  Select: {state.selection_mode}  "
            f"Grid: {state.grid_size} ({'snap' if state.snap_to_grid else 'free'})  "
            f"Space: {state.transform_space}  Shading: {state.shading}  "
            f"Selection: {'yes' if state.has_selection else 'no'} [Space]"
        )
        for view in self.views:
            tooltip = view.hovered_tooltip()
            if tooltip:
                text = tooltip.replace("\n", " - ")
                break

        surf = self.font_small.render(text, True, COLOR_TEXT)
        self.screen.blit(surf, (10, status_y + (STATUS_HEIGHT - surf.get_height()) // 2))
