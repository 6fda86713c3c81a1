"""
Editor Toolbars - Constants

Configuration constants for the toolbar host including layout values,
colors, window defaults, and logging format.
"""

# Window
WINDOW_WIDTH = 1100
WINDOW_HEIGHT = 420
WINDOW_TITLE = "Editor Toolbars"
FRAME_RATE = 60

# UI Layout
TOOLBAR_HEIGHT = 40
TOOLBAR_PADDING = 10
BUTTON_HEIGHT = 30
BUTTON_MIN_WIDTH = 40
BUTTON_TEXT_PADDING = 8
BUTTON_SPACING = 6
SEPARATOR_WIDTH = 12
LABEL_SPACING = 8
STATUS_HEIGHT = 30

# Colors
COLOR_BG = (48, 48, 48)
COLOR_TOOLBAR = (32, 32, 32)
COLOR_STATUS = (32, 32, 32)
COLOR_GRID = (80, 80, 80)
COLOR_TEXT = (255, 255, 255)
COLOR_TEXT_DISABLED = (120, 120, 120)
COLOR_BUTTON = (64, 64, 64)
COLOR_BUTTON_HOVER = (80, 80, 80)
COLOR_BUTTON_ACTIVE = (100, 100, 200)
COLOR_BUTTON_DISABLED = (44, 44, 44)
COLOR_SEPARATOR = (90, 90, 90)

# Fonts
FONT_SIZE = 16
FONT_SIZE_SMALL = 14

# Logging
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Native toolbar names (registry keys)
MAIN_TOOLS = "MainTools"
SELECTION_MODES = "SelectionModes"
EDITING_SETTINGS = "EditingSettings"
VIEW_SETTINGS = "ViewSettings"
