"""
Editor Toolbars - Editor State

Editor settings driven by the native toolbars' shortcut actions.
"""

GRID_SIZES = (1, 4, 16)


class EditorState:
    """Manages editor settings the native toolbars act on."""

    def __init__(self):
        # Main tools
        self.active_tool: str = "select"  # "select", "move", "rotate", "scale", "mesh"

        # Selection
        self.selection_mode: str = "object"  # "object", "vertex", "edge", "face"
        self.has_selection: bool = False

        # Editing settings
        self.snap_to_grid: bool = True
        self.grid_size_index: int = 0
        self.angle_snap: bool = False
        self.transform_space: str = "world"  # "world" or "local"

        # View settings
        self.shading: str = "lit"  # "wireframe", "shaded", "lit"
        self.show_gizmos: bool = True
        self.show_gizmo_labels: bool = False
        self.show_grid: bool = True
        self.show_bounds: bool = False

    @property
    def grid_size(self) -> int:
        return GRID_SIZES[self.grid_size_index]

    def set_tool(self, tool: str):
        """Set the active main tool."""
        if tool in ("select", "move", "rotate", "scale", "mesh"):
            self.active_tool = tool

    def set_selection_mode(self, mode: str):
        """Set the element type that clicks select."""
        if mode in ("object", "vertex", "edge", "face"):
            self.selection_mode = mode

    def set_transform_space(self, space: str):
        if space in ("world", "local"):
            self.transform_space = space

    def set_shading(self, shading: str):
        if shading in ("wireframe", "shaded", "lit"):
            self.shading = shading

    def toggle_selection(self):
        """Toggle whether anything is selected."""
        self.has_selection = not self.has_selection
