"""
Editor Toolbars - Native Toolbars

Definitions for the editor's built-in toolbars and the shortcut actions
behind them.
"""

from toolbars.actions.action_registry import ActionRegistry
from toolbars.controllers.editor_state import EditorState
from toolbars.controllers.toolbar_registry import ToolbarRegistry
from toolbars.core.constants import (
    EDITING_SETTINGS,
    MAIN_TOOLS,
    SELECTION_MODES,
    VIEW_SETTINGS,
)
from toolbars.data.option_record import GroupType, OptionRecord


def main_tool_options() -> list[OptionRecord]:
    return [
        OptionRecord(
            name="Select",
            icon="cursor",
            checkable=True,
            active=True,
            hotkey="Q",
            shortcut_action="tools.select",
        ),
        OptionRecord(
            name="Move", icon="move", checkable=True, hotkey="W", shortcut_action="tools.move"
        ),
        OptionRecord(
            name="Rotate",
            icon="rotate",
            checkable=True,
            hotkey="E",
            shortcut_action="tools.rotate",
        ),
        OptionRecord(
            name="Scale", icon="scale", checkable=True, hotkey="R", shortcut_action="tools.scale"
        ),
        OptionRecord.separator(),
        OptionRecord(
            name="Mesh",
            icon="mesh",
            checkable=True,
            description="Edit mesh geometry",
            shortcut_action="tools.mesh",
        ),
    ]


def selection_mode_options() -> list[OptionRecord]:
    return [
        OptionRecord(
            name="Object",
            icon="cube",
            checkable=True,
            active=True,
            hotkey="1",
            shortcut_action="mesh.object",
        ),
        OptionRecord(
            name="Vertex",
            icon="vertex",
            checkable=True,
            hotkey="2",
            shortcut_action="mesh.vertex",
        ),
        OptionRecord(
            name="Edge", icon="edge", checkable=True, hotkey="3", shortcut_action="mesh.edge"
        ),
        OptionRecord(
            name="Face", icon="face", checkable=True, hotkey="4", shortcut_action="mesh.face"
        ),
    ]


def editing_setting_options() -> list[OptionRecord]:
    return [
        OptionRecord(
            name="Snap",
            icon="snap_off",
            toggled_icon="snap_on",
            checkable=True,
            active=True,
            description="Snap moved objects to the grid",
            shortcut_action="editing.snap",
        ),
        OptionRecord(
            name="Grid Size",
            icon="grid",
            icon_cycle=["grid_1", "grid_4", "grid_16"],
            description="Cycle the grid spacing",
            shortcut_action="editing.grid_size",
        ),
        OptionRecord(
            name="Angle Snap",
            icon="angle",
            checkable=True,
            group_type=GroupType.CONDITIONAL_PRESERVE_STATE,
            conditional_on="Snap",
            shortcut_action="editing.angle_snap",
        ),
        OptionRecord.separator(),
        OptionRecord(
            name="World",
            icon="globe",
            checkable=True,
            active=True,
            group="space",
            group_type=GroupType.SINGLE_EXCLUSIVE,
            shortcut_action="editing.space_world",
        ),
        OptionRecord(
            name="Local",
            icon="local",
            checkable=True,
            group="space",
            group_type=GroupType.SINGLE_EXCLUSIVE,
            shortcut_action="editing.space_local",
        ),
    ]


def view_setting_options() -> list[OptionRecord]:
    return [
        OptionRecord(
            name="Wireframe",
            icon="wire",
            checkable=True,
            group="shading",
            group_type=GroupType.SINGLE_EXCLUSIVE,
            shortcut_action="view.wireframe",
        ),
        OptionRecord(
            name="Shaded",
            icon="shaded",
            checkable=True,
            group="shading",
            group_type=GroupType.SINGLE_EXCLUSIVE,
            shortcut_action="view.shaded",
        ),
        OptionRecord(
            name="Lit",
            icon="lit",
            checkable=True,
            active=True,
            group="shading",
            group_type=GroupType.SINGLE_EXCLUSIVE,
            shortcut_action="view.lit",
        ),
        OptionRecord.separator(),
        OptionRecord(
            name="Gizmos",
            icon="gizmo",
            checkable=True,
            active=True,
            shortcut_action="view.gizmos",
        ),
        OptionRecord(
            name="Labels",
            icon="label",
            checkable=True,
            group_type=GroupType.CONDITIONAL_CLEAR_STATE,
            conditional_on="Gizmos",
            description="Show gizmo labels",
            shortcut_action="view.gizmo_labels",
        ),
        OptionRecord(
            name="Grid",
            icon="grid_hidden",
            toggled_icon="grid_shown",
            checkable=True,
            active=True,
            hotkey="G",
            shortcut_action="view.grid",
        ),
        OptionRecord(
            name="Bounds",
            icon="bounds",
            checkable=True,
            group_type=GroupType.EXTERNALLY_CONTROLLED,
            description="Available while something is selected",
            shortcut_action="view.bounds",
        ),
    ]


def sync_settings(registry: ToolbarRegistry, state: EditorState):
    """
    Copy the toggle options' state into the editor settings.

    Reads the options rather than flipping settings so that options reset by
    conditional rules (which run no action) stay in step. A disabled option
    counts as off even when it keeps its active state.
    """

    def option(toolbar_name: str, option_name: str) -> OptionRecord | None:
        toolbar = registry.lookup(toolbar_name)
        found = toolbar.find_option(option_name) if toolbar else None
        return found[1] if found else None

    flags = {
        "snap_to_grid": (EDITING_SETTINGS, "Snap"),
        "angle_snap": (EDITING_SETTINGS, "Angle Snap"),
        "show_gizmos": (VIEW_SETTINGS, "Gizmos"),
        "show_gizmo_labels": (VIEW_SETTINGS, "Labels"),
        "show_grid": (VIEW_SETTINGS, "Grid"),
        "show_bounds": (VIEW_SETTINGS, "Bounds"),
    }
    for attribute, (toolbar_name, option_name) in flags.items():
        record = option(toolbar_name, option_name)
        if record is not None:
            setattr(state, attribute, record.active and record.enabled)

    grid_size = option(EDITING_SETTINGS, "Grid Size")
    if grid_size is not None:
        state.grid_size_index = grid_size.current_icon_index


def register_native_actions(
    actions: ActionRegistry, registry: ToolbarRegistry, state: EditorState
):
    """Register the handlers behind the native toolbar options."""
    for tool in ("select", "move", "rotate", "scale", "mesh"):
        actions.register(f"tools.{tool}", lambda tool=tool: state.set_tool(tool))

    for mode in ("object", "vertex", "edge", "face"):
        actions.register(f"mesh.{mode}", lambda mode=mode: state.set_selection_mode(mode))

    actions.register("editing.space_world", lambda: state.set_transform_space("world"))
    actions.register("editing.space_local", lambda: state.set_transform_space("local"))

    for shading in ("wireframe", "shaded", "lit"):
        actions.register(f"view.{shading}", lambda shading=shading: state.set_shading(shading))

    for identifier in (
        "editing.snap",
        "editing.grid_size",
        "editing.angle_snap",
        "view.gizmos",
        "view.gizmo_labels",
        "view.grid",
        "view.bounds",
    ):
        actions.register(identifier, lambda: sync_settings(registry, state))


def build_native(registry: ToolbarRegistry):
    """Create and register the built-in toolbars."""
    registry.create_toolbar(MAIN_TOOLS, main_tool_options(), single_select=True)
    registry.create_toolbar(SELECTION_MODES, selection_mode_options(), single_select=True)
    registry.create_toolbar(EDITING_SETTINGS, editing_setting_options())
    registry.create_toolbar(VIEW_SETTINGS, view_setting_options())
