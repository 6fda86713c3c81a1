"""Shared pytest fixtures for toolbar option tests."""

import os

import pytest

# Headless pygame for widget tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from toolbars.actions.action_registry import ActionRegistry
from toolbars.actions.dispatcher import ActionDispatcher
from toolbars.controllers.activation_engine import ActivationEngine
from toolbars.controllers.toolbar_registry import ToolbarRegistry
from toolbars.data.option_record import GroupType, OptionRecord


@pytest.fixture
def action_registry():
    """Create an empty action registry."""
    return ActionRegistry()


@pytest.fixture
def dispatcher(action_registry):
    """Create a dispatcher over the empty action registry."""
    return ActionDispatcher(action_registry)


@pytest.fixture
def engine(dispatcher):
    """Create an activation engine that dispatches actions."""
    return ActivationEngine(dispatcher)


@pytest.fixture
def toolbar_registry(engine):
    """Create an empty toolbar registry."""
    return ToolbarRegistry(engine)


@pytest.fixture
def exclusive_pair():
    """Two exclusive options in group 'g', the second active."""
    return [
        OptionRecord(
            name="A", icon="a", checkable=True, group="g", group_type=GroupType.SINGLE_EXCLUSIVE
        ),
        OptionRecord(
            name="B",
            icon="b",
            toggled_icon="b_on",
            checkable=True,
            active=True,
            group="g",
            group_type=GroupType.SINGLE_EXCLUSIVE,
        ),
    ]
