"""Unit tests for the activation engine."""

import copy
from unittest.mock import Mock

import pytest

from toolbars.controllers.activation_engine import ActivationEngine
from toolbars.data.option_record import GroupType, OptionRecord
from toolbars.data.toolbar_data import OptionBatch


def active_names(batch):
    return [record.name for record in batch.options() if record.active]


class TestExclusiveGroup:
    """Tests for SINGLE_EXCLUSIVE group activation."""

    def test_activating_member_deactivates_sibling(self, engine, exclusive_pair):
        """Activating a group member should deactivate its sibling."""
        batch = OptionBatch(exclusive_pair)
        a, b = exclusive_pair

        assert engine.activate(batch, a) is True

        assert a.active is True
        assert b.active is False
        assert a.checked is True
        assert b.checked is False
        assert b.display_icon == "b"

    def test_reactivating_active_member_is_idempotent(self, engine, exclusive_pair):
        """Activating the active member again should change nothing."""
        batch = OptionBatch(exclusive_pair)
        b = exclusive_pair[1]
        before = copy.deepcopy(exclusive_pair)

        engine.activate(batch, b)

        assert exclusive_pair == before

    def test_group_does_not_touch_other_groups(self, engine):
        """Group activation should leave other groups and plain options alone."""
        a = OptionRecord(name="A", group="g", group_type=GroupType.SINGLE_EXCLUSIVE)
        other = OptionRecord(
            name="X", active=True, group="h", group_type=GroupType.SINGLE_EXCLUSIVE
        )
        plain = OptionRecord(name="P", active=True)
        batch = OptionBatch([a, other, plain])

        engine.activate(batch, a)

        assert active_names(batch) == ["A", "X", "P"]

    def test_exclusive_without_group_toggles(self, engine):
        """An exclusive option without a group should toggle."""
        record = OptionRecord(name="A", group_type=GroupType.SINGLE_EXCLUSIVE)
        batch = OptionBatch([record])

        engine.activate(batch, record)
        assert record.active is True
        engine.activate(batch, record)
        assert record.active is False

    def test_at_most_one_active_per_group(self, engine):
        """A group should never have more than one active member."""
        records = [
            OptionRecord(name=name, group="g", group_type=GroupType.SINGLE_EXCLUSIVE)
            for name in "ABCD"
        ]
        batch = OptionBatch(records)

        for index in [0, 2, 2, 1, 3, 0, 1]:
            engine.activate(batch, records[index])
            assert len(active_names(batch)) == 1
            assert records[index].active is True


class TestSingleSelect:
    """Tests for single-select batches."""

    def test_only_activated_record_is_active(self, engine):
        """Single-select should leave only the activated option on."""
        records = [OptionRecord(name=n, checkable=True, active=True) for n in "ABC"]
        batch = OptionBatch(records, single_select=True)

        engine.activate(batch, records[1])

        assert active_names(batch) == ["B"]
        assert [r.checked for r in records] == [False, True, False]

    def test_exactly_one_active_after_any_activation(self, engine):
        """Single-select should keep exactly one option on."""
        records = [OptionRecord(name=n) for n in "ABCD"]
        batch = OptionBatch(records, single_select=True)

        for index in [3, 3, 0, 2, 1]:
            engine.activate(batch, records[index])
            assert active_names(batch) == [records[index].name]

    def test_separators_are_skipped(self, engine):
        """Single-select should ignore separators."""
        a = OptionRecord(name="A")
        batch = OptionBatch([a, OptionRecord.separator(), OptionRecord(name="B")], single_select=True)

        engine.activate(batch, a)

        assert batch.records[1].active is False
        assert active_names(batch) == ["A"]

    def test_exclusive_rule_takes_precedence(self, engine, exclusive_pair):
        """The group rule should apply before single-select."""
        plain = OptionRecord(name="P", active=True)
        batch = OptionBatch(exclusive_pair + [plain], single_select=True)

        engine.activate(batch, exclusive_pair[0])

        # Group rule applies, so the ungrouped option is left alone
        assert active_names(batch) == ["A", "P"]


class TestIconCycle:
    """Tests for icon cycling."""

    def test_wraps_to_start(self, engine):
        """The icon cycle should wrap back to the first icon."""
        record = OptionRecord(name="Size", icon_cycle=["a", "b", "c"], current_icon_index=2)
        batch = OptionBatch([record])

        engine.activate(batch, record)

        assert record.current_icon_index == 0
        assert record.display_icon == "a"

    def test_does_not_change_active(self, engine):
        """Cycling should not change the active flag."""
        record = OptionRecord(name="Size", icon_cycle=["a", "b"])
        batch = OptionBatch([record])

        engine.activate(batch, record)

        assert record.active is False

    @pytest.mark.parametrize("clicks", [1, 2, 3, 4, 7, 12])
    def test_index_after_n_clicks(self, engine, clicks):
        """The cycle index should follow the click count."""
        record = OptionRecord(name="Size", icon_cycle=["a", "b", "c"])
        batch = OptionBatch([record])

        for _ in range(clicks):
            engine.activate(batch, record)

        assert record.current_icon_index == clicks % 3
        assert record.display_icon == ["a", "b", "c"][clicks % 3]

    def test_override_hides_cycle(self, engine):
        """Cycling should advance the index under an override icon."""
        record = OptionRecord(name="Size", icon_cycle=["a", "b"], override_icon="x")
        batch = OptionBatch([record])

        engine.activate(batch, record)

        assert record.current_icon_index == 1
        assert record.display_icon == "x"


class TestToggle:
    """Tests for plain multi-select toggles."""

    def test_toggle_flips_active_and_icon(self, engine):
        """A plain option should flip its active state and icon."""
        record = OptionRecord(name="Grid", icon="off", toggled_icon="on", checkable=True)
        batch = OptionBatch([record])

        engine.activate(batch, record)
        assert record.active is True
        assert record.display_icon == "on"
        assert record.checked is True

        engine.activate(batch, record)
        assert record.active is False
        assert record.display_icon == "off"

    def test_single_toggleable_behaves_like_toggle(self, engine):
        """SINGLE_TOGGLEABLE options should toggle independently."""
        a = OptionRecord(name="A", group="g", group_type=GroupType.SINGLE_TOGGLEABLE)
        b = OptionRecord(
            name="B", active=True, group="g", group_type=GroupType.SINGLE_TOGGLEABLE
        )
        batch = OptionBatch([a, b])

        engine.activate(batch, a)

        assert a.active is True
        assert b.active is True


class TestRejectedActivation:
    """Tests for activations that must be ignored."""

    def test_disabled_record_is_unchanged(self, action_registry, engine):
        """Activating a disabled option should change nothing and run no action."""
        handler = Mock()
        action_registry.register("grid.toggle", handler)
        record = OptionRecord(
            name="Grid", icon="off", enabled=False, shortcut_action="grid.toggle"
        )
        other = OptionRecord(name="Other", active=True)
        batch = OptionBatch([record, other], single_select=True)
        before = copy.deepcopy(batch.records)

        assert engine.activate(batch, record) is False

        assert batch.records == before
        handler.assert_not_called()

    def test_separator_is_ignored(self, engine):
        """Activating a separator should be rejected."""
        separator = OptionRecord.separator()
        batch = OptionBatch([separator])

        assert engine.activate(batch, separator) is False

    def test_record_from_other_batch_is_ignored(self, engine):
        """A record from another batch should be rejected."""
        batch = OptionBatch([OptionRecord(name="A")])
        stranger = OptionRecord(name="A")

        assert engine.activate(batch, stranger) is False
        assert stranger.active is False


class TestDispatchAfterCommit:
    """Tests for the ordering of state commit and action dispatch."""

    def test_action_sees_committed_state(self, action_registry, engine):
        """The action should run after conditional state is settled."""
        parent = OptionRecord(name="P", active=True, shortcut_action="p.toggle")
        child = OptionRecord(
            name="C",
            active=True,
            group_type=GroupType.CONDITIONAL_CLEAR_STATE,
            conditional_on="P",
        )
        batch = OptionBatch([parent, child])
        seen = []
        action_registry.register("p.toggle", lambda: seen.append((parent.active, child.active)))

        engine.activate(batch, parent)

        assert seen == [(False, False)]

    def test_only_activated_record_dispatches(self):
        """Only the clicked option should have its action dispatched."""
        dispatcher = Mock()
        engine = ActivationEngine(dispatcher)
        a = OptionRecord(name="A", shortcut_action="a")
        b = OptionRecord(name="B", active=True, shortcut_action="b")
        batch = OptionBatch([a, b], single_select=True)

        engine.activate(batch, a)

        dispatcher.dispatch.assert_called_once_with(a)

    def test_engine_without_dispatcher(self):
        """The engine should work without a dispatcher."""
        engine = ActivationEngine()
        record = OptionRecord(name="A", shortcut_action="a")
        batch = OptionBatch([record])

        assert engine.activate(batch, record) is True
        assert record.active is True


class TestSetActive:
    """Tests for programmatic activation."""

    def test_force_on_applies_group_exclusivity(self, engine, exclusive_pair):
        """set_active should keep group exclusivity."""
        batch = OptionBatch(exclusive_pair)
        a, b = exclusive_pair

        assert engine.set_active(batch, a, True) is True

        assert a.active is True
        assert b.active is False

    def test_force_off_exclusive_member(self, engine, exclusive_pair):
        """set_active should be able to turn a whole group off."""
        batch = OptionBatch(exclusive_pair)
        b = exclusive_pair[1]

        engine.set_active(batch, b, False)

        assert active_names(batch) == []
        assert b.display_icon == "b"

    def test_force_on_single_select(self, engine):
        """set_active should keep single-select exclusivity."""
        records = [OptionRecord(name=n) for n in "AB"]
        records[0].active = True
        batch = OptionBatch(records, single_select=True)

        engine.set_active(batch, records[1], True)

        assert active_names(batch) == ["B"]

    def test_force_on_cycle_record_sets_active(self, engine):
        """set_active should set active on a cycling option without cycling."""
        record = OptionRecord(name="Size", icon_cycle=["a", "b"])
        batch = OptionBatch([record])

        engine.set_active(batch, record, True)

        assert record.active is True
        assert record.current_icon_index == 0

    def test_force_ignores_enabled(self, engine):
        """set_active should work on disabled options."""
        record = OptionRecord(name="A", enabled=False)
        batch = OptionBatch([record])

        engine.set_active(batch, record, True)

        assert record.active is True

    def test_force_does_not_dispatch(self):
        """set_active should not run the option's action."""
        dispatcher = Mock()
        engine = ActivationEngine(dispatcher)
        record = OptionRecord(name="A", shortcut_action="a")
        batch = OptionBatch([record])

        engine.set_active(batch, record, True)

        dispatcher.dispatch.assert_not_called()

    def test_propagation_undoes_forced_external(self, engine):
        """An external option without its flag should not stay forced on."""
        record = OptionRecord(name="Bounds", group_type=GroupType.EXTERNALLY_CONTROLLED)
        batch = OptionBatch([record])

        engine.set_active(batch, record, True)

        assert record.active is False

    def test_force_rejects_separator(self, engine):
        """set_active should reject separators."""
        separator = OptionRecord.separator()
        batch = OptionBatch([separator])

        assert engine.set_active(batch, separator, True) is False
        assert separator.active is False
