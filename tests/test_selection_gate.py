"""
Tests for single-card selection state.
"""
from components.interaction import SelectionGate


class TestSelectionGate:

    def test_nothing_selected_initially(self, qapp):
        gate = SelectionGate()
        assert gate.selected_id is None
        assert not gate.is_selected(None)

    def test_select_replaces_previous(self, qapp):
        gate = SelectionGate()
        gate.select('a')
        gate.select('b')
        assert gate.selected_id == 'b'
        assert not gate.is_selected('a')
        assert gate.is_selected('b')

    def test_signal_carries_previous_and_new(self, qtbot):
        gate = SelectionGate()
        gate.select('a')
        with qtbot.waitSignal(gate.selectionChanged) as blocker:
            gate.select('b')
        assert blocker.args == ['a', 'b']

    def test_observer_never_sees_two_selected(self, qapp):
        gate = SelectionGate()
        snapshots = []
        gate.selectionChanged.connect(lambda old, new: snapshots.append(gate.selected_id))
        gate.select('a')
        gate.select('b')
        gate.clear()
        assert snapshots == ['a', 'b', None]

    def test_reselect_same_card_is_silent(self, qapp):
        gate = SelectionGate()
        emitted = []
        gate.selectionChanged.connect(lambda old, new: emitted.append(new))
        gate.select('a')
        gate.select('a')
        assert emitted == ['a']

    def test_forget_clears_only_matching_card(self, qapp):
        gate = SelectionGate()
        gate.select('a')
        gate.forget('b')
        assert gate.selected_id == 'a'
        gate.forget('a')
        assert gate.selected_id is None
