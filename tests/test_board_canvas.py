"""
pytest-qt integration tests for the board canvas.

Exercises the whole chain: store -> mounted CardWidget -> drag/resize
handlers -> single commit back into the store, plus selection, zoom and
pan arbitration.
"""
import pytest
from PyQt5.QtCore import Qt, QPoint, QEvent
from PyQt5.QtGui import QKeyEvent
from PyQt5.QtWidgets import QApplication

from constants import AFFORDANCE_DRAGGING, MIN_ZOOM, MAX_ZOOM
from components.interaction import ResizeHandle
from models.geometry import Vec2, Size
from services.card_factory import create_text_card
from conftest import press, move, release


@pytest.fixture
def card(store, board):
    card = create_text_card(100, 100, "note")
    store.add_card(card)
    return card


class TestMounting:

    def test_store_card_gets_widget(self, board, card):
        assert card.id in board.card_widgets
        assert board.drag_handler.is_registered(card.id)
        assert board.resize_handler.is_registered(card.id)

    def test_widget_placed_by_viewport(self, board, card):
        board.viewport.scale = 2.0
        board.viewport.translate_x = 10
        board._apply_viewport()
        widget = board.card_widgets[card.id]
        assert widget.pos() == QPoint(210, 200)

    def test_existing_cards_mounted_on_construction(self, qtbot, store):
        from components.board_canvas import BoardCanvas
        card = create_text_card(0, 0)
        store.add_card(card)
        canvas = BoardCanvas(store)
        qtbot.addWidget(canvas)
        assert card.id in canvas.card_widgets
        canvas.shutdown()

    def test_removing_card_unregisters(self, board, store, card):
        widget = board.card_widgets[card.id]
        store.remove_card(card.id)

        assert card.id not in board.card_widgets
        assert not board.drag_handler.is_registered(card.id)
        assert not board.resize_handler.is_registered(card.id)
        press(widget, 0, 0)
        assert not board.gesture_lock.active

    def test_right_click_deletes(self, board, store, card):
        press(board.card_widgets[card.id], 0, 0, button=Qt.RightButton)
        assert card.id not in store


class TestCardDrag:

    def test_drag_commits_once_at_zoom(self, board, store, card):
        board.viewport.scale = 2.0
        widget = board.card_widgets[card.id]
        commits = []
        store.subscribe(lambda change, card_id: commits.append(change))

        press(widget, 200, 200)
        move(widget, 220, 210)

        assert widget.canvas_position() == Vec2(110, 105)
        assert widget.has_affordance(AFFORDANCE_DRAGGING)
        assert card.position == Vec2(100, 100)
        assert commits == []

        release(widget, 220, 210)

        assert card.position == Vec2(110, 105)
        assert commits == ['position']
        assert not widget.has_affordance(AFFORDANCE_DRAGGING)

    def test_click_selects_card(self, board, card):
        widget = board.card_widgets[card.id]
        press(widget, 0, 0)
        release(widget, 0, 0)
        assert board.selection.selected_id == card.id
        assert widget.property('selected') is True

    def test_second_card_blocked_during_drag(self, board, store, card):
        other = create_text_card(400, 400, "other")
        store.add_card(other)
        first_widget = board.card_widgets[card.id]
        other_widget = board.card_widgets[other.id]

        press(first_widget, 0, 0)
        press(other_widget, 0, 0)
        move(other_widget, 30, 30)
        release(other_widget, 30, 30)

        assert card.position == Vec2(130, 130)
        assert other.position == Vec2(400, 400)


class TestCardResize:

    def test_handle_follows_selection(self, board, store, card):
        other = create_text_card(0, 0)
        store.add_card(other)

        board.selection.select(card.id)
        assert not board.resize_handler.handle_for(card.id).isHidden()
        assert board.resize_handler.handle_for(other.id).isHidden()

        board.selection.select(other.id)
        assert board.resize_handler.handle_for(card.id).isHidden()
        assert not board.resize_handler.handle_for(other.id).isHidden()

        board.selection.clear()
        assert board.resize_handler.handle_for(other.id).isHidden()

    def test_resize_through_handle(self, board, card):
        board.viewport.scale = 2.0
        board._apply_viewport()
        board.selection.select(card.id)
        handle = board.resize_handler.handle_for(card.id)
        widget = board.card_widgets[card.id]

        press(handle, 0, 0)
        move(handle, 40, -20)
        assert widget.canvas_size() == Size(220, 110)
        assert card.size is None

        release(handle, 40, -20)
        assert card.size == Size(220, 110)

    def test_resize_floor_through_board(self, board, card):
        board.selection.select(card.id)
        handle = board.resize_handler.handle_for(card.id)
        press(handle, 0, 0)
        move(handle, -1000, -1000)
        release(handle, -1000, -1000)
        assert card.size == Size(60, 30)

    def test_deleted_card_loses_handle(self, board, store, card):
        widget = board.card_widgets[card.id]
        board.selection.select(card.id)
        store.remove_card(card.id)
        assert widget.findChildren(ResizeHandle) == []
        assert board.selection.selected_id is None


class TestViewport:

    def test_zoom_in_keeps_cursor_point(self, board):
        cursor = QPoint(300, 200)
        before = board.screen_to_canvas(cursor)
        board.zoom_in(cursor)
        after = board.screen_to_canvas(cursor)
        assert board.viewport.scale == pytest.approx(1.25)
        assert after == pytest.approx(before)

    def test_zoom_clamped(self, board):
        for _ in range(40):
            board.zoom_in()
        assert board.viewport.scale == MAX_ZOOM
        for _ in range(80):
            board.zoom_out()
        assert board.viewport.scale == MIN_ZOOM

    def test_zoom_reset(self, board):
        board.zoom_in()
        board.pan_by(30, 40)
        board.zoom_reset()
        assert (board.viewport.scale, board.viewport.translate_x, board.viewport.translate_y) == (1.0, 0.0, 0.0)

    def test_set_zoom_level_percent(self, board):
        board.set_zoom_level(200)
        assert board.get_zoom_percent() == 200

    def test_viewport_signal(self, qtbot, board):
        with qtbot.waitSignal(board.viewportChanged) as blocker:
            board.pan_by(5, 0)
        assert blocker.args == [1.0, 5.0, 0.0]

    def test_background_drag_pans(self, board):
        press(board, 10, 10)
        move(board, 40, 25)
        release(board, 40, 25)
        assert (board.viewport.translate_x, board.viewport.translate_y) == (30, 15)
        assert not board.gesture_lock.active

    def test_background_click_clears_selection(self, board, card):
        board.selection.select(card.id)
        press(board, 700, 500)
        release(board, 700, 500)
        assert board.selection.selected_id is None

    def test_pan_blocks_card_drag(self, board, card):
        widget = board.card_widgets[card.id]
        press(board, 10, 10)
        press(widget, 0, 0)
        assert not board.drag_handler.active
        release(board, 10, 10)

    def test_card_drag_blocks_pan(self, board, card):
        widget = board.card_widgets[card.id]
        press(widget, 0, 0)
        press(board, 10, 10, button=Qt.MiddleButton)
        assert not board.is_panning
        release(widget, 0, 0)

    @pytest.mark.parametrize("event_type", [QEvent.WindowDeactivate, QEvent.ApplicationDeactivate])
    def test_focus_loss_ends_pan(self, board, card, event_type):
        press(board, 10, 10)
        move(board, 30, 10)
        QApplication.sendEvent(board, QEvent(event_type))

        assert not board.is_panning
        assert not board.gesture_lock.active
        assert not board._pan_tracker.installed

        widget = board.card_widgets[card.id]
        press(widget, 0, 0)
        assert board.drag_handler.active
        release(widget, 0, 0)

    def test_escape_ends_pan(self, board):
        press(board, 10, 10)
        QApplication.sendEvent(board, QKeyEvent(QEvent.KeyPress, Qt.Key_Escape, Qt.NoModifier))
        assert not board.is_panning
        assert not board.gesture_lock.active

    def test_middle_pan_ignores_left_release(self, board):
        press(board, 10, 10, button=Qt.MiddleButton)
        move(board, 20, 20)
        release(board, 20, 20, button=Qt.LeftButton)
        assert board.is_panning

        move(board, 30, 20)
        release(board, 30, 20, button=Qt.MiddleButton)
        assert not board.is_panning
        assert not board.gesture_lock.active
        assert (board.viewport.translate_x, board.viewport.translate_y) == (20, 10)

    def test_left_pan_ignores_middle_release(self, board):
        press(board, 10, 10)
        release(board, 10, 10, button=Qt.MiddleButton)
        assert board.is_panning
        release(board, 10, 10)
        assert not board.is_panning


class TestShutdown:

    def test_shutdown_releases_bindings(self, board, card):
        widget = board.card_widgets[card.id]
        board.shutdown()
        press(widget, 0, 0)
        assert not board.gesture_lock.active
        assert widget.findChildren(ResizeHandle) == []
