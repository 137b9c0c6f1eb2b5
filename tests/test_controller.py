# tests/test_controller.py
from stonego.board_state import EMPTY, BLACK, WHITE
from stonego.game import Game
from ui.controller import GameController


class FakeView:
    def __init__(self):
        self.click_cb = None
        self.board = None
        self.last_stone = None
        self.redraws = 0

    def on_click(self, callback):
        self.click_cb = callback

    def set_board(self, board_state):
        self.board = board_state
        self.redraws += 1

    def set_last_stone(self, coords):
        self.last_stone = coords


def make(size=9):
    view = FakeView()
    statuses = []
    ctrl = GameController(view, Game(size=size), statuses.append)
    return view, statuses, ctrl


def test_wires_view_and_draws_initial_board():
    view, statuses, ctrl = make()
    assert view.click_cb == ctrl.on_board_click
    assert view.board == [[EMPTY] * 9 for _ in range(9)]
    assert statuses == ["Black to move  (captures: Black 0, White 0)"]


def test_click_places_stone_and_updates_status():
    view, statuses, ctrl = make()
    view.click_cb(2, 3)
    assert view.board[2][3] == BLACK
    assert view.last_stone == (2, 3, BLACK)
    assert statuses[-1].startswith("White to move")


def test_click_on_occupied_point_is_ignored():
    view, statuses, ctrl = make()
    view.click_cb(2, 3)
    redraws = view.redraws
    result = view.click_cb(2, 3)
    assert result.accepted is False
    assert view.redraws == redraws
    assert ctrl.game.get_current_player() == WHITE
    assert len(statuses) == 2


def test_capture_is_shown():
    view, statuses, ctrl = make(size=5)
    for r, c in [(2, 2), (1, 2), (4, 4), (3, 2), (4, 0), (2, 1), (0, 0)]:
        view.click_cb(r, c)
    result = view.click_cb(2, 3)
    assert result.captured_coordinates == [(2, 2)]
    assert view.board[2][2] == EMPTY
    assert statuses[-1] == "Black to move  (captures: Black 0, White 1)"


def test_reset():
    view, statuses, ctrl = make()
    view.click_cb(4, 4)
    ctrl.reset()
    assert view.last_stone is None
    assert all(cell == EMPTY for row in view.board for cell in row)
    assert statuses[-1] == "Black to move  (captures: Black 0, White 0)"
    assert ctrl.last_result is None
