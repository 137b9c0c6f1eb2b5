# ui/controller.py
from typing import Callable, Optional

from stonego.board_state import BLACK, WHITE
from stonego.game import Game, PlacementResult
from stonego.settings import DEBUG

PLAYER_NAMES = {BLACK: "Black", WHITE: "White"}


class GameController:
    """
    Glue between a board view and a Game.

    view is expected to provide on_click(cb), set_board(grid) and
    set_last_stone(coords or None); set_status receives the text for the
    current-player label.
    """

    def __init__(self, view, game: Optional[Game] = None, set_status: Optional[Callable[[str], None]] = None):
        self.view = view
        self.game = game if game is not None else Game()
        self._set_status = set_status
        self.last_result: Optional[PlacementResult] = None
        try:
            self.view.on_click(self.on_board_click)
        except Exception as e:
            print("[GameController] failed to wire board view callbacks", e)
        self.refresh()

    def on_board_click(self, r: int, c: int):
        player = self.game.get_current_player()
        result = self.game.place_stone(r, c)
        self.last_result = result
        if not result.accepted:
            if DEBUG:
                print("[GameController] ignored click at", (r, c))
            return result
        if DEBUG and result.captured_coordinates:
            print("[GameController] captured:", result.captured_coordinates)
        self.view.set_last_stone((r, c, player))
        self.refresh()
        return result

    def reset(self):
        if DEBUG:
            print("[GameController] reset")
        self.game.reset_game()
        self.last_result = None
        self.view.set_last_stone(None)
        self.refresh()

    def refresh(self):
        self.view.set_board(self.game.get_board())
        if self._set_status is not None:
            self._set_status(self.status_text())

    def status_text(self) -> str:
        caps = self.game.captures
        return "%s to move  (captures: Black %d, White %d)" % (
            PLAYER_NAMES[self.game.get_current_player()], caps[BLACK], caps[WHITE])
