# stonego/game.py
import threading
from collections import namedtuple
from typing import List

from stonego.board_state import BoardState, IllegalMove, BLACK, WHITE
from stonego.capture_resolver import resolve_captures
from stonego.settings import BOARD_SIZE, DEBUG

PlacementResult = namedtuple('PlacementResult', ['accepted', 'captured_coordinates', 'next_player'])


class Game:
    """
    One game instance: the entry point used by the UI.

    place_stone + capture resolution + turn change happen under a per-game
    lock, so an observer never sees a half-resolved capture.
    """

    def __init__(self, size=None):
        self.board = BoardState(size=BOARD_SIZE if size is None else size)
        self.move_number = 0
        self.captures = {BLACK: 0, WHITE: 0}  # stones taken by each colour
        self._lock = threading.RLock()

    @property
    def size(self):
        return self.board.size

    # --- main API ---
    def place_stone(self, row, col) -> PlacementResult:
        """Play the side to move at (row, col). Illegal points are rejected without side effects."""
        with self._lock:
            player = self.board.active_player()
            try:
                self.board.place(row, col, player)
            except IllegalMove as e:
                if DEBUG:
                    print("[Game] rejected", (row, col), "for", player, ":", e)
                return PlacementResult(False, [], player)
            captured = resolve_captures(self.board, row, col, player)
            self.captures[player] += len(captured)
            self.move_number += 1
            next_player = self.board.toggle_player()
            if DEBUG:
                print("[Game] move", self.move_number, player, (row, col), "captured:", captured)
            return PlacementResult(True, captured, next_player)

    def get_cell_state(self, row, col):
        return self.board.get(row, col)

    def get_current_player(self):
        return self.board.active_player()

    def reset_game(self):
        with self._lock:
            self.board.reset()
            self.move_number = 0
            self.captures = {BLACK: 0, WHITE: 0}
            if DEBUG:
                print("[Game] reset, size", self.board.size)

    # helpers for the view
    def get_board(self) -> List[List[str]]:
        return self.board.get_board()

    def pretty(self):
        return self.board.pretty()
