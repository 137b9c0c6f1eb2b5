# stonego/board_state.py
from collections import namedtuple
from typing import Iterator, List


# Exceptions
class IllegalMove(Exception): pass


class OutOfBoundsError(IllegalMove): pass


class OccupiedCellError(IllegalMove): pass


class InvalidSizeError(ValueError): pass


EMPTY = '.'
BLACK = 'B'
WHITE = 'W'
PLAYERS = (BLACK, WHITE)

# right, down, left, up
DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))

Coordinate = namedtuple('Coordinate', ['row', 'col'])


def opponent(color):
    return WHITE if color == BLACK else BLACK


def _empty_grid(size):
    if not isinstance(size, int) or isinstance(size, bool) or size <= 0:
        raise InvalidSizeError(f"Board size must be a positive integer, got {size!r}")
    return [[EMPTY] * size for _ in range(size)]


class BoardState:
    """Square grid of EMPTY/BLACK/WHITE cells plus the side to move."""

    def __init__(self, size=9):
        self._board = _empty_grid(size)
        self.size = size
        self.to_move = BLACK

    # --- helpers ---
    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def _check_bounds(self, row, col):
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(f"({row}, {col}) is outside a {self.size}x{self.size} board")

    def neighbors(self, row, col) -> Iterator[Coordinate]:
        """In-bounds orthogonal neighbours: right, down, left, up."""
        for dr, dc in DIRECTIONS:
            nr, nc = row + dr, col + dc
            if 0 <= nr < self.size and 0 <= nc < self.size:
                yield Coordinate(nr, nc)

    # --- cells ---
    def get(self, row, col):
        self._check_bounds(row, col)
        return self._board[row][col]

    def place(self, row, col, player):
        """Put player's stone on an empty cell. Raises before mutating anything."""
        if player not in PLAYERS:
            raise ValueError(f"Unknown player {player!r}")
        self._check_bounds(row, col)
        if self._board[row][col] != EMPTY:
            raise OccupiedCellError(f"({row}, {col}) is occupied")
        self._board[row][col] = player

    def remove(self, row, col):
        self._check_bounds(row, col)
        self._board[row][col] = EMPTY

    # --- side to move ---
    def active_player(self):
        return self.to_move

    def set_active_player(self, player):
        if player not in PLAYERS:
            raise ValueError(f"Unknown player {player!r}")
        self.to_move = player

    def toggle_player(self):
        self.to_move = opponent(self.to_move)
        return self.to_move

    def reset(self, size=None):
        if size is None:
            size = self.size
        self._board = _empty_grid(size)
        self.size = size
        self.to_move = BLACK

    # utility for tests and redraws
    def get_board(self) -> List[List[str]]:
        """Return a copy of the grid: list of rows of EMPTY/BLACK/WHITE."""
        return [row[:] for row in self._board]

    def pretty(self):
        return '\n'.join(''.join(row) for row in self._board)
