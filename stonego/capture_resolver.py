# stonego/capture_resolver.py
from typing import List, Tuple

from stonego.board_state import BoardState, Coordinate, EMPTY, opponent


def liberty_search(board: BoardState, start: Coordinate, target_color) -> Tuple[bool, List[Coordinate]]:
    """
    Walk the target_color group containing start.

    Returns (captured, group). captured is True when no member of the group
    touches an EMPTY cell; board edges and stones of any other colour are walls.
    group lists members in depth-first preorder (right, down, left, up) and is
    empty when a liberty was found, since the search stops at the first one.
    The board is only read.
    """
    group = []
    visited = set()
    stack = [start]
    while stack:
        p = stack.pop()
        if p in visited:
            continue
        visited.add(p)
        group.append(p)
        pending = []
        for n in board.neighbors(*p):
            v = board.get(*n)
            if v == EMPTY:
                return False, []
            if v == target_color and n not in visited:
                pending.append(n)
        # reversed so the first direction is popped first
        stack.extend(reversed(pending))
    return True, group


def resolve_captures(board: BoardState, row, col, just_played_by) -> List[Coordinate]:
    """
    Remove every opposing group next to (row, col) left without liberties.

    Call right after just_played_by's stone lands on (row, col). Returns the
    removed coordinates, group by group, in neighbour order right, down, left, up.
    The just-played stone's own group is not examined.
    """
    board.get(row, col)  # bounds check
    enemy = opponent(just_played_by)
    removed = []
    for n in board.neighbors(row, col):
        # a group already taken through an earlier neighbour reads EMPTY here
        if board.get(*n) != enemy:
            continue
        captured, group = liberty_search(board, n, enemy)
        if not captured:
            continue
        for p in group:
            board.remove(*p)
        removed.extend(group)
    return removed
