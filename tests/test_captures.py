# tests/test_captures.py
from stonego.board_state import BoardState, Coordinate, EMPTY, BLACK, WHITE
from stonego.capture_resolver import liberty_search, resolve_captures


def setup(size, black=(), white=()):
    b = BoardState(size=size)
    for r, c in black:
        b.place(r, c, BLACK)
    for r, c in white:
        b.place(r, c, WHITE)
    return b


def play(b, r, c, color):
    b.place(r, c, color)
    return resolve_captures(b, r, c, color)


def test_single_stone_capture_in_the_middle():
    b = setup(9, black=[(4, 4)], white=[(3, 4), (5, 4), (4, 3)])
    captured = play(b, 4, 5, WHITE)
    assert captured == [Coordinate(4, 4)]
    assert b.get(4, 4) == EMPTY
    assert b.get(4, 5) == WHITE


def test_stone_with_a_liberty_is_not_captured():
    b = setup(9, white=[(0, 0)])
    assert play(b, 1, 0, BLACK) == []
    assert b.get(0, 0) == WHITE


def test_corner_capture_uses_edges_as_walls():
    b = setup(9, black=[(0, 1)], white=[(0, 0)])
    assert play(b, 1, 0, BLACK) == [(0, 0)]
    assert b.get(0, 0) == EMPTY


def test_edge_capture():
    b = setup(9, black=[(0, 3), (1, 4)], white=[(0, 4)])
    assert play(b, 0, 5, BLACK) == [(0, 4)]


def test_two_stone_group_removed_as_one_unit():
    b = setup(5, black=[(1, 0), (1, 1)], white=[(0, 0), (0, 1)])
    captured = play(b, 0, 2, BLACK)
    assert captured == [Coordinate(0, 1), Coordinate(0, 0)]
    assert b.get(0, 0) == EMPTY and b.get(0, 1) == EMPTY


def test_group_touching_two_sides_is_removed_once():
    b = setup(3, black=[(0, 2), (1, 2), (2, 1), (2, 0)], white=[(0, 1), (1, 1), (1, 0)])
    captured = play(b, 0, 0, BLACK)
    assert captured == [(0, 1), (1, 1), (1, 0)]
    assert b.pretty() == "B.B\n..B\nBB."


def test_one_move_captures_two_groups():
    b = setup(5, black=[(1, 0), (1, 2), (0, 3)], white=[(0, 0), (0, 2)])
    captured = play(b, 0, 1, BLACK)
    assert captured == [(0, 2), (0, 0)]


def test_only_adjacent_groups_are_checked():
    # (4,4) has no liberties but does not touch the played stone
    b = setup(9, black=[(4, 4)], white=[(3, 4), (5, 4), (4, 3), (4, 5)])
    assert play(b, 8, 8, WHITE) == []
    assert b.get(4, 4) == BLACK


def test_played_stone_own_group_is_not_checked():
    b = setup(3, black=[(0, 1), (1, 0)])
    assert play(b, 0, 0, WHITE) == []
    assert b.get(0, 0) == WHITE


def test_failed_search_leaves_board_identical():
    b = setup(9, black=[(1, 0)], white=[(0, 0), (0, 1), (0, 2), (1, 2)])
    b.place(1, 1, BLACK)
    before = b.get_board()
    assert resolve_captures(b, 1, 1, BLACK) == []
    assert b.get_board() == before


def test_liberty_search_one_by_one_board():
    b = setup(1, black=[(0, 0)])
    assert liberty_search(b, Coordinate(0, 0), BLACK) == (True, [(0, 0)])
    assert b.get(0, 0) == BLACK


def test_liberty_search_does_not_mutate():
    b = setup(5, black=[(1, 0), (1, 1)], white=[(0, 0), (0, 1)])
    before = b.get_board()
    captured, group = liberty_search(b, Coordinate(0, 0), WHITE)
    assert captured is False
    assert group == []
    assert b.get_board() == before


def test_snake_group_on_large_board():
    # a long chain must not depend on recursion depth
    n = 41
    b = BoardState(size=n)
    for c in range(n):
        b.place(0, c, WHITE)
    for c in range(n - 1):
        b.place(1, c, BLACK)
    captured = play(b, 1, n - 1, BLACK)
    assert len(captured) == n
    assert all(b.get(0, c) == EMPTY for c in range(n))
