# ui/layout.py
"""Board geometry in widget pixels. No drawing here, so it is usable without cairo."""
from typing import Dict, List, Optional, Tuple

from stonego.settings import DEFAULT_STYLE


def grid_from_cell_and_stone_place(board_size: int, cell: float, stone_left: float, stone_top: float) -> tuple[
    float, float, float, float, float, float, float, float]:
    # grid intersections origin (top-left) is half-cell inside stone_area
    half = cell / 2.0
    x0 = stone_left + half
    y0 = stone_top + half
    grid_span = (board_size - 1) * cell
    return (x0, y0, x0 + grid_span, y0 + grid_span, cell, x0, y0, grid_span)


def compute_layout(board_size: int, width: int, height: int, style: Optional[Dict] = None) -> Dict:
    style = DEFAULT_STYLE if style is None else {**DEFAULT_STYLE, **style}
    margin = style['outer_margin_fixed']
    cell = max(style['min_cell'], (min(width, height) - 2 * margin) / board_size)
    stone_side = cell * board_size
    stone_left = (width - stone_side) / 2.0
    stone_top = (height - stone_side) / 2.0
    return {
        "viewport": (stone_left - margin, stone_top - margin, stone_side + 2 * margin, stone_side + 2 * margin),
        "stone_area": (stone_left, stone_top, stone_side, stone_side),
        "grid": grid_from_cell_and_stone_place(board_size, cell, stone_left, stone_top),
    }


def cell_center_coords(layout: Dict, r: int, c: int) -> Tuple[float, float, float]:
    grid_left, grid_top, grid_right, grid_bottom, cell, x0, y0, grid_span = layout["grid"]
    return x0 + c * cell, y0 + r * cell, cell


def point_from_coords(layout: Dict, board_size: int, x: float, y: float) -> Optional[Tuple[int, int]]:
    """Nearest intersection to widget pixel (x, y), or None off the board."""
    grid_left, grid_top, grid_right, grid_bottom, cell, x0, y0, grid_span = layout["grid"]
    if cell <= 0:
        return None
    c = int(round((x - x0) / cell))
    r = int(round((y - y0) / cell))
    if 0 <= r < board_size and 0 <= c < board_size:
        return r, c
    return None


def star_points(board_size: int) -> List[Tuple[int, int]]:
    if board_size >= 13:
        edge = 3
    elif board_size >= 7:
        edge = 2
    else:
        return []
    far = board_size - 1 - edge
    points = {(r, c) for r in (edge, far) for c in (edge, far)}
    if board_size % 2 == 1:
        mid = board_size // 2
        points.add((mid, mid))
        if board_size >= 19:
            points.update({(edge, mid), (mid, edge), (mid, far), (far, mid)})
    return sorted(points)
