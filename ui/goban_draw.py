# ui/goban_draw.py
"""
Cairo drawing of the board:
- draw_panel (outside area and wooden board)
- draw_grid
- draw_hoshi
- draw_stones
- draw_last_stone_mark

Style comes from stonego.settings.DEFAULT_STYLE (stonego.env).
"""
import math
from typing import Dict, List, Optional, Tuple

import cairo

from stonego.board_state import BLACK, EMPTY
from stonego.settings import DEFAULT_STYLE
from ui.layout import compute_layout, star_points


def stones_from_state(board_state: List[List[str]]) -> List[Tuple[int, int, str]]:
    return [
        (row_n, column_n, color)
        for row_n, row in enumerate(board_state)
        for column_n, color in enumerate(row)
        if color != EMPTY
    ]


def draw_panel(cr: cairo.Context, layout, width: int, height: int, style: Dict = DEFAULT_STYLE):
    cr.set_source_rgb(0.92, 0.92, 0.92)
    cr.rectangle(0, 0, width, height)
    cr.fill()

    vp_left, vp_top, vp_w, vp_h = layout["viewport"]
    cr.set_source_rgb(*style['board_bg'])
    cr.rectangle(vp_left, vp_top, vp_w, vp_h)
    cr.fill()


def draw_grid(cr: cairo.Context, board_size: int, layout, style: Dict = DEFAULT_STYLE):
    grid_left, grid_top, grid_right, grid_bottom, cell, x0, y0, grid_span = layout["grid"]
    line_width = max(1.0, cell * style['line_width_factor'])
    cr.set_source_rgb(*style['line_color'])
    cr.set_line_width(line_width)
    for i in range(board_size):
        xi = x0 + i * cell
        cr.move_to(xi, grid_top)
        cr.line_to(xi, grid_bottom)
    for j in range(board_size):
        yj = y0 + j * cell
        cr.move_to(grid_left, yj)
        cr.line_to(grid_right, yj)
    cr.stroke()


def draw_hoshi(cr: cairo.Context, board_size: int, layout, style: Dict = DEFAULT_STYLE):
    grid_left, grid_top, grid_right, grid_bottom, cell, x0, y0, grid_span = layout["grid"]
    hoshi_r = max(1.0, cell * style['hoshi_radius_factor'])
    cr.set_source_rgb(*style['star_color'])
    for r, c in star_points(board_size):
        cr.arc(x0 + c * cell, y0 + r * cell, hoshi_r, 0, 2.0 * math.pi)
        cr.fill()


def draw_stones(cr: cairo.Context, layout, stones: List[Tuple[int, int, str]], style: Dict = DEFAULT_STYLE):
    grid_left, grid_top, grid_right, grid_bottom, cell, x0, y0, grid_span = layout["grid"]
    stone_r = cell * style['stone_radius_factor']
    line_width = max(1.0, cell * style['line_width_factor'])
    for r, c, color in stones:
        cx = x0 + c * cell
        cy = y0 + r * cell
        if color == BLACK:
            cr.set_source_rgb(*style['stone_black'])
            cr.arc(cx, cy, stone_r, 0, 2.0 * math.pi)
            cr.fill()
        else:
            cr.set_source_rgb(*style['stone_white'])
            cr.arc(cx, cy, stone_r, 0, 2.0 * math.pi)
            cr.fill_preserve()
            cr.set_source_rgb(0, 0, 0)
            cr.set_line_width(max(1.0, line_width * 0.9))
            cr.stroke()


def draw_last_stone_mark(cr: cairo.Context, layout, last_stone: Optional[Tuple[int, int, str]],
                         style: Dict = DEFAULT_STYLE):
    if last_stone is None:
        return
    grid_left, grid_top, grid_right, grid_bottom, cell, x0, y0, grid_span = layout["grid"]
    mark_r = cell * style['stone_radius_factor'] * style['last_stone_mark_radius']
    r, c, color = last_stone
    # contrasting dot: white on black, black on white
    cr.set_source_rgb(*style['stone_white' if color == BLACK else 'stone_black'])
    cr.arc(x0 + c * cell, y0 + r * cell, mark_r, 0, 2.0 * math.pi)
    cr.fill()


def on_draw(cr: cairo.Context, board_size: int, width: int, height: int, board_state: List[List[str]],
            last_stone: Optional[Tuple[int, int, str]] = None, style: Dict = DEFAULT_STYLE):
    layout = compute_layout(board_size, width, height, style)
    draw_panel(cr, layout, width, height, style)
    draw_grid(cr, board_size, layout, style)
    draw_hoshi(cr, board_size, layout, style)
    draw_stones(cr, layout, stones_from_state(board_state), style)
    draw_last_stone_mark(cr, layout, last_stone, style)
    return layout
