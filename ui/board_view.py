# ui/board_view.py
from typing import Callable, Optional, Tuple

import gi
import cairo

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk

from stonego.board_state import EMPTY
from stonego.settings import DEBUG, DEFAULT_STYLE
from ui.goban_draw import on_draw
from ui.layout import compute_layout, point_from_coords


class BoardView(Gtk.Box):
    def __init__(self, board_size: int = 9, style: Optional[dict] = None):
        super().__init__(orientation=Gtk.Orientation.VERTICAL)

        self.board_size = board_size
        self.style = dict(DEFAULT_STYLE) if style is None else {**DEFAULT_STYLE, **style}

        # state
        self.board_state = [[EMPTY] * board_size for _ in range(board_size)]
        self._last_stone: Optional[Tuple[int, int, str]] = None
        self._layout = {}

        # drawing area
        self.darea = Gtk.DrawingArea()
        self.darea.set_hexpand(True)
        self.darea.set_vexpand(True)
        self.darea.set_draw_func(self.on_draw, None)

        click = Gtk.GestureClick.new()
        click.connect("pressed", self._on_pressed)
        self.darea.add_controller(click)

        self.append(self.darea)

        self._click_cb: Optional[Callable[[int, int], None]] = None

    # Public API
    def set_board(self, board_state):
        self.board_state = [row[:] for row in board_state]
        if len(board_state) != self.board_size:
            self.board_size = len(board_state)
        self.darea.queue_draw()

    def set_last_stone(self, coords: Optional[Tuple[int, int, str]]):
        self._last_stone = coords
        self.darea.queue_draw()

    def on_click(self, callback: Callable[[int, int], None]):
        self._click_cb = callback

    # Events
    def _on_pressed(self, gesture, n_press, x, y):
        if not self._layout:
            self._layout = compute_layout(self.board_size, self.darea.get_width(), self.darea.get_height(),
                                          self.style)
        pt = point_from_coords(self._layout, self.board_size, x, y)
        if DEBUG:
            print(f"[BoardView] _on_pressed: n_press={n_press} x={x:.1f} y={y:.1f} -> pt={pt}")
        if pt is None or self._click_cb is None:
            return
        try:
            self._click_cb(pt[0], pt[1])
        except Exception as e:
            print("[BoardView] click callback error:", e)

    # Drawing
    def on_draw(self, area, cr: cairo.Context, width: int, height: int, user_data):
        self._layout = on_draw(cr, self.board_size, width, height, self.board_state, self._last_stone, self.style)
