# stonego/settings.py
"""
Runtime configuration.

Values come from stonego.env (next to this file) via python-dotenv, real
environment variables take precedence.
"""
import os
from typing import Tuple

from dotenv import load_dotenv

ENV_PATH = os.path.join(os.path.dirname(__file__), "stonego.env")
if os.path.exists(ENV_PATH):
    load_dotenv(ENV_PATH, override=False)


# Helpers to read env with defaults
def getf(name: str, default: float) -> float:
    v = os.getenv(name)
    return float(v) if v is not None else float(default)


def geti(name: str, default: int) -> int:
    v = os.getenv(name)
    return int(v) if v is not None else int(default)


def gets(name: str, default: str) -> str:
    v = os.getenv(name)
    return v if v is not None else default


def getb(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return bool(default)
    return v.strip().lower() in ("1", "true", "yes", "on")


def get_rgb(name: str, default: str) -> Tuple[float, float, float]:
    """'#RRGGBB' or 'r,g,b' (floats 0..1) -> (r, g, b)"""
    rgb = gets(name, default).strip()
    if "," in rgb:
        return tuple(float(x) for x in rgb.split(","))
    rgb = rgb.lstrip('#')
    if len(rgb) != 6:
        raise ValueError(f"{name}: expected #RRGGBB, got {rgb!r}")
    return tuple(int(rgb[j:j + 2], 16) / 255 for j in range(0, 6, 2))


BOARD_SIZE = geti("BOARD_SIZE", 9)
DEBUG = getb("STONEGO_DEBUG", False)

WINDOW_WIDTH = geti("WINDOW_WIDTH", 640)
WINDOW_HEIGHT = geti("WINDOW_HEIGHT", 720)

# Board style (r, g, b) colours and geometry factors
DEFAULT_STYLE = {
    'board_bg': get_rgb("BOARD_BG", "#C0742A"),
    'line_color': get_rgb("LINE_COLOR", "0.08,0.08,0.08"),
    'star_color': get_rgb("STAR_COLOR", "0.08,0.08,0.08"),
    'stone_black': get_rgb("STONE_BLACK", "0.03,0.03,0.03"),
    'stone_white': get_rgb("STONE_WHITE", "0.99,0.99,0.99"),
    'stone_radius_factor': getf("STONE_RADIUS_FACTOR", 0.46),
    'line_width_factor': getf("LINE_WIDTH_FACTOR", 0.03),
    'hoshi_radius_factor': getf("HOSHI_RADIUS_FACTOR", 0.12),
    'last_stone_mark_radius': getf("LAST_STONE_MARK_RADIUS", 0.345),
    'outer_margin_fixed': getf("OUTER_MARGIN_FIXED", 12),
    'min_cell': getf("MIN_CELL", 6.0),
}
