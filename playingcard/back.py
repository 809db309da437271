"""
back.py: The face-down pattern: rows of small diamonds laid like bricks.

Each row is offset by half a column from the one above it. Rows start one pitch
above the top edge and run two pitches past the bottom so glyph ascenders and
descenders never leave a gap at either edge.
"""

import math
from typing import List, Optional, Tuple

from .surface import Surface

BACK_GLYPH = "♦"

BACK_SELECTED = (51, 255, 255)      # light cyan
BACK_NORMAL = (191, 0, 0)           # dark red


def motif_font_size(font_size: float) -> float:
    return font_size / 1.5


def back_pitch(font_size: float) -> Tuple[int, int]:
    """Column and row pitch (w, h) in pixels for a base font size."""
    if font_size <= 0:
        raise ValueError(f"font_size must be positive, got {font_size}")
    motif = motif_font_size(font_size) * 0.9
    return math.ceil(motif * 1.2), math.ceil(motif * 0.6)


def back_pattern_positions(width: float, height: float,
                           font_size: float) -> List[Tuple[int, int]]:
    """Baseline-left positions of every back glyph, row by row."""
    w, h = back_pitch(font_size)
    positions = []
    row = 0
    y = -h
    while y <= height + 2 * h:
        x = 0 if row % 2 == 0 else -(w // 2)
        while x <= width:
            positions.append((x, y))
            x += w
        y += h
        row += 1
    return positions


def tile_back(surface: Surface, width: float, height: float, font_size: float,
              selected: bool, font_family: Optional[str] = None) -> List[Tuple[int, int]]:
    """Stamp the back pattern onto ``surface``. Returns the positions used."""
    positions = back_pattern_positions(width, height, font_size)
    surface.set_fill(BACK_SELECTED if selected else BACK_NORMAL)
    surface.set_font(font_family, motif_font_size(font_size))
    for x, y in positions:
        surface.draw_text(BACK_GLYPH, x, y)
    return positions
