"""
mirror.py: Draw something twice so it reads upright from either end of the card.

The second copy is drawn under a 180° rotation about the surface origin with
every coordinate shifted by (-width, -height), which lands it reflected
through the center of the surface:

    (x, y)  ->  (width - x, height - y)
"""

from contextlib import contextmanager
from typing import Callable, Optional

from .surface import Surface


@contextmanager
def rotated_half_turn(surface: Surface):
    """Rotate the surface transform by 180° for the block, then put it back exactly."""
    saved = surface.get_transform()
    surface.set_transform(saved.rotated(180))
    try:
        yield surface
    finally:
        surface.set_transform(saved)


def draw_mirrored(surface: Surface, draw: Callable[[float, float], None],
                  width: Optional[float] = None, height: Optional[float] = None):
    """
    Call ``draw(dx, dy)`` once with (0, 0) and once, rotated, with
    (-width, -height). ``draw`` must add (dx, dy) to every coordinate it
    paints at. Width and height default to the surface size. The transform in
    place on entry is in place again on return, whatever ``draw`` does to it.
    """
    if width is None:
        width = surface.width
    if height is None:
        height = surface.height
    saved = surface.get_transform()
    try:
        draw(0.0, 0.0)
        surface.set_transform(saved)
        with rotated_half_turn(surface):
            draw(-width, -height)
    finally:
        surface.set_transform(saved)
