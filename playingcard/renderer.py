"""
renderer.py: Paints one playing card onto a surface.

Four outcomes, decided in this order:
  1. Face down:   the staggered diamond back pattern (back.py)
  2. Joker:       one large joker glyph in the middle
  3. Numeral/Ace: pips from the layout table, mirrored where the table says so
  4. Face card:   the J/Q/K stick-figure silhouette, drawn once

Cards 2-4 also get the rank + suit corner mark, mirrored into the opposite
corner. Every call repaints the whole surface, so output depends only on the
card, the render state and the surface size.

The UI shell owns the surface and calls render() whenever the card is
selected, flipped or zoomed.
"""

import io
import logging
from dataclasses import dataclass

from PIL import Image

from .back import tile_back
from .card import CardIdentity, Suit
from .fonts import DEFAULT_FONT_FAMILY
from .layout import (BASE_FONT_SIZE, CORNER_RANK_Y, CORNER_SUIT_X, CORNER_SUIT_Y,
                     JOKER_CENTER, JOKER_SCALE, REF_H, REF_W, layout_for)
from .mirror import draw_mirrored
from .surface import BLACK, WHITE, Affine, ImageSurface, Surface

logger = logging.getLogger(__name__)

# ── Design Constants ─────────────────────────────────────────────────────────

MIN_SCALE = 0.30
MAX_SCALE = 2.50

RED_SELECTED = (51, 255, 255)       # teal
RED_NORMAL = (191, 0, 0)            # dark red
BLACK_SELECTED = WHITE
BLACK_NORMAL = BLACK
JOKER_SELECTED = (0, 179, 255)      # cyan-blue
JOKER_NORMAL = (255, 69, 0)         # orange-red


# ── Render State ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class RenderState:
    selected: bool = False
    show_back: bool = False
    scale: float = 1.0
    surface_width: int = REF_W
    surface_height: int = REF_H

    def __post_init__(self):
        if not self.scale > 0:
            raise ValueError(f"scale must be positive, got {self.scale}")
        if self.surface_width <= 0 or self.surface_height <= 0:
            raise ValueError(f"Surface size must be positive, got "
                             f"{self.surface_width}x{self.surface_height}")

    @classmethod
    def for_scale(cls, scale: float, selected: bool = False,
                  show_back: bool = False) -> "RenderState":
        """State whose surface is exactly the reference frame times ``scale``."""
        if not scale > 0:
            raise ValueError(f"scale must be positive, got {scale}")
        return cls(selected=selected, show_back=show_back, scale=scale,
                   surface_width=max(1, round(REF_W * scale)),
                   surface_height=max(1, round(REF_H * scale)))

    @property
    def base_font_size(self) -> float:
        return BASE_FONT_SIZE * self.scale


def clamp_scale(scale: float) -> float:
    """Pin a requested zoom level into [MIN_SCALE, MAX_SCALE]."""
    return min(MAX_SCALE, max(MIN_SCALE, scale))


def card_color(suit: Suit, selected: bool):
    if suit is Suit.NONE:
        return JOKER_SELECTED if selected else JOKER_NORMAL
    if suit.is_red:
        return RED_SELECTED if selected else RED_NORMAL
    return BLACK_SELECTED if selected else BLACK_NORMAL


# ── Drawing Steps ────────────────────────────────────────────────────────────

def _draw_joker(surface: Surface, identity: CardIdentity, state: RenderState,
                font_family):
    size = state.base_font_size * JOKER_SCALE
    half = size / 2
    cx, cy = JOKER_CENTER
    surface.set_fill(card_color(identity.suit, state.selected))
    surface.set_font(font_family, size)
    surface.draw_text(identity.glyph, cx * state.scale - half, cy * state.scale + half)


def _draw_face(surface: Surface, identity: CardIdentity, state: RenderState,
               font_family):
    s = state.scale
    entry = layout_for(identity.rank)
    pip_size = state.base_font_size * entry.pip_scale
    half = pip_size * 0.5
    glyph = identity.glyph

    surface.set_fill(card_color(identity.suit, state.selected))
    surface.set_font(font_family, pip_size)

    def stamp_pips(dx, dy):
        for x, y in entry.mirrored_pips:
            surface.draw_text(glyph, x * s - half + dx, y * s + half + dy)

    if entry.mirrored_pips:
        draw_mirrored(surface, stamp_pips, state.surface_width, state.surface_height)
    for x, y in entry.pips:
        surface.draw_text(glyph, x * s - half, y * s + half)

    # Silhouettes hang above their anchor rather than sitting on it
    for frag in entry.silhouette:
        surface.draw_text(frag.text, frag.x * s - half, frag.y * s - half)

    rank_text = identity.rank_name
    corner_x = entry.corner_x_at(s)
    surface.set_font(font_family, state.base_font_size)

    def stamp_corner(dx, dy):
        surface.draw_text(rank_text, corner_x + dx, CORNER_RANK_Y * s + dy)
        surface.draw_text(glyph, CORNER_SUIT_X * s + dx, CORNER_SUIT_Y * s + dy)

    draw_mirrored(surface, stamp_corner, state.surface_width, state.surface_height)


# ── Public API ───────────────────────────────────────────────────────────────

def render(identity: CardIdentity, state: RenderState, surface: Surface,
           font_family: str = DEFAULT_FONT_FAMILY):
    """Repaint ``surface`` with ``identity`` as described by ``state``."""
    assert isinstance(identity, CardIdentity), f"not a CardIdentity: {identity!r}"

    surface.set_transform(Affine.identity())
    surface.set_fill(BLACK if state.selected else WHITE)
    surface.fill_rect(0, 0, state.surface_width, state.surface_height)

    if state.show_back:
        tile_back(surface, state.surface_width, state.surface_height,
                  state.base_font_size, state.selected, font_family)
    elif identity.is_joker:
        _draw_joker(surface, identity, state, font_family)
    else:
        _draw_face(surface, identity, state, font_family)


def render_card(identity: CardIdentity, scale: float = 1.0, selected: bool = False,
                show_back: bool = False,
                font_family: str = DEFAULT_FONT_FAMILY) -> Image.Image:
    """Render onto a fresh image sized to the card. Returns the Pillow image."""
    state = RenderState.for_scale(scale, selected=selected, show_back=show_back)
    surface = ImageSurface(state.surface_width, state.surface_height)
    render(identity, state, surface, font_family)
    logger.debug("Rendered %s at %.2fx (%dx%d)", identity, scale,
                 state.surface_width, state.surface_height)
    return surface.image


def render_png(identity: CardIdentity, scale: float = 1.0, selected: bool = False,
               show_back: bool = False,
               font_family: str = DEFAULT_FONT_FAMILY) -> io.BytesIO:
    """Same as render_card(), encoded as PNG. Returns BytesIO PNG."""
    img = render_card(identity, scale, selected, show_back, font_family)
    buf = io.BytesIO()
    img.save(buf, format="PNG", optimize=True)
    buf.seek(0)
    return buf


# ── Quick test ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    import os
    import tempfile

    logging.basicConfig(level=logging.INFO, format="[playingcard] %(message)s")
    out_dir = tempfile.gettempdir()

    samples = [
        ("ace_of_spades", CardIdentity(Suit.SPADE, 1), {}),
        ("eight_of_hearts", CardIdentity(Suit.HEART, 8), {}),
        ("ten_of_clubs_selected", CardIdentity(Suit.CLUB, 10), {"selected": True}),
        ("jack_of_diamonds", CardIdentity(Suit.DIAMOND, 11), {"scale": 0.5}),
        ("joker", CardIdentity(Suit.NONE), {}),
        ("back", CardIdentity(Suit.SPADE, 1), {"show_back": True}),
    ]
    for name, card, opts in samples:
        path = os.path.join(out_dir, f"card_{name}.png")
        with open(path, "wb") as f:
            f.write(render_png(card, **opts).read())
        print(f"✅ {path}")
