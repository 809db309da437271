"""
layout.py: Where things go on a card face.

Every coordinate here lives in the 297 x 421 reference frame and is multiplied
by the render scale before drawing. Numeral pips are split into two groups:

  pips           drawn once, as authored (middle row pips, lone center pips)
  mirrored_pips  drawn as authored and again rotated 180° about the card
                 center, which produces the matching pip on the bottom half

so len(pips) + 2 * len(mirrored_pips) is always the number of pips on the card.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from .errors import InvalidRank

# ── Reference Frame ──────────────────────────────────────────────────────────

REF_W = 297
REF_H = 421
BASE_FONT_SIZE = 48     # font size of the corner marks at scale 1.0

Point = Tuple[float, float]


@dataclass(frozen=True)
class SilhouetteFragment:
    text: str
    x: float
    y: float


@dataclass(frozen=True)
class LayoutEntry:
    rank: int
    pip_scale: float                    # pip font size / BASE_FONT_SIZE
    pips: Tuple[Point, ...] = ()
    mirrored_pips: Tuple[Point, ...] = ()
    silhouette: Tuple[SilhouetteFragment, ...] = ()
    corner_x: float = 19
    corner_whole_px: bool = False       # round the scaled corner x up to a pixel

    def corner_x_at(self, scale: float) -> float:
        x = self.corner_x * scale
        return math.ceil(x) if self.corner_whole_px else x

    @property
    def pip_count(self) -> int:
        return len(self.pips) + 2 * len(self.mirrored_pips)

    @property
    def is_mirrored(self) -> bool:
        return bool(self.mirrored_pips)


# ── Corner Marks ─────────────────────────────────────────────────────────────

CORNER_RANK_Y = BASE_FONT_SIZE          # baseline of the rank text
CORNER_SUIT_X = 9
CORNER_SUIT_Y = BASE_FONT_SIZE * 2      # baseline of the small suit glyph

# ── Joker ────────────────────────────────────────────────────────────────────

JOKER_SCALE = 4.0
JOKER_CENTER = (149, 175)

# ── Pip Anchors ──────────────────────────────────────────────────────────────

_TOP_PAIR = ((205, 70), (93, 70))
_MID_PAIR = ((205, 200), (93, 200))


def _silhouette(x, head, body, legs):
    return (
        SilhouetteFragment(head, x, 175),
        SilhouetteFragment(body, x, 252),
        SilhouetteFragment(legs, x, 329),
    )


LAYOUT = {
    1: LayoutEntry(1, 3.0, pips=((149, 187),)),
    2: LayoutEntry(2, 1.8, mirrored_pips=((149, 80),)),
    3: LayoutEntry(3, 1.7, pips=((149, 200),), mirrored_pips=((149, 70),)),
    4: LayoutEntry(4, 1.7, mirrored_pips=_TOP_PAIR, corner_x=16,
                   corner_whole_px=True),
    5: LayoutEntry(5, 1.7, pips=((149, 200),), mirrored_pips=_TOP_PAIR),
    6: LayoutEntry(6, 1.7, pips=_MID_PAIR, mirrored_pips=_TOP_PAIR),
    7: LayoutEntry(7, 1.7, pips=((149, 135),) + _MID_PAIR, mirrored_pips=_TOP_PAIR),
    8: LayoutEntry(8, 1.7, pips=_MID_PAIR,
                   mirrored_pips=((205, 70), (149, 135), (93, 70))),
    9: LayoutEntry(9, 1.7, pips=((149, 200),),
                   mirrored_pips=((205, 50), (93, 50), (205, 150), (93, 150))),
    # "10" is two characters wide, so its corner mark hugs the left edge
    10: LayoutEntry(10, 1.7,
                    mirrored_pips=((205, 50), (93, 50), (149, 100), (205, 150), (93, 150)),
                    corner_x=1),
    11: LayoutEntry(11, 1.1, silhouette=_silhouette(42, "　　●", "　＜█＞", "　／　＼")),
    12: LayoutEntry(12, 1.1, silhouette=_silhouette(95, "　●／", "＜█", "／　＼"),
                    corner_x=15),
    13: LayoutEntry(13, 1.1, silhouette=_silhouette(95, "＼●", "　█＞", "／　）"),
                    corner_x=16),
}


def layout_for(rank: int) -> LayoutEntry:
    try:
        return LAYOUT[rank]
    except (KeyError, TypeError):
        raise InvalidRank(rank) from None


def pip_font_size(rank: int, scale: float) -> float:
    return BASE_FONT_SIZE * scale * layout_for(rank).pip_scale
