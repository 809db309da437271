"""Render a single playing card (face, back or joker) onto a pixel surface."""

from .card import (CardIdentity, Suit, compare, rank_name, suit_glyph,  # noqa: F401
                   suit_name)
from .errors import (FormatFailure, InvalidRank, InvalidSuitOrdinal,  # noqa: F401
                     ValidationError)
from .renderer import (MAX_SCALE, MIN_SCALE, RenderState, clamp_scale,  # noqa: F401
                       render, render_card, render_png)
from .surface import Affine, ImageSurface, RecordingSurface, Surface  # noqa: F401

__version__ = "0.1.0"
