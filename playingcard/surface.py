"""
surface.py: The drawing surface a card is rendered onto.

A Surface carries the usual 2D drawing state (fill color, font, affine
transform) and exposes the handful of primitives the renderer needs:

    fill_rect(x, y, w, h)
    set_fill(color)
    set_font(family, size)
    draw_text(text, x, y)        # (x, y) is the baseline-left corner
    get_transform() / set_transform(affine)

ImageSurface paints into a Pillow image. RecordingSurface paints nothing and
keeps a list of what would have been painted, in device coordinates.
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from PIL import Image, ImageDraw

from . import fonts

Color = Tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)


# ── Affine Transform ─────────────────────────────────────────────────────────

# cos/sin for quarter turns, so 180° + 180° lands exactly back on identity
_QUARTER_TURNS = {0: (1.0, 0.0), 90: (0.0, 1.0), 180: (-1.0, 0.0), 270: (0.0, -1.0)}


@dataclass(frozen=True)
class Affine:
    """
    2x3 affine matrix, mapping (x, y) to

        (a*x + c*y + e,  b*x + d*y + f)

    in y-down device coordinates.
    """

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @classmethod
    def identity(cls) -> "Affine":
        return cls()

    @property
    def is_identity(self) -> bool:
        return self == Affine()

    @property
    def rotation(self) -> float:
        """Rotation angle in degrees, in [0, 360)."""
        return math.degrees(math.atan2(self.b, self.a)) % 360.0

    def apply(self, x: float, y: float) -> Tuple[float, float]:
        return (self.a * x + self.c * y + self.e,
                self.b * x + self.d * y + self.f)

    def then(self, other: "Affine") -> "Affine":
        """self * other: ``other`` is applied to points first."""
        return Affine(
            self.a * other.a + self.c * other.b,
            self.b * other.a + self.d * other.b,
            self.a * other.c + self.c * other.d,
            self.b * other.c + self.d * other.d,
            self.a * other.e + self.c * other.f + self.e,
            self.b * other.e + self.d * other.f + self.f,
        )

    def rotated(self, degrees: float) -> "Affine":
        """Append a rotation about the current origin."""
        turn = degrees % 360
        if turn in _QUARTER_TURNS:
            cos, sin = _QUARTER_TURNS[turn]
        else:
            rad = math.radians(degrees)
            cos, sin = math.cos(rad), math.sin(rad)
        return self.then(Affine(cos, sin, -sin, cos, 0.0, 0.0))

    def translated(self, dx: float, dy: float) -> "Affine":
        return self.then(Affine(1.0, 0.0, 0.0, 1.0, dx, dy))


# ── Surfaces ─────────────────────────────────────────────────────────────────

class Surface:
    """Drawing state shared by every surface. Subclasses do the painting."""

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.fill: Color = BLACK
        self.font_family: Optional[str] = None
        self.font_size: float = 12.0
        self._transform = Affine()

    def set_fill(self, color: Color):
        self.fill = tuple(color)

    def set_font(self, family: Optional[str], size: float):
        self.font_family = family
        self.font_size = size

    def get_transform(self) -> Affine:
        return self._transform

    def set_transform(self, transform: Affine):
        self._transform = transform

    def fill_rect(self, x: float, y: float, w: float, h: float):
        corners = [self._transform.apply(px, py)
                   for px, py in ((x, y), (x + w, y), (x, y + h), (x + w, y + h))]
        xs = [p[0] for p in corners]
        ys = [p[1] for p in corners]
        self._paint_rect(min(xs), min(ys), max(xs), max(ys))

    def draw_text(self, text: str, x: float, y: float):
        dx, dy = self._transform.apply(x, y)
        self._paint_text(text, dx, dy, self._transform.rotation)

    def _paint_rect(self, x0, y0, x1, y1):
        raise NotImplementedError

    def _paint_text(self, text, x, y, rotation):
        raise NotImplementedError


class ImageSurface(Surface):
    """Surface backed by a Pillow RGB image."""

    def __init__(self, width: int, height: int, background: Color = WHITE):
        super().__init__(width, height)
        self.image = Image.new("RGB", (width, height), background)
        self._draw = ImageDraw.Draw(self.image)

    def _paint_rect(self, x0, y0, x1, y1):
        self._draw.rectangle((x0, y0, x1, y1), fill=self.fill)

    def _paint_text(self, text, x, y, rotation):
        font = fonts.load_font(self.font_family, self.font_size)
        if rotation < 1e-9 or 360.0 - rotation < 1e-9:
            self._draw.text((x, y), text, fill=self.fill, font=font, anchor="ls")
            return

        # Render into a mask, turn the mask, then stamp the fill color through it
        left, top, right, bottom = font.getbbox(text, anchor="ls")
        if right <= left or bottom <= top:
            return
        tile = Image.new("L", (int(right - left), int(bottom - top)), 0)
        ImageDraw.Draw(tile).text((-left, -top), text, fill=255, font=font, anchor="ls")

        # Affine angles turn clockwise on screen, Image.rotate turns counter-clockwise
        turned = tile.rotate(-rotation, resample=Image.BICUBIC, expand=True)

        # Where the baseline origin ended up inside the turned tile
        vx, vy = -left - tile.width / 2, -top - tile.height / 2
        rad = math.radians(rotation)
        ox = turned.width / 2 + vx * math.cos(rad) - vy * math.sin(rad)
        oy = turned.height / 2 + vx * math.sin(rad) + vy * math.cos(rad)

        px, py = int(round(x - ox)), int(round(y - oy))
        self.image.paste(self.fill, (px, py, px + turned.width, py + turned.height), turned)


@dataclass(frozen=True)
class TextOp:
    text: str
    x: float
    y: float
    rotation: float
    font_family: Optional[str]
    font_size: float
    color: Color


@dataclass(frozen=True)
class RectOp:
    x0: float
    y0: float
    x1: float
    y1: float
    color: Color


class RecordingSurface(Surface):
    """Surface that records paint calls (device coordinates) instead of painting."""

    def __init__(self, width: int, height: int):
        super().__init__(width, height)
        self.ops: List[Union[TextOp, RectOp]] = []

    def _paint_rect(self, x0, y0, x1, y1):
        self.ops.append(RectOp(x0, y0, x1, y1, self.fill))

    def _paint_text(self, text, x, y, rotation):
        self.ops.append(TextOp(text, x, y, rotation, self.font_family,
                               self.font_size, self.fill))

    @property
    def texts(self) -> List[TextOp]:
        return [op for op in self.ops if isinstance(op, TextOp)]

    @property
    def rects(self) -> List[RectOp]:
        return [op for op in self.ops if isinstance(op, RectOp)]

    def clear(self):
        self.ops.clear()
