"""
fonts.py: Font discovery for ImageSurface.

Callers pass a font *family name* (e.g. "Noto Sans CJK TC Regular"). The family
is resolved to a font file in this order:

  1. $PLAYINGCARD_FONT, if it points at an existing file
  2. font.otf / font.ttf placed next to this package
  3. the family itself, if it is a path to an existing file
  4. a file in the system font directories whose name matches the family
     (case, spaces, dashes and underscores ignored)
  5. the first known system font that carries the suit glyphs
  6. Pillow's built-in default font
"""

import logging
import os
from typing import Optional

from PIL import ImageFont

logger = logging.getLogger(__name__)

# ── Configuration ────────────────────────────────────────────────────────────

FONT_ENV_VAR = "PLAYINGCARD_FONT"
DEFAULT_FONT_FAMILY = "Noto Sans CJK TC Regular"

FONT_DIRS = [
    "/usr/share/fonts",
    "/usr/local/share/fonts",
    os.path.expanduser("~/.fonts"),
    os.path.expanduser("~/.local/share/fonts"),
    "/Library/Fonts",
    "/System/Library/Fonts",
    "C:/Windows/Fonts",
]

# Fonts with ♠ ♥ ♣ ♦ coverage, preferred when the family cannot be found
FALLBACK_FONTS = [
    "/usr/share/fonts/opentype/noto/NotoSansCJK-Regular.ttc",
    "/usr/share/fonts/noto-cjk/NotoSansCJK-Regular.ttc",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/TTF/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/noto/NotoSansSymbols2-Regular.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
    "/System/Library/Fonts/Apple Symbols.ttf",
    "/Library/Fonts/Arial Unicode.ttf",
    "C:/Windows/Fonts/seguisym.ttf",
    "C:/Windows/Fonts/arial.ttf",
]

_FONT_SUFFIXES = (".ttf", ".otf", ".ttc")


# ── Font Setup ───────────────────────────────────────────────────────────────

def _normalize(name: str) -> str:
    return "".join(ch for ch in name.lower() if ch not in " -_")


def _search_font_dirs(family: str) -> Optional[str]:
    wanted = _normalize(family)
    for d in FONT_DIRS:
        if not os.path.isdir(d):
            continue
        for root, _, files in os.walk(d):
            for f in files:
                stem, ext = os.path.splitext(f)
                if ext.lower() in _FONT_SUFFIXES and _normalize(stem) == wanted:
                    return os.path.join(root, f)
    return None


def find_font(family: Optional[str] = None) -> Optional[str]:
    """Resolve a family name to a font file path, or None for Pillow's default."""
    override = os.environ.get(FONT_ENV_VAR)
    if override:
        if os.path.exists(override):
            return override
        logger.warning("%s=%s does not exist, ignoring it", FONT_ENV_VAR, override)

    _here = os.path.dirname(os.path.abspath(__file__))
    for local_name in ("font.otf", "font.ttf", "Font.otf", "Font.ttf"):
        local_path = os.path.join(_here, local_name)
        if os.path.exists(local_path):
            return local_path

    family = family or DEFAULT_FONT_FAMILY
    if os.path.isfile(family):
        return family

    found = _search_font_dirs(family)
    if found:
        return found

    for p in FALLBACK_FONTS:
        if os.path.exists(p):
            logger.debug("Font family %r not found, using %s", family, p)
            return p
    return None


# ── Font Loading ─────────────────────────────────────────────────────────────

_path_cache: dict = {}
_font_cache: dict = {}


def resolve_font(family: Optional[str]) -> Optional[str]:
    """find_font() with the answer remembered per family."""
    if family not in _path_cache:
        path = find_font(family)
        if path:
            logger.info("Font %r -> %s", family or DEFAULT_FONT_FAMILY, path)
        else:
            logger.warning("No font file found for %r, using Pillow's default font",
                           family or DEFAULT_FONT_FAMILY)
        _path_cache[family] = path
    return _path_cache[family]


def load_font(family: Optional[str], size: float):
    """Return a Pillow font for ``family`` at ``size`` pixels (rounded, at least 1)."""
    px = max(1, int(round(size)))
    path = resolve_font(family)
    key = (path, px)
    if key in _font_cache:
        return _font_cache[key]

    font = None
    if path:
        try:
            font = ImageFont.truetype(path, px)
        except (OSError, IOError) as e:
            logger.warning("Failed to load font %s: %s", path, e)
    if font is None:
        font = ImageFont.load_default(size=px)
    _font_cache[key] = font
    return font


def clear_cache():
    _path_cache.clear()
    _font_cache.clear()
