from __future__ import annotations

from functools import lru_cache
import logging
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from labelchart.raster.canvas import RGBA, blend_mask


LOGGER = logging.getLogger(__name__)

DEFAULT_FONT_FAMILY = "serif"
DEFAULT_FONT_SIZE_PX = 10.0
FONT_FALLBACK_PATTERNS = {
    "serif": ("dejavuserif", "dejavu serif", "liberationserif", "times new roman", "times", "georgia"),
    "sans-serif": ("dejavusans", "dejavu sans", "liberationsans", "helvetica", "arial"),
    "monospace": ("dejavusansmono", "dejavu sans mono", "menlo", "courier new", "courier"),
}
FONT_DIRS = (
    Path.home() / "Library" / "Fonts",
    Path("/Library/Fonts"),
    Path("/System/Library/Fonts"),
    Path("/System/Library/Fonts/Supplemental"),
    Path("/usr/share/fonts"),
    Path("/usr/local/share/fonts"),
)

Font = ImageFont.FreeTypeFont | ImageFont.ImageFont


def draw_text(
    dst: np.ndarray,
    x: float,
    y: float,
    text: str,
    color: RGBA,
    *,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_px: float = DEFAULT_FONT_SIZE_PX,
    max_width: float | None = None,
) -> None:
    """Draw ``text`` with its left edge at ``x`` and its alphabetic baseline at ``y``."""
    if not text:
        return
    if max_width is not None and max_width <= 0:
        return
    font = load_font(font_family, font_size_px)
    left, top, mask = _render_mask(text, font)
    if max_width is not None and mask.shape[1] > max_width:
        squeezed = Image.fromarray(mask).resize((max(1, int(max_width)), mask.shape[0]), Image.Resampling.BILINEAR)
        mask = np.asarray(squeezed, dtype=np.uint8)
    ascent = font_ascent(font)
    blend_mask(dst, int(round(x)) + left, int(round(y)) - ascent + top, mask, color)


def text_size(
    text: str,
    *,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_px: float = DEFAULT_FONT_SIZE_PX,
) -> tuple[int, int]:
    font = load_font(font_family, font_size_px)
    if not text:
        return (0, max(1, font_ascent(font)))
    left, top, right, bottom = font.getbbox(text)
    return (max(0, int(right - left)), max(1, int(bottom - top)))


def font_ascent(font: Font) -> int:
    if isinstance(font, ImageFont.FreeTypeFont):
        ascent, _ = font.getmetrics()
        return int(ascent)
    _, _, _, bottom = font.getbbox("Ag")
    return int(bottom)


@lru_cache(maxsize=256)
def _render_mask(text: str, font: Font) -> tuple[int, int, np.ndarray]:
    left, top, right, bottom = (int(v) for v in font.getbbox(text))
    width = max(1, right - left)
    height = max(1, bottom - top)
    image = Image.new("L", (width, height), 0)
    draw = ImageDraw.Draw(image)
    draw.text((-left, -top), text, fill=255, font=font)
    mask = np.asarray(image, dtype=np.uint8)
    mask.setflags(write=False)
    return left, top, mask


@lru_cache(maxsize=64)
def load_font(font_family: str, font_size_px: float) -> Font:
    size = max(1, int(round(font_size_px)))
    font_path = _resolve_font_path(font_family)
    if font_path is None:
        LOGGER.debug("no font file found for %r; using Pillow default font", font_family)
        return ImageFont.load_default(size=size)
    try:
        return ImageFont.truetype(str(font_path), size=size)
    except OSError as exc:
        LOGGER.warning("failed to load font %s (%s); using Pillow default font", font_path, exc)
        return ImageFont.load_default(size=size)


@lru_cache(maxsize=16)
def _font_candidates() -> tuple[Path, ...]:
    candidates: list[Path] = []
    for base in FONT_DIRS:
        if not base.exists():
            continue
        for ext in ("*.ttf", "*.otf", "*.ttc"):
            candidates.extend(sorted(base.rglob(ext)))
    return tuple(candidates)


def _resolve_font_path(font_family: str) -> Path | None:
    wanted = font_family.strip().lower() or DEFAULT_FONT_FAMILY
    patterns = FONT_FALLBACK_PATTERNS.get(wanted, (wanted,) + FONT_FALLBACK_PATTERNS[DEFAULT_FONT_FAMILY])

    candidates = _font_candidates()
    for pattern in patterns:
        p = pattern.replace(" ", "")
        stems = [(path, path.stem.lower().replace(" ", "")) for path in candidates]
        for path, stem in stems:
            if stem == p:
                return path
        for path, stem in stems:
            if stem.startswith(p):
                return path
    return None
