from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import re
from typing import Literal

import numpy as np
from PIL import Image

from labelchart.chart import Chart
from labelchart.config import RGBA
from labelchart.raster import RasterSurface, draw_text, font_ascent, load_font, new_canvas, text_size


TextAlign = Literal["left", "center", "right"]

PT_TO_PX = 4.0 / 3.0
DEFAULT_TEXT_STYLE_PX = 16.0

_DECLARATION = re.compile(r"^\s*([a-zA-Z-]+)\s*:\s*(.+?)\s*$")
_FONT_SIZE = re.compile(r"^(\d+(?:\.\d+)?)\s*(pt|px)?$")


@dataclass(frozen=True)
class TextStyle:
    font_size_px: float = DEFAULT_TEXT_STYLE_PX
    align: TextAlign = "center"


def parse_text_style(style: str) -> TextStyle:
    """Read ``font-size`` and ``text-align`` from a CSS declaration list; other declarations are ignored."""
    font_size_px = DEFAULT_TEXT_STYLE_PX
    align: TextAlign = "center"
    for declaration in style.split(";"):
        match = _DECLARATION.match(declaration)
        if match is None:
            continue
        name, value = match.group(1).lower(), match.group(2).lower()
        if name == "font-size":
            size = _FONT_SIZE.match(value)
            if size is not None and float(size.group(1)) > 0:
                font_size_px = float(size.group(1)) * (PT_TO_PX if size.group(2) == "pt" else 1.0)
        elif name == "text-align" and value in ("left", "center", "right"):
            align = value  # type: ignore[assignment]
    return TextStyle(font_size_px=font_size_px, align=align)


def compose_figure(chart: Chart) -> np.ndarray:
    """Draw ``chart`` and stack its title above and caption below, as one RGBA frame."""
    surface = chart.surface
    if isinstance(surface, RasterSurface):
        chart.draw()
    else:
        surface = RasterSurface(background=chart.config.background)
        Chart(surface, chart.dataset, chart.config).draw()
    plot = surface.to_rgba()

    config = chart.config
    bands = [plot]
    if config.title:
        bands.insert(0, _text_band(config.title, parse_text_style(config.title_style), config.width, config.background_rgba, config.text_rgba))
    if config.caption:
        bands.append(_text_band(config.caption, parse_text_style(config.caption_style), config.width, config.background_rgba, config.text_rgba))
    return np.concatenate(bands, axis=0)


def save_figure(chart: Chart, path: str | Path) -> Path:
    out = Path(path)
    Image.fromarray(compose_figure(chart)).save(out, format="PNG")
    return out


def _text_band(text: str, style: TextStyle, width: int, background: RGBA, color: RGBA) -> np.ndarray:
    font = load_font("serif", style.font_size_px)
    line_height = max(1, int(round(style.font_size_px * 1.5)))
    band = new_canvas(width, line_height, color=background)
    text_w, _ = text_size(text, font_size_px=style.font_size_px)
    if style.align == "left":
        x = 0
    elif style.align == "right":
        x = max(0, width - text_w)
    else:
        x = max(0, (width - text_w) // 2)
    baseline = (line_height - int(style.font_size_px)) // 2 + font_ascent(font)
    draw_text(band, x, baseline, text, color, font_size_px=style.font_size_px, max_width=width)
    return band
