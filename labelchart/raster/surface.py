from __future__ import annotations

import numpy as np
from PIL import Image

from labelchart.config import RGBA, Color, parse_color
from labelchart.raster.canvas import new_canvas
from labelchart.raster.draw_lines import draw_polyline
from labelchart.raster.draw_shapes import fill_polygon
from labelchart.raster.draw_text import DEFAULT_FONT_SIZE_PX, draw_text
from labelchart.surface import DEFAULT_FONT_FAMILY, DrawingSurface, PathBuilder


class RasterSurface(DrawingSurface):
    """DrawingSurface backed by an (H, W, 4) uint8 RGBA numpy canvas."""

    def __init__(self, width: int = 1, height: int = 1, background: Color = (255, 255, 255, 0)) -> None:
        self._background: RGBA = parse_color(background)
        self._canvas = new_canvas(width, height, color=self._background)
        self._path = PathBuilder()
        self._stroke_color: RGBA = (0, 0, 0, 255)
        self._fill_color: RGBA = (0, 0, 0, 255)
        self._line_width = 1.0
        self._font_size_px = DEFAULT_FONT_SIZE_PX
        self._font_family = DEFAULT_FONT_FAMILY

    @property
    def size(self) -> tuple[int, int]:
        return (int(self._canvas.shape[1]), int(self._canvas.shape[0]))

    def set_background(self, color: Color) -> None:
        self._background = parse_color(color)

    def set_size(self, width: int, height: int) -> None:
        self._canvas = new_canvas(int(width), int(height), color=self._background)
        self._path.reset()

    def begin_path(self) -> None:
        self._path.reset()

    def move_to(self, x: float, y: float) -> None:
        self._path.move_to(x, y)

    def line_to(self, x: float, y: float) -> None:
        self._path.line_to(x, y)

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        counterclockwise: bool = False,
    ) -> None:
        self._path.arc(x, y, radius, start_angle, end_angle, counterclockwise)

    def stroke(self) -> None:
        width = max(1, int(round(self._line_width)))
        for points in self._path.subpaths:
            draw_polyline(self._canvas, points, self._stroke_color, width=width)

    def fill(self) -> None:
        for points in self._path.subpaths:
            fill_polygon(self._canvas, points, self._fill_color)

    def set_stroke_color(self, color: Color) -> None:
        self._stroke_color = parse_color(color)

    def set_fill_color(self, color: Color) -> None:
        self._fill_color = parse_color(color)

    def set_line_width(self, width: float) -> None:
        if width <= 0:
            raise ValueError("line width must be > 0")
        self._line_width = float(width)

    def set_font(self, size_px: float, family: str = DEFAULT_FONT_FAMILY) -> None:
        if size_px <= 0:
            raise ValueError("font size must be > 0")
        self._font_size_px = float(size_px)
        self._font_family = family

    def fill_text(self, text: str, x: float, y: float, max_width: float | None = None) -> None:
        draw_text(
            self._canvas,
            x,
            y,
            text,
            self._fill_color,
            font_family=self._font_family,
            font_size_px=self._font_size_px,
            max_width=max_width,
        )

    def to_rgba(self) -> np.ndarray:
        return self._canvas.copy()

    def to_image(self) -> Image.Image:
        return Image.fromarray(self._canvas)
