from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from enum import Enum
import logging
from typing import Any

from PIL import ImageColor

from labelchart.errors import ChartConfigError, UnknownVariantError


LOGGER = logging.getLogger(__name__)

RGBA = tuple[int, int, int, int]
Color = str | tuple[int, ...]


class ChartVariant(str, Enum):
    POINT_GRAPH = "PointGraph"
    LINE_GRAPH = "LineGraph"

    @classmethod
    def parse(cls, value: object) -> "ChartVariant":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for variant in cls:
                if variant.value == value:
                    return variant
        raise UnknownVariantError(value)


@dataclass(frozen=True)
class ChartConfig:
    axes_color: Color = "rgb(128,128,128)"
    caption: str = ""
    caption_style: str = "font-size: 14pt; text-align: center;"
    data_color: Color = "rgb(0,0,255)"
    height: int = 500
    line_width: int = 1
    x_padding: float = 30
    y_padding: float = 30
    point_radius: float = 3
    tick_length: float = 10
    ticks_y: int = 5
    tick_font_size: float = 10
    title: str = ""
    title_style: str = "font-size:24pt; text-align: center;"
    type: str = ChartVariant.LINE_GRAPH.value
    width: int = 500
    background: Color = "rgba(255,255,255,0)"
    text_color: Color = "rgb(0,0,0)"

    @property
    def variant(self) -> ChartVariant:
        return ChartVariant.parse(self.type)

    @property
    def axes_rgba(self) -> RGBA:
        return parse_color(self.axes_color)

    @property
    def data_rgba(self) -> RGBA:
        return parse_color(self.data_color)

    @property
    def background_rgba(self) -> RGBA:
        return parse_color(self.background)

    @property
    def text_rgba(self) -> RGBA:
        return parse_color(self.text_color)

    @property
    def plot_width(self) -> float:
        return self.width - 2 * self.x_padding

    @property
    def plot_height(self) -> float:
        return self.height - self.y_padding - self.tick_length


DEFAULT_CONFIG = ChartConfig()

# option name -> accepted value kind
_OPTION_KINDS: dict[str, str] = {
    "axes_color": "color",
    "caption": "text",
    "caption_style": "text",
    "data_color": "color",
    "height": "size",
    "line_width": "size",
    "x_padding": "length",
    "y_padding": "length",
    "point_radius": "length",
    "tick_length": "length",
    "ticks_y": "count",
    "tick_font_size": "font",
    "title": "text",
    "title_style": "text",
    "type": "variant",
    "width": "size",
    "background": "color",
    "text_color": "color",
}


def parse_color(color: Color) -> RGBA:
    """Resolve a CSS color string or an RGB/RGBA tuple to an RGBA tuple."""
    if isinstance(color, str):
        try:
            rgb = ImageColor.getrgb(color.replace(" ", ""))
        except ValueError as exc:
            raise ChartConfigError(f"unrecognized color: {color!r}") from exc
    elif isinstance(color, (tuple, list)) and len(color) in (3, 4):
        rgb = color
    else:
        raise ChartConfigError(f"color must be a CSS string or RGB(A) tuple: {color!r}")
    if not all(isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255 for c in rgb):
        raise ChartConfigError(f"color channels must be ints in [0, 255]: {color!r}")
    if len(rgb) == 3:
        r, g, b = rgb
        return (r, g, b, 255)
    r, g, b, a = rgb
    return (r, g, b, a)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check(kind: str, value: Any) -> str | None:
    """Return a problem description, or None when ``value`` fits ``kind``."""
    if kind == "text":
        return None if isinstance(value, str) else "must be a string"
    if kind == "variant":
        return None if isinstance(value, str) else "must be a chart type name"
    if kind == "color":
        try:
            parse_color(value)
        except ChartConfigError as exc:
            return str(exc)
        return None
    if kind in {"size", "count"}:
        if not isinstance(value, int) or isinstance(value, bool):
            return "must be an integer"
        return None if value > 0 else "must be > 0"
    if kind == "font":
        if not _is_number(value):
            return "must be a number"
        return None if value > 0 else "must be > 0"
    if kind == "length":
        if not _is_number(value):
            return "must be a number"
        return None if value >= 0 else "must be >= 0"
    raise AssertionError(f"unhandled option kind: {kind}")


def validate_overrides(overrides: Mapping[str, Any] | None) -> None:
    if overrides is None:
        return
    if not isinstance(overrides, Mapping):
        raise ChartConfigError(f"config overrides must be a mapping, got {type(overrides)!r}")
    for name, value in overrides.items():
        kind = _OPTION_KINDS.get(name)
        if kind is None:
            LOGGER.debug("ignoring unknown chart option %r", name)
            continue
        problem = _check(kind, value)
        if problem is not None:
            raise ChartConfigError(f"option {name!r} {problem}: {value!r}")
    _check_plot_area(resolve_config(overrides))


def validate_config(config: ChartConfig) -> None:
    """Apply the override checks to every field of an already built ``config``."""
    for name, kind in _OPTION_KINDS.items():
        value = getattr(config, name)
        problem = _check(kind, value)
        if problem is not None:
            raise ChartConfigError(f"option {name!r} {problem}: {value!r}")
    _check_plot_area(config)


def _check_plot_area(config: ChartConfig) -> None:
    if config.plot_width <= 0:
        raise ChartConfigError(
            f"width {config.width!r} leaves no plot area with x_padding {config.x_padding!r}"
        )
    if config.plot_height <= 0:
        raise ChartConfigError(
            f"height {config.height!r} leaves no plot area with y_padding {config.y_padding!r}"
            f" and tick_length {config.tick_length!r}"
        )


def resolve_config(overrides: Mapping[str, Any] | None = None) -> ChartConfig:
    if not overrides:
        return DEFAULT_CONFIG
    accepted: dict[str, Any] = {}
    for name, kind in _OPTION_KINDS.items():
        if name not in overrides:
            continue
        value = overrides[name]
        if _check(kind, value) is not None:
            LOGGER.debug("dropping ill-typed chart option %s=%r", name, value)
            continue
        if isinstance(value, ChartVariant):
            value = value.value
        elif isinstance(value, list):
            value = tuple(value)
        accepted[name] = value
    return replace(DEFAULT_CONFIG, **accepted)
