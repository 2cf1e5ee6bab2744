from __future__ import annotations

from dataclasses import dataclass, field
import xml.etree.ElementTree as ET

from labelchart.config import RGBA, Color, parse_color
from labelchart.surface import DEFAULT_FONT_FAMILY, TAU, DrawingSurface, arc_points, arc_sweep


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float


@dataclass(frozen=True)
class Arc:
    x: float
    y: float
    radius: float
    start_angle: float
    end_angle: float
    counterclockwise: bool

    @property
    def is_full_circle(self) -> bool:
        return abs(arc_sweep(self.start_angle, self.end_angle, self.counterclockwise)) >= TAU


PathElement = MoveTo | LineTo | Arc


@dataclass(frozen=True)
class StrokeCommand:
    path: tuple[PathElement, ...]
    color: RGBA
    line_width: float


@dataclass(frozen=True)
class FillCommand:
    path: tuple[PathElement, ...]
    color: RGBA


@dataclass(frozen=True)
class TextCommand:
    text: str
    x: float
    y: float
    max_width: float | None
    color: RGBA
    font_size_px: float
    font_family: str


@dataclass(frozen=True)
class ResizeCommand:
    width: int
    height: int


DrawCommand = StrokeCommand | FillCommand | TextCommand | ResizeCommand


@dataclass(frozen=True)
class Segment:
    x0: float
    y0: float
    x1: float
    y1: float
    color: RGBA


@dataclass
class RecordingSurface(DrawingSurface):
    """Keeps every stroke, fill and text call so a render can be inspected or exported."""

    width: int = 0
    height: int = 0
    commands: list[DrawCommand] = field(default_factory=list)
    _path: list[PathElement] = field(default_factory=list)
    _stroke_color: RGBA = (0, 0, 0, 255)
    _fill_color: RGBA = (0, 0, 0, 255)
    _line_width: float = 1.0
    _font_size_px: float = 10.0
    _font_family: str = DEFAULT_FONT_FAMILY

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def set_size(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.commands = [ResizeCommand(width=self.width, height=self.height)]
        self._path = []

    def begin_path(self) -> None:
        self._path = []

    def move_to(self, x: float, y: float) -> None:
        self._path.append(MoveTo(float(x), float(y)))

    def line_to(self, x: float, y: float) -> None:
        self._path.append(LineTo(float(x), float(y)))

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        counterclockwise: bool = False,
    ) -> None:
        if radius < 0:
            raise ValueError("arc radius must be >= 0")
        self._path.append(Arc(float(x), float(y), float(radius), start_angle, end_angle, counterclockwise))

    def stroke(self) -> None:
        self.commands.append(StrokeCommand(path=tuple(self._path), color=self._stroke_color, line_width=self._line_width))

    def fill(self) -> None:
        self.commands.append(FillCommand(path=tuple(self._path), color=self._fill_color))

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
        self.commands.append(
            TextCommand(
                text=text,
                x=float(x),
                y=float(y),
                max_width=max_width,
                color=self._fill_color,
                font_size_px=self._font_size_px,
                font_family=self._font_family,
            )
        )

    def filled_arcs(self) -> list[tuple[Arc, RGBA]]:
        out: list[tuple[Arc, RGBA]] = []
        for cmd in self.commands:
            if isinstance(cmd, FillCommand):
                out.extend((el, cmd.color) for el in cmd.path if isinstance(el, Arc))
        return out

    def stroked_segments(self, color: Color | None = None) -> list[Segment]:
        """Straight segments of every stroked path, optionally only those in ``color``."""
        wanted = parse_color(color) if color is not None else None
        out: list[Segment] = []
        for cmd in self.commands:
            if not isinstance(cmd, StrokeCommand):
                continue
            if wanted is not None and cmd.color != wanted:
                continue
            current: tuple[float, float] | None = None
            for el in cmd.path:
                if isinstance(el, MoveTo):
                    current = (el.x, el.y)
                elif isinstance(el, LineTo):
                    if current is not None:
                        out.append(Segment(current[0], current[1], el.x, el.y, cmd.color))
                    current = (el.x, el.y)
                else:
                    current = arc_points(el.x, el.y, el.radius, el.start_angle, el.end_angle, el.counterclockwise)[-1]
        return out

    def texts(self) -> list[TextCommand]:
        return [cmd for cmd in self.commands if isinstance(cmd, TextCommand)]

    def to_svg(self) -> str:
        root = ET.Element(
            "svg",
            {
                "xmlns": "http://www.w3.org/2000/svg",
                "width": _fmt(self.width),
                "height": _fmt(self.height),
                "viewBox": f"0 0 {_fmt(self.width)} {_fmt(self.height)}",
            },
        )
        for cmd in self.commands:
            if isinstance(cmd, StrokeCommand):
                d = _path_data(cmd.path)
                if d:
                    ET.SubElement(
                        root,
                        "path",
                        {"d": d, "fill": "none", "stroke-width": _fmt(cmd.line_width), **_paint("stroke", cmd.color)},
                    )
            elif isinstance(cmd, FillCommand):
                if len(cmd.path) == 1 and isinstance(cmd.path[0], Arc) and cmd.path[0].is_full_circle:
                    arc = cmd.path[0]
                    attrs = {"cx": _fmt(arc.x), "cy": _fmt(arc.y), "r": _fmt(arc.radius), **_paint("fill", cmd.color)}
                    ET.SubElement(root, "circle", attrs)
                    continue
                d = _path_data(cmd.path)
                if d:
                    ET.SubElement(root, "path", {"d": d + " Z", **_paint("fill", cmd.color)})
            elif isinstance(cmd, TextCommand):
                attrs = {
                    "x": _fmt(cmd.x),
                    "y": _fmt(cmd.y),
                    "font-size": _fmt(cmd.font_size_px),
                    "font-family": cmd.font_family,
                    **_paint("fill", cmd.color),
                }
                el = ET.SubElement(root, "text", attrs)
                el.text = cmd.text
        return ET.tostring(root, encoding="unicode")


def _fmt(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.3f}".rstrip("0").rstrip(".")


def _paint(attr: str, color: RGBA) -> dict[str, str]:
    r, g, b, a = color
    out = {attr: f"rgb({r},{g},{b})"}
    if a != 255:
        out[f"{attr}-opacity"] = _fmt(round(a / 255.0, 3))
    return out


def _path_data(path: tuple[PathElement, ...]) -> str:
    parts: list[str] = []
    for el in path:
        if isinstance(el, MoveTo):
            parts.append(f"M {_fmt(el.x)} {_fmt(el.y)}")
        elif isinstance(el, LineTo):
            parts.append(f"{'L' if parts else 'M'} {_fmt(el.x)} {_fmt(el.y)}")
        else:
            for i, (px, py) in enumerate(arc_points(el.x, el.y, el.radius, el.start_angle, el.end_angle, el.counterclockwise)):
                parts.append(f"{'M' if not parts and i == 0 else 'L'} {_fmt(px)} {_fmt(py)}")
    return " ".join(parts)
