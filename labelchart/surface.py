from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
import math

from labelchart.config import Color


TAU = 2 * math.pi
DEFAULT_FONT_FAMILY = "serif"


class DrawingSurface(ABC):
    """Path/stroke/fill/text primitives the chart engine draws through.

    Angles are radians, y grows downward, ``fill_text`` positions the
    alphabetic baseline at ``y``.
    """

    @property
    @abstractmethod
    def size(self) -> tuple[int, int]:
        raise NotImplementedError

    @abstractmethod
    def set_size(self, width: int, height: int) -> None:
        """Resize and clear the surface."""
        raise NotImplementedError

    @abstractmethod
    def begin_path(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def move_to(self, x: float, y: float) -> None:
        raise NotImplementedError

    @abstractmethod
    def line_to(self, x: float, y: float) -> None:
        raise NotImplementedError

    @abstractmethod
    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        counterclockwise: bool = False,
    ) -> None:
        raise NotImplementedError

    @abstractmethod
    def stroke(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def fill(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_stroke_color(self, color: Color) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_fill_color(self, color: Color) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_line_width(self, width: float) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_font(self, size_px: float, family: str = DEFAULT_FONT_FAMILY) -> None:
        raise NotImplementedError

    @abstractmethod
    def fill_text(self, text: str, x: float, y: float, max_width: float | None = None) -> None:
        raise NotImplementedError


def arc_sweep(start_angle: float, end_angle: float, counterclockwise: bool) -> float:
    """Signed sweep in radians, following the HTML canvas ``arc`` rules."""
    if not counterclockwise:
        delta = end_angle - start_angle
        if delta >= TAU:
            return TAU
        return math.fmod(delta, TAU) % TAU
    delta = start_angle - end_angle
    if delta >= TAU:
        return -TAU
    return -(math.fmod(delta, TAU) % TAU)


def arc_points(
    x: float,
    y: float,
    radius: float,
    start_angle: float,
    end_angle: float,
    counterclockwise: bool = False,
) -> list[tuple[float, float]]:
    if radius < 0:
        raise ValueError("arc radius must be >= 0")
    sweep = arc_sweep(start_angle, end_angle, counterclockwise)
    segments = max(16, int(math.ceil(abs(sweep) * max(radius, 1.0) / 2.0)))
    if sweep == 0:
        segments = 0
    points = []
    for i in range(segments + 1):
        theta = start_angle + sweep * (i / segments) if segments else start_angle
        points.append((x + radius * math.cos(theta), y + radius * math.sin(theta)))
    return points


@dataclass
class PathBuilder:
    """Subpaths flattened to point lists; arcs are approximated by short segments."""

    subpaths: list[list[tuple[float, float]]] = field(default_factory=list)

    def reset(self) -> None:
        self.subpaths = []

    def move_to(self, x: float, y: float) -> None:
        self.subpaths.append([(float(x), float(y))])

    def line_to(self, x: float, y: float) -> None:
        if not self.subpaths:
            self.move_to(x, y)
            return
        self.subpaths[-1].append((float(x), float(y)))

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        counterclockwise: bool = False,
    ) -> None:
        points = arc_points(x, y, radius, start_angle, end_angle, counterclockwise)
        if not self.subpaths:
            self.subpaths.append([])
        self.subpaths[-1].extend(points)
