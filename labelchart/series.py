from __future__ import annotations

from collections.abc import Callable

from labelchart.config import ChartConfig, ChartVariant
from labelchart.dataset import Dataset
from labelchart.mapping import CoordinateMapper
from labelchart.surface import TAU, DrawingSurface


SeriesRenderer = Callable[[DrawingSurface, ChartConfig, Dataset, CoordinateMapper], None]


def render_points(surface: DrawingSurface, config: ChartConfig, dataset: Dataset, mapper: CoordinateMapper) -> None:
    surface.set_line_width(config.line_width)
    surface.set_stroke_color(config.data_color)
    surface.set_fill_color(config.data_color)
    for x, y in mapper.map_dataset(dataset):
        surface.begin_path()
        surface.arc(x, y, config.point_radius, 0.0, TAU)
        surface.fill()


def render_line(surface: DrawingSurface, config: ChartConfig, dataset: Dataset, mapper: CoordinateMapper) -> None:
    render_points(surface, config, dataset, mapper)
    points = mapper.map_dataset(dataset)
    if len(points) < 2:
        return
    surface.begin_path()
    surface.move_to(*points[0])
    for x, y in points[1:]:
        surface.line_to(x, y)
    surface.stroke()


SERIES_RENDERERS: dict[ChartVariant, SeriesRenderer] = {
    ChartVariant.POINT_GRAPH: render_points,
    ChartVariant.LINE_GRAPH: render_line,
}


def render_series(
    surface: DrawingSurface,
    variant: ChartVariant,
    config: ChartConfig,
    dataset: Dataset,
    mapper: CoordinateMapper,
) -> None:
    SERIES_RENDERERS[variant](surface, config, dataset, mapper)
