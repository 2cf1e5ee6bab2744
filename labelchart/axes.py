from __future__ import annotations

from labelchart.config import ChartConfig
from labelchart.dataset import Dataset
from labelchart.mapping import CoordinateMapper
from labelchart.ranges import ValueRange
from labelchart.surface import DrawingSurface
from labelchart.ticks import format_tick_value, y_tick_values


def render_axes(
    surface: DrawingSurface,
    config: ChartConfig,
    dataset: Dataset,
    value_range: ValueRange,
    mapper: CoordinateMapper,
) -> None:
    surface.set_stroke_color(config.axes_color)
    surface.set_line_width(config.line_width)
    _draw_axis_lines(surface, config)
    surface.set_fill_color(config.text_color)
    surface.set_font(config.tick_font_size)
    _draw_y_ticks(surface, config, value_range, mapper)
    _draw_x_ticks(surface, config, dataset, mapper)


def _draw_axis_lines(surface: DrawingSurface, config: ChartConfig) -> None:
    axis_y = config.height - config.y_padding
    # Both axes overshoot the origin by one tick length.
    surface.begin_path()
    surface.move_to(config.x_padding - config.tick_length, axis_y)
    surface.line_to(config.width - config.x_padding, axis_y)
    surface.stroke()

    surface.begin_path()
    surface.move_to(config.x_padding, config.tick_length)
    surface.line_to(config.x_padding, axis_y + config.tick_length)
    surface.stroke()


def _draw_y_ticks(
    surface: DrawingSurface,
    config: ChartConfig,
    value_range: ValueRange,
    mapper: CoordinateMapper,
) -> None:
    label_width = config.x_padding - config.tick_length
    for value in y_tick_values(value_range, config.ticks_y).tolist():
        y = mapper.y_for_value(value)
        surface.fill_text(format_tick_value(value), 0, y + config.tick_font_size / 2, label_width)
        surface.begin_path()
        surface.move_to(config.x_padding - config.tick_length, y)
        surface.line_to(config.x_padding, y)
        surface.stroke()


def _draw_x_ticks(
    surface: DrawingSurface,
    config: ChartConfig,
    dataset: Dataset,
    mapper: CoordinateMapper,
) -> None:
    axis_y = config.height - config.y_padding
    half_font = config.tick_font_size / 2
    for index, point in enumerate(dataset):
        x = mapper.x_for_index(index)
        if point.label:
            # No text metrics in the surface contract: estimate width from the character count.
            estimated = len(point.label) - 0.5
            surface.fill_text(
                point.label,
                x - half_font * estimated,
                axis_y + config.tick_length + config.tick_font_size,
                config.tick_font_size * estimated,
            )
        surface.begin_path()
        surface.move_to(x, axis_y + config.tick_length)
        surface.line_to(x, axis_y)
        surface.stroke()
