from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any

from labelchart.axes import render_axes
from labelchart.config import ChartConfig, ChartVariant, resolve_config, validate_config, validate_overrides
from labelchart.dataset import Dataset
from labelchart.mapping import CoordinateMapper
from labelchart.mount import MountPoint, MountRegistry, mount_surface, resolve_mount
from labelchart.ranges import ValueRange, analyze_range
from labelchart.series import render_series
from labelchart.surface import DrawingSurface


LOGGER = logging.getLogger(__name__)


class Chart:
    """A point or line graph of one dataset, bound to one drawing surface."""

    def __init__(
        self,
        surface: DrawingSurface,
        data: Any,
        config: ChartConfig | Mapping[str, Any] | None = None,
    ) -> None:
        if not isinstance(surface, DrawingSurface):
            raise TypeError(f"surface must be a DrawingSurface, got {type(surface)!r}")
        if isinstance(config, ChartConfig):
            validate_config(config)
        else:
            validate_overrides(config)
            config = resolve_config(config)
        self._surface = surface
        self._config = config
        self._dataset = Dataset.from_input(data)
        self._value_range: ValueRange | None = None
        self._mapper: CoordinateMapper | None = None

    @property
    def surface(self) -> DrawingSurface:
        return self._surface

    @property
    def config(self) -> ChartConfig:
        return self._config

    @property
    def dataset(self) -> Dataset:
        return self._dataset

    @property
    def value_range(self) -> ValueRange | None:
        return self._value_range

    @property
    def mapper(self) -> CoordinateMapper | None:
        return self._mapper

    def draw(self) -> None:
        variant = ChartVariant.parse(self._config.type)
        value_range = analyze_range(self._dataset)
        mapper = CoordinateMapper.from_config(self._config, value_range)

        surface = self._surface
        surface.set_size(self._config.width, self._config.height)
        render_axes(surface, self._config, self._dataset, value_range, mapper)
        render_series(surface, variant, self._config, self._dataset, mapper)

        self._value_range = value_range
        self._mapper = mapper
        LOGGER.debug(
            "drew %s: %d points, range [%s, %s], step %.3f",
            variant.value,
            value_range.count,
            value_range.min_value,
            value_range.max_value,
            mapper.step,
        )


def create_chart(
    container: str | MountPoint,
    data: Any,
    overrides: Mapping[str, Any] | None = None,
    *,
    registry: MountRegistry | None = None,
) -> Chart:
    """Resolve ``container``, validate the inputs and bind a new chart to a fresh surface.

    Raises MountError when the container cannot be found or cannot host a
    surface, ChartConfigError for ill-typed overrides and ChartDataError
    (including EmptyDatasetError) for unusable data. Nothing is drawn.
    """
    mount = resolve_mount(container, registry)
    validate_overrides(overrides)
    config = resolve_config(overrides)
    dataset = Dataset.from_input(data)
    surface = mount_surface(mount, config)
    return Chart(surface, dataset, config)
