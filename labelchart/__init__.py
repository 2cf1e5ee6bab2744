from labelchart.chart import Chart, create_chart
from labelchart.config import ChartConfig, ChartVariant, parse_color, resolve_config, validate_config, validate_overrides
from labelchart.dataset import DataPoint, Dataset
from labelchart.errors import (
    ChartConfigError,
    ChartDataError,
    ChartError,
    EmptyDatasetError,
    MountError,
    UnknownVariantError,
)
from labelchart.figure import compose_figure, save_figure
from labelchart.mapping import CoordinateMapper
from labelchart.mount import MountPoint, MountRegistry, RasterMount, RecordingMount
from labelchart.ranges import ValueRange, analyze_range
from labelchart.raster import RasterSurface
from labelchart.recording import RecordingSurface
from labelchart.surface import DrawingSurface

__all__ = [
    "Chart",
    "ChartConfig",
    "ChartConfigError",
    "ChartDataError",
    "ChartError",
    "ChartVariant",
    "CoordinateMapper",
    "DataPoint",
    "Dataset",
    "DrawingSurface",
    "EmptyDatasetError",
    "MountError",
    "MountPoint",
    "MountRegistry",
    "RasterMount",
    "RasterSurface",
    "RecordingMount",
    "RecordingSurface",
    "UnknownVariantError",
    "ValueRange",
    "analyze_range",
    "compose_figure",
    "create_chart",
    "parse_color",
    "resolve_config",
    "save_figure",
    "validate_config",
    "validate_overrides",
]
