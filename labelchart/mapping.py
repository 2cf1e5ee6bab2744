from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from labelchart.config import ChartConfig
from labelchart.dataset import Dataset
from labelchart.ranges import ValueRange


@dataclass(frozen=True)
class CoordinateMapper:
    """Pure (label index, value) -> pixel mapping for one resolved layout.

    A single label sits at the horizontal center of the plot area and a flat
    dataset (range == 0) sits at its vertical center, so neither case divides
    by zero.
    """

    x_padding: float
    tick_length: float
    plot_width: float
    plot_height: float
    count: int
    min_value: float
    value_span: float

    @classmethod
    def from_config(cls, config: ChartConfig, value_range: ValueRange) -> "CoordinateMapper":
        return cls(
            x_padding=float(config.x_padding),
            tick_length=float(config.tick_length),
            plot_width=float(config.plot_width),
            plot_height=float(config.plot_height),
            count=value_range.count,
            min_value=value_range.min_value,
            value_span=value_range.range,
        )

    @property
    def step(self) -> float:
        if self.count <= 1:
            return 0.0
        return self.plot_width / (self.count - 1)

    def x_for_index(self, index: int) -> float:
        if index < 0 or index >= self.count:
            raise IndexError(f"label index out of range: {index} (count={self.count})")
        if self.count == 1:
            return self.x_padding + self.plot_width / 2
        return self.x_padding + self.step * index

    def y_for_value(self, value: float) -> float:
        if self.value_span == 0:
            return self.tick_length + self.plot_height / 2
        return self.tick_length + self.plot_height * (1 - (value - self.min_value) / self.value_span)

    def map_point(self, index: int, value: float) -> tuple[float, float]:
        return (self.x_for_index(index), self.y_for_value(value))

    def map_label(self, dataset: Dataset, label: str) -> tuple[float, float]:
        index = dataset.index_of(label)
        return self.map_point(index, dataset.points[index].value)

    def map_dataset(self, dataset: Dataset) -> list[tuple[float, float]]:
        return [self.map_point(i, p.value) for i, p in enumerate(dataset)]

    def map_arrays(self, dataset: Dataset) -> tuple[np.ndarray, np.ndarray]:
        xs = np.asarray([self.x_for_index(i) for i in range(len(dataset))], dtype=np.float64)
        values = dataset.values_array()
        if self.value_span == 0:
            ys = np.full(values.shape, self.tick_length + self.plot_height / 2, dtype=np.float64)
        else:
            ys = self.tick_length + self.plot_height * (1 - (values - self.min_value) / self.value_span)
        return xs, ys
