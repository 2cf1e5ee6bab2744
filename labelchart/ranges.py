from __future__ import annotations

from dataclasses import dataclass

from labelchart.dataset import Dataset
from labelchart.errors import EmptyDatasetError


@dataclass(frozen=True)
class ValueRange:
    min_value: float
    max_value: float
    range: float
    first_label: str
    last_label: str
    count: int

    @property
    def is_flat(self) -> bool:
        return self.range == 0


def analyze_range(dataset: Dataset) -> ValueRange:
    """Scan ``dataset`` once in order, collecting min/max and the first/last labels."""
    min_value: float | None = None
    max_value: float | None = None
    first_label: str | None = None
    last_label: str | None = None
    count = 0
    for point in dataset:
        if min_value is None or max_value is None:
            min_value = point.value
            max_value = point.value
            first_label = point.label
        if point.value < min_value:
            min_value = point.value
        if point.value > max_value:
            max_value = point.value
        last_label = point.label
        count += 1
    if min_value is None or max_value is None or first_label is None or last_label is None:
        raise EmptyDatasetError("cannot analyze the range of an empty dataset")
    return ValueRange(
        min_value=min_value,
        max_value=max_value,
        range=max_value - min_value,
        first_label=first_label,
        last_label=last_label,
        count=count,
    )
