from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
import math
from typing import Any

import numpy as np

from labelchart.errors import ChartDataError, EmptyDatasetError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


@dataclass(frozen=True)
class DataPoint:
    label: str
    value: float


@dataclass(frozen=True)
class Dataset:
    """Ordered (label, value) entries; position in ``points`` is the x-axis rank."""

    points: tuple[DataPoint, ...]

    def __post_init__(self) -> None:
        if not self.points:
            raise EmptyDatasetError("dataset must contain at least one entry")
        seen: set[str] = set()
        for point in self.points:
            if point.label in seen:
                raise ChartDataError(f"duplicate label: {point.label!r}")
            seen.add(point.label)

    @classmethod
    def from_input(cls, data: Any) -> "Dataset":
        if isinstance(data, Dataset):
            return data
        return cls(points=tuple(DataPoint(label=label, value=value) for label, value in _iter_pairs(data)))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[DataPoint]:
        return iter(self.points)

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(p.label for p in self.points)

    @property
    def values(self) -> tuple[float, ...]:
        return tuple(p.value for p in self.points)

    def index_of(self, label: str) -> int:
        for idx, point in enumerate(self.points):
            if point.label == label:
                return idx
        raise KeyError(label)

    def values_array(self) -> np.ndarray:
        return np.asarray(self.values, dtype=np.float64)


def _iter_pairs(data: Any) -> Iterator[tuple[str, float]]:
    if data is None:
        raise ChartDataError("dataset is required")

    if pd is not None and isinstance(data, pd.Series):
        for label, raw in zip(data.index.tolist(), data.tolist(), strict=True):
            yield _coerce_label(label), _coerce_value(raw, label=label)
        return

    if isinstance(data, Mapping):
        for label, raw in data.items():
            yield _coerce_label(label), _coerce_value(raw, label=label)
        return

    if isinstance(data, Sequence) and not isinstance(data, (str, bytes, bytearray)):
        for i, item in enumerate(data):
            if isinstance(item, DataPoint):
                yield item.label, _coerce_value(item.value, label=item.label)
                continue
            if not isinstance(item, Sequence) or isinstance(item, (str, bytes, bytearray)) or len(item) != 2:
                raise ChartDataError(f"entry at index {i} must be a (label, value) pair: {item!r}")
            label, raw = item
            yield _coerce_label(label), _coerce_value(raw, label=label)
        return

    raise ChartDataError(f"unsupported dataset input type: {type(data)!r}")


def _coerce_label(label: Any) -> str:
    if isinstance(label, str):
        return label
    if isinstance(label, (bytes, bytearray)):
        raise ChartDataError(f"label must be text, got {type(label)!r}")
    return str(label)


def _coerce_value(raw: Any, *, label: Any) -> float:
    if isinstance(raw, bool):
        raise ChartDataError(f"value for {label!r} must be numeric, got bool")
    if torch is not None and isinstance(raw, torch.Tensor):
        if raw.numel() != 1:
            raise ChartDataError(f"value for {label!r} must be a scalar tensor")
        raw = raw.detach().cpu().item()
    if isinstance(raw, Decimal):
        out = float(raw)
    elif isinstance(raw, (int, float, np.integer, np.floating)):
        out = float(raw)
    else:
        raise ChartDataError(f"value for {label!r} must be numeric, got {type(raw).__name__}")
    if not math.isfinite(out):
        raise ChartDataError(f"value for {label!r} must be finite, got {out!r}")
    return out
