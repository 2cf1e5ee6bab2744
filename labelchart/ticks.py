from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

import numpy as np

from labelchart.ranges import ValueRange


MAX_FRACTION_DIGITS = 2


def y_tick_values(value_range: ValueRange, ticks_y: int) -> np.ndarray:
    """``ticks_y + 1`` evenly spaced values from min to max inclusive."""
    if ticks_y <= 0:
        raise ValueError("ticks_y must be > 0")
    if value_range.is_flat:
        return np.asarray([value_range.min_value], dtype=np.float64)
    ticks = np.linspace(value_range.min_value, value_range.max_value, ticks_y + 1, dtype=np.float64)
    # Pin the endpoints so the top tick lands exactly on max_value.
    ticks[0] = value_range.min_value
    ticks[-1] = value_range.max_value
    return ticks


def format_tick_value(value: float, *, max_fraction_digits: int = MAX_FRACTION_DIGITS) -> str:
    """en-US style: thousands grouping, at most ``max_fraction_digits`` decimals, no trailing zeros."""
    if not np.isfinite(value):
        return str(value)
    quant = Decimal("1").scaleb(-max_fraction_digits)
    q = Decimal(repr(float(value))).quantize(quant, rounding=ROUND_HALF_UP)
    out = format(q, ",f")
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    if out == "-0":
        out = "0"
    return out


def format_ticks_for_axis(ticks: np.ndarray) -> list[str]:
    return [format_tick_value(float(v)) for v in ticks]
