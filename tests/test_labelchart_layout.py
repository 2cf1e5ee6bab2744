from __future__ import annotations

import math
import random
import unittest

import numpy as np

from labelchart import CoordinateMapper, DataPoint, Dataset, EmptyDatasetError, analyze_range, resolve_config
from labelchart.surface import TAU, PathBuilder, arc_points, arc_sweep
from labelchart.ticks import format_tick_value, format_ticks_for_axis, y_tick_values


def _mapper(data: dict[str, float], **overrides: object) -> tuple[Dataset, CoordinateMapper]:
    ds = Dataset.from_input(data)
    return ds, CoordinateMapper.from_config(resolve_config(overrides), analyze_range(ds))


class RangeAnalyzerTests(unittest.TestCase):
    def test_min_max_and_range_match_builtin_reductions(self) -> None:
        rng = random.Random(7)
        for _ in range(25):
            values = [rng.uniform(-1000.0, 1000.0) for _ in range(rng.randint(1, 12))]
            ds = Dataset.from_input([(f"L{i}", v) for i, v in enumerate(values)])
            vr = analyze_range(ds)
            self.assertEqual(vr.max_value, max(values))
            self.assertEqual(vr.min_value, min(values))
            self.assertEqual(vr.range, max(values) - min(values))
            self.assertGreaterEqual(vr.range, 0.0)
            self.assertEqual(vr.count, len(values))

    def test_first_and_last_labels_follow_order(self) -> None:
        vr = analyze_range(Dataset.from_input({"Jan": 7, "Feb": 20, "Dec": 5}))
        self.assertEqual((vr.first_label, vr.last_label), ("Jan", "Dec"))
        self.assertFalse(vr.is_flat)

    def test_flat_data_is_flagged(self) -> None:
        self.assertTrue(analyze_range(Dataset.from_input({"A": 5, "B": 5, "C": 5})).is_flat)
        self.assertTrue(analyze_range(Dataset.from_input({"Jan": 10})).is_flat)

    def test_empty_iterable_raises(self) -> None:
        with self.assertRaises(EmptyDatasetError):
            analyze_range([])  # type: ignore[arg-type]


class CoordinateMapperTests(unittest.TestCase):
    def test_increasing_values_map_to_decreasing_y(self) -> None:
        ds, mapper = _mapper({"a": 1, "b": 2, "c": 4, "d": 8, "e": 9.5})
        ys = [y for _, y in mapper.map_dataset(ds)]
        for upper, lower in zip(ys[:-1], ys[1:]):
            self.assertGreater(upper, lower)

    def test_constant_horizontal_step(self) -> None:
        for n in range(2, 9):
            ds, mapper = _mapper({f"L{i}": float(i % 3) for i in range(n)})
            xs = [x for x, _ in mapper.map_dataset(ds)]
            expected = (500 - 2 * 30) / (n - 1)
            self.assertAlmostEqual(mapper.step, expected)
            for left, right in zip(xs[:-1], xs[1:]):
                self.assertAlmostEqual(right - left, expected)
            self.assertAlmostEqual(xs[0], 30.0)
            self.assertAlmostEqual(xs[-1], 470.0)

    def test_extremes_map_to_plot_edges(self) -> None:
        ds, mapper = _mapper({"Jan": 7, "Feb": 20, "Dec": 5})
        self.assertAlmostEqual(mapper.map_label(ds, "Feb")[1], 10.0)
        self.assertAlmostEqual(mapper.map_label(ds, "Dec")[1], 470.0)
        self.assertAlmostEqual(mapper.map_label(ds, "Jan")[1], 10.0 + 460.0 * (13.0 / 15.0))

    def test_flat_data_is_centered_vertically(self) -> None:
        ds, mapper = _mapper({"A": 5, "B": 5, "C": 5})
        ys = {y for _, y in mapper.map_dataset(ds)}
        self.assertEqual(ys, {10.0 + 460.0 / 2})

    def test_single_point_is_centered(self) -> None:
        ds, mapper = _mapper({"Jan": 10})
        self.assertEqual(mapper.step, 0.0)
        self.assertEqual(mapper.map_dataset(ds), [(250.0, 240.0)])

    def test_padding_overrides_feed_the_mapping(self) -> None:
        ds, mapper = _mapper({"a": 0, "b": 1}, width=200, height=100, x_padding=20, y_padding=10, tick_length=5)
        self.assertEqual(mapper.map_dataset(ds), [(20.0, 90.0), (180.0, 5.0)])

    def test_out_of_range_index_and_unknown_label(self) -> None:
        ds, mapper = _mapper({"a": 0, "b": 1})
        with self.assertRaises(IndexError):
            mapper.map_point(2, 0.0)
        with self.assertRaises(KeyError):
            mapper.map_label(ds, "zzz")

    def test_array_mapping_matches_point_mapping(self) -> None:
        for data in ({"a": 3, "b": -1, "c": 7}, {"a": 2, "b": 2}, {"only": 1}):
            ds, mapper = _mapper(data)
            xs, ys = mapper.map_arrays(ds)
            expected = np.asarray(mapper.map_dataset(ds), dtype=np.float64)
            self.assertTrue(np.allclose(xs, expected[:, 0]))
            self.assertTrue(np.allclose(ys, expected[:, 1]))

    def test_mapping_is_deterministic(self) -> None:
        ds, mapper = _mapper({"a": 0.1, "b": 0.7, "c": 0.3})
        self.assertEqual(mapper.map_dataset(ds), mapper.map_dataset(ds))


class TickTests(unittest.TestCase):
    def test_tick_values_span_min_to_max(self) -> None:
        vr = analyze_range(Dataset.from_input({"Jan": 7, "Feb": 20, "Dec": 5}))
        ticks = y_tick_values(vr, 5)
        self.assertEqual(ticks.tolist(), [5.0, 8.0, 11.0, 14.0, 17.0, 20.0])

    def test_tick_endpoints_are_exact(self) -> None:
        vr = analyze_range(Dataset.from_input({"a": 0.1, "b": 0.7}))
        ticks = y_tick_values(vr, 3)
        self.assertEqual(ticks.size, 4)
        self.assertEqual(float(ticks[0]), 0.1)
        self.assertEqual(float(ticks[-1]), 0.7)

    def test_flat_range_has_single_tick(self) -> None:
        vr = analyze_range(Dataset.from_input({"A": 5, "B": 5}))
        self.assertEqual(y_tick_values(vr, 5).tolist(), [5.0])

    def test_tick_count_must_be_positive(self) -> None:
        vr = analyze_range(Dataset.from_input({"A": 1, "B": 2}))
        with self.assertRaises(ValueError):
            y_tick_values(vr, 0)

    def test_tick_formatting(self) -> None:
        self.assertEqual(format_tick_value(5.0), "5")
        self.assertEqual(format_tick_value(2.5), "2.5")
        self.assertEqual(format_tick_value(0.125), "0.13")
        self.assertEqual(format_tick_value(1234.567), "1,234.57")
        self.assertEqual(format_tick_value(1_000_000.0), "1,000,000")
        self.assertEqual(format_tick_value(-0.001), "0")
        self.assertEqual(format_tick_value(-12.5), "-12.5")
        self.assertEqual(format_ticks_for_axis(np.asarray([0.1, 0.2, 0.30000000000000004])), ["0.1", "0.2", "0.3"])


class PathGeometryTests(unittest.TestCase):
    def test_arc_sweep_follows_canvas_rules(self) -> None:
        self.assertEqual(arc_sweep(0.0, TAU, False), TAU)
        self.assertEqual(arc_sweep(TAU, 0.0, True), -TAU)
        self.assertEqual(arc_sweep(0.0, TAU, True), 0.0)
        self.assertAlmostEqual(arc_sweep(0.0, -math.pi / 2, False), 1.5 * math.pi)
        self.assertAlmostEqual(arc_sweep(0.0, math.pi / 2, True), -1.5 * math.pi)

    def test_full_circle_points_close(self) -> None:
        points = arc_points(10.0, 20.0, 3.0, 0.0, TAU)
        self.assertGreaterEqual(len(points), 17)
        self.assertAlmostEqual(points[0][0], points[-1][0])
        self.assertAlmostEqual(points[0][1], points[-1][1])
        for x, y in points:
            self.assertAlmostEqual(math.hypot(x - 10.0, y - 20.0), 3.0)

    def test_negative_radius_rejected(self) -> None:
        with self.assertRaises(ValueError):
            arc_points(0.0, 0.0, -1.0, 0.0, TAU)

    def test_path_builder_subpaths(self) -> None:
        path = PathBuilder()
        path.line_to(1, 1)
        path.line_to(2, 2)
        path.move_to(5, 5)
        path.arc(5, 5, 1, 0.0, math.pi)
        self.assertEqual(len(path.subpaths), 2)
        self.assertEqual(path.subpaths[0], [(1.0, 1.0), (2.0, 2.0)])
        self.assertGreater(len(path.subpaths[1]), 2)
        path.reset()
        self.assertEqual(path.subpaths, [])


if __name__ == "__main__":
    unittest.main()
