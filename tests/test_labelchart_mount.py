from __future__ import annotations

import unittest

from labelchart import (
    Chart,
    ChartConfigError,
    ChartDataError,
    EmptyDatasetError,
    MountError,
    MountPoint,
    MountRegistry,
    RasterMount,
    RasterSurface,
    RecordingMount,
    RecordingSurface,
    UnknownVariantError,
    create_chart,
)
from labelchart.config import ChartConfig
from labelchart.surface import DrawingSurface


class _BrokenMount(MountPoint):
    def create_surface(self, config: ChartConfig) -> DrawingSurface:
        raise OSError("display unavailable")


class _NotASurfaceMount(MountPoint):
    def create_surface(self, config: ChartConfig) -> DrawingSurface:
        return object()  # type: ignore[return-value]


class CreateChartTests(unittest.TestCase):
    def test_registry_resolves_container_ids(self) -> None:
        registry = MountRegistry()
        registry.register("sales", RecordingMount())
        chart = create_chart("sales", {"Jan": 7, "Feb": 20}, {"title": "Sales"}, registry=registry)
        self.assertIsInstance(chart, Chart)
        self.assertIsInstance(chart.surface, RecordingSurface)
        self.assertEqual(chart.config.title, "Sales")
        self.assertEqual(registry.ids(), ["sales"])

    def test_mount_instance_is_used_directly(self) -> None:
        chart = create_chart(RasterMount(), {"a": 1}, {"width": 64, "height": 48, "background": "white"})
        self.assertIsInstance(chart.surface, RasterSurface)
        self.assertEqual(chart.surface.size, (64, 48))

    def test_unknown_container_id(self) -> None:
        registry = MountRegistry()
        with self.assertRaises(MountError):
            create_chart("missing", {"a": 1}, registry=registry)
        registry.register("gone", RecordingMount())
        registry.unregister("gone")
        with self.assertRaises(MountError):
            create_chart("gone", {"a": 1}, registry=registry)

    def test_id_without_registry(self) -> None:
        with self.assertRaises(MountError):
            create_chart("chart", {"a": 1})

    def test_bad_handle_type(self) -> None:
        with self.assertRaises(MountError):
            create_chart(42, {"a": 1}, registry=MountRegistry())  # type: ignore[arg-type]

    def test_mount_that_cannot_host_a_surface(self) -> None:
        for mount in (_BrokenMount(), _NotASurfaceMount()):
            with self.subTest(mount=type(mount).__name__):
                with self.assertRaises(MountError):
                    create_chart(mount, {"a": 1})

    def test_registry_rejects_bad_registrations(self) -> None:
        registry = MountRegistry()
        with self.assertRaises(ValueError):
            registry.register("", RecordingMount())
        with self.assertRaises(TypeError):
            registry.register("x", object())  # type: ignore[arg-type]

    def test_empty_dataset_fails_construction(self) -> None:
        with self.assertRaises(EmptyDatasetError):
            create_chart(RecordingMount(), {})

    def test_bad_data_and_bad_overrides_fail_construction(self) -> None:
        with self.assertRaises(ChartDataError):
            create_chart(RecordingMount(), {"a": "x"})
        with self.assertRaises(ChartConfigError):
            create_chart(RecordingMount(), {"a": 1}, {"height": -5})
        with self.assertRaises(ChartConfigError):
            create_chart(RecordingMount(), {"a": 1, "b": 2, "c": 3}, {"height": 30})

    def test_mount_error_wins_over_data_errors(self) -> None:
        with self.assertRaises(MountError):
            create_chart("missing", {}, registry=MountRegistry())

    def test_unknown_variant_surfaces_at_draw_time(self) -> None:
        chart = create_chart(RecordingMount(), {"a": 1}, {"type": "PieGraph"})
        with self.assertRaises(UnknownVariantError):
            chart.draw()
        assert isinstance(chart.surface, RecordingSurface)
        self.assertEqual(chart.surface.commands, [])


if __name__ == "__main__":
    unittest.main()
