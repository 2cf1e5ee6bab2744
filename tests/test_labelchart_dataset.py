from __future__ import annotations

from decimal import Decimal
import unittest

import numpy as np

from labelchart import ChartDataError, DataPoint, Dataset, EmptyDatasetError


class DatasetTests(unittest.TestCase):
    def test_mapping_keeps_insertion_order(self) -> None:
        ds = Dataset.from_input({"Jan": 7, "Feb": 20, "Dec": 5})
        self.assertEqual(ds.labels, ("Jan", "Feb", "Dec"))
        self.assertEqual(ds.values, (7.0, 20.0, 5.0))

    def test_pairs_define_order(self) -> None:
        ds = Dataset.from_input([("b", 1), ("a", 2.5), ("c", Decimal("3.25"))])
        self.assertEqual(ds.labels, ("b", "a", "c"))
        self.assertEqual(ds.values, (1.0, 2.5, 3.25))
        self.assertEqual(ds.index_of("a"), 1)

    def test_existing_dataset_is_returned_unchanged(self) -> None:
        ds = Dataset(points=(DataPoint("x", 1.0),))
        self.assertIs(Dataset.from_input(ds), ds)

    def test_numpy_scalars_and_non_string_labels(self) -> None:
        ds = Dataset.from_input({2024: np.float32(1.5), 2025: np.int64(3)})
        self.assertEqual(ds.labels, ("2024", "2025"))
        self.assertEqual(ds.values, (1.5, 3.0))
        self.assertEqual(ds.values_array().dtype, np.float64)

    def test_empty_inputs_raise(self) -> None:
        with self.assertRaises(EmptyDatasetError):
            Dataset.from_input({})
        with self.assertRaises(EmptyDatasetError):
            Dataset.from_input([])

    def test_duplicate_labels_rejected(self) -> None:
        with self.assertRaises(ChartDataError):
            Dataset.from_input([("a", 1), ("a", 2)])

    def test_non_numeric_and_non_finite_values_rejected(self) -> None:
        for bad in ("7", None, True, float("nan"), float("inf")):
            with self.subTest(value=bad):
                with self.assertRaises(ChartDataError):
                    Dataset.from_input({"a": bad})

    def test_malformed_pairs_rejected(self) -> None:
        with self.assertRaises(ChartDataError):
            Dataset.from_input([("a", 1, 2)])
        with self.assertRaises(ChartDataError):
            Dataset.from_input("abc")
        with self.assertRaises(ChartDataError):
            Dataset.from_input(None)

    def test_empty_dataset_error_is_a_value_error(self) -> None:
        self.assertTrue(issubclass(EmptyDatasetError, ValueError))

    def test_pandas_series_uses_index_as_labels(self) -> None:
        try:
            import pandas as pd
        except Exception:
            self.skipTest("pandas is not installed")

        series = pd.Series([3, 1, 2], index=["c", "a", "b"])
        ds = Dataset.from_input(series)
        self.assertEqual(ds.labels, ("c", "a", "b"))
        self.assertEqual(ds.values, (3.0, 1.0, 2.0))

    def test_torch_scalar_values(self) -> None:
        try:
            import torch
        except Exception:
            self.skipTest("torch is not installed")

        ds = Dataset.from_input({"a": torch.tensor(2), "b": torch.tensor(4.5)})
        self.assertEqual(ds.values, (2.0, 4.5))
        with self.assertRaises(ChartDataError):
            Dataset.from_input({"a": torch.tensor([1.0, 2.0])})


if __name__ == "__main__":
    unittest.main()
