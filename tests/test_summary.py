import tempfile
import unittest
from pathlib import Path

import pandas as pd

from fars.errors import EmptyResultError
from fars.summary import export_summary_csv, summarize_frames, summarize_years
from _fixtures import write_header_only, write_years


class TestSummarizeYears(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.data_dir = self._tmp.name
        write_years(self.data_dir)

    def tearDown(self):
        self._tmp.cleanup()

    def test_columns(self):
        summary = summarize_years([2013, 2014, 2015], data_dir=self.data_dir)
        self.assertIsInstance(summary, pd.DataFrame)
        self.assertEqual(list(summary.columns), ["MONTH", 2013, 2014, 2015])

    def test_years_sorted_whatever_the_input_order(self):
        summary = summarize_years([2015, 2013], data_dir=self.data_dir)
        self.assertEqual(list(summary.columns), ["MONTH", 2013, 2015])

    def test_counts(self):
        summary = summarize_years([2013, 2014, 2015], data_dir=self.data_dir).set_index("MONTH")
        self.assertEqual(summary.index.tolist(), [1, 2, 3, 4, 5])
        self.assertEqual(summary.loc[1, 2013], 2)
        self.assertEqual(summary.loc[2, 2013], 2)
        self.assertEqual(summary.loc[3, 2014], 3)
        self.assertEqual(summary.loc[4, 2015], 1)
        self.assertEqual(summary[2013].sum(), 6)

    def test_missing_combinations_are_not_zero_filled(self):
        summary = summarize_years([2013, 2014, 2015], data_dir=self.data_dir).set_index("MONTH")
        self.assertTrue(pd.isna(summary.loc[2, 2014]))
        self.assertTrue(pd.isna(summary.loc[5, 2015]))

    def test_failed_year_is_left_out(self):
        with self.assertWarnsRegex(UserWarning, "invalid year: 2016"):
            summary = summarize_years([2013, 2016], data_dir=self.data_dir)
        self.assertEqual(list(summary.columns), ["MONTH", 2013])

    def test_year_without_records_keeps_its_column(self):
        write_header_only(self.data_dir, 2016)
        summary = summarize_years([2013, 2016], data_dir=self.data_dir)
        self.assertEqual(list(summary.columns), ["MONTH", 2013, 2016])
        self.assertTrue(summary[2016].isna().all())
        self.assertEqual(summary[2013].sum(), 6)

    def test_only_years_without_records(self):
        write_header_only(self.data_dir, 2016)
        with self.assertRaises(EmptyResultError):
            summarize_years([2016], data_dir=self.data_dir)

    def test_warning_points_at_caller(self):
        with self.assertWarns(UserWarning) as ctx:
            summarize_years([2013, 2017], data_dir=self.data_dir)
        self.assertEqual(Path(ctx.filename).name, Path(__file__).name)

    def test_every_year_failed(self):
        with self.assertWarns(UserWarning):
            with self.assertRaises(EmptyResultError):
                summarize_years([2016, 2017], data_dir=self.data_dir)

    def test_summarize_frames_skips_none(self):
        frames = [None, pd.DataFrame({"MONTH": [1, 1, 12], "year": [2020, 2020, 2020]})]
        summary = summarize_frames(frames)
        self.assertEqual(list(summary.columns), ["MONTH", 2020])
        self.assertEqual(summary[2020].tolist(), [2, 1])

    def test_summarize_frames_empty(self):
        with self.assertRaises(EmptyResultError):
            summarize_frames([None, None])

    def test_summarize_frames_explicit_years(self):
        frames = [pd.DataFrame({"MONTH": [6], "year": [2021]}), pd.DataFrame({"MONTH": [], "year": []})]
        summary = summarize_frames(frames, years=[2022, 2021])
        self.assertEqual(list(summary.columns), ["MONTH", 2021, 2022])
        self.assertTrue(summary[2022].isna().all())

    def test_summarize_frames_no_rows(self):
        with self.assertRaises(EmptyResultError):
            summarize_frames([pd.DataFrame({"MONTH": [], "year": []})], years=[2021])


class TestExportSummary(unittest.TestCase):
    def test_writes_csv(self):
        summary = summarize_frames([pd.DataFrame({"MONTH": [3, 4], "year": [2013, 2013]})])
        with tempfile.TemporaryDirectory() as tmp:
            out = export_summary_csv(summary, Path(tmp) / "reports" / "summary.csv")
            written = pd.read_csv(out)
        self.assertEqual(list(written.columns), ["MONTH", "2013"])
        self.assertEqual(written["2013"].tolist(), [1, 1])


if __name__ == "__main__":
    unittest.main()
