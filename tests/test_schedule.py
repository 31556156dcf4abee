"""Tests for the amortization schedule service."""
import os
import sys
import unittest
from datetime import date

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from loancalc.exceptions import InvalidRequestError
from loancalc.services.schedule_service import SCHEDULE_COLUMNS, build_schedule, summarize_schedule


class TestBuildSchedule(unittest.TestCase):

    def setUp(self):
        self.df = build_schedule(1000, 0.24, 12, date(2026, 1, 15))

    def test_shape_and_columns(self):
        self.assertEqual(list(self.df.columns), SCHEDULE_COLUMNS)
        self.assertEqual(len(self.df), 12)
        self.assertEqual(list(self.df["period"]), list(range(1, 13)))

    def test_first_installment_split(self):
        first = self.df.iloc[0]
        self.assertEqual(first["payment"], 94.56)
        self.assertEqual(first["interest_portion"], 20.0)
        self.assertEqual(first["principal_portion"], 74.56)
        self.assertEqual(first["balance"], 925.44)

    def test_balance_closes_at_zero(self):
        self.assertEqual(self.df.iloc[-1]["balance"], 0.0)
        self.assertAlmostEqual(self.df["principal_portion"].sum(), 1000.0, places=2)

    def test_last_installment_absorbs_residue(self):
        """Only the final payment may differ from the level installment."""
        self.assertTrue((self.df["payment"].iloc[:-1] == 94.56).all())
        self.assertAlmostEqual(self.df["payment"].iloc[-1], 94.56, delta=0.10)

    def test_due_dates_advance_monthly(self):
        self.assertEqual(self.df["due_date"].iloc[0], "2026-02-15")
        self.assertEqual(self.df["due_date"].iloc[-1], "2027-01-15")

    def test_month_end_start_date_is_clamped(self):
        df = build_schedule(1000, 0.24, 3, date(2026, 1, 31))
        self.assertEqual(list(df["due_date"]), ["2026-02-28", "2026-03-31", "2026-04-30"])

    def test_zero_rate_has_no_interest(self):
        df = build_schedule(1200, 0.0, 12, date(2026, 1, 1))
        self.assertTrue((df["payment"] == 100.0).all())
        self.assertEqual(df["interest_portion"].sum(), 0.0)

    def test_small_principal_never_overpays(self):
        """Cent rounding on a tiny loan must not push the balance below zero."""
        df = build_schedule(5, 0.25, 60, date(2026, 1, 1))
        self.assertTrue((df["balance"] >= 0).all())
        self.assertTrue((df["payment"] > 0).all())
        self.assertTrue((df["principal_portion"] >= 0).all())
        self.assertLessEqual(len(df), 60)
        self.assertEqual(df["balance"].iloc[-1], 0.0)
        self.assertAlmostEqual(df["principal_portion"].sum(), 5.0, places=2)

    def test_small_principals_across_terms(self):
        for principal in (1, 7, 13, 50, 199):
            for term in (6, 24, 60):
                with self.subTest(principal=principal, term=term):
                    df = build_schedule(principal, 0.25, term, date(2026, 1, 1))
                    self.assertTrue((df["balance"] >= 0).all())
                    self.assertTrue((df["payment"] > 0).all())
                    self.assertEqual(df["balance"].iloc[-1], 0.0)

    def test_rejects_non_positive_principal(self):
        with self.assertRaises(InvalidRequestError):
            build_schedule(0, 0.24, 12, date(2026, 1, 1))

    def test_rejects_zero_term(self):
        with self.assertRaises(InvalidRequestError):
            build_schedule(1000, 0.24, 0, date(2026, 1, 1))


class TestSummarizeSchedule(unittest.TestCase):

    def test_totals(self):
        df = build_schedule(1000, 0.24, 12, date(2026, 1, 15))
        summary = summarize_schedule(df)
        self.assertEqual(summary.installments, 12)
        self.assertAlmostEqual(summary.total_paid - summary.total_interest, 1000.0, places=2)
        self.assertAlmostEqual(summary.total_paid, 1134.72, delta=0.10)

    def test_empty_schedule(self):
        df = build_schedule(1000, 0.24, 1, date(2026, 1, 15)).iloc[0:0]
        summary = summarize_schedule(df)
        self.assertEqual(summary.installments, 0)
        self.assertEqual(summary.total_paid, 0.0)


if __name__ == "__main__":
    unittest.main()
