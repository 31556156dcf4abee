import os
import sys
import unittest
from datetime import date
from unittest.mock import Mock

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from loancalc.data_structures import LoanRequest
from loancalc.engine import LoanEngine
from loancalc.exceptions import InvalidCategoryError, InvalidRequestError


class TestLoanEngine(unittest.TestCase):

    def setUp(self):
        self.today = Mock(return_value=date(2026, 10, 17))
        self.engine = LoanEngine(today_provider=self.today)
        self.request = LoanRequest(
            category="personal", principal=1000, term_months=12, monthly_income=6000,
            collateral_category="none", date_of_birth=date(1996, 12, 31),
        )

    def test_quote_reference_scenario(self):
        quote = self.engine.quote(self.request)
        self.assertAlmostEqual(quote.pricing.effective_annual_rate, 0.24)
        self.assertEqual(quote.pricing.monthly_payment, 94.56)
        self.assertEqual(quote.pricing.total_payment, 1134.72)
        self.assertEqual(quote.pricing.processing_fee, 20.0)
        self.assertEqual(quote.applicant_age, 30)
        self.assertTrue(quote.is_eligible)
        self.assertIs(quote.request, self.request)
        self.today.assert_called_once()

    def test_explicit_today_skips_provider(self):
        quote = self.engine.quote(self.request, today=date(2014, 6, 1))
        self.assertEqual(quote.applicant_age, 18)
        self.today.assert_not_called()

    def test_quote_reports_violations(self):
        request = LoanRequest(
            category="education", principal=35000, term_months=24, monthly_income=900,
            collateral_category="none", date_of_birth=date(2006, 3, 3),
        )
        quote = self.engine.quote(request)
        self.assertFalse(quote.is_eligible)
        self.assertIn("Maximum loan amount exceeded for education loan", quote.verdict.violations)

    def test_quote_unknown_category(self):
        request = LoanRequest(
            category="mortgage", principal=1000, term_months=12, monthly_income=6000,
            collateral_category="none", date_of_birth=date(1996, 1, 1),
        )
        with self.assertRaises(InvalidCategoryError):
            self.engine.quote(request)

    def test_quote_without_date_of_birth(self):
        request = LoanRequest(
            category="personal", principal=1000, term_months=12, monthly_income=6000,
            collateral_category="none",
        )
        with self.assertRaises(InvalidRequestError):
            self.engine.quote(request)

    def test_schedule_uses_effective_rate_and_today(self):
        df = self.engine.schedule(self.request)
        self.assertEqual(df["payment"].iloc[0], 94.56)
        self.assertEqual(df["due_date"].iloc[0], "2026-11-17")


if __name__ == "__main__":
    unittest.main()
