"""Loan calculator: pricing, eligibility and application wizard for cedi loans."""

__version__ = "1.0.0"
