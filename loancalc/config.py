"""Centralized configuration for the loan calculator.

This module contains the loan program table, pricing adjustments and the
eligibility thresholds used by the pricing and eligibility services.
"""

# =============================================================================
# LOAN PROGRAMS
# =============================================================================

# One entry per loan category. Rates are nominal annual fractions.
LOAN_PROGRAMS = {
    "personal": {"max_amount": 50000, "min_income": 1000, "base_interest_rate": 0.25},
    "business": {"max_amount": 100000, "min_income": 2000, "base_interest_rate": 0.20},
    "education": {"max_amount": 30000, "min_income": 800, "base_interest_rate": 0.15},
}

# =============================================================================
# PRICING ADJUSTMENTS
# =============================================================================

# Deducted from the base rate when any collateral is pledged
COLLATERAL_DISCOUNT = 0.02

# Deducted from the base rate when monthly income is above the threshold
HIGH_INCOME_DISCOUNT = 0.01
HIGH_INCOME_THRESHOLD = 5000

# Processing fee as a fraction of principal (2%)
PROCESSING_FEE_RATE = 0.02

# =============================================================================
# BUSINESS RULES
# =============================================================================

MIN_APPLICANT_AGE = 18

# Monthly payment may not exceed this share of monthly income
MAX_PAYMENT_TO_INCOME_RATIO = 0.4

COLLATERAL_CATEGORIES = ("none", "property", "vehicle", "investment")

EMPLOYMENT_STATUSES = ("employed", "self-employed", "business-owner", "retired")

# =============================================================================
# FORM DEFAULTS AND LIMITS
# =============================================================================

DEFAULT_LOAN_TYPE = "personal"
DEFAULT_LOAN_AMOUNT = 1000
DEFAULT_LOAN_TERM = 12
DEFAULT_EMPLOYMENT_STATUS = "employed"
DEFAULT_COLLATERAL = "none"

# Limits checked when a draft is turned into a request
MIN_LOAN_AMOUNT = 1000
MIN_LOAN_TERM = 6
MAX_LOAN_TERM = 60

# =============================================================================
# DISPLAY FORMATS
# =============================================================================

# Date format for date of birth and schedule due dates (ISO 8601)
DATE_FORMAT_STORAGE = "%Y-%m-%d"

CURRENCY_SYMBOL = "GH₵"

# Decimal places for money amounts
CURRENCY_PLACES = 2
