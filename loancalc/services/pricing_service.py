"""Loan pricing service.

Pure functions that turn a loan request into figures:
- Effective annual rate (base rate less collateral and income discounts)
- Amortizing monthly payment
- Total repayment
- Processing fee
"""
import logging
from decimal import Decimal, ROUND_HALF_UP

from loancalc.config import (
    COLLATERAL_DISCOUNT,
    CURRENCY_PLACES,
    HIGH_INCOME_DISCOUNT,
    HIGH_INCOME_THRESHOLD,
    PROCESSING_FEE_RATE,
)
from loancalc.data_structures import LoanProgram, LoanRequest, PricingResult
from loancalc.exceptions import InvalidRequestError
from loancalc.services.program_catalog import get_program

logger = logging.getLogger(__name__)

_CENT = Decimal(1).scaleb(-CURRENCY_PLACES)


def round_currency(amount: float) -> float:
    """Round to cents, half away from zero on the exact binary value.

    Matches fixed-point string formatting of the float, so 0.125 becomes 0.13
    where the built-in round() would give 0.12.
    """
    return float(Decimal(amount).quantize(_CENT, rounding=ROUND_HALF_UP))


def compute_effective_rate(request: LoanRequest, program: LoanProgram = None) -> float:
    """Compute the annual rate after collateral and income discounts.

    Discounts are subtracted from the base rate and are not floored at zero.
    The rate is not rounded.

    Args:
        request: The loan request.
        program: The request's program; looked up by category when omitted.

    Returns:
        Effective nominal annual rate as a fraction.

    Raises:
        InvalidCategoryError: If the request's category is not configured.
    """
    if program is None:
        program = get_program(request.category)

    rate = program.base_interest_rate
    if request.collateral_category != "none":
        rate -= COLLATERAL_DISCOUNT
    if request.monthly_income > HIGH_INCOME_THRESHOLD:
        rate -= HIGH_INCOME_DISCOUNT
    return rate


def compute_monthly_payment(principal: float, annual_rate: float, term_months: int) -> float:
    """Compute the fixed installment that repays the principal over the term.

    Args:
        principal: Loan principal.
        annual_rate: Nominal annual rate as a fraction.
        term_months: Number of monthly installments (>= 1).

    Returns:
        Monthly payment rounded to cents.

    Raises:
        InvalidRequestError: If term_months is below 1.
    """
    if term_months < 1:
        raise InvalidRequestError("term_months", term_months, "must be at least 1")

    monthly_rate = annual_rate / 12
    if monthly_rate == 0:
        return round_currency(principal / term_months)

    growth = (1 + monthly_rate) ** term_months
    payment = principal * monthly_rate * growth / (growth - 1)
    return round_currency(payment)


def compute_total_payment(monthly_payment: float, term_months: int) -> float:
    return round_currency(monthly_payment * term_months)


def compute_processing_fee(principal: float) -> float:
    return principal * PROCESSING_FEE_RATE


def price_request(request: LoanRequest, program: LoanProgram = None) -> PricingResult:
    """Compute all pricing figures for a request."""
    rate = compute_effective_rate(request, program)
    monthly = compute_monthly_payment(request.principal, rate, request.term_months)
    result = PricingResult(
        effective_annual_rate=rate,
        monthly_payment=monthly,
        total_payment=compute_total_payment(monthly, request.term_months),
        processing_fee=compute_processing_fee(request.principal),
    )
    logger.debug("Priced %s loan of %s over %sm: %s",
                 request.category, request.principal, request.term_months, result)
    return result
