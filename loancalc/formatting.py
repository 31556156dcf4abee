"""Display formatting for loan figures.

Amounts are shown in Ghana cedi with thousands grouping; rates as a
percentage per annum. The engine itself only returns plain numbers.
"""
from typing import List, Tuple

from loancalc.config import CURRENCY_PLACES, CURRENCY_SYMBOL
from loancalc.data_structures import LoanRequest, PricingResult
from loancalc.services.pricing_service import round_currency


def format_cedi(amount) -> str:
    value = round_currency(float(amount))
    sign = "-" if value < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(value):,.{CURRENCY_PLACES}f}"


def format_rate(rate: float) -> str:
    return f"{rate * 100:.1f}% per annum"


def application_summary(request: LoanRequest, pricing: PricingResult) -> List[Tuple[str, str]]:
    """Build the label/value rows shown on the confirmation screen.

    Args:
        request: The submitted request.
        pricing: Pricing computed for that request.

    Returns:
        Ordered list of (label, value) pairs.
    """
    return [
        ("Loan Type", f"{request.category.capitalize()} Loan"),
        ("Loan Amount", format_cedi(request.principal)),
        ("Monthly Payment", format_cedi(pricing.monthly_payment)),
        ("Loan Term", f"{request.term_months} months"),
        ("Interest Rate", format_rate(pricing.effective_annual_rate)),
        ("Processing Fee", format_cedi(pricing.processing_fee)),
    ]
