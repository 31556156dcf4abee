"""Business logic engine for the loan calculator.

This module provides the LoanEngine class which acts as a facade over
the focused service functions in loancalc/services/.

Services:
    - program_catalog: Loan program lookup
    - pricing_service: Rate, payment, total and fee
    - eligibility_service: Age derivation and eligibility rules
    - schedule_service: Amortization table
"""
import logging
from datetime import date

from loancalc.data_structures import LoanRequest, Quote
from loancalc.services import (
    applicant_age,
    build_schedule,
    compute_effective_rate,
    get_program,
    price_request,
    validate,
)

logger = logging.getLogger(__name__)


class LoanEngine:
    """Prices and validates loan requests.

    Holds no state between calls; every method takes an immutable
    LoanRequest snapshot and returns freshly computed values.

    Attributes:
        today_provider: Callable returning the current date. Used for age
            derivation and as the default schedule start date.
    """

    def __init__(self, today_provider=None):
        self.today_provider = today_provider or date.today

    def _today(self, today=None):
        return today if today is not None else self.today_provider()

    def quote(self, request: LoanRequest, today: date = None) -> Quote:
        """Price and validate a request in one pass.

        Args:
            request: Snapshot of the current form state.
            today: Date used for age derivation (default: today_provider()).

        Returns:
            Quote with pricing, applicant age and eligibility verdict.

        Raises:
            InvalidCategoryError: If the request's category is not configured.
            InvalidRequestError: If the request has no date of birth.
        """
        program = get_program(request.category)
        pricing = price_request(request, program)
        age = applicant_age(request.date_of_birth, self._today(today))
        verdict = validate(request, age)

        logger.debug("Quote for %s loan: eligible=%s", request.category, verdict.is_eligible)
        return Quote(request=request, pricing=pricing, applicant_age=age, verdict=verdict)

    def schedule(self, request: LoanRequest, start_date: date = None):
        """Build the amortization schedule at the request's effective rate.

        Returns:
            pandas DataFrame, see schedule_service.build_schedule.
        """
        rate = compute_effective_rate(request)
        return build_schedule(request.principal, rate, request.term_months, self._today(start_date))
