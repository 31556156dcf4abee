"""Eligibility checks for loan requests.

Every rule is evaluated on every call; failures are collected as readable
messages in check order rather than raised.
"""
import logging
from datetime import date

from loancalc.config import MAX_PAYMENT_TO_INCOME_RATIO, MIN_APPLICANT_AGE
from loancalc.data_structures import EligibilityVerdict, LoanRequest
from loancalc.exceptions import InvalidRequestError
from loancalc.services.pricing_service import compute_effective_rate, compute_monthly_payment
from loancalc.services.program_catalog import get_program

logger = logging.getLogger(__name__)


def applicant_age(date_of_birth: date, today: date = None) -> int:
    """Derive age by subtracting calendar years.

    Month and day are ignored, so an applicant whose birthday is still ahead
    this year is counted one year older.

    Raises:
        InvalidRequestError: If date_of_birth is missing.
    """
    if date_of_birth is None:
        raise InvalidRequestError("date_of_birth", None, "is required to derive age")
    if today is None:
        today = date.today()
    return today.year - date_of_birth.year


def validate(request: LoanRequest, age: int) -> EligibilityVerdict:
    """Run all eligibility rules against a request.

    Args:
        request: The loan request.
        age: Applicant age in whole years.

    Returns:
        EligibilityVerdict with one message per failed rule.

    Raises:
        InvalidCategoryError: If the request's category is not configured.
    """
    program = get_program(request.category)
    violations = []

    if age < MIN_APPLICANT_AGE:
        violations.append(f"You must be at least {MIN_APPLICANT_AGE} years old to apply")

    if request.monthly_income < program.min_income:
        violations.append(
            f"Minimum monthly income requirement not met for {request.category} loan"
        )

    if request.principal > program.max_amount:
        violations.append(f"Maximum loan amount exceeded for {request.category} loan")

    rate = compute_effective_rate(request, program)
    payment = compute_monthly_payment(request.principal, rate, request.term_months)
    if payment > request.monthly_income * MAX_PAYMENT_TO_INCOME_RATIO:
        violations.append(
            f"Monthly payment cannot exceed {MAX_PAYMENT_TO_INCOME_RATIO:.0%} of monthly income"
        )

    if violations:
        logger.debug("Request for %s loan failed %d rule(s): %s",
                     request.category, len(violations), violations)
    return EligibilityVerdict(is_eligible=not violations, violations=tuple(violations))


def check_eligibility(request: LoanRequest, today: date = None) -> EligibilityVerdict:
    """Validate a request using the age derived from its date of birth."""
    return validate(request, applicant_age(request.date_of_birth, today))
