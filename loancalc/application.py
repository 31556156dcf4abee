"""Application wizard state for the loan calculator.

This module provides the mutable form draft and the three-step wizard
(calculate, apply, confirm) that sits between a front-end and the engine.
The draft is edited field by field; the engine only ever sees immutable
LoanRequest snapshots taken from it.
"""
import logging
import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List, Optional

from loancalc.config import (
    COLLATERAL_CATEGORIES,
    DATE_FORMAT_STORAGE,
    DEFAULT_COLLATERAL,
    DEFAULT_EMPLOYMENT_STATUS,
    DEFAULT_LOAN_AMOUNT,
    DEFAULT_LOAN_TERM,
    DEFAULT_LOAN_TYPE,
    EMPLOYMENT_STATUSES,
    MAX_LOAN_TERM,
    MIN_LOAN_AMOUNT,
    MIN_LOAN_TERM,
)
from loancalc.data_structures import LoanRequest, PricingResult, Quote
from loancalc.engine import LoanEngine
from loancalc.exceptions import WizardStateError
from loancalc.result import ErrorType, Result
from loancalc.services import categories, price_request

logger = logging.getLogger(__name__)


def _is_number(value) -> bool:
    """True for finite ints and floats (rejects None, NaN and inf)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


# Text fields the applicant must fill in before submitting, with their labels
REQUIRED_FIELDS = (
    ("name", "Full name"),
    ("date_of_birth", "Date of birth"),
    ("national_id", "National ID"),
    ("phone", "Phone number"),
    ("email", "Email"),
    ("address", "Address"),
    ("employer_name", "Employer name"),
    ("purpose", "Loan purpose"),
)


@dataclass
class ApplicationDraft:
    """Everything the applicant has typed so far.

    Only loan_type, amount, term, monthly_income, collateral_type and
    date_of_birth feed the engine; the rest is carried for the summary.
    """
    loan_type: str = DEFAULT_LOAN_TYPE
    amount: float = DEFAULT_LOAN_AMOUNT
    term: int = DEFAULT_LOAN_TERM
    purpose: str = ""
    name: str = ""
    email: str = ""
    phone: str = ""
    # YYYY-MM-DD, as entered
    date_of_birth: str = ""
    national_id: str = ""
    address: str = ""
    employment_status: str = DEFAULT_EMPLOYMENT_STATUS
    employer_name: str = ""
    monthly_income: float = 0
    collateral_type: str = DEFAULT_COLLATERAL
    collateral_value: float = 0
    has_existing_loan: bool = False
    existing_loan_amount: float = 0

    def missing_fields(self) -> List[str]:
        """Labels of required text fields that are still blank."""
        return [label for attr, label in REQUIRED_FIELDS
                if not str(getattr(self, attr) or "").strip()]

    def snapshot(self, require_date_of_birth: bool = True) -> Result[LoanRequest]:
        """Freeze the engine-relevant fields into a LoanRequest.

        Args:
            require_date_of_birth: When False, a blank date of birth is allowed
                and left as None (the calculator step has no date yet).

        Returns:
            Result holding the LoanRequest, or the first problem found.
        """
        if self.loan_type not in categories():
            return Result.fail(f"Unknown loan type '{self.loan_type}'", ErrorType.UNKNOWN_CATEGORY)
        if self.collateral_type not in COLLATERAL_CATEGORIES:
            return Result.fail(f"Unknown collateral type '{self.collateral_type}'", ErrorType.VALIDATION)
        if self.employment_status not in EMPLOYMENT_STATUSES:
            return Result.fail(f"Unknown employment status '{self.employment_status}'", ErrorType.VALIDATION)
        if not _is_number(self.amount) or self.amount <= 0:
            return Result.fail("Loan amount must be greater than zero", ErrorType.VALIDATION)
        if self.amount < MIN_LOAN_AMOUNT:
            return Result.fail(f"Loan amount must be at least {MIN_LOAN_AMOUNT}", ErrorType.VALIDATION)
        if not _is_number(self.term) or int(self.term) != self.term:
            return Result.fail("Loan term must be a whole number of months", ErrorType.VALIDATION)
        if not MIN_LOAN_TERM <= self.term <= MAX_LOAN_TERM:
            return Result.fail(
                f"Loan term must be between {MIN_LOAN_TERM} and {MAX_LOAN_TERM} months", ErrorType.VALIDATION
            )
        if not _is_number(self.monthly_income) or self.monthly_income < 0:
            return Result.fail("Monthly income must be a non-negative number", ErrorType.VALIDATION)

        dob = None
        if self.date_of_birth:
            try:
                dob = datetime.strptime(self.date_of_birth, DATE_FORMAT_STORAGE).date()
            except ValueError:
                return Result.fail(f"Invalid date of birth '{self.date_of_birth}'", ErrorType.INVALID_DATE)
        elif require_date_of_birth:
            return Result.fail("Date of birth is required", ErrorType.INVALID_DATE)

        return Result.ok(LoanRequest(
            category=self.loan_type,
            principal=float(self.amount),
            term_months=int(self.term),
            monthly_income=float(self.monthly_income),
            collateral_category=self.collateral_type,
            date_of_birth=dob,
        ))


class WizardStep(Enum):
    CALCULATING = "calculating"
    APPLYING = "applying"
    CONFIRMED = "confirmed"


class ApplicationWizard:
    """Drives the calculate -> apply -> confirm flow.

    Attributes:
        draft: The ApplicationDraft being edited.
        step: Current WizardStep.
        errors: Messages from the last submit attempt.
        quote: The eligible Quote once confirmed, else None.
    """

    def __init__(self, engine: LoanEngine = None, draft: ApplicationDraft = None):
        self.engine = engine or LoanEngine()
        self.draft = draft or ApplicationDraft()
        self.step = WizardStep.CALCULATING
        self.errors: List[str] = []
        self.quote: Optional[Quote] = None

    def _require_step(self, expected: WizardStep, action: str):
        if self.step is not expected:
            raise WizardStateError(action, self.step.value)

    def current_pricing(self) -> Optional[PricingResult]:
        """Live figures for the calculator, or None if the draft can't be priced."""
        result = self.draft.snapshot(require_date_of_birth=False)
        if not result:
            return None
        return price_request(result.value)

    def continue_to_application(self) -> None:
        self._require_step(WizardStep.CALCULATING, "continue to application")
        self.step = WizardStep.APPLYING
        logger.info("Wizard moved to %s", self.step.value)

    def submit(self, today=None) -> bool:
        """Validate the draft and confirm the application if eligible.

        Args:
            today: Date used for age derivation (default: engine's today).

        Returns:
            True if the application moved to CONFIRMED.

        Raises:
            WizardStateError: If not in the APPLYING step.
        """
        self._require_step(WizardStep.APPLYING, "submit")

        errors = [f"{label} is required" for label in self.draft.missing_fields()]
        result = self.draft.snapshot()
        if not result:
            # A blank date of birth is already reported as missing
            if not (result.error_type == ErrorType.INVALID_DATE and not self.draft.date_of_birth):
                errors.append(result.error)
        if errors:
            self.errors = errors
            logger.info("Submission blocked by %d form error(s)", len(errors))
            return False

        quote = self.engine.quote(result.value, today)
        self.errors = list(quote.verdict.violations)
        if not quote.is_eligible:
            logger.info("Application ineligible: %s", self.errors)
            return False

        self.quote = quote
        self.step = WizardStep.CONFIRMED
        logger.info("Wizard moved to %s", self.step.value)
        return True

    def restart(self) -> None:
        """Discard the draft and return to the calculator."""
        self.draft = ApplicationDraft()
        self.step = WizardStep.CALCULATING
        self.errors = []
        self.quote = None
