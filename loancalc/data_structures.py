from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Tuple


@dataclass(frozen=True)
class LoanProgram:
    """Static terms for one loan category."""
    category: str
    max_amount: float
    min_income: float
    base_interest_rate: float


@dataclass(frozen=True)
class LoanRequest:
    """Immutable snapshot of the form fields that drive pricing and eligibility.

    Built fresh from the application draft on every recompute; the engine
    never holds on to it.
    """
    category: str
    principal: float
    term_months: int
    monthly_income: float
    collateral_category: str
    # None until the applicant reaches the personal details step
    date_of_birth: Optional[date] = None


@dataclass(frozen=True)
class PricingResult:
    effective_annual_rate: float
    monthly_payment: float
    total_payment: float
    processing_fee: float


@dataclass(frozen=True)
class EligibilityVerdict:
    is_eligible: bool
    # In check order
    violations: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Quote:
    """Pricing and eligibility for one request, computed together."""
    request: LoanRequest
    pricing: PricingResult
    applicant_age: int
    verdict: EligibilityVerdict

    @property
    def is_eligible(self) -> bool:
        return self.verdict.is_eligible


@dataclass(frozen=True)
class ScheduleSummary:
    installments: int
    total_paid: float
    total_interest: float
