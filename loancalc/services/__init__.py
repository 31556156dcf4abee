"""Services package for loan calculator business logic.

Each module holds one focused concern: program lookup, pricing,
eligibility and the amortization schedule.
"""

from .program_catalog import categories, get_program
from .pricing_service import (
    compute_effective_rate,
    compute_monthly_payment,
    compute_total_payment,
    compute_processing_fee,
    price_request,
)
from .eligibility_service import applicant_age, validate, check_eligibility
from .schedule_service import build_schedule, summarize_schedule

__all__ = ['categories', 'get_program',
           'compute_effective_rate', 'compute_monthly_payment', 'compute_total_payment',
           'compute_processing_fee', 'price_request',
           'applicant_age', 'validate', 'check_eligibility',
           'build_schedule', 'summarize_schedule']
