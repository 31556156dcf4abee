"""Amortization schedule service.

Builds the month-by-month repayment table for a priced loan:
- Due dates one calendar month apart
- Interest/principal split of each installment
- Remaining balance after each installment
"""
import logging
from datetime import date
from dateutil.relativedelta import relativedelta
import pandas as pd

from loancalc.config import DATE_FORMAT_STORAGE
from loancalc.data_structures import ScheduleSummary
from loancalc.exceptions import InvalidRequestError
from loancalc.services.pricing_service import compute_monthly_payment, round_currency

logger = logging.getLogger(__name__)

SCHEDULE_COLUMNS = ["period", "due_date", "payment", "interest_portion", "principal_portion", "balance"]


def build_schedule(principal, annual_rate, term_months, start_date: date = None) -> pd.DataFrame:
    """Build the amortization table for a loan.

    Every installment equals the rounded monthly payment except the last,
    which absorbs the rounding residue so the balance closes at 0.00. Cent
    rounding on small principals can clear the balance early; the schedule
    then ends at that installment and never runs negative.

    Args:
        principal: Loan principal.
        annual_rate: Nominal annual rate as a fraction.
        term_months: Number of monthly installments.
        start_date: Disbursement date; the first installment falls one month later.
            Defaults to today.

    Returns:
        DataFrame with SCHEDULE_COLUMNS, one row per installment (at most term_months rows).

    Raises:
        InvalidRequestError: If principal is not positive or term_months is below 1.
    """
    if principal <= 0:
        raise InvalidRequestError("principal", principal, "must be positive")

    if start_date is None:
        start_date = date.today()

    payment = compute_monthly_payment(principal, annual_rate, term_months)
    monthly_rate = annual_rate / 12
    balance = round_currency(principal)

    rows = []
    for period in range(1, term_months + 1):
        interest = round_currency(balance * monthly_rate)
        principal_portion = round_currency(payment - interest)
        if period == term_months or principal_portion >= balance:
            principal_portion = balance
            installment = round_currency(principal_portion + interest)
        else:
            installment = payment

        balance = round_currency(balance - principal_portion)
        due = start_date + relativedelta(months=period)
        rows.append({
            "period": period,
            "due_date": due.strftime(DATE_FORMAT_STORAGE),
            "payment": installment,
            "interest_portion": interest,
            "principal_portion": principal_portion,
            "balance": balance,
        })
        if balance == 0:
            break

    logger.debug("Built %d-row schedule for principal %s at %s", len(rows), principal, annual_rate)
    return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)


def summarize_schedule(schedule_df: pd.DataFrame) -> ScheduleSummary:
    """Total up a schedule produced by build_schedule."""
    if schedule_df.empty:
        return ScheduleSummary(installments=0, total_paid=0.0, total_interest=0.0)

    return ScheduleSummary(
        installments=len(schedule_df),
        total_paid=round_currency(float(schedule_df["payment"].sum())),
        total_interest=round_currency(float(schedule_df["interest_portion"].sum())),
    )
