"""Loan program lookup.

Wraps the LOAN_PROGRAMS table from config in immutable LoanProgram values.
An unknown category is a caller bug, not a user error, so it raises.
"""
import logging

from loancalc.config import LOAN_PROGRAMS
from loancalc.data_structures import LoanProgram
from loancalc.exceptions import InvalidCategoryError

logger = logging.getLogger(__name__)


def _build_catalog(table):
    return {
        category: LoanProgram(
            category=category,
            max_amount=terms["max_amount"],
            min_income=terms["min_income"],
            base_interest_rate=terms["base_interest_rate"],
        )
        for category, terms in table.items()
    }


_CATALOG = _build_catalog(LOAN_PROGRAMS)


def categories():
    """Return the configured loan categories in display order."""
    return tuple(_CATALOG)


def get_program(category: str) -> LoanProgram:
    """Look up the program for a loan category.

    Args:
        category: One of the configured category keys.

    Returns:
        The matching LoanProgram.

    Raises:
        InvalidCategoryError: If the category is not configured.
    """
    try:
        return _CATALOG[category]
    except KeyError:
        logger.error("Loan program lookup failed for category %r", category)
        raise InvalidCategoryError(category, _CATALOG.keys()) from None
