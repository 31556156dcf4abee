"""Command line entry point for the loan calculator."""
import argparse
import logging
import sys

from loancalc.application import ApplicationDraft
from loancalc.config import (
    COLLATERAL_CATEGORIES,
    DEFAULT_COLLATERAL,
    DEFAULT_LOAN_AMOUNT,
    DEFAULT_LOAN_TERM,
    DEFAULT_LOAN_TYPE,
)
from loancalc.engine import LoanEngine
from loancalc.formatting import application_summary, format_cedi
from loancalc.services import categories, price_request


def build_parser():
    parser = argparse.ArgumentParser(prog="loancalc", description="Quote a cedi loan and check eligibility.")
    parser.add_argument("--type", dest="loan_type", default=DEFAULT_LOAN_TYPE, choices=categories())
    parser.add_argument("--amount", type=float, default=DEFAULT_LOAN_AMOUNT)
    parser.add_argument("--term", type=int, default=DEFAULT_LOAN_TERM, help="Term in months")
    parser.add_argument("--income", type=float, default=0, help="Monthly income")
    parser.add_argument("--collateral", default=DEFAULT_COLLATERAL, choices=COLLATERAL_CATEGORIES)
    parser.add_argument("--dob", default="", help="Date of birth (YYYY-MM-DD); enables the eligibility check")
    parser.add_argument("--schedule", action="store_true", help="Print the amortization schedule")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    draft = ApplicationDraft(
        loan_type=args.loan_type,
        amount=args.amount,
        term=args.term,
        monthly_income=args.income,
        collateral_type=args.collateral,
        date_of_birth=args.dob,
    )
    result = draft.snapshot(require_date_of_birth=False)
    if not result:
        print(f"Error: {result.error}", file=sys.stderr)
        return 2

    request = result.value
    engine = LoanEngine()
    pricing = price_request(request)
    for label, value in application_summary(request, pricing):
        print(f"{label + ':':<18}{value}")
    print(f"{'Total Payment:':<18}{format_cedi(pricing.total_payment)}")

    exit_code = 0
    if request.date_of_birth is not None:
        quote = engine.quote(request)
        if quote.is_eligible:
            print("\nEligible")
        else:
            exit_code = 1
            print("\nNot eligible:")
            for violation in quote.verdict.violations:
                print(f"  - {violation}")

    if args.schedule:
        schedule_df = engine.schedule(request)
        print()
        print(schedule_df.to_string(index=False))

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
