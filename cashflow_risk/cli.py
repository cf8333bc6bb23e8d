"""Command line entry point: assess a CSV upload or a generated sample portfolio"""

import argparse
import logging
import sys
from typing import List, Optional

from cashflow_risk.assessment import AssessmentResult, assess_csv, assess_sample
from cashflow_risk.config import settings
from cashflow_risk.domain.exceptions import DomainException
from cashflow_risk.domain.models import Decision, RiskTier
from cashflow_risk.infrastructure.observability.logging import setup_logging
from cashflow_risk.presentation.export import write_csv
from cashflow_risk.presentation.table import SORTABLE_COLUMNS, TableState, apply_table_state

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cashflow-risk",
        description="Cash-flow risk assessment: automated lending decisions for a portfolio",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 100 sample customers, reproducible
  cashflow-risk sample --seed 42

  # Assess an upload and export the low risk customers
  cashflow-risk assess customers.csv --risk-level "Low Risk" --export out/
        """,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    sample = subparsers.add_parser("sample", help="Generate and assess sample customers")
    sample.add_argument("--count", type=int, default=settings.sample_size, help="Number of customers")
    sample.add_argument("--seed", type=int, default=settings.sample_seed, help="Seed for reproducible data")

    assess = subparsers.add_parser("assess", help="Assess customers from a CSV file")
    assess.add_argument("csv_file", help="CSV with customer_id and the four criterion columns")

    for sub in (sample, assess):
        sub.add_argument("--search", default="", help="Only customers whose ID contains this text")
        sub.add_argument(
            "--risk-level",
            choices=[tier.value for tier in RiskTier],
            help="Only customers at this overall risk level",
        )
        sub.add_argument("--sort", choices=SORTABLE_COLUMNS, help="Column to sort the table by")
        sub.add_argument("--desc", action="store_true", help="Sort descending")
        sub.add_argument("--page", type=int, default=1, help="Table page to print")
        sub.add_argument("--export", help="Write the filtered table as CSV to this file or directory")
        sub.add_argument("--log-level", default=settings.log_level)

    return parser


def _table_state(args: argparse.Namespace) -> TableState:
    state = TableState()
    state.set_search(args.search)
    state.set_risk_filter(RiskTier(args.risk_level) if args.risk_level else None)
    if args.sort:
        state.toggle_sort(args.sort)
        if args.desc:
            state.toggle_sort(args.sort)
    state.go_to(args.page)
    return state


def print_report(result: AssessmentResult, state: TableState) -> None:
    summary = result.summary
    print(f"Customers: {summary.total}")
    if result.invalid_count:
        print(f"Invalid rows skipped: {result.invalid_count}")
    for decision in Decision:
        print(f"  {decision.value:<14} {summary.counts[decision]:>5}  ({summary.rates[decision]:.1f}%)")

    print("\nInsights:")
    for insight in summary.insights:
        print(f"  [{insight.tone}] {insight.title}: {insight.description}")

    page = apply_table_state(result.records, state)
    print(f"\nShowing {page.start}-{page.end} of {page.total} records (page {page.page}/{page.total_pages})")
    for r in page.rows:
        print(
            f"  {r.customer_id:<12} {r.transaction_history:>6g} {r.affordability:>6g} "
            f"{r.employment:>6g} {r.behavior:>6g} {r.combined_score:>6.1f}  "
            f"{r.risk_level.value:<14} {r.decision.value}"
        )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, settings.log_format)

    try:
        if args.command == "sample":
            result = assess_sample(args.count, args.seed)
        else:
            result = assess_csv(args.csv_file)

        state = _table_state(args)
        print_report(result, state)

        if args.export:
            # Export honours search/filter/sort but not pagination
            state.items_per_page = max(len(result.records), 1)
            state.go_to(1)
            path = write_csv(apply_table_state(result.records, state).rows, args.export)
            print(f"\nExported to {path}")
    except (DomainException, ValueError, OSError) as e:
        logger.error(f"Assessment failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
