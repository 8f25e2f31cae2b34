"""Command-line client for the allocator.

Can be run as:
    python -m advisor_api.cli analyze --amount 10000 [--profile moderate]
    python -m advisor_api.cli catalog [--type equity]
    python -m advisor_api.cli plans [--billing annual]
"""

import argparse
import logging
import sys

from rich.console import Console
from rich.table import Table

from advisor_api.catalog import filter_by_type, load_catalog
from advisor_api.core.analysis import AnalysisSession, parse_amount
from advisor_api.core.config import get_analysis_delay, get_default_currency
from advisor_api.core.currency import format_currency, format_percent
from advisor_api.core.onboarding import BillingPeriod, price_all_plans
from advisor_api.domain.entities import (
    AllocationRequest,
    Currency,
    InstrumentTypeFilter,
    RiskLabel,
    RiskProfile,
)
from advisor_api.domain.exceptions import DataValidationError, StorageReadError
from advisor_api.domain.services import classify_risk_score
from advisor_api.storage import LocalProfileStore, resolve_risk_profile

console = Console()

RISK_LABEL_STYLES = {
    RiskLabel.LOW: "green",
    RiskLabel.MODERATE: "yellow",
    RiskLabel.HIGH: "red",
}

# Exit code for invalid user input
EXIT_INVALID_INPUT = 2


def run_analyze(args: argparse.Namespace) -> int:
    """Validate input, run one analysis and print it."""
    try:
        amount = parse_amount(args.amount)
    except DataValidationError as e:
        console.print(f"[bold red]{e}[/]")
        return EXIT_INVALID_INPUT

    store = LocalProfileStore(args.data_path)
    profile = store.load_profile()
    risk_profile = RiskProfile(args.profile) if args.profile else resolve_risk_profile(profile)
    if args.currency:
        currency = Currency(args.currency)
    else:
        currency = profile.preferred_currency if profile else get_default_currency()

    request = AllocationRequest(
        amount=amount,
        risk_profile=risk_profile,
        instrument_type_filter=InstrumentTypeFilter(args.type),
    )
    session = AnalysisSession(delay_seconds=get_analysis_delay())
    with console.status("[bold blue]Analyzing...[/]"):
        result = session.run(request, load_catalog(args.catalog))

    label = classify_risk_score(result.risk_score)
    table = Table(title=f"Recommended allocation ({currency.value})")
    table.add_column("Instrument")
    table.add_column("Kind")
    table.add_column("Risk")
    table.add_column("%", justify="right")
    table.add_column("Amount", justify="right")
    table.add_column("24h", justify="right")
    table.add_column("Why")
    for line in result.lines:
        inst = line.instrument
        table.add_row(
            inst.name,
            inst.kind.value,
            inst.risk_tier.value,
            f"{line.percentage:.1f}%",
            format_currency(line.amount, currency),
            format_percent(inst.change_percent),
            line.reasoning,
        )

    console.print(f"Profile: [bold]{risk_profile.value}[/]")
    console.print(table)
    console.print(f"Estimated return: [bold]{format_percent(result.total_return)}[/]")
    console.print(
        f"Risk: [{RISK_LABEL_STYLES[label]}]{label.value}[/] "
        f"(score {result.risk_score:.1f}/3.0)"
    )
    console.print(f"Allocated: {result.total_percentage:.1f}% across {len(result.lines)} assets")
    console.print(result.recommendation_text)
    return 0


def run_catalog(args: argparse.Namespace) -> int:
    """Print the instrument catalog."""
    instruments = filter_by_type(load_catalog(args.catalog), InstrumentTypeFilter(args.type))
    table = Table(title="Instrument catalog")
    for column in ("Id", "Name", "Kind", "Risk", "Price", "24h", "Signal"):
        table.add_column(column)
    for inst in instruments:
        table.add_row(
            inst.id,
            inst.name,
            inst.kind.value,
            inst.risk_tier.value,
            f"{inst.current_price:,.2f}",
            format_percent(inst.change_percent),
            inst.recommendation.value,
        )
    console.print(table)
    return 0


def run_plans(args: argparse.Namespace) -> int:
    """Print plan pricing for a billing period."""
    table = Table(title=f"Plans ({args.billing})")
    for column in ("Plan", "Price", "Billed", "Savings"):
        table.add_column(column)
    for price in price_all_plans(BillingPeriod(args.billing)):
        data = price.to_dict()
        name = f"{data['name']} *" if data["popular"] else data["name"]
        table.add_row(name, f"{data['price']}{data['period']}", data["annual"] or "-", data["savings"] or "-")
    console.print(table)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rule-based portfolio allocation")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable info logging")
    parser.add_argument("--catalog", default=None, help="JSON catalog file (default: built-in)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    type_choices = [t.value for t in InstrumentTypeFilter]

    analyze = subparsers.add_parser("analyze", help="Allocate an amount")
    analyze.add_argument("--amount", required=True, help="Amount to invest (BRL)")
    analyze.add_argument("--profile", choices=[p.value for p in RiskProfile], default=None)
    analyze.add_argument("--type", choices=type_choices, default="all")
    analyze.add_argument("--currency", choices=[c.value for c in Currency], default=None)
    analyze.add_argument("--data-path", default=None, help="Profile store directory")
    analyze.set_defaults(handler=run_analyze)

    catalog = subparsers.add_parser("catalog", help="List instruments")
    catalog.add_argument("--type", choices=type_choices, default="all")
    catalog.set_defaults(handler=run_catalog)

    plans = subparsers.add_parser("plans", help="Show plan pricing")
    plans.add_argument("--billing", choices=[b.value for b in BillingPeriod], default="monthly")
    plans.set_defaults(handler=run_plans)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.handler(args)
    except StorageReadError as e:
        console.print(f"[bold red]Catalog error:[/] {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
