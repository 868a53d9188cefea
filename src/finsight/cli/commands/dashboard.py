"""Dashboard and reporting commands."""

from datetime import date

import click
from finsight.cli.date_filters import resolve_cli_date, resolve_cli_month
from finsight.cli.error_handling import handle_domain_error
from finsight.cli.serialization import dump_envelope
from finsight.domain.dashboard import DashboardService
from finsight.domain.entities import InsightKind

INSIGHT_MARKERS = {
    InsightKind.WARNING: "[!]",
    InsightKind.INFO: "[i]",
    InsightKind.SUCCESS: "[+]",
}


def money(amount) -> str:
    if amount < 0:
        return f"-${-amount:,.2f}"
    return f"${amount:,.2f}"


@click.command("dashboard")
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of text")
@click.pass_context
def dashboard(ctx, as_json: bool) -> None:
    """Show totals, top expense category and recent transactions."""
    service = DashboardService(ctx.obj["db"])
    summary = service.get_summary()

    if as_json:
        click.echo(dump_envelope(summary=summary))
        return

    click.echo("\nDashboard")
    click.echo("=" * 50)
    click.echo(f"{'Total Income':<30} {money(summary.total_income):>19}")
    click.echo(f"{'Total Expenses':<30} {money(summary.total_expense):>19}")
    click.echo(f"{'Net Amount':<30} {money(summary.net):>19}")
    click.echo(f"{'Transactions':<30} {summary.transaction_count:>19}")

    top = summary.top_expense_category
    if top is not None:
        click.echo(f"{'Top Expense Category':<30} {top.category:>19}")
        click.echo(f"{'':<30} {money(top.amount):>19}")

    if summary.recent_transactions:
        click.echo("\nRecent Transactions:")
        for txn in summary.recent_transactions:
            sign = "+" if txn.type == "income" else "-"
            click.echo(
                f"  {txn.date.isoformat():<12} {txn.description[:30]:<30} "
                f"{txn.category:<20} {sign}{money(txn.amount)}"
            )
    else:
        click.echo("\nNo transactions yet.")


@click.command("breakdown")
@click.option(
    "--type",
    "transaction_type",
    type=click.Choice(["expense", "income"], case_sensitive=False),
    default="expense",
    help="Break down expenses or income (default: expense)",
)
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table")
@click.pass_context
def breakdown(ctx, transaction_type: str, as_json: bool) -> None:
    """Show totals per category with their share of the whole."""
    service = DashboardService(ctx.obj["db"])
    rows = service.get_category_breakdown(transaction_type.lower())

    if as_json:
        click.echo(dump_envelope(categories=rows))
        return

    label = "Expense" if transaction_type.lower() == "expense" else "Income"
    if not rows:
        click.echo(f"No {label.lower()} data available.")
        return

    click.echo(f"\n{label} Categories")
    click.echo("=" * 60)
    for row in rows:
        click.echo(
            f"{row.category:<25} {money(row.amount):>15} {row.share * 100:>8.1f}%  {row.color}"
        )


@click.command("monthly")
@click.option(
    "--months",
    type=click.IntRange(min=1),
    default=6,
    show_default=True,
    help="Number of months to show",
)
@click.option("--anchor", help="Last month of the window (date or YYYY-MM; default: today)")
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table")
@click.pass_context
def monthly(ctx, months: int, anchor: str | None, as_json: bool) -> None:
    """Show income and expenses for each of the last N months."""
    service = DashboardService(ctx.obj["db"])
    anchor_month = resolve_cli_month(ctx, month=anchor, period_flags={})

    try:
        series = service.get_monthly_series(window_months=months, anchor=anchor_month)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    if as_json:
        click.echo(dump_envelope(months=series))
        return

    click.echo(f"\n{'Month':<10} {'Income':>15} {'Expenses':>15}")
    click.echo("-" * 42)
    for entry in series:
        click.echo(
            f"{entry.label:<10} {money(entry.total_income):>15} {money(entry.total_expense):>15}"
        )


@click.command("compare")
@click.option("--month", help="Month to compare (YYYY-MM; default: current month)")
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table")
@click.pass_context
def compare(ctx, month: str | None, as_json: bool) -> None:
    """Compare budgets with actual spending for a month."""
    service = DashboardService(ctx.obj["db"])
    month_key = resolve_cli_month(
        ctx, month=month, period_flags={}, default_month=date.today()
    )

    try:
        rows, totals = service.get_budget_comparison(month_key)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    if as_json:
        click.echo(dump_envelope(month=month_key, comparison=rows, totals=totals))
        return

    if not rows:
        click.echo(f"No budget data available for {month_key}.")
        return

    click.echo(f"\nBudget vs Actual ({month_key})")
    click.echo("=" * 80)
    click.echo(f"{'Category':<25} {'Budget':>12} {'Actual':>12} {'Remaining':>12} {'Used':>8}")
    click.echo("-" * 80)
    for row in rows:
        click.echo(
            f"{row.category:<25} {money(row.budgeted):>12} {money(row.actual):>12} "
            f"{money(row.delta):>12} {row.percent_used:>7.1f}%"
        )
    click.echo("-" * 80)
    click.echo(
        f"{'Total':<25} {money(totals.total_budgeted):>12} {money(totals.total_actual):>12} "
        f"{money(totals.remaining):>12}"
    )


@click.command("insights")
@click.option("--date", "as_of", help="Reference date (default: today)")
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of text")
@click.pass_context
def insights(ctx, as_of: str | None, as_json: bool) -> None:
    """Show spending insights for the current month."""
    service = DashboardService(ctx.obj["db"])
    now = resolve_cli_date(ctx, as_of)
    results = service.get_insights(now=now)

    if as_json:
        click.echo(dump_envelope(insights=results))
        return

    click.echo("\nSpending Insights")
    click.echo("=" * 50)
    for insight in results:
        marker = INSIGHT_MARKERS[insight.kind]
        value = f" ({insight.value})" if insight.value else ""
        click.echo(f"{marker} {insight.title}{value}")
        click.echo(f"    {insight.description}")


def register_commands(cli):
    """Register dashboard commands with main CLI."""
    cli.add_command(dashboard)
    cli.add_command(breakdown)
    cli.add_command(monthly)
    cli.add_command(compare)
    cli.add_command(insights)
