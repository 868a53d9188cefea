"""Budget management commands."""

from datetime import date

import click
from finsight.cli.date_filters import resolve_cli_month
from finsight.cli.error_handling import handle_domain_error
from finsight.cli.serialization import dump_envelope
from finsight.domain.budget import BudgetService
from finsight.utils.amount_parser import parse_amount


@click.group()
def budget_group():
    """Manage monthly category budgets."""
    pass


@budget_group.command("set")
@click.argument("category")
@click.argument("amount")
@click.option("--month", help="Budget month (YYYY-MM; default: current month)")
@click.pass_context
def set_budget(ctx, category: str, amount: str, month: str | None) -> None:
    """Create a budget for CATEGORY in a month.

    Examples:
        finsight budget set "Food & Dining" 400
        finsight budget set Travel 1200 --month 2024-07
    """
    db = ctx.obj["db"]
    service = BudgetService(db)

    month_key = resolve_cli_month(
        ctx, month=month, period_flags={}, default_month=date.today()
    )

    try:
        parsed_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        budget_id = service.create_budget(
            category=category, amount=parsed_amount, month=month_key
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(
        f"Created budget for '{category.strip()}' in {month_key}: ${parsed_amount:,.2f} (ID: {budget_id})"
    )


@budget_group.command("list")
@click.option("--month", help="Only show budgets for this month (YYYY-MM)")
@click.option("--this-month", is_flag=True, help="Only show budgets for the current month")
@click.option("--last-month", is_flag=True, help="Only show budgets for the previous month")
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table")
@click.pass_context
def list_budgets(
    ctx, month: str | None, this_month: bool, last_month: bool, as_json: bool
) -> None:
    """List budgets ordered by category."""
    db = ctx.obj["db"]
    service = BudgetService(db)

    month_key = resolve_cli_month(
        ctx,
        month=month,
        period_flags={"this-month": this_month, "last-month": last_month},
    )

    try:
        budgets = service.list_budgets(month=month_key)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    if as_json:
        click.echo(dump_envelope(budgets=budgets))
        return

    if not budgets:
        click.echo("No budgets found.")
        return

    click.echo(f"{'ID':<6} {'Month':<8} {'Category':<25} {'Amount':>14}")
    click.echo("-" * 56)
    for budget in budgets:
        amount_str = f"${budget.amount:,.2f}"
        click.echo(f"{budget.id:<6} {budget.month:<8} {budget.category:<25} {amount_str:>14}")


@budget_group.command("update")
@click.argument("budget_id", type=int)
@click.option("--category", help="Category name")
@click.option("--amount", help="Budget amount")
@click.option("--month", help="Budget month (YYYY-MM)")
@click.pass_context
def update_budget(
    ctx,
    budget_id: int,
    category: str | None,
    amount: str | None,
    month: str | None,
) -> None:
    """Update a budget.

    Updates only the fields that are provided.
    """
    db = ctx.obj["db"]
    service = BudgetService(db)

    month_key = resolve_cli_month(ctx, month=month, period_flags={})

    parsed_amount = None
    if amount is not None:
        try:
            parsed_amount = parse_amount(amount)
        except ValueError as e:
            click.echo(f"Error: Invalid amount format: {e}", err=True)
            ctx.exit(1)

    try:
        service.update_budget(
            budget_id=budget_id,
            category=category,
            amount=parsed_amount,
            month=month_key,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Updated budget {budget_id}")


@budget_group.command("delete")
@click.argument("budget_id", type=int)
@click.pass_context
def delete_budget(ctx, budget_id: int) -> None:
    """Delete a budget."""
    db = ctx.obj["db"]
    service = BudgetService(db)

    budget = service.get_budget(budget_id)
    if budget is None:
        click.echo(f"Error: Budget {budget_id} not found", err=True)
        ctx.exit(1)

    if not click.confirm(
        f"Are you sure you want to delete the {budget.month} budget for '{budget.category}'?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_budget(budget_id)
        click.echo(f"Deleted budget {budget_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli: click.Group) -> None:
    """Register budget commands with main CLI."""
    cli.add_command(budget_group, name="budget")
