"""Add transaction command."""

import click
from datetime import date
from finsight.cli.date_filters import resolve_cli_date
from finsight.cli.error_handling import handle_domain_error
from finsight.domain.categories import DEFAULT_TAXONOMY
from finsight.domain.transaction import TransactionService
from finsight.utils.amount_parser import parse_amount


@click.command("add")
@click.option(
    "--amount", required=True, help="Transaction amount (e.g., 123.45)"
)
@click.option("--description", required=True, help="Transaction description")
@click.option("--category", required=True, help="Category name (e.g., 'Food & Dining')")
@click.option(
    "--type",
    "transaction_type",
    type=click.Choice(["expense", "income"], case_sensitive=False),
    default="expense",
    help="Transaction type (default: expense)",
)
@click.option(
    "--date",
    "txn_date",
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday'; default: today)",
)
@click.pass_context
def add_transaction(
    ctx,
    amount: str,
    description: str,
    category: str,
    transaction_type: str,
    txn_date: str | None,
):
    """Add a transaction.

    Examples:
        finsight add --amount 42.50 --description "Groceries" --category "Food & Dining"
        finsight add --amount 3000 --description "Paycheck" --category Salary --type income
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    parsed_date = resolve_cli_date(ctx, txn_date) or date.today()

    try:
        parsed_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        transaction_id = service.create_transaction(
            amount=parsed_amount,
            description=description,
            date=parsed_date,
            category=category,
            transaction_type=transaction_type.lower(),
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created transaction {transaction_id}")
    click.echo(f"  Date: {parsed_date}")
    click.echo(f"  Amount: ${parsed_amount:,.2f}")
    click.echo(f"  Type: {transaction_type.lower()}")
    click.echo(f"  Category: {category}")
    if not DEFAULT_TAXONOMY.is_known(category.strip()):
        click.echo(f"  Note: '{category.strip()}' is not a built-in category")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
