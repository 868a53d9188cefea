"""Transaction management commands."""

import click
from finsight.cli.date_filters import resolve_cli_date, resolve_cli_month
from finsight.cli.error_handling import handle_domain_error
from finsight.cli.serialization import dump_envelope
from finsight.domain.transaction import TransactionService
from finsight.utils.amount_parser import parse_amount


def format_transaction_line(txn) -> str:
    """Format a transaction as a single table row."""
    sign = "+" if txn.type == "income" else "-"
    amount_str = f"{sign}${txn.amount:,.2f}"
    return (
        f"{txn.id:<6} {txn.date.isoformat():<12} {txn.type.value:<8} "
        f"{txn.category:<20} {amount_str:>14}  {txn.description}"
    )


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("list")
@click.option("--month", help="Month to list (YYYY-MM or relative like 'last month')")
@click.option("--this-month", is_flag=True, help="Filter to current month")
@click.option("--last-month", is_flag=True, help="Filter to previous month")
@click.option(
    "--type",
    "transaction_type",
    type=click.Choice(["expense", "income"], case_sensitive=False),
    help="Only show income or expenses",
)
@click.option("--category", help="Only show this category")
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table")
@click.pass_context
def list_transactions(
    ctx,
    month: str | None,
    this_month: bool,
    last_month: bool,
    transaction_type: str | None,
    category: str | None,
    as_json: bool,
):
    """List transactions, newest first."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    month_key = resolve_cli_month(
        ctx,
        month=month,
        period_flags={"this-month": this_month, "last-month": last_month},
    )

    try:
        transactions = service.list_transactions(
            month=month_key,
            transaction_type=transaction_type.lower() if transaction_type else None,
            category=category,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    if as_json:
        click.echo(dump_envelope(transactions=transactions))
        return

    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    click.echo(f"{'ID':<6} {'Date':<12} {'Type':<8} {'Category':<20} {'Amount':>14}  Description")
    click.echo("-" * 90)
    for txn in transactions:
        click.echo(format_transaction_line(txn))


@transaction_group.command("show")
@click.argument("transaction_id", type=int)
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of text")
@click.pass_context
def show_transaction(ctx, transaction_id: int, as_json: bool) -> None:
    """Show a single transaction."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    try:
        txn = service.require_transaction(transaction_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    if as_json:
        click.echo(dump_envelope(transaction=txn))
        return

    click.echo(f"Transaction ID: {txn.id}")
    click.echo(f"  Date: {txn.date}")
    click.echo(f"  Amount: ${txn.amount:,.2f}")
    click.echo(f"  Type: {txn.type.value}")
    click.echo(f"  Category: {txn.category}")
    click.echo(f"  Description: {txn.description}")


@transaction_group.command("update")
@click.argument("transaction_id", type=int)
@click.option("--amount", help="Transaction amount (e.g., 123.45)")
@click.option("--description", help="Transaction description")
@click.option("--category", help="Category name")
@click.option(
    "--type",
    "transaction_type",
    type=click.Choice(["expense", "income"], case_sensitive=False),
    help="Transaction type",
)
@click.option("--date", "txn_date", help="Transaction date (YYYY-MM-DD or relative like 'today')")
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: int,
    amount: str | None,
    description: str | None,
    category: str | None,
    transaction_type: str | None,
    txn_date: str | None,
) -> None:
    """Update a transaction.

    Updates only the fields that are provided.

    Examples:
        finsight transaction update 1 --amount 75.00
        finsight transaction update 1 --category Travel --date 2024-06-03
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    parsed_date = resolve_cli_date(ctx, txn_date)

    parsed_amount = None
    if amount is not None:
        try:
            parsed_amount = parse_amount(amount)
        except ValueError as e:
            click.echo(f"Error: Invalid amount format: {e}", err=True)
            ctx.exit(1)

    try:
        service.update_transaction(
            transaction_id=transaction_id,
            amount=parsed_amount,
            description=description,
            date=parsed_date,
            category=category,
            transaction_type=transaction_type.lower() if transaction_type else None,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Updated transaction {transaction_id}")


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.pass_context
def delete_transaction(ctx, transaction_id: int) -> None:
    """Delete a transaction.

    Examples:
        finsight transaction delete 1
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    txn = service.get_transaction(transaction_id)
    if txn is None:
        click.echo(f"Error: Transaction {transaction_id} not found", err=True)
        ctx.exit(1)

    if not click.confirm(f"Are you sure you want to delete transaction {transaction_id}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_transaction(transaction_id)
        click.echo(f"Deleted transaction {transaction_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli: click.Group) -> None:
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
