"""Category taxonomy commands."""

import click
from finsight.domain.categories import DEFAULT_TAXONOMY
from finsight.domain.entities import TransactionType


@click.command("categories")
@click.option(
    "--type",
    "transaction_type",
    type=click.Choice(["expense", "income"], case_sensitive=False),
    help="Only show categories for this transaction type",
)
def list_categories(transaction_type: str | None):
    """List the built-in categories and their display colors."""
    if transaction_type is None:
        types = [TransactionType.EXPENSE, TransactionType.INCOME]
    else:
        types = [TransactionType(transaction_type.lower())]

    for index, txn_type in enumerate(types):
        if index > 0:
            click.echo()
        click.echo(f"{txn_type.value.capitalize()} categories:")
        for name in DEFAULT_TAXONOMY.categories_for(txn_type):
            click.echo(f"  {name:<25} {DEFAULT_TAXONOMY.color_for(name)}")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(list_categories)
