"""Main CLI entry point."""

import click
from finsight.config import LOG_LEVELS, load_config
from finsight.database.factories import create_sqlite_database
from finsight.logger import setup_logging

# Import and register all commands at module level
from finsight.cli.commands import (
    add,
    budget,
    categories,
    dashboard,
    transaction,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides FINSIGHT_DB_PATH environment variable)",
    envvar="FINSIGHT_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Log level (overrides FINSIGHT_LOG_LEVEL environment variable)",
    envvar="FINSIGHT_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str | None):
    """Finsight - Personal finance tracker.

    Record income and expenses, set monthly category budgets and review
    dashboards, budget comparisons and spending insights.
    """
    ctx.ensure_object(dict)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        config = load_config(db_path=db_path, log_level=log_level)
        setup_logging(config)
        db = create_sqlite_database(database_path=str(config.db_path) if db_path else None)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
categories.register_commands(cli)
add.register_commands(cli)
transaction.register_commands(cli)
budget.register_commands(cli)
dashboard.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
