"""CLI helpers for month and date resolution."""

from datetime import date

import click

from finsight.utils.date_parser import month_key, parse_date, parse_month, shift_month

# Offset from the current month for each period flag
PERIOD_OFFSETS = {"this-month": 0, "last-month": -1}


def resolve_cli_month(
    ctx,
    *,
    month: str | None,
    period_flags: dict[str, bool],
    default_month: date | None = None,
) -> str | None:
    """Resolve a YYYY-MM month key from a --month value or period flags."""
    period_count = sum(1 for is_set in period_flags.values() if is_set)

    if period_count > 1:
        click.echo(
            "Error: Only one period option (--this-month, --last-month) can be specified at a time.",
            err=True,
        )
        ctx.exit(1)

    if period_count > 0 and month:
        click.echo(
            "Error: Period options (--this-month, --last-month) cannot be combined with --month.",
            err=True,
        )
        ctx.exit(1)

    if period_count == 1:
        for period, is_set in period_flags.items():
            if is_set:
                start = shift_month(parse_month(date.today()), PERIOD_OFFSETS[period])
                return month_key(start)

    if month:
        try:
            return month_key(parse_month(month))
        except ValueError:
            pass
        # Fall back to free-form dates such as "last month" or "2024-06-15"
        try:
            return month_key(parse_date(month))
        except ValueError as e:
            click.echo(f"Error: Invalid month: {e}", err=True)
            ctx.exit(1)

    if default_month is not None:
        return month_key(default_month)
    return None


def resolve_cli_date(ctx, value: str | None, label: str = "date") -> date | None:
    """Parse an optional CLI date, exiting with an error when invalid."""
    if value is None:
        return None
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)
