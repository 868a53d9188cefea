"""Input validation shared by the transaction and budget services."""

from decimal import Decimal, InvalidOperation

from finsight.domain.entities import TransactionType
from finsight.domain.errors import ValidationError, amount_out_of_range
from finsight.utils.date_parser import month_key, parse_month

MIN_AMOUNT = Decimal("0.01")
MAX_AMOUNT = Decimal("999999.99")
MAX_DESCRIPTION_LENGTH = 200


def validate_amount(amount: object, label: str = "Amount") -> Decimal:
    """Return amount as a Decimal within the accepted bounds.

    Raises:
        ValidationError: If amount is not a number or is out of range
    """
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except InvalidOperation:
        raise ValidationError(f"{label} must be a number")

    if not value.is_finite():
        raise ValidationError(f"{label} must be a number")
    if value < MIN_AMOUNT:
        raise ValidationError(f"{label} must be greater than 0")
    if value > MAX_AMOUNT:
        raise ValidationError(amount_out_of_range(label, str(MIN_AMOUNT), f"{MAX_AMOUNT:,}"))
    return value


def validate_description(description: str | None) -> str:
    """Return the trimmed description.

    Raises:
        ValidationError: If the description is empty or too long
    """
    text = (description or "").strip()
    if not text:
        raise ValidationError("Description is required")
    if len(text) > MAX_DESCRIPTION_LENGTH:
        raise ValidationError(
            f"Description cannot be longer than {MAX_DESCRIPTION_LENGTH} characters"
        )
    return text


def validate_transaction_type(transaction_type: object) -> TransactionType:
    """Return the transaction type as an enum member.

    Raises:
        ValidationError: If the type is not income or expense
    """
    try:
        return TransactionType(transaction_type)
    except ValueError:
        raise ValidationError(
            f"Unknown transaction type '{transaction_type}'. Expected 'income' or 'expense'"
        )


def validate_category(category: str | None) -> str:
    """Return the trimmed category name.

    Category names are not checked against the taxonomy or the transaction
    type; any non-empty name is accepted.

    Raises:
        ValidationError: If the category is empty
    """
    name = (category or "").strip()
    if not name:
        raise ValidationError("Category is required")
    return name


def validate_month(month: object) -> str:
    """Return the canonical YYYY-MM key for a month.

    Raises:
        ValidationError: If the month is not a valid YYYY-MM key
    """
    try:
        return month_key(parse_month(month))
    except ValueError as e:
        raise ValidationError(str(e))
