"""Domain error types and the messages shared between layers."""


class DomainError(ValueError):
    """Base class for finsight domain errors.

    Deriving from ValueError lets callers that only catch ValueError (the CLI
    commands do) handle every domain failure.
    """


class ValidationError(DomainError):
    """A transaction, budget or query parameter failed validation."""


class NotFoundError(DomainError):
    """No transaction or budget exists with the requested ID."""


class ConflictError(DomainError):
    """A budget already exists for the category and month."""


def transaction_not_found(transaction_id: int) -> str:
    return f"Transaction {transaction_id} not found"


def budget_not_found(budget_id: int) -> str:
    return f"Budget {budget_id} not found"


def duplicate_budget(category: str, month: str) -> str:
    """Return message for a second budget in the same category and month."""
    return f"Budget already exists for this category and month ({category}, {month})"


def amount_out_of_range(label: str, minimum: str, maximum: str) -> str:
    return f"{label} must be between {minimum} and {maximum}"
