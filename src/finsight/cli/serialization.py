"""JSON rendering of domain entities for --json output."""

import json
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any


def to_jsonable(value: Any) -> Any:
    """Convert entities and view models into JSON-compatible values.

    Decimals become floats, enums their values, dates ISO strings.
    """
    if is_dataclass(value) and not isinstance(value, type):
        return to_jsonable(asdict(value))
    if isinstance(value, dict):
        return {key: to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


def dump_envelope(**entities: Any) -> str:
    """Render entities wrapped in a JSON envelope (e.g. {"budgets": [...]})."""
    return json.dumps(to_jsonable(entities), indent=2)
