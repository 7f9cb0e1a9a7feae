"""
SQL helpers: partial-update SET clauses and NUMERIC rendering.
"""

from decimal import Decimal
from typing import Any, List, Mapping, NamedTuple

from jobly.core.exceptions import InvalidInputError


class PartialUpdate(NamedTuple):
    """SET clause fragment plus the values bound to its placeholders."""
    set_cols: str
    values: List[Any]


def sql_for_partial_update(data_to_update: Mapping[str, Any], js_to_sql: Mapping[str, str]) -> PartialUpdate:
    """
    Build the SET clause of an UPDATE from a sparse field mapping.

    Args:
        data_to_update: {fieldName: newValue, ...}, only the fields to change
        js_to_sql: {fieldName: column_name, ...}; fields missing here are
            used as the column name unchanged

    Returns:
        PartialUpdate, e.g. {firstName: 'Aliya', age: 32} with
        {firstName: 'first_name'} gives
        ('"first_name"=$1, "age"=$2', ['Aliya', 32])

    Raises:
        InvalidInputError: If data_to_update is empty
    """
    keys = list(data_to_update.keys())
    if not keys:
        raise InvalidInputError("No data")

    cols = [f'"{js_to_sql.get(col_name, col_name)}"=${idx}' for idx, col_name in enumerate(keys, start=1)]

    return PartialUpdate(
        set_cols=", ".join(cols),
        values=[data_to_update[key] for key in keys],
    )


def decimal_to_str(value: Any) -> str:
    """
    Render a NUMERIC column value as a plain decimal string.

    Drivers hand back Decimal (PostgreSQL) or float (SQLite); str() on either
    switches to exponent notation for small values ("1E-7", "1e-07").
    """
    return format(Decimal(str(value)), "f")
