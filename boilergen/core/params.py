"""
Statement fragment builders.

Each builder walks the column list once, left to right, and joins the
results with ", ". Column order is preserved; nothing is sorted or
deduplicated.
"""

from typing import Sequence

from .naming import db_name
from .schema import Column

PARAM_SEPARATOR = ", "


def insert_param_names(columns: Sequence[Column]) -> str:
    """Return the column names for an INSERT column list, e.g. "a, b, c"."""
    return PARAM_SEPARATOR.join(column.name for column in columns)


def insert_param_flags(columns: Sequence[Column]) -> str:
    """
    Return positional placeholders for an INSERT value list.

    The index is the column's 1-based position in ``columns``:
    three columns give "$1, $2, $3".
    """
    return PARAM_SEPARATOR.join(f"${index}" for index, _ in enumerate(columns, 1))


def select_param_names(table_name: str, columns: Sequence[Column]) -> str:
    """
    Return an aliased SELECT list.

    Each column is emitted as "column AS table_column", for example
    "id AS users_id, email AS users_email".
    """
    return PARAM_SEPARATOR.join(
        f"{column.name} AS {db_name(table_name, column.name)}" for column in columns
    )
