"""
Identifier derivation for generated Go code.

Turns snake_case schema names into Go type names, Go variable names and
``db`` tag names. All functions are pure and total over any string.
"""

from typing import List

SEPARATOR = "_"
ID_SEGMENT = "id"
ID_REPLACEMENT = "ID"


def _segments(name: str) -> List[str]:
    """Split a snake_case name, dropping empty segments."""
    return [segment for segment in name.split(SEPARATOR) if segment]


def _capitalize(segment: str) -> str:
    """Title-case the first code point and leave the rest untouched."""
    first = segment[:1]
    titled = first.title()
    if len(titled) != 1:
        # keep one code point, e.g. "ß" would become "Ss"
        titled = first
    return titled + segment[1:]


def go_name(name: str) -> str:
    """
    Convert a name like "column_name" into a Go type name "ColumnName".

    Segments that are exactly "id" are fully uppercased, so
    "column_name_id" becomes "ColumnNameID".
    """
    parts = []
    for segment in _segments(name):
        if segment == ID_SEGMENT:
            parts.append(ID_REPLACEMENT)
        else:
            parts.append(_capitalize(segment))
    return "".join(parts)


def go_var_name(name: str) -> str:
    """
    Convert a name like "var_name" into a Go variable name "varName".

    The first segment is kept as is, even when it is "id". Later "id"
    segments are uppercased: "var_name_id" becomes "varNameID".
    """
    segments = _segments(name)
    if not segments:
        return ""

    parts = [segments[0]]
    for segment in segments[1:]:
        if segment == ID_SEGMENT:
            parts.append(ID_REPLACEMENT)
        else:
            parts.append(_capitalize(segment))
    return "".join(parts)


def db_name(table_name: str, column_name: str) -> str:
    """Build the ``db:""`` tag name "table_name_column_name"."""
    return table_name + SEPARATOR + column_name
