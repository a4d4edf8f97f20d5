"""
Column metadata and template data context.

Column values come from the database introspection layer; this module only
carries them. TemplateData assembles what the built-in templates render.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Sequence

from .naming import go_name, go_var_name


@dataclass(frozen=True)
class Column:
    """A single database column used as generation input."""

    name: str  # raw snake_case column name
    type: str = ""  # Go type chosen by the driver, not inspected by the core
    is_nullable: bool = False


def column_value(column: Any, key: str, default: Any = None) -> Any:
    """Read a column value by key for mappings and by attribute otherwise."""
    if isinstance(column, Mapping):
        return column.get(key, default)
    return getattr(column, key, default)


@dataclass
class TemplateData:
    """Data a template renders against for one table."""

    table_name: str
    columns: Sequence[Column] = field(default_factory=list)
    package_name: str = "models"
    imports: List[str] = field(default_factory=list)

    @property
    def struct_name(self) -> str:
        """Go type name of the table, e.g. "user_accounts" -> "UserAccounts"."""
        return go_name(self.table_name)

    @property
    def var_name(self) -> str:
        """Go variable name of the table, e.g. "user_accounts" -> "userAccounts"."""
        return go_var_name(self.table_name)

    def to_context(self) -> Dict[str, Any]:
        """
        Build the mapping passed to template rendering.

        Returns:
            Dict with table, column, package and derived identifier values
        """
        return {
            "table_name": self.table_name,
            "columns": list(self.columns),
            "package_name": self.package_name,
            "imports": sorted(set(self.imports)),
            "struct_name": self.struct_name,
            "var_name": self.var_name,
        }
