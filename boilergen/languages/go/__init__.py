"""
Go code generator module.

Generates Go structs and database/sql helpers from table column metadata.
"""

from .generator import GoGenerator, create_go_generator
from .naming import GO_BUILTIN_TYPES, GO_RESERVED_WORDS, check_go_identifier
from .templates import BUILTIN_TEMPLATES

__all__ = [
    "GoGenerator",
    "create_go_generator",
    "GO_BUILTIN_TYPES",
    "GO_RESERVED_WORDS",
    "check_go_identifier",
    "BUILTIN_TEMPLATES",
]
