"""
Go-specific naming checks.

Handles Go reserved words and predeclared identifiers that derived names
must not collide with.
"""

from typing import List

# Go reserved words
GO_RESERVED_WORDS = {
    "break",
    "case",
    "chan",
    "const",
    "continue",
    "default",
    "defer",
    "else",
    "fallthrough",
    "for",
    "func",
    "go",
    "goto",
    "if",
    "import",
    "interface",
    "map",
    "package",
    "range",
    "return",
    "select",
    "struct",
    "switch",
    "type",
    "var",
}

# Go builtin types and functions
GO_BUILTIN_TYPES = {
    "any",
    "bool",
    "byte",
    "comparable",
    "complex64",
    "complex128",
    "error",
    "float32",
    "float64",
    "int",
    "int8",
    "int16",
    "int32",
    "int64",
    "rune",
    "string",
    "uint",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
    "uintptr",
    "append",
    "cap",
    "clear",
    "close",
    "complex",
    "copy",
    "delete",
    "imag",
    "len",
    "make",
    "max",
    "min",
    "new",
    "panic",
    "print",
    "println",
    "real",
    "recover",
}

# Names the insert template declares next to the table variable
TEMPLATE_LOCALS = {"db", "err", "errors", "sql"}


def check_go_identifier(name: str) -> List[str]:
    """
    Check a derived identifier against Go naming rules.

    Returns:
        List of problems (empty if the name is usable)
    """
    problems = []

    if not name:
        problems.append("derived identifier is empty")
        return problems

    if not name.isidentifier():
        problems.append(f"'{name}' is not a valid Go identifier")

    if name in GO_RESERVED_WORDS:
        problems.append(f"'{name}' is a Go reserved word")
    elif name in GO_BUILTIN_TYPES:
        problems.append(f"'{name}' shadows a Go predeclared identifier")

    return problems
