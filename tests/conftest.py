"""
Shared test fixtures.
"""

import pytest

from boilergen.core.formatting import CanonicalizeError
from boilergen.core.schema import Column, TemplateData
from boilergen.languages.go import create_go_generator


def passthrough(source: bytes) -> bytes:
    """Canonicalizer that returns the source unchanged."""
    return source


def reject(source: bytes) -> bytes:
    """Canonicalizer that rejects every input."""
    raise CanonicalizeError("1:1: expected 'package', found 'EOF'")


@pytest.fixture
def user_columns() -> list[Column]:
    return [
        Column(name="id", type="int"),
        Column(name="email", type="string"),
        Column(name="display_name", type="sql.NullString", is_nullable=True),
        Column(name="account_id", type="int64"),
    ]


@pytest.fixture
def user_data(user_columns) -> TemplateData:
    return TemplateData(table_name="users", columns=user_columns, package_name="models")


@pytest.fixture
def go_generator():
    """Go generator that skips gofmt."""
    return create_go_generator(canonicalizer=passthrough)


@pytest.fixture
def passthrough_canonicalizer():
    return passthrough


@pytest.fixture
def rejecting_canonicalizer():
    return reject
