"""Tests for gofmt canonicalization."""

import shutil

import pytest

from boilergen.core.formatting import CanonicalizeError, GofmtCanonicalizer

requires_gofmt = pytest.mark.skipif(shutil.which("gofmt") is None, reason="gofmt not installed")


def test_missing_executable():
    canonicalizer = GofmtCanonicalizer("boilergen-no-such-gofmt")
    with pytest.raises(CanonicalizeError, match="Unable to run boilergen-no-such-gofmt"):
        canonicalizer(b"package main\n")


@requires_gofmt
def test_formats_valid_source():
    output = GofmtCanonicalizer()(b"package main\nfunc  main( ) {\n}\n")
    assert output.startswith(b"package main\n")
    assert b"func main() {\n}\n" in output


@requires_gofmt
def test_rejects_invalid_source():
    with pytest.raises(CanonicalizeError):
        GofmtCanonicalizer()(b"package main\nfunc {\n")
