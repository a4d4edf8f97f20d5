"""
Source canonicalization.

Rendered text is handed to a canonicalizer before it is returned to the
caller. The default one pipes the source through ``gofmt``.
"""

import subprocess
from typing import Callable

from ..logging_config import get_logger

logger = get_logger(__name__)

# Takes raw rendered source, returns canonical source or raises CanonicalizeError.
Canonicalizer = Callable[[bytes], bytes]


class CanonicalizeError(Exception):
    """Raised when source cannot be canonicalized (usually a syntax error)."""

    pass


class GofmtCanonicalizer:
    """Formats Go source with the ``gofmt`` executable."""

    def __init__(self, command: str = "gofmt"):
        self.command = command

    def __call__(self, source: bytes) -> bytes:
        """
        Format Go source.

        Args:
            source: Raw Go source

        Returns:
            gofmt output

        Raises:
            CanonicalizeError: If gofmt is missing or rejects the source
        """
        try:
            completed = subprocess.run(
                [self.command],
                input=source,
                capture_output=True,
                check=False,
            )
        except OSError as e:
            logger.error("Unable to run %s: %s", self.command, e)
            raise CanonicalizeError(f"Unable to run {self.command}: {e}") from e

        if completed.returncode != 0:
            message = completed.stderr.decode("utf-8", errors="replace").strip()
            raise CanonicalizeError(message or f"{self.command} exited with {completed.returncode}")

        return completed.stdout
