"""
Template rendering.

Executes a compiled template against a data context and canonicalizes the
result. Either complete canonical bytes come back or a RenderError is
raised; partial output is never returned.
"""

from enum import Enum
from typing import Any, Mapping

from jinja2 import Template

from ..logging_config import get_logger
from .formatting import CanonicalizeError, Canonicalizer

logger = get_logger(__name__)


class RenderPhase(Enum):
    """Stage of rendering that failed."""

    EXECUTION = "execution"
    CANONICALIZE = "canonicalize"


class RenderError(Exception):
    """Exception raised when a template cannot be turned into source."""

    def __init__(self, phase: RenderPhase, message: str):
        self.phase = phase
        super().__init__(f"{phase.value} failed: {message}")


class TemplateRenderer:
    """Renders templates and canonicalizes their output."""

    def __init__(self, canonicalizer: Canonicalizer, encoding: str = "utf-8"):
        self.canonicalizer = canonicalizer
        self.encoding = encoding

    def render(self, template: Template, context: Mapping[str, Any]) -> bytes:
        """
        Render a template into canonical source bytes.

        Args:
            template: Compiled template
            context: Values the template may reference

        Returns:
            Canonicalized source

        Raises:
            RenderError: With phase EXECUTION if the template fails to run,
                or CANONICALIZE if the output is not valid source
        """
        try:
            raw = template.render(**context)
        except Exception as e:
            logger.debug("Template %s failed to execute: %s", template.name, e)
            raise RenderError(RenderPhase.EXECUTION, str(e)) from e

        try:
            return self.canonicalizer(raw.encode(self.encoding))
        except CanonicalizeError as e:
            logger.debug("Output of template %s is not valid source: %s", template.name, e)
            raise RenderError(RenderPhase.CANONICALIZE, str(e)) from e
