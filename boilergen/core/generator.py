"""
Generation facade.

Resolves a generation target to its template and renders it. Failures are
deterministic configuration or authoring defects, so they are reported
once and never retried.
"""

from typing import Any, Dict, Iterable, List, Mapping, Union

from ..logging_config import get_logger
from .renderer import RenderError, TemplateRenderer
from .schema import TemplateData, column_value
from .templates import TemplateNotFoundError, TemplateResolver

logger = get_logger(__name__)

Context = Union[TemplateData, Mapping[str, Any]]


class GenerationError(Exception):
    """Fatal error for a generation target."""

    def __init__(self, target: str, cause: Exception):
        self.target = target
        self.cause = cause
        super().__init__(f"Unable to generate {target}: {cause}")


def as_context(context: Context) -> Mapping[str, Any]:
    """Return the plain mapping a template renders against."""
    if isinstance(context, TemplateData):
        return context.to_context()
    return context


class Generator:
    """Turns a target name and a data context into finished source."""

    def __init__(self, resolver: TemplateResolver, renderer: TemplateRenderer):
        self.resolver = resolver
        self.renderer = renderer

    def generate(self, target: str, context: Context) -> bytes:
        """
        Generate source for one target.

        Args:
            target: Logical target name, e.g. "struct"
            context: TemplateData or a plain mapping of template values

        Returns:
            Canonical source bytes

        Raises:
            GenerationError: If the template is missing or fails to render
        """
        try:
            template = self.resolver.resolve(target)
            output = self.renderer.render(template, as_context(context))
        except (TemplateNotFoundError, RenderError) as e:
            logger.error("Generation of %s failed: %s", target, e)
            raise GenerationError(target, e) from e

        logger.info("Generated %s (%d bytes)", target, len(output))
        return output

    def generate_all(self, targets: Iterable[str], context: Context) -> Dict[str, bytes]:
        """
        Generate several targets against the same context.

        The batch stops at the first failing target and nothing from it is
        returned.

        Returns:
            Dict mapping target name to its source, in target order
        """
        mapping = as_context(context)
        return {target: self.generate(target, mapping) for target in targets}

    def validate_context(self, context: Context) -> List[str]:
        """
        Check a context for issues worth reporting.

        Language generators extend this with their own checks.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []
        mapping = as_context(context)
        table_name = mapping.get("table_name", "")
        columns = mapping.get("columns", [])

        if not table_name:
            warnings.append("Context has no table name")

        if not columns:
            warnings.append(f"Table '{table_name}' has no columns")

        seen = set()
        for column in columns:
            name = column_value(column, "name", "")
            if name in seen:
                warnings.append(f"Duplicate column {table_name}.{name}")
            seen.add(name)

        return warnings
