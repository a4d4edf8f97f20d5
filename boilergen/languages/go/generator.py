"""
Go code generator implementation.

Wires the built-in Go templates, gofmt canonicalization and Go-specific
validation into a Generator.
"""

from typing import Any, Dict, List, Optional, Union

from ...core.config import GeneratorConfig, load_config
from ...core.formatting import Canonicalizer, GofmtCanonicalizer
from ...core.generator import Context, Generator, as_context
from ...core.naming import go_name
from ...core.renderer import TemplateRenderer
from ...core.schema import Column, TemplateData, column_value
from ...core.templates import TemplateEngine, TemplateRegistry, TemplateResolver
from ...logging_config import get_logger
from .naming import TEMPLATE_LOCALS, check_go_identifier
from .templates import BUILTIN_TEMPLATES

logger = get_logger(__name__)


class GoGenerator(Generator):
    """Generator for Go structs and database/sql helpers."""

    def __init__(
        self,
        resolver: TemplateResolver,
        renderer: TemplateRenderer,
        config: Optional[GeneratorConfig] = None,
    ):
        super().__init__(resolver, renderer)
        self.config = config or GeneratorConfig()

    def build_context(self, table_name: str, columns: List[Column]) -> TemplateData:
        """Create TemplateData for a table using the configured package and imports."""
        return TemplateData(
            table_name=table_name,
            columns=list(columns),
            package_name=self.config.package_name,
            imports=list(self.config.imports),
        )

    def generate_configured(self, context: Context) -> Dict[str, bytes]:
        """Generate every configured target for the context."""
        return self.generate_all(self.config.targets, context)

    def validate_context(self, context: Context) -> List[str]:
        """Validate a context for Go generation."""
        warnings = super().validate_context(context)
        mapping = as_context(context)
        table_name = mapping.get("table_name", "")
        columns = mapping.get("columns", [])

        struct_name = mapping.get("struct_name", go_name(table_name))
        for problem in check_go_identifier(struct_name):
            warnings.append(f"Table {table_name}: {problem}")

        var_name = mapping.get("var_name")
        if var_name is not None:
            for problem in check_go_identifier(var_name):
                warnings.append(f"Table {table_name}: {problem}")
            if var_name in TEMPLATE_LOCALS:
                warnings.append(
                    f"Table {table_name}: variable '{var_name}' clashes with a "
                    f"name used by the generated code"
                )

        field_names: Dict[str, str] = {}
        for column in columns:
            name = column_value(column, "name", "")
            field_name = go_name(name)
            for problem in check_go_identifier(field_name):
                warnings.append(f"Column {table_name}.{name}: {problem}")

            if field_name in field_names and field_names[field_name] != name:
                warnings.append(
                    f"Columns {table_name}.{field_names[field_name]} and "
                    f"{table_name}.{name} both map to field {field_name}"
                )
            field_names.setdefault(field_name, name)

            if not column_value(column, "type", ""):
                warnings.append(f"Column {table_name}.{name} has no Go type")

        return warnings


def create_go_generator(
    config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None,
    canonicalizer: Optional[Canonicalizer] = None,
    extra_templates: Optional[Dict[str, str]] = None,
) -> GoGenerator:
    """
    Create a Go generator with the built-in templates.

    Args:
        config: GeneratorConfig or dict of overrides
        canonicalizer: Source formatter (gofmt if omitted)
        extra_templates: Additional template sources by name

    Returns:
        Configured GoGenerator instance
    """
    if not isinstance(config, GeneratorConfig):
        config = load_config(custom_config=config)

    engine = TemplateEngine()
    registry = TemplateRegistry.from_sources(BUILTIN_TEMPLATES, engine)
    if extra_templates:
        registry = registry.extended(extra_templates, engine)

    if canonicalizer is None:
        canonicalizer = GofmtCanonicalizer(config.gofmt_command)

    logger.debug(
        "Creating Go generator (package=%s, templates=%s)",
        config.package_name,
        ", ".join(registry.names()),
    )

    return GoGenerator(
        TemplateResolver(registry),
        TemplateRenderer(canonicalizer),
        config,
    )
