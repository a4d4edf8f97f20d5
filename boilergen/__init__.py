"""
boilergen

Generates Go source for database tables from column metadata and
named templates.
"""

from .core import (
    Column,
    GenerationError,
    Generator,
    GeneratorConfig,
    TemplateData,
    db_name,
    go_name,
    go_var_name,
    load_config,
)
from .languages.go import GoGenerator, create_go_generator
from .logging_config import get_logger, setup_logging

__version__ = "0.1.0"

logger = get_logger(__name__)


def generate_table(table_name, columns, targets=None, config=None, canonicalizer=None):
    """
    Generate Go source for one table.

    Args:
        table_name: Database table name
        columns: Ordered column metadata
        targets: Target names (the configured targets if omitted)
        config: GeneratorConfig or dict of overrides
        canonicalizer: Source formatter (gofmt if omitted)

    Returns:
        Dict mapping target name to canonical Go source bytes
    """
    generator = create_go_generator(config, canonicalizer)
    context = generator.build_context(table_name, columns)
    for warning in generator.validate_context(context):
        logger.warning(warning)
    return generator.generate_all(targets or generator.config.targets, context)


__all__ = [
    "Column",
    "TemplateData",
    "Generator",
    "GoGenerator",
    "GenerationError",
    "GeneratorConfig",
    "create_go_generator",
    "generate_table",
    "load_config",
    "go_name",
    "go_var_name",
    "db_name",
    "get_logger",
    "setup_logging",
]
