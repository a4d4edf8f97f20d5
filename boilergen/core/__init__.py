"""
Core code generation components.

Identifier derivation, statement fragments, template resolution and
rendering shared by all language generators.
"""

from .config import ConfigError, ConfigManager, DEFAULT_TARGETS, GeneratorConfig, load_config
from .formatting import CanonicalizeError, Canonicalizer, GofmtCanonicalizer
from .generator import GenerationError, Generator
from .naming import db_name, go_name, go_var_name
from .params import insert_param_flags, insert_param_names, select_param_names
from .renderer import RenderError, RenderPhase, TemplateRenderer
from .schema import Column, TemplateData
from .templates import (
    TEMPLATE_SUFFIX,
    TemplateEngine,
    TemplateError,
    TemplateNotFoundError,
    TemplateRegistry,
    TemplateResolver,
)

__all__ = [
    # Naming utilities
    "go_name",
    "go_var_name",
    "db_name",
    # Statement fragments
    "insert_param_names",
    "insert_param_flags",
    "select_param_names",
    # Schema and context
    "Column",
    "TemplateData",
    # Template system
    "TEMPLATE_SUFFIX",
    "TemplateEngine",
    "TemplateError",
    "TemplateNotFoundError",
    "TemplateRegistry",
    "TemplateResolver",
    # Rendering
    "Canonicalizer",
    "CanonicalizeError",
    "GofmtCanonicalizer",
    "RenderError",
    "RenderPhase",
    "TemplateRenderer",
    # Generation
    "Generator",
    "GenerationError",
    # Configuration
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "DEFAULT_TARGETS",
    "load_config",
]
