"""
Template registry and resolution.

Wraps a Jinja2 environment that exposes the naming and parameter helpers
to templates, compiles named template sources into an immutable registry
and resolves templates from it by logical name.
"""

from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional

from jinja2 import DictLoader, Environment, StrictUndefined, Template
from jinja2 import TemplateError as JinjaTemplateError

from ..logging_config import get_logger
from .naming import db_name, go_name, go_var_name
from .params import insert_param_flags, insert_param_names, select_param_names

logger = get_logger(__name__)

# Registry entries are stored as "<name>.tpl" and looked up the same way.
TEMPLATE_SUFFIX = ".tpl"


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateNotFoundError(TemplateError):
    """Raised when no registered template matches the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unable to find the template: {template_filename(name)}")


def template_filename(name: str) -> str:
    """Return the registry key for a logical template name."""
    if name.endswith(TEMPLATE_SUFFIX):
        return name
    return name + TEMPLATE_SUFFIX


class TemplateEngine:
    """Jinja2 environment set up for Go source generation."""

    def __init__(self):
        self._env = Environment(
            loader=DictLoader({}),
            autoescape=False,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

        # Naming helpers
        self._env.filters["go_name"] = go_name
        self._env.filters["go_var_name"] = go_var_name
        self._env.globals["db_name"] = db_name

        # Statement fragment helpers
        self._env.filters["insert_param_names"] = insert_param_names
        self._env.filters["insert_param_flags"] = insert_param_flags
        self._env.globals["select_param_names"] = select_param_names

    def add_template(self, name: str, content: str):
        """
        Add an in-memory template source.

        Args:
            name: Template name
            content: Template content
        """
        self._env.loader.mapping[template_filename(name)] = content

    def compile(self, name: str) -> Template:
        """
        Compile a previously added template.

        Args:
            name: Template name

        Returns:
            Compiled Jinja2 template

        Raises:
            TemplateError: If the source has a syntax error
        """
        filename = template_filename(name)
        try:
            return self._env.get_template(filename)
        except JinjaTemplateError as e:
            raise TemplateError(f"Failed to compile template {filename}: {e}") from e


class TemplateRegistry:
    """
    Immutable collection of compiled templates keyed by name.

    Built once and handed to a TemplateResolver; it is never modified
    afterwards, so it can be shared freely.
    """

    def __init__(self, templates: Mapping[str, Template]):
        normalized: Dict[str, Template] = {}
        for name, template in templates.items():
            filename = template_filename(name)
            if filename in normalized:
                raise TemplateError(f"Duplicate template name: {filename}")
            normalized[filename] = template
        self._templates = MappingProxyType(normalized)

    @classmethod
    def from_sources(
        cls, sources: Mapping[str, str], engine: Optional[TemplateEngine] = None
    ) -> "TemplateRegistry":
        """
        Compile template sources into a registry.

        Args:
            sources: Mapping of template name to template source
            engine: Engine to compile with (a fresh one if omitted)

        Returns:
            New registry holding every compiled template
        """
        engine = engine or TemplateEngine()
        compiled: Dict[str, Template] = {}
        for name, content in sources.items():
            filename = template_filename(name)
            if filename in compiled:
                raise TemplateError(f"Duplicate template name: {filename}")
            engine.add_template(filename, content)
            compiled[filename] = engine.compile(filename)

        logger.debug("Compiled %d templates", len(compiled))
        return cls(compiled)

    def extended(
        self, sources: Mapping[str, str], engine: Optional[TemplateEngine] = None
    ) -> "TemplateRegistry":
        """Return a new registry with extra templates added to these ones."""
        clashes = sorted({template_filename(name) for name in sources} & set(self.names()))
        if clashes:
            raise TemplateError(f"Duplicate template name: {', '.join(clashes)}")

        added = TemplateRegistry.from_sources(sources, engine)
        merged = dict(self._templates)
        merged.update(added._templates)
        return TemplateRegistry(merged)

    def get(self, filename: str) -> Optional[Template]:
        """Return the template stored under ``filename`` or None."""
        return self._templates.get(filename)

    def names(self) -> List[str]:
        """Get sorted list of registered template names."""
        return sorted(self._templates)

    def __contains__(self, filename: object) -> bool:
        return filename in self._templates

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)


class TemplateResolver:
    """Looks up templates in a registry by logical name."""

    def __init__(self, registry: TemplateRegistry):
        self.registry = registry

    def resolve(self, name: str) -> Template:
        """
        Find the template registered for ``name``.

        Args:
            name: Logical template name, e.g. "struct"

        Returns:
            The matching compiled template

        Raises:
            TemplateNotFoundError: If nothing is registered under the name
        """
        template = self.registry.get(template_filename(name))
        if template is None:
            logger.debug("Template lookup failed: %s", name)
            raise TemplateNotFoundError(name)
        return template
