"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering
with common filters for TypeScript generation.
"""

import re
from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import (
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
)

from .naming import NameSanitizer, NamingCase
from ..logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self, template_dir: Optional[Path] = None, indent_size: int = 4):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing template files
            indent_size: Default indentation used by the ``indent`` filter
        """
        self.template_dir = Path(template_dir) if template_dir else None
        self.indent_size = indent_size
        self._sanitizer = NameSanitizer()
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Setup Jinja2 environment with code generation filters."""
        if self.template_dir and self.template_dir.exists():
            loader = FileSystemLoader(str(self.template_dir))
        else:
            if self.template_dir:
                logger.warning("Template directory not found: %s", self.template_dir)
            loader = DictLoader({})

        self._env = Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

        self._env.filters["snake_case"] = self._snake_case_filter
        self._env.filters["camel_case"] = self._camel_case_filter
        self._env.filters["pascal_case"] = self._pascal_case_filter
        self._env.filters["indent"] = self._indent_filter
        self._env.filters["comment"] = self._comment_filter
        self._env.filters["path_template"] = self._path_template_filter

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template file
            context: Variables to pass to template

        Returns:
            Rendered template content

        Raises:
            TemplateError: If the template is missing or rejects the context
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except Exception as e:
            raise TemplateError(
                f"Failed to render template {template_name}: {str(e)}"
            ) from e

    def render_string(self, template_string: str, context: Dict[str, Any]) -> str:
        """
        Render a template string with the given context.

        Args:
            template_string: Template content as string
            context: Variables to pass to template

        Returns:
            Rendered content
        """
        try:
            template = self._env.from_string(template_string)
            return template.render(**context)
        except Exception as e:
            raise TemplateError(f"Failed to render template string: {str(e)}") from e

    def add_template(self, name: str, content: str):
        """
        Add an in-memory template.

        File templates stay reachable only if the engine was built without
        a template directory.

        Args:
            name: Template name
            content: Template content
        """
        if not isinstance(self._env.loader, DictLoader):
            self._env.loader = DictLoader({})

        self._env.loader.mapping[name] = content
        if self._env.cache is not None:
            self._env.cache.clear()

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        try:
            self._env.get_template(template_name)
            return True
        except TemplateNotFound:
            return False

    # Template filters for code generation

    def _snake_case_filter(self, value: str) -> str:
        """Convert string to snake_case."""
        return self._sanitizer._convert_case(str(value), NamingCase.SNAKE_CASE)

    def _camel_case_filter(self, value: str) -> str:
        """Convert string to camelCase."""
        return self._sanitizer._convert_case(str(value), NamingCase.CAMEL_CASE)

    def _pascal_case_filter(self, value: str) -> str:
        """Convert string to PascalCase."""
        return self._sanitizer._convert_case(str(value), NamingCase.PASCAL_CASE)

    def _indent_filter(self, value: str, spaces: Optional[int] = None) -> str:
        """Indent all non-blank lines in a string."""
        indent = " " * (self.indent_size if spaces is None else spaces)
        lines = str(value).split("\n")
        return "\n".join(indent + line if line.strip() else "" for line in lines)

    def _comment_filter(self, value: str, style: str = "//") -> str:
        """Add comment markers to each line."""
        lines = str(value).split("\n")
        return "\n".join(f"{style} {line}" if line.strip() else line for line in lines)

    def _path_template_filter(self, value: str) -> str:
        """/users/{id} -> /users/${id}"""
        return re.sub(r"\{([^}]+)\}", r"${\1}", str(value))


def create_template_engine(
    template_dir: Optional[Path] = None, indent_size: int = 4
) -> TemplateEngine:
    """Create a template engine, falling back to the packaged templates."""
    return TemplateEngine(template_dir or DEFAULT_TEMPLATE_DIR, indent_size)


# Default template engine instance
_default_engine = None


def get_default_template_engine() -> TemplateEngine:
    """Get the default template engine instance."""
    global _default_engine
    if _default_engine is None:
        _default_engine = create_template_engine()
    return _default_engine
