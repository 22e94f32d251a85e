"""
Template engine wrapper for code generation.

Provides a thin interface over Jinja2 plus the DocumentRenderer, which
serializes a Document by rendering each declaration with its template.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import (
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
)
from jinja2 import TemplateError as JinjaTemplateError

from ...logging_config import get_logger
from .document import Document
from .errors import GeneratorError

logger = get_logger(__name__)

DEFAULT_TEMPLATE_DIR = Path(__file__).parent.parent / "templates"


class TemplateError(GeneratorError):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing template files; defaults to
                the templates bundled with the package
        """
        self.template_dir = Path(template_dir) if template_dir else DEFAULT_TEMPLATE_DIR
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Setup Jinja2 environment with code generation utilities."""
        if self.template_dir.exists():
            loader = FileSystemLoader(str(self.template_dir))
        else:
            logger.warning("Template directory %s not found", self.template_dir)
            loader = DictLoader({})

        self._env = Environment(
            loader=loader,
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template file
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except TemplateNotFound as e:
            raise TemplateError(f"Template not found: {template_name}") from e
        except JinjaTemplateError as e:
            raise TemplateError(
                f"Failed to render template {template_name}: {str(e)}"
            ) from e

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        try:
            self._env.get_template(template_name)
            return True
        except TemplateNotFound:
            return False


def format_code(code: str) -> str:
    """
    Normalize whitespace in generated code.

    Strips trailing whitespace, collapses runs of blank lines to one and
    guarantees a single trailing newline.
    """
    formatted_lines = []
    blank_count = 0

    for line in code.split("\n"):
        stripped = line.rstrip()
        if not stripped:
            blank_count += 1
            if blank_count <= 1:
                formatted_lines.append("")
        else:
            blank_count = 0
            formatted_lines.append(stripped)

    return "\n".join(formatted_lines).strip("\n") + "\n"


class DocumentRenderer:
    """Serializes Documents to TypeScript source."""

    def __init__(self, engine: Optional[TemplateEngine] = None):
        self.engine = engine or TemplateEngine()

    def render(self, document: Document) -> str:
        """Render imports, then each declaration separated per the document."""
        sections = []

        if document.imports:
            sections.append(
                "\n".join(
                    self._render_node(imp).strip("\n") for imp in document.imports
                )
            )

        declarations = [
            self._render_node(decl).strip("\n") for decl in document.declarations
        ]
        if declarations:
            sections.append(document.separator.join(declarations))

        return format_code("\n\n".join(sections))

    def _render_node(self, node) -> str:
        return self.engine.render_template(node.template, {"decl": node})
