"""Jinja2 template engine for gallery rendering."""

from pathlib import Path
from typing import Any

from bs4 import BeautifulSoup
from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape

from .dates import format_display_date


def strip_markup(value: str | None) -> str:
    """Drop inline markup (Naver wraps query hits in <b> tags)."""
    if not value:
        return ""
    return BeautifulSoup(value, "html.parser").get_text()


class TemplateEngine:
    """Render gallery templates using Jinja2."""

    def __init__(self, template_dir: Path | None = None):
        """Initialize template engine with template directory.

        Args:
            template_dir: Path to templates directory.
                         Defaults to project templates/ folder.
        """
        if template_dir is None:
            template_dir = Path(__file__).parent.parent.parent / "templates"

        self.template_dir = template_dir
        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["strip_markup"] = strip_markup
        self.env.filters["display_date"] = format_display_date

    def render(self, template_name: str, context: dict[str, Any]) -> str:
        """Render a template with the given context.

        Args:
            template_name: Name of template file (e.g., 'gallery.html')
            context: Dictionary of template variables

        Returns:
            Rendered template string

        Raises:
            TemplateNotFound: If template doesn't exist
        """
        template = self.env.get_template(template_name)
        return template.render(**context)

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render a template from a string."""
        template = self.env.from_string(template_string)
        return template.render(**context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        try:
            self.env.get_template(template_name)
            return True
        except TemplateNotFound:
            return False
