"""Render catalogue pages as plain text through Jinja2 templates."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .filters import FILTERS

TEMPLATES_DIR = Path(__file__).parent.parent / "resources" / "templates"


class TextRenderer:
    """Render ``<page>.txt.j2`` templates.

    Args:
        templates_dir: Directory containing templates (default: resources/templates)
    """

    def __init__(self, templates_dir: Path | None = None):
        self.templates_dir = templates_dir or TEMPLATES_DIR
        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        for name, func in FILTERS.items():
            self._env.filters[name] = func

    def render(self, page: str, **context) -> str:
        template = self._env.get_template(f"{page}.txt.j2")
        return template.render(**context).rstrip() + "\n"
