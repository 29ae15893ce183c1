"""Jinja2 prompt templates for the AI service."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

PROMPTS_DIR = Path(__file__).parent.parent / "resources" / "prompts"


class PromptBuilder:
    """Render prompts from the templates in resources/prompts.

    Args:
        prompts_dir: Directory containing the templates (default: resources/prompts)
    """

    SUMMARY_SENTENCES = 3

    def __init__(self, prompts_dir: Path | None = None):
        self.prompts_dir = prompts_dir or PROMPTS_DIR
        self._env = Environment(
            loader=FileSystemLoader(str(self.prompts_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=False,
        )

    def summarize(self, text: str) -> str:
        template = self._env.get_template("summarize.txt.j2")
        return template.render(text=text, sentences=self.SUMMARY_SENTENCES).strip()

    def semantic_match(self, query: str, candidates: list[str]) -> str:
        template = self._env.get_template("semantic_match.txt.j2")
        return template.render(query=query, candidates=list(candidates)).strip()
