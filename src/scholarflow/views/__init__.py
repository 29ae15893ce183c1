"""Plain-text views over the catalogue."""

from .filters import FILTERS, chip, format_authors, format_date, format_status
from .renderer import TextRenderer

__all__ = [
    "FILTERS",
    "TextRenderer",
    "chip",
    "format_authors",
    "format_date",
    "format_status",
]
