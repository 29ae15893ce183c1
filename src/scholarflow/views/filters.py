"""Jinja2 filters for the text views."""

from datetime import date


def format_date(date_string: str) -> str:
    """Format an ISO date as a human-readable date.

    Examples:
        >>> format_date("2024-03-05")
        'March 5, 2024'
    """
    if not date_string:
        return ""
    try:
        parsed = date.fromisoformat(date_string)
    except ValueError:
        return date_string
    return f"{parsed.strftime('%B')} {parsed.day}, {parsed.year}"


def format_authors(authors: list) -> str:
    """Comma-separated author names.

    Examples:
        >>> format_authors([{"name": "Jane"}, {"name": "John"}])
        'Jane, John'
    """
    if not authors:
        return ""
    names = []
    for author in authors:
        if isinstance(author, dict):
            name = author.get("name", "")
        else:
            name = getattr(author, "name", "")
        if name:
            names.append(name)
    return ", ".join(names)


def format_status(status: str) -> str:
    """Status badge text; published articles carry no badge.

    Examples:
        >>> format_status("under_review")
        '[UNDER REVIEW]'
    """
    if not status or status == "published":
        return ""
    return f"[{status.replace('_', ' ').upper()}]"


def chip(text: str, width: int = 20) -> str:
    """Shorten long labels for filter chips.

    Examples:
        >>> chip("Journal of Advanced Artificial Intelligence")
        'Journal of Advanced ...'
    """
    if len(text) <= width:
        return text
    return text[:width] + "..."


FILTERS = {
    "format_date": format_date,
    "format_authors": format_authors,
    "format_status": format_status,
    "chip": chip,
}
