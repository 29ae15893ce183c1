"""Filters for the browse listings: journal directory, issues, users, logs, FAQ."""

from collections.abc import Iterable
from typing import Literal

from schemas import Article, FAQItem, Issue, Journal, LogEntry, SemanticMatch, User

from .articles import title_sort_key

ALL = "All"

IssueSort = Literal["page", "title"]


def filter_journals(
    journals: Iterable[Journal], query: str = "", field: str | None = None
) -> list[Journal]:
    """Journal directory filter.

    Args:
        journals: Journals in directory order
        query: Substring matched case-insensitively against title or description
        field: Academic field to restrict to; None or "All" means any field
    """
    result = list(journals)
    if query:
        needle = query.lower()
        result = [
            j for j in result
            if needle in j.title.lower() or needle in j.description.lower()
        ]
    if field and field != ALL:
        result = [j for j in result if j.field == field]
    return result


def journal_fields(journals: Iterable[Journal]) -> list[str]:
    """Field choices for the directory, "All" first, then first-seen order."""
    fields = dict.fromkeys(j.field for j in journals)
    return [ALL, *fields]


def apply_semantic_match(
    journals: Iterable[Journal],
    current: list[Journal],
    match: SemanticMatch,
) -> list[Journal]:
    """Apply an AI semantic match to the journal directory.

    Args:
        journals: Every journal the match was computed over
        current: The listing shown before the match
        match: Outcome of the semantic match

    Returns:
        The narrowed journals for ``matched``, an empty list for ``none``,
        and ``current`` unchanged when the service was unavailable
    """
    if match.outcome == "unavailable":
        return current
    if match.outcome == "none":
        return []
    wanted = set(match.titles)
    return [j for j in journals if j.title in wanted]


def sort_issues(issues: Iterable[Issue]) -> list[Issue]:
    """Issues newest year first; issues from the same year keep their order."""
    return sorted(issues, key=lambda i: i.year, reverse=True)


def sort_issue_articles(articles: Iterable[Article], method: IssueSort = "page") -> list[Article]:
    """Table of contents ordering for an issue.

    ``page`` keeps the stored order, which is page order.
    """
    if method == "title":
        return sorted(articles, key=lambda a: title_sort_key(a.title))
    return list(articles)


def filter_users(
    users: Iterable[User], query: str = "", role: str | None = None
) -> list[User]:
    """User management listing: name or email substring, optional role."""
    result = list(users)
    if query:
        needle = query.lower()
        result = [
            u for u in result
            if needle in u.name.lower() or needle in u.email.lower()
        ]
    if role and role != ALL:
        result = [u for u in result if u.role == role]
    return result


def filter_logs(entries: Iterable[LogEntry], query: str = "") -> list[LogEntry]:
    """Audit log search over action, user name and details."""
    if not query:
        return list(entries)
    needle = query.lower()
    return [
        e for e in entries
        if needle in e.action.lower()
        or needle in e.user_name.lower()
        or needle in e.details.lower()
    ]


def filter_faqs(items: Iterable[FAQItem], category: str = "all") -> list[FAQItem]:
    if category == "all":
        return list(items)
    return [item for item in items if item.category == category]


def authored_by(articles: Iterable[Article], user_name: str) -> list[Article]:
    """Articles crediting ``user_name``, ignoring case and extra whitespace."""
    return [a for a in articles if a.credits(user_name)]
