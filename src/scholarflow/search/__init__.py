"""Filtering and ordering over catalogue collections."""

from .articles import (
    author_options,
    build_predicates,
    matches_author,
    matches_text,
    search_articles,
    sort_articles,
)
from .listings import (
    apply_semantic_match,
    authored_by,
    filter_faqs,
    filter_journals,
    filter_logs,
    filter_users,
    journal_fields,
    sort_issue_articles,
    sort_issues,
)

__all__ = [
    "apply_semantic_match",
    "author_options",
    "authored_by",
    "build_predicates",
    "filter_faqs",
    "filter_journals",
    "filter_logs",
    "filter_users",
    "journal_fields",
    "matches_author",
    "matches_text",
    "search_articles",
    "sort_articles",
    "sort_issue_articles",
    "sort_issues",
]
