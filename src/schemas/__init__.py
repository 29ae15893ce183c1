"""Schema definitions for ScholarFlow."""

from .article import ARTICLE_STATUSES, Article, ArticleStatus, Author, normalize_name
from .gemini import GeminiResponse
from .issue import Issue
from .journal import Journal
from .search import SearchFilters, SemanticMatch, SortKey
from .user import ROLES, FAQItem, LogEntry, Role, User

__all__ = [
    "ARTICLE_STATUSES",
    "Article",
    "ArticleStatus",
    "Author",
    "FAQItem",
    "GeminiResponse",
    "Issue",
    "Journal",
    "LogEntry",
    "ROLES",
    "Role",
    "SearchFilters",
    "SemanticMatch",
    "SortKey",
    "User",
    "normalize_name",
]
