"""Search filter and semantic match schemas."""

from typing import Literal

from pydantic import BaseModel, Field

from .article import ArticleStatus

SortKey = Literal["relevance", "date_desc", "date_asc", "title"]


class SearchFilters(BaseModel):
    """Predicate state for the advanced article search.

    Every predicate is optional; an unset one matches everything. Dates are
    ISO strings and are compared lexicographically.

    Attributes:
        query: Free text matched against title, abstract and keywords
        author: Substring matched against author names
        journals: Journal ids to restrict to (empty means any journal)
        date_from: Inclusive lower publish date bound
        date_to: Inclusive upper publish date bound
        status: Statuses to include (empty means any status)
        sort: Result ordering
    """

    query: str = ""
    author: str = ""
    journals: frozenset[str] = frozenset()
    date_from: str = ""
    date_to: str = ""
    status: frozenset[ArticleStatus] = Field(
        default_factory=lambda: frozenset({"published"})
    )
    sort: SortKey = "relevance"

    model_config = {"frozen": True}


class SemanticMatch(BaseModel):
    """Outcome of an AI semantic match.

    ``matched`` carries the relevant titles, ``none`` means the service
    answered and found nothing relevant, ``unavailable`` means no answer was
    obtained (missing key, transport failure, unparseable reply).
    """

    outcome: Literal["matched", "none", "unavailable"]
    titles: list[str] = []

    model_config = {"frozen": True}

    @classmethod
    def matched(cls, titles: list[str]) -> "SemanticMatch":
        if not titles:
            return cls.none()
        return cls(outcome="matched", titles=list(titles))

    @classmethod
    def none(cls) -> "SemanticMatch":
        return cls(outcome="none")

    @classmethod
    def unavailable(cls) -> "SemanticMatch":
        return cls(outcome="unavailable")

    @property
    def is_available(self) -> bool:
        return self.outcome != "unavailable"
