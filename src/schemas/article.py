"""Article and author schemas."""

from typing import Literal, get_args

from pydantic import BaseModel

ArticleStatus = Literal["draft", "pending", "under_review", "published", "rejected"]

ARTICLE_STATUSES: tuple[str, ...] = get_args(ArticleStatus)


def normalize_name(name: str) -> str:
    """Person name as compared for ownership: whitespace collapsed, casefolded."""
    return " ".join(name.split()).casefold()


class Author(BaseModel):
    """An author credited on an article."""

    id: str
    name: str
    affiliation: str = ""

    model_config = {"frozen": True}


class Article(BaseModel):
    """A research article published (or in progress) in an issue.

    Attributes:
        id: Unique article identifier
        title: Article title
        authors: Credited authors, in byline order
        abstract: Abstract text
        publish_date: ISO date string (YYYY-MM-DD)
        keywords: Keyword strings
        pdf_url: Optional link to the PDF
        page_range: Page range as printed, e.g. "12-24"
        issue_id: Owning issue identifier
        journal_id: Owning journal identifier
        status: Editorial status
    """

    id: str
    title: str
    authors: list[Author] = []
    abstract: str = ""
    publish_date: str = ""
    keywords: list[str] = []
    pdf_url: str | None = None
    page_range: str = ""
    issue_id: str
    journal_id: str
    status: ArticleStatus = "draft"

    model_config = {"frozen": True}

    @property
    def author_names(self) -> list[str]:
        return [author.name for author in self.authors]

    def credits(self, name: str) -> bool:
        """Whether ``name`` is one of the authors, compared with normalize_name()."""
        wanted = normalize_name(name)
        return bool(wanted) and any(normalize_name(n) == wanted for n in self.author_names)
