"""Advanced article search.

Each active filter is a predicate; an article is kept when every predicate
accepts it. Sorting runs after filtering and is stable, so ties keep the
collection order.
"""

import locale
import unicodedata
from collections.abc import Callable, Iterable

from schemas import Article, SearchFilters, SortKey

Predicate = Callable[[Article], bool]


def matches_text(article: Article, query: str) -> bool:
    """Case-insensitive substring match on title, abstract or any keyword.

    Examples:
        >>> a = Article(id="x", title="CRISPR Advances", issue_id="i", journal_id="j")
        >>> matches_text(a, "crispr")
        True
    """
    if not query:
        return True
    needle = query.lower()
    return (
        needle in article.title.lower()
        or needle in article.abstract.lower()
        or any(needle in keyword.lower() for keyword in article.keywords)
    )


def matches_author(article: Article, author: str) -> bool:
    """Case-insensitive substring match on any author's name."""
    if not author:
        return True
    needle = author.lower()
    return any(needle in name.lower() for name in article.author_names)


def build_predicates(filters: SearchFilters) -> list[Predicate]:
    """Turn the active parts of ``filters`` into predicates.

    Unset filters contribute nothing, which makes them vacuously true.
    """
    predicates: list[Predicate] = []

    if filters.query:
        predicates.append(lambda a: matches_text(a, filters.query))

    if filters.author:
        predicates.append(lambda a: matches_author(a, filters.author))

    if filters.journals:
        predicates.append(lambda a: a.journal_id in filters.journals)

    if filters.date_from:
        predicates.append(lambda a: a.publish_date >= filters.date_from)

    if filters.date_to:
        predicates.append(lambda a: a.publish_date <= filters.date_to)

    if filters.status:
        predicates.append(lambda a: a.status in filters.status)

    return predicates


def title_sort_key(title: str) -> tuple[str, str]:
    """Collation key for titles.

    Accents and case are ignored first, so "Étude" files under E whatever
    the process locale. The locale's own collation breaks the remaining ties.

    Examples:
        >>> sorted(["Zebra", "Étude", "apple"], key=title_sort_key)
        ['apple', 'Étude', 'Zebra']
    """
    folded = title.casefold()
    decomposed = unicodedata.normalize("NFKD", folded)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base, locale.strxfrm(folded)


def sort_articles(articles: Iterable[Article], sort: SortKey) -> list[Article]:
    """Order articles by ``sort``.

    ``relevance`` keeps the input order; there is no scoring model.
    """
    articles = list(articles)
    if sort == "date_desc":
        return sorted(articles, key=lambda a: a.publish_date, reverse=True)
    if sort == "date_asc":
        return sorted(articles, key=lambda a: a.publish_date)
    if sort == "title":
        return sorted(articles, key=lambda a: title_sort_key(a.title))
    return articles


def search_articles(
    articles: Iterable[Article], filters: SearchFilters | None = None
) -> list[Article]:
    """Filter and sort articles.

    Args:
        articles: Full article collection, in collection order
        filters: Predicate state and sort key (defaults to published only,
            relevance order)

    Returns:
        The matching articles in the requested order
    """
    filters = filters or SearchFilters()
    predicates = build_predicates(filters)
    matched = [a for a in articles if all(p(a) for p in predicates)]
    return sort_articles(matched, filters.sort)


def author_options(articles: Iterable[Article]) -> list[str]:
    """Distinct author names in first-seen order, for autocompletion."""
    names: dict[str, None] = {}
    for article in articles:
        for name in article.author_names:
            names.setdefault(name, None)
    return list(names)
