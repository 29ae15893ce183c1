"""Asynchronous facade over a repository.

Reads and searches go through ``await``, optionally after a fixed delay that
mimics a network round trip. The filter engine itself stays synchronous and
untimed.
"""

import asyncio

from schemas import Article, Issue, Journal, SearchFilters

from scholarflow.search import search_articles

from .repository import Repository


class AsyncRepository:
    """Await-able reads over a synchronous Repository.

    Attributes:
        repository: The wrapped store
        latency: Seconds to wait before each read (default: 0)
    """

    def __init__(self, repository: Repository, latency: float = 0.0):
        self.repository = repository
        self.latency = latency

    async def _delay(self) -> None:
        if self.latency > 0:
            await asyncio.sleep(self.latency)

    async def list_journals(self) -> list[Journal]:
        await self._delay()
        return self.repository.list_journals()

    async def list_issues(self, journal_id: str | None = None) -> list[Issue]:
        await self._delay()
        return self.repository.list_issues(journal_id)

    async def list_articles(
        self, issue_id: str | None = None, journal_id: str | None = None
    ) -> list[Article]:
        await self._delay()
        return self.repository.list_articles(issue_id, journal_id)

    async def get_article(self, article_id: str) -> Article | None:
        await self._delay()
        return self.repository.get_article(article_id)

    async def search_articles(self, filters: SearchFilters) -> list[Article]:
        """Run the article search after the simulated delay."""
        await self._delay()
        return search_articles(self.repository.list_articles(), filters)
