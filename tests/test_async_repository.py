"""Tests for the asynchronous repository facade."""

import asyncio
from unittest.mock import AsyncMock, patch

from schemas import SearchFilters
from scholarflow.store import AsyncRepository


class TestAsyncRepository:
    """Tests for AsyncRepository."""

    def test_reads_delegate(self, repository):
        store = AsyncRepository(repository)

        journals = asyncio.run(store.list_journals())
        issues = asyncio.run(store.list_issues("j1"))
        articles = asyncio.run(store.list_articles(issue_id="i3"))

        assert journals == repository.list_journals()
        assert [i.id for i in issues] == ["i1", "i2"]
        assert [a.id for a in articles] == ["a3"]

    def test_get_article(self, repository):
        store = AsyncRepository(repository)

        assert asyncio.run(store.get_article("a2")).title == "Ethical Implications of AGI"
        assert asyncio.run(store.get_article("a99")) is None

    def test_search(self, repository):
        store = AsyncRepository(repository)

        result = asyncio.run(store.search_articles(SearchFilters(query="CRISPR")))

        assert [a.id for a in result] == ["a3"]

    def test_latency_is_awaited(self, repository):
        store = AsyncRepository(repository, latency=0.5)

        with patch("scholarflow.store.async_repository.asyncio.sleep", new=AsyncMock()) as mock_sleep:
            asyncio.run(store.list_journals())

        mock_sleep.assert_awaited_once_with(0.5)

    def test_no_latency_skips_sleep(self, repository):
        store = AsyncRepository(repository)

        with patch("scholarflow.store.async_repository.asyncio.sleep", new=AsyncMock()) as mock_sleep:
            asyncio.run(store.list_journals())

        mock_sleep.assert_not_awaited()
