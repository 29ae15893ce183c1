"""Pytest fixtures for ScholarFlow tests."""

import pytest

from schemas import Article, Author, Issue, Journal, User
from scholarflow.store import InMemoryRepository, seed


@pytest.fixture
def repository():
    """In-memory repository over the seed dataset with a fixed clock."""
    return InMemoryRepository(clock=lambda: "2024-04-01 09:00")


@pytest.fixture
def seed_articles():
    """The seeded articles a1, a2, a3 in collection order."""
    return list(seed.ARTICLES)


@pytest.fixture
def admin():
    return seed.USERS[0]


@pytest.fixture
def editor():
    return seed.USERS[2]


@pytest.fixture
def author_user():
    return seed.USERS[1]


@pytest.fixture
def sample_journal():
    """A journal that is not in the seed dataset."""
    return Journal(
        id="",
        title="Journal of Marine Biology",
        description="Research on ocean ecosystems and marine life.",
        issn="1234-5678",
        field="Biology",
        publisher="Ocean Press",
    )


@pytest.fixture
def make_article():
    """Factory for articles attached to seed issue i1 of journal j1."""

    def _make(id="x1", title="Untitled", status="published", **kwargs):
        values = {
            "issue_id": "i1",
            "journal_id": "j1",
            "publish_date": "2024-01-01",
            **kwargs,
        }
        return Article(id=id, title=title, status=status, **values)

    return _make


@pytest.fixture
def sample_issue():
    return Issue(id="", volume=13, number=1, year=2025, journal_id="j1")


@pytest.fixture
def sample_user():
    return User(id="", name="Ada Lovelace", email="ada@example.com", role="author")


@pytest.fixture
def gemini_config():
    """GeminiClient config with a key and no retry delay."""
    return {
        "base_url": "https://generativelanguage.googleapis.com",
        "api_key": "test-key",
        "model": "gemini-2.5-flash",
        "retry_attempts": 2,
        "retry_delay": 0,
    }


@pytest.fixture
def gemini_reply():
    """Factory for generateContent response bodies."""

    def _reply(text):
        return {
            "candidates": [
                {"content": {"role": "model", "parts": [{"text": text}]}}
            ]
        }

    return _reply


@pytest.fixture
def jane_article():
    """An unpublished article credited to the seeded author."""
    return Article(
        id="a9",
        title="Draft on Sparse Attention",
        authors=[Author(id="au9", name="Dr. Jane Smith", affiliation="MIT")],
        abstract="Work in progress.",
        publish_date="2024-05-01",
        issue_id="i1",
        journal_id="j1",
        status="pending",
    )
