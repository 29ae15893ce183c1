"""Repository interface and the in-memory catalogue store.

The catalogue is a set of immutable tuples. Simulated writes build a new
tuple and swap it in, so a reader holding the previous tuple never sees a
partial update. Nothing is persisted.
"""

import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from datetime import datetime

from schemas import Article, FAQItem, Issue, Journal, LogEntry, User, normalize_name

from . import seed
from .exceptions import IntegrityError, NotFoundError

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"


def _default_clock() -> str:
    return datetime.now().strftime(TIMESTAMP_FORMAT)


def next_id(prefix: str, existing: Iterable[str]) -> str:
    """Return the next free ``<prefix><n>`` identifier.

    Examples:
        >>> next_id("j", ["j1", "j4", "x9"])
        'j5'
    """
    pattern = re.compile(rf"^{re.escape(prefix)}(\d+)$")
    numbers = [int(m.group(1)) for m in map(pattern.match, existing) if m]
    return f"{prefix}{max(numbers, default=0) + 1}"


class Repository(ABC):
    """Read and simulated-write access to the catalogue.

    Lookups return ``None`` for unknown ids; the ``require_*`` variants
    raise NotFoundError instead.
    """

    @abstractmethod
    def list_journals(self) -> list[Journal]:
        pass

    @abstractmethod
    def list_issues(self, journal_id: str | None = None) -> list[Issue]:
        pass

    @abstractmethod
    def list_articles(
        self, issue_id: str | None = None, journal_id: str | None = None
    ) -> list[Article]:
        pass

    @abstractmethod
    def list_users(self) -> list[User]:
        pass

    @abstractmethod
    def list_logs(self) -> list[LogEntry]:
        pass

    @abstractmethod
    def list_faqs(self) -> list[FAQItem]:
        pass

    def get_journal(self, journal_id: str) -> Journal | None:
        return next((j for j in self.list_journals() if j.id == journal_id), None)

    def get_issue(self, issue_id: str) -> Issue | None:
        return next((i for i in self.list_issues() if i.id == issue_id), None)

    def get_article(self, article_id: str) -> Article | None:
        return next((a for a in self.list_articles() if a.id == article_id), None)

    def get_user(self, user_id: str) -> User | None:
        return next((u for u in self.list_users() if u.id == user_id), None)

    def require_journal(self, journal_id: str) -> Journal:
        journal = self.get_journal(journal_id)
        if journal is None:
            raise NotFoundError("journal", journal_id)
        return journal

    def require_issue(self, issue_id: str) -> Issue:
        issue = self.get_issue(issue_id)
        if issue is None:
            raise NotFoundError("issue", issue_id)
        return issue

    def require_article(self, article_id: str) -> Article:
        article = self.get_article(article_id)
        if article is None:
            raise NotFoundError("article", article_id)
        return article

    def require_user(self, user_id: str) -> User:
        user = self.get_user(user_id)
        if user is None:
            raise NotFoundError("user", user_id)
        return user

    def find_user_by_role(self, role: str) -> User | None:
        """First user holding ``role``, used to pick a demo identity."""
        return next((u for u in self.list_users() if u.role == role), None)

    def find_user_by_name(self, name: str) -> User | None:
        wanted = normalize_name(name)
        return next(
            (u for u in self.list_users() if normalize_name(u.name) == wanted),
            None,
        )


class InMemoryRepository(Repository):
    """Catalogue held in process memory.

    Args:
        journals, issues, articles, users, logs, faqs: Initial collections.
            Each defaults to the seed dataset.
        clock: Returns the display timestamp used for new log entries

    Raises:
        IntegrityError: If the initial collections contain dangling references
    """

    def __init__(
        self,
        journals: Iterable[Journal] | None = None,
        issues: Iterable[Issue] | None = None,
        articles: Iterable[Article] | None = None,
        users: Iterable[User] | None = None,
        logs: Iterable[LogEntry] | None = None,
        faqs: Iterable[FAQItem] | None = None,
        clock: Callable[[], str] = _default_clock,
    ):
        self._journals = tuple(seed.JOURNALS if journals is None else journals)
        self._issues = tuple(seed.ISSUES if issues is None else issues)
        self._articles = tuple(seed.ARTICLES if articles is None else articles)
        self._users = tuple(seed.USERS if users is None else users)
        self._logs = tuple(seed.LOGS if logs is None else logs)
        self._faqs = tuple(seed.FAQS if faqs is None else faqs)
        self._clock = clock

        for issue in self._issues:
            self._check_issue_refs(issue)
        for article in self._articles:
            self._check_article_refs(article)

    def list_journals(self) -> list[Journal]:
        return list(self._journals)

    def list_issues(self, journal_id: str | None = None) -> list[Issue]:
        if journal_id is None:
            return list(self._issues)
        return [i for i in self._issues if i.journal_id == journal_id]

    def list_articles(
        self, issue_id: str | None = None, journal_id: str | None = None
    ) -> list[Article]:
        return [
            a for a in self._articles
            if (issue_id is None or a.issue_id == issue_id)
            and (journal_id is None or a.journal_id == journal_id)
        ]

    def list_users(self) -> list[User]:
        return list(self._users)

    def list_logs(self) -> list[LogEntry]:
        return list(self._logs)

    def list_faqs(self) -> list[FAQItem]:
        return list(self._faqs)

    # Simulated writes

    def save_journal(self, journal: Journal, actor: User) -> Journal:
        """Create or replace a journal. An empty id allocates a new one."""
        if not journal.id:
            journal = journal.model_copy(
                update={"id": next_id("j", (j.id for j in self._journals))}
            )
        self._journals, created = _upsert(self._journals, journal)
        verb = "Create" if created else "Update"
        self._log(actor, f"{verb} Journal", f'{verb}d "{journal.title}"')
        return journal

    def delete_journal(self, journal_id: str, actor: User) -> Journal:
        """Delete a journal together with its issues and articles."""
        journal = self.require_journal(journal_id)
        self._journals = tuple(j for j in self._journals if j.id != journal_id)
        self._issues = tuple(i for i in self._issues if i.journal_id != journal_id)
        self._articles = tuple(a for a in self._articles if a.journal_id != journal_id)
        self._log(actor, "Delete Journal", f'Deleted "{journal.title}"')
        return journal

    def save_issue(self, issue: Issue, actor: User) -> Issue:
        """Create or replace an issue. An empty id allocates a new one."""
        self._check_issue_refs(issue)
        if not issue.id:
            issue = issue.model_copy(
                update={"id": next_id("i", (i.id for i in self._issues))}
            )
        self._issues, created = _upsert(self._issues, issue)
        verb = "Create" if created else "Update"
        self._log(actor, f"{verb} Issue", f"{verb}d {issue.label}")
        return issue

    def delete_issue(self, issue_id: str, actor: User) -> Issue:
        """Delete an issue together with its articles."""
        issue = self.require_issue(issue_id)
        self._issues = tuple(i for i in self._issues if i.id != issue_id)
        self._articles = tuple(a for a in self._articles if a.issue_id != issue_id)
        self._log(actor, "Delete Issue", f"Deleted {issue.label}")
        return issue

    def save_article(self, article: Article, actor: User) -> Article:
        """Create or replace an article. An empty id allocates a new one."""
        self._check_article_refs(article)
        if not article.id:
            article = article.model_copy(
                update={"id": next_id("a", (a.id for a in self._articles))}
            )
        self._articles, created = _upsert(self._articles, article)
        if created:
            self._log(actor, "Submit Article", f'Submitted "{article.title}"')
        else:
            self._log(actor, "Update Article", f'Updated "{article.title}"')
        return article

    def delete_article(self, article_id: str, actor: User) -> Article:
        article = self._remove_article(article_id)
        self._log(actor, "Delete Article", f'Deleted "{article.title}"')
        return article

    def withdraw_article(self, article_id: str, actor: User) -> Article:
        """Remove a submission at its author's request."""
        article = self._remove_article(article_id)
        self._log(actor, "Withdraw Article", f'Withdrew "{article.title}"')
        return article

    def _remove_article(self, article_id: str) -> Article:
        article = self.require_article(article_id)
        self._articles = tuple(a for a in self._articles if a.id != article_id)
        return article

    def save_user(self, user: User, actor: User) -> User:
        """Create or replace a user. An empty id allocates a new one."""
        if not user.id:
            user = user.model_copy(
                update={"id": next_id("u", (u.id for u in self._users))}
            )
        if not user.avatar:
            user = user.model_copy(
                update={"avatar": f"https://ui-avatars.com/api/?name={user.name.replace(' ', '+')}&background=random"}
            )
        self._users, created = _upsert(self._users, user)
        verb = "Create" if created else "Update"
        self._log(actor, f"{verb} User", f'{verb}d user "{user.name}"')
        return user

    def delete_user(self, user_id: str, actor: User) -> User:
        user = self.require_user(user_id)
        self._users = tuple(u for u in self._users if u.id != user_id)
        self._log(actor, "Delete User", f'Deleted user "{user.name}"')
        return user

    def _log(self, actor: User, action: str, details: str) -> LogEntry:
        entry = LogEntry(
            id=next_id("l", (entry.id for entry in self._logs)),
            user_id=actor.id,
            user_name=actor.name,
            action=action,
            details=details,
            timestamp=self._clock(),
        )
        self._logs = (entry, *self._logs)
        logger.info(f"{actor.name}: {action} - {details}")
        return entry

    def _check_issue_refs(self, issue: Issue) -> None:
        if not any(j.id == issue.journal_id for j in self._journals):
            raise IntegrityError(
                f"Issue {issue.id or '<new>'} references unknown journal {issue.journal_id}"
            )

    def _check_article_refs(self, article: Article) -> None:
        issue = next((i for i in self._issues if i.id == article.issue_id), None)
        if issue is None:
            raise IntegrityError(
                f"Article {article.id or '<new>'} references unknown issue {article.issue_id}"
            )
        if issue.journal_id != article.journal_id:
            raise IntegrityError(
                f"Article {article.id or '<new>'} journal {article.journal_id} "
                f"does not own issue {article.issue_id}"
            )


def _upsert(records: tuple, record) -> tuple[tuple, bool]:
    """Replace the record with the same id, or append it.

    Returns:
        The new collection and whether the record was newly added
    """
    if any(r.id == record.id for r in records):
        return tuple(record if r.id == record.id else r for r in records), False
    return (*records, record), True
