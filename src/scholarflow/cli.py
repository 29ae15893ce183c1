"""Command-line interface for ScholarFlow.

Each subcommand stands in for one page of the catalogue. Every command takes
an explicit ``--role`` (and optional ``--user``) instead of relying on a
global role switcher. Writes are simulated against the in-memory store and
are gone when the process exits.
"""

import argparse
import asyncio
import locale
import logging
import sys

from pydantic import ValidationError

from schemas import ARTICLE_STATUSES, ROLES, Article, Author, Issue, Journal, SearchFilters, User

from scholarflow.ai import AIAdapter, GeminiClient
from scholarflow.auth import Action, AuthContext, PermissionDenied, allowed_actions, can_perform, require, visible_statuses
from scholarflow.config import load_ai_config
from scholarflow.search import (
    apply_semantic_match,
    authored_by,
    filter_faqs,
    filter_journals,
    filter_logs,
    filter_users,
    journal_fields,
    search_articles,
    sort_issue_articles,
    sort_issues,
)
from scholarflow.store import InMemoryRepository, IntegrityError, NotFoundError, Repository
from scholarflow.views import TextRenderer, chip

SORT_CHOICES = ("relevance", "date_desc", "date_asc", "title")
DELETE_TYPES = ("journal", "issue", "article", "user")

# Editors manage the first two journals in directory order
EDITOR_MANAGED_JOURNALS = 2


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def setup_locale() -> None:
    """Collate titles by the user's locale where the environment names one."""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        logging.getLogger(__name__).debug(f"Keeping default collation: {e}")


def make_repository() -> Repository:
    return InMemoryRepository()


def resolve_viewer(args: argparse.Namespace, repo: Repository) -> tuple[AuthContext, User]:
    """Build the authorization context and acting user from ``--role``/``--user``.

    Without ``--user`` the first seeded user holding the role is used. An
    unknown ``--user`` name acts as an ad-hoc user with the requested role.
    """
    user = None
    if args.user:
        user = repo.find_user_by_name(args.user)
        if user is None:
            user = User(id="", name=args.user, email="", role=args.role)
    else:
        user = repo.find_user_by_role(args.role)
        if user is None:
            user = User(id="", name=args.role.capitalize(), email="", role=args.role)
    return AuthContext(role=args.role, user_name=user.name), user


def action_labels(actions: list[Action], *candidates: Action) -> list[str]:
    return [a.value.split("_")[0] for a in candidates if a in actions]


def emit(text: str) -> None:
    sys.stdout.write(text)


def list_journals(args: argparse.Namespace) -> int:
    """Execute the journals command (journal directory)."""
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    repo = make_repository()
    context, _ = resolve_viewer(args, repo)
    journals = repo.list_journals()

    fields = journal_fields(journals)
    if args.field and args.field not in fields:
        logger.error(f"Unknown field: {args.field} (choose from {', '.join(fields)})")
        return 1

    admin_actions = []
    if can_perform(context, Action.VIEW_LOGS):
        admin_actions.append("logs")
    if can_perform(context, Action.EDIT_USER):
        admin_actions.append("users")
    if can_perform(context, Action.CREATE_JOURNAL):
        admin_actions.append("create-journal")

    emit(TextRenderer().render(
        "journals",
        journals=filter_journals(journals, args.query, args.field),
        query=args.query,
        field=args.field,
        note=None,
        can_edit=can_perform(context, Action.EDIT_JOURNAL),
        admin_actions=admin_actions,
    ))
    return 0


def semantic_search(args: argparse.Namespace) -> int:
    """Execute the semantic-search command.

    Narrows the journal directory with the AI service. When the service is
    unavailable the keyword-filtered directory is shown unchanged.
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    repo = make_repository()
    resolve_viewer(args, repo)
    journals = repo.list_journals()
    current = filter_journals(journals, args.query)

    with GeminiClient(load_ai_config(api_key=args.api_key)) as client:
        adapter = AIAdapter(client)
        match = asyncio.run(
            adapter.semantic_match(args.query, [j.title for j in journals])
        )

    if match.outcome == "unavailable":
        logger.warning("AI semantic search unavailable; showing keyword matches")
        note = "AI search unavailable; showing keyword matches."
    elif match.outcome == "none":
        note = "AI search found no relevant journals."
    else:
        note = f"AI search matched {len(match.titles)} journal(s)."

    emit(TextRenderer().render(
        "journals",
        journals=apply_semantic_match(journals, current, match),
        query=args.query,
        field=None,
        note=note,
        can_edit=False,
        admin_actions=[],
    ))
    return 0


def show_journal(args: argparse.Namespace) -> int:
    """Execute the journal command."""
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    repo = make_repository()
    context, _ = resolve_viewer(args, repo)
    journal = repo.get_journal(args.id)
    if journal is None:
        logger.error("Journal not found")
        return 1

    actions = action_labels(
        allowed_actions(context),
        Action.EDIT_JOURNAL, Action.DELETE_JOURNAL, Action.CREATE_ISSUE,
    )
    emit(TextRenderer().render(
        "journal",
        journal=journal,
        issues=sort_issues(repo.list_issues(journal.id)),
        actions=actions,
    ))
    return 0


def show_issue(args: argparse.Namespace) -> int:
    """Execute the issue command (table of contents)."""
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    repo = make_repository()
    context, _ = resolve_viewer(args, repo)
    issue = repo.get_issue(args.id)
    journal = repo.get_journal(issue.journal_id) if issue else None
    if issue is None or journal is None:
        logger.error("Issue not found")
        return 1

    articles = repo.list_articles(issue_id=issue.id)
    if not can_perform(context, Action.VIEW_UNPUBLISHED):
        articles = [a for a in articles if a.status == "published"]

    entries = []
    for article in sort_issue_articles(articles, args.sort):
        allowed = allowed_actions(context, article)
        entries.append({
            "article": article,
            "actions": action_labels(
                allowed, Action.EDIT_ARTICLE, Action.DELETE_ARTICLE, Action.WITHDRAW_ARTICLE
            ),
        })

    emit(TextRenderer().render(
        "issue",
        issue=issue,
        journal=journal,
        entries=entries,
        actions=action_labels(allowed_actions(context), Action.EDIT_ISSUE, Action.DELETE_ISSUE),
    ))
    return 0


def show_article(args: argparse.Namespace) -> int:
    """Execute the article command, optionally with an AI summary."""
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    repo = make_repository()
    context, _ = resolve_viewer(args, repo)
    article = repo.get_article(args.id)
    if article is None or (
        article.status != "published" and not can_perform(context, Action.VIEW_UNPUBLISHED)
    ):
        logger.error("Article not found")
        return 1

    summary = None
    if args.summarize:
        with GeminiClient(load_ai_config(api_key=args.api_key)) as client:
            summary = asyncio.run(AIAdapter(client).summarize(article.abstract))

    emit(TextRenderer().render(
        "article",
        article=article,
        journal=repo.get_journal(article.journal_id),
        summary=summary,
        actions=action_labels(
            allowed_actions(context, article),
            Action.EDIT_ARTICLE, Action.DELETE_ARTICLE, Action.WITHDRAW_ARTICLE,
        ),
    ))
    return 0


def search(args: argparse.Namespace) -> int:
    """Execute the search command (advanced article search)."""
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    repo = make_repository()
    context, _ = resolve_viewer(args, repo)

    statuses = set(args.status or ["published"])
    hidden = statuses - visible_statuses(context)
    if hidden:
        logger.warning(
            f"Role '{context.role}' cannot filter on {', '.join(sorted(hidden))}; ignoring"
        )
        statuses -= hidden
        statuses = statuses or {"published"}

    journals = repo.list_journals()
    journal_ids = set()
    for value in args.journal or []:
        match = next((j for j in journals if value in (j.id, j.title)), None)
        if match is None:
            logger.error(f"Journal not found: {value}")
            return 1
        journal_ids.add(match.id)

    try:
        filters = SearchFilters(
            query=args.query,
            author=args.author,
            journals=frozenset(journal_ids),
            date_from=args.date_from,
            date_to=args.date_to,
            status=frozenset(statuses),
            sort=args.sort,
        )
    except ValidationError as e:
        logger.error(f"Invalid search filters: {e}")
        return 1

    titles = {j.id: j.title for j in journals}
    emit(TextRenderer().render(
        "search",
        filters=filters,
        results=search_articles(repo.list_articles(), filters),
        journal_titles=titles,
        journal_chips=[chip(titles[jid]) for jid in sorted(journal_ids)],
    ))
    return 0


def show_profile(args: argparse.Namespace) -> int:
    """Execute the profile command."""
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    repo = make_repository()
    context, user = resolve_viewer(args, repo)
    if not can_perform(context, Action.CREATE_ARTICLE):
        logger.error("Profiles are available to authors, editors and admins")
        return 1

    managed = []
    if context.role == "editor":
        managed = repo.list_journals()[:EDITOR_MANAGED_JOURNALS]

    emit(TextRenderer().render(
        "profile",
        user=user,
        managed_journals=managed,
        show_articles=True,
        articles=authored_by(repo.list_articles(), user.name),
    ))
    return 0


def list_users(args: argparse.Namespace) -> int:
    """Execute the users command (admin user management)."""
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    repo = make_repository()
    context, _ = resolve_viewer(args, repo)
    try:
        require(context, Action.EDIT_USER)
    except PermissionDenied as e:
        logger.error(e.message)
        return 1

    emit(TextRenderer().render(
        "users", users=filter_users(repo.list_users(), args.query, args.filter_role)
    ))
    return 0


def list_logs(args: argparse.Namespace) -> int:
    """Execute the logs command (admin audit log)."""
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    repo = make_repository()
    context, _ = resolve_viewer(args, repo)
    try:
        require(context, Action.VIEW_LOGS)
    except PermissionDenied as e:
        logger.error(e.message)
        return 1

    emit(TextRenderer().render("logs", entries=filter_logs(repo.list_logs(), args.query)))
    return 0


def show_faq(args: argparse.Namespace) -> int:
    """Execute the faq command."""
    setup_logging(args.verbose)
    repo = make_repository()
    emit(TextRenderer().render("faq", items=filter_faqs(repo.list_faqs(), args.category)))
    return 0


def show_about(args: argparse.Namespace) -> int:
    """Execute the about command."""
    setup_logging(args.verbose)
    repo = make_repository()
    emit(TextRenderer().render(
        "about",
        journal_count=len(repo.list_journals()),
        issue_count=len(repo.list_issues()),
        article_count=len(repo.list_articles()),
    ))
    return 0


def _updates(args: argparse.Namespace, *names: str) -> dict:
    """Collect the options that were actually given."""
    return {name: getattr(args, name) for name in names if getattr(args, name) is not None}


JOURNAL_FIELDS = ("title", "description", "issn", "field", "publisher", "cover_image", "contact_email")
ISSUE_FIELDS = ("volume", "number", "year", "cover_image")
ARTICLE_FIELDS = ("title", "abstract", "publish_date", "page_range", "pdf_url", "status")


def _user_updates(args: argparse.Namespace) -> dict:
    updates = _updates(args, "name", "email", "affiliation")
    if args.new_role is not None:
        updates["role"] = args.new_role
    return updates


def _parse_authors(values: list[str] | None) -> list[Author] | None:
    """Parse ``Name|Affiliation`` author options."""
    if not values:
        return None
    authors = []
    for index, value in enumerate(values, start=1):
        name, _, affiliation = value.partition("|")
        authors.append(Author(id=f"au-new{index}", name=name.strip(), affiliation=affiliation.strip()))
    return authors


def save_record(args: argparse.Namespace) -> int:
    """Execute a create-* / edit-* / submit-article command."""
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    repo = make_repository()
    context, actor = resolve_viewer(args, repo)
    kind = args.kind
    editing = getattr(args, "id", None) is not None

    try:
        if kind == "journal":
            if editing:
                existing = repo.require_journal(args.id)
                require(context, Action.EDIT_JOURNAL)
                record = Journal.model_validate(
                    {**existing.model_dump(), **_updates(args, *JOURNAL_FIELDS)}
                )
            else:
                require(context, Action.CREATE_JOURNAL)
                record = Journal.model_validate({"id": "", **_updates(args, *JOURNAL_FIELDS)})
            saved = repo.save_journal(record, actor)
            label = f'Journal "{saved.title}"'

        elif kind == "issue":
            if editing:
                existing = repo.require_issue(args.id)
                require(context, Action.EDIT_ISSUE)
                record = Issue.model_validate(
                    {**existing.model_dump(), **_updates(args, *ISSUE_FIELDS)}
                )
            else:
                require(context, Action.CREATE_ISSUE)
                record = Issue.model_validate(
                    {"id": "", "journal_id": args.journal, **_updates(args, *ISSUE_FIELDS)}
                )
            saved = repo.save_issue(record, actor)
            label = f"Issue {saved.label}"

        elif kind == "article":
            updates = _updates(args, *ARTICLE_FIELDS)
            authors = _parse_authors(args.author)
            if authors is not None:
                updates["authors"] = authors
            if args.keyword:
                updates["keywords"] = list(args.keyword)
            if editing:
                existing = repo.require_article(args.id)
                require(context, Action.EDIT_ARTICLE, existing)
                record = Article.model_validate({**existing.model_dump(), **updates})
            else:
                require(context, Action.CREATE_ARTICLE)
                issue = repo.require_issue(args.issue)
                updates.setdefault("status", "pending")
                updates.setdefault(
                    "authors", [Author(id="au-new1", name=actor.name, affiliation=actor.affiliation)]
                )
                record = Article.model_validate(
                    {"id": "", "issue_id": issue.id, "journal_id": issue.journal_id, **updates}
                )
            saved = repo.save_article(record, actor)
            label = f'Article "{saved.title}"'

        else:
            if editing:
                existing = repo.require_user(args.id)
                require(context, Action.EDIT_USER)
                record = User.model_validate(
                    {**existing.model_dump(), **_user_updates(args)}
                )
            else:
                require(context, Action.CREATE_USER)
                record = User.model_validate({"id": "", **_user_updates(args)})
            saved = repo.save_user(record, actor)
            label = f'User "{saved.name}"'

    except NotFoundError as e:
        logger.error(e.message)
        return 1
    except PermissionDenied as e:
        logger.error(e.message)
        return 1
    except (ValidationError, IntegrityError) as e:
        logger.error(f"Invalid {kind}: {e}")
        return 1

    logger.info(f"{label} {'updated' if editing else 'created'} successfully (not persisted)")
    emit(f"{saved.id}\n")
    return 0


def delete_record(args: argparse.Namespace) -> int:
    """Execute the delete command.

    Authors may withdraw their own articles; everything else needs the
    matching delete permission.
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    repo = make_repository()
    context, actor = resolve_viewer(args, repo)

    try:
        if args.type == "journal":
            repo.require_journal(args.id)
            require(context, Action.DELETE_JOURNAL)
            repo.delete_journal(args.id, actor)
        elif args.type == "issue":
            repo.require_issue(args.id)
            require(context, Action.DELETE_ISSUE)
            repo.delete_issue(args.id, actor)
        elif args.type == "article":
            article = repo.require_article(args.id)
            if can_perform(context, Action.DELETE_ARTICLE, article):
                repo.delete_article(args.id, actor)
            else:
                require(context, Action.WITHDRAW_ARTICLE, article)
                repo.withdraw_article(args.id, actor)
        else:
            repo.require_user(args.id)
            require(context, Action.DELETE_USER)
            repo.delete_user(args.id, actor)
    except NotFoundError as e:
        logger.error(e.message)
        return 1
    except PermissionDenied as e:
        logger.error(e.message)
        return 1

    logger.info(f"Successfully deleted {args.type} with ID {args.id} (not persisted)")
    return 0


def _add_viewer_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--role",
        choices=ROLES,
        default="guest",
        help="Role to act as (default: guest)",
    )
    parser.add_argument(
        "--user",
        type=str,
        default=None,
        help="User name to act as (default: first user with the role)",
    )


def _add_journal_arguments(parser: argparse.ArgumentParser, required: bool) -> None:
    parser.add_argument("--title", required=required)
    parser.add_argument("--description", required=required)
    parser.add_argument("--issn", required=required)
    parser.add_argument("--field", required=required)
    parser.add_argument("--publisher", required=required)
    parser.add_argument("--cover-image", dest="cover_image")
    parser.add_argument("--contact-email", dest="contact_email")


def _add_issue_arguments(parser: argparse.ArgumentParser, required: bool) -> None:
    parser.add_argument("--volume", type=int, required=required)
    parser.add_argument("--number", type=int, required=required)
    parser.add_argument("--year", type=int, required=required)
    parser.add_argument("--cover-image", dest="cover_image")


def _add_article_arguments(parser: argparse.ArgumentParser, required: bool) -> None:
    parser.add_argument("--title", required=required)
    parser.add_argument("--abstract", required=required)
    parser.add_argument(
        "--author",
        action="append",
        help="Author as 'Name|Affiliation' (repeatable; default: the acting user)",
    )
    parser.add_argument("--keyword", action="append", help="Keyword (repeatable)")
    parser.add_argument("--publish-date", dest="publish_date", help="ISO date (YYYY-MM-DD)")
    parser.add_argument("--page-range", dest="page_range")
    parser.add_argument("--pdf-url", dest="pdf_url")
    parser.add_argument("--status", choices=ARTICLE_STATUSES)


def _add_user_arguments(parser: argparse.ArgumentParser, required: bool) -> None:
    parser.add_argument("--name", required=required)
    parser.add_argument("--email", required=required)
    parser.add_argument("--affiliation")
    parser.add_argument("--new-role", dest="new_role", choices=ROLES)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="scholarflow",
        description="Browse and manage an academic journal catalogue",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    viewer = argparse.ArgumentParser(add_help=False)
    _add_viewer_arguments(viewer)

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    journals_parser = subparsers.add_parser(
        "journals", parents=[viewer], help="List the journal directory",
    )
    journals_parser.add_argument("--query", default="", help="Match title or description")
    journals_parser.add_argument("--field", default=None, help="Restrict to an academic field")
    journals_parser.set_defaults(func=list_journals)

    semantic_parser = subparsers.add_parser(
        "semantic-search",
        parents=[viewer],
        help="Narrow the journal directory with AI semantic search",
    )
    semantic_parser.add_argument("query", help="Natural-language search")
    semantic_parser.add_argument("--api-key", default=None, help="Gemini API key")
    semantic_parser.set_defaults(func=semantic_search)

    journal_parser = subparsers.add_parser(
        "journal", parents=[viewer], help="Show a journal and its issues",
    )
    journal_parser.add_argument("id", help="Journal id")
    journal_parser.set_defaults(func=show_journal)

    issue_parser = subparsers.add_parser(
        "issue", parents=[viewer], help="Show an issue's table of contents",
    )
    issue_parser.add_argument("id", help="Issue id")
    issue_parser.add_argument("--sort", choices=("page", "title"), default="page")
    issue_parser.set_defaults(func=show_issue)

    article_parser = subparsers.add_parser(
        "article", parents=[viewer], help="Show an article",
    )
    article_parser.add_argument("id", help="Article id")
    article_parser.add_argument("--summarize", action="store_true", help="Add an AI summary")
    article_parser.add_argument("--api-key", default=None, help="Gemini API key")
    article_parser.set_defaults(func=show_article)

    search_parser = subparsers.add_parser(
        "search", parents=[viewer], help="Advanced article search",
    )
    search_parser.add_argument("--query", default="", help="Match title, abstract or keywords")
    search_parser.add_argument("--author", default="", help="Match author names")
    search_parser.add_argument(
        "--journal", action="append", help="Journal id or title (repeatable)"
    )
    search_parser.add_argument("--from", dest="date_from", default="", help="Earliest publish date (YYYY-MM-DD)")
    search_parser.add_argument("--to", dest="date_to", default="", help="Latest publish date (YYYY-MM-DD)")
    search_parser.add_argument(
        "--status", action="append", choices=ARTICLE_STATUSES,
        help="Status to include (repeatable; default: published)",
    )
    search_parser.add_argument("--sort", choices=SORT_CHOICES, default="relevance")
    search_parser.set_defaults(func=search)

    profile_parser = subparsers.add_parser(
        "profile", parents=[viewer], help="Show the acting user's profile",
    )
    profile_parser.set_defaults(func=show_profile)

    users_parser = subparsers.add_parser(
        "users", parents=[viewer], help="List users (admin)",
    )
    users_parser.add_argument("--query", default="", help="Match name or email")
    users_parser.add_argument("--filter-role", dest="filter_role", choices=("All", *ROLES), default=None)
    users_parser.set_defaults(func=list_users)

    logs_parser = subparsers.add_parser(
        "logs", parents=[viewer], help="Show the audit log (admin)",
    )
    logs_parser.add_argument("--query", default="", help="Match action, user or details")
    logs_parser.set_defaults(func=list_logs)

    faq_parser = subparsers.add_parser("faq", help="Frequently asked questions")
    faq_parser.add_argument(
        "--category", choices=("all", "author", "editor", "general"), default="all"
    )
    faq_parser.set_defaults(func=show_faq)

    about_parser = subparsers.add_parser("about", help="About the catalogue")
    about_parser.set_defaults(func=show_about)

    create_journal_parser = subparsers.add_parser(
        "create-journal", parents=[viewer], help="Create a journal (simulated)",
    )
    _add_journal_arguments(create_journal_parser, required=True)
    create_journal_parser.set_defaults(func=save_record, kind="journal")

    edit_journal_parser = subparsers.add_parser(
        "edit-journal", parents=[viewer], help="Edit a journal (simulated)",
    )
    edit_journal_parser.add_argument("id", help="Journal id")
    _add_journal_arguments(edit_journal_parser, required=False)
    edit_journal_parser.set_defaults(func=save_record, kind="journal")

    create_issue_parser = subparsers.add_parser(
        "create-issue", parents=[viewer], help="Create an issue (simulated)",
    )
    create_issue_parser.add_argument("--journal", required=True, help="Owning journal id")
    _add_issue_arguments(create_issue_parser, required=True)
    create_issue_parser.set_defaults(func=save_record, kind="issue")

    edit_issue_parser = subparsers.add_parser(
        "edit-issue", parents=[viewer], help="Edit an issue (simulated)",
    )
    edit_issue_parser.add_argument("id", help="Issue id")
    _add_issue_arguments(edit_issue_parser, required=False)
    edit_issue_parser.set_defaults(func=save_record, kind="issue")

    submit_parser = subparsers.add_parser(
        "submit-article", parents=[viewer], help="Submit a manuscript (simulated)",
    )
    submit_parser.add_argument("--issue", required=True, help="Target issue id")
    _add_article_arguments(submit_parser, required=True)
    submit_parser.set_defaults(func=save_record, kind="article")

    edit_article_parser = subparsers.add_parser(
        "edit-article", parents=[viewer], help="Edit an article (simulated)",
    )
    edit_article_parser.add_argument("id", help="Article id")
    _add_article_arguments(edit_article_parser, required=False)
    edit_article_parser.set_defaults(func=save_record, kind="article")

    create_user_parser = subparsers.add_parser(
        "create-user", parents=[viewer], help="Create a user (simulated, admin)",
    )
    _add_user_arguments(create_user_parser, required=True)
    create_user_parser.set_defaults(func=save_record, kind="user")

    edit_user_parser = subparsers.add_parser(
        "edit-user", parents=[viewer], help="Edit a user (simulated, admin)",
    )
    edit_user_parser.add_argument("id", help="User id")
    _add_user_arguments(edit_user_parser, required=False)
    edit_user_parser.set_defaults(func=save_record, kind="user")

    delete_parser = subparsers.add_parser(
        "delete", parents=[viewer], help="Delete a record (simulated)",
    )
    delete_parser.add_argument("type", choices=DELETE_TYPES)
    delete_parser.add_argument("id", help="Record id")
    delete_parser.set_defaults(func=delete_record)

    args = parser.parse_args(argv)
    setup_locale()

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
