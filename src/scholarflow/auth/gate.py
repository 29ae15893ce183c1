"""Role authorization gate.

Decides which actions a viewer is offered. This is UI-layer authorization
only: it controls which edit and delete affordances are shown and lets the
CLI refuse a simulated write, but it is not a security boundary. The store
performs no checks of its own, and a caller that skips the gate can still
write.

The viewer is passed explicitly as an AuthContext (or a bare role); there is
no process-wide "current role".
"""

import re
from dataclasses import dataclass
from enum import Enum

from schemas import ARTICLE_STATUSES, ROLES, Article, Role


class Action(str, Enum):
    """Every action the gate can be asked about."""

    VIEW_PUBLISHED = "view_published"
    VIEW_UNPUBLISHED = "view_unpublished"
    CREATE_JOURNAL = "create_journal"
    EDIT_JOURNAL = "edit_journal"
    DELETE_JOURNAL = "delete_journal"
    CREATE_ISSUE = "create_issue"
    EDIT_ISSUE = "edit_issue"
    DELETE_ISSUE = "delete_issue"
    CREATE_ARTICLE = "create_article"
    EDIT_ARTICLE = "edit_article"
    DELETE_ARTICLE = "delete_article"
    WITHDRAW_ARTICLE = "withdraw_article"
    CREATE_USER = "create_user"
    EDIT_USER = "edit_user"
    DELETE_USER = "delete_user"
    VIEW_LOGS = "view_logs"

    @classmethod
    def _missing_(cls, value):
        """Accept camelCase spellings such as ``deleteArticle``."""
        if isinstance(value, str):
            snake = re.sub(r"(?<!^)(?=[A-Z])", "_", value).lower()
            for member in cls:
                if member.value == snake:
                    return member
        return None


@dataclass(frozen=True)
class AuthContext:
    """Who is looking.

    Attributes:
        role: The viewer's role
        user_name: Display name used for article ownership checks
    """

    role: Role = "guest"
    user_name: str | None = None

    def __post_init__(self):
        if self.role not in ROLES:
            raise ValueError(f"Unknown role: {self.role!r}")


EDITOR_ACTIONS = frozenset({
    Action.VIEW_PUBLISHED,
    Action.VIEW_UNPUBLISHED,
    Action.EDIT_JOURNAL,
    Action.CREATE_ISSUE,
    Action.EDIT_ISSUE,
    Action.DELETE_ISSUE,
    Action.CREATE_ARTICLE,
    Action.EDIT_ARTICLE,
    Action.DELETE_ARTICLE,
    Action.WITHDRAW_ARTICLE,
})

AUTHOR_ACTIONS = frozenset({
    Action.VIEW_PUBLISHED,
    Action.VIEW_UNPUBLISHED,
    Action.CREATE_ARTICLE,
})

# Author actions that additionally require owning the article
AUTHOR_OWNED_ACTIONS = frozenset({Action.EDIT_ARTICLE, Action.WITHDRAW_ARTICLE})

GUEST_ACTIONS = frozenset({Action.VIEW_PUBLISHED})


class PermissionDenied(Exception):
    """Raised by require() when the gate refuses an action."""

    def __init__(self, role: str, action: Action):
        self.role = role
        self.action = action
        self.message = f"Role '{role}' is not permitted to {action.value.replace('_', ' ')}"
        super().__init__(self.message)


def _context(viewer: AuthContext | str) -> AuthContext:
    if isinstance(viewer, AuthContext):
        return viewer
    return AuthContext(role=viewer)


def is_owner(viewer: AuthContext | str, article: Article | None) -> bool:
    """Whether the viewer is credited on ``article``.

    Ownership is a name match against the author list; there is no real
    identity binding.
    """
    context = _context(viewer)
    if article is None or not context.user_name:
        return False
    return article.credits(context.user_name)


def can_perform(
    viewer: AuthContext | str,
    action: Action | str,
    resource_owner: Article | None = None,
) -> bool:
    """Decide whether ``viewer`` may perform ``action``.

    Args:
        viewer: AuthContext, or a bare role name
        action: The action, as an Action, its snake_case value, or the
            camelCase spelling of that value (e.g. "deleteArticle")
        resource_owner: The article acted upon, for ownership-scoped actions

    Returns:
        True when the action should be offered
    """
    context = _context(viewer)
    action = Action(action)

    if context.role == "admin":
        return True
    if context.role == "editor":
        return action in EDITOR_ACTIONS
    if context.role == "author":
        if action in AUTHOR_OWNED_ACTIONS:
            return is_owner(context, resource_owner)
        return action in AUTHOR_ACTIONS
    return action in GUEST_ACTIONS


def require(
    viewer: AuthContext | str,
    action: Action | str,
    resource_owner: Article | None = None,
) -> None:
    """Raise PermissionDenied unless can_perform() allows the action."""
    if not can_perform(viewer, action, resource_owner):
        raise PermissionDenied(_context(viewer).role, Action(action))


def allowed_actions(
    viewer: AuthContext | str, resource_owner: Article | None = None
) -> list[Action]:
    """All actions the viewer may perform, in enumeration order."""
    return [a for a in Action if can_perform(viewer, a, resource_owner)]


def visible_statuses(viewer: AuthContext | str) -> frozenset[str]:
    """Statuses the viewer may filter on."""
    if can_perform(viewer, Action.VIEW_UNPUBLISHED):
        return frozenset(ARTICLE_STATUSES)
    return frozenset({"published"})


def default_statuses(viewer: AuthContext | str) -> frozenset[str]:
    """Initial status filter; published only, whatever the role."""
    return frozenset({"published"})
