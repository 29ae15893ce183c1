"""Presentation-layer role authorization."""

from .gate import (
    Action,
    AuthContext,
    PermissionDenied,
    allowed_actions,
    can_perform,
    default_statuses,
    is_owner,
    require,
    visible_statuses,
)

__all__ = [
    "Action",
    "AuthContext",
    "PermissionDenied",
    "allowed_actions",
    "can_perform",
    "default_statuses",
    "is_owner",
    "require",
    "visible_statuses",
]
