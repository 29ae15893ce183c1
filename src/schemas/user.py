"""User, audit log and FAQ schemas."""

from typing import Literal, get_args

from pydantic import BaseModel

Role = Literal["guest", "author", "editor", "admin"]

ROLES: tuple[str, ...] = get_args(Role)

FAQCategory = Literal["author", "editor", "general"]


class User(BaseModel):
    """A catalogue user.

    The role is the only authorization signal; there are no credentials.
    """

    id: str
    name: str
    email: str
    role: Role = "guest"
    affiliation: str = ""
    avatar: str | None = None

    model_config = {"frozen": True}


class LogEntry(BaseModel):
    """An append-only audit log entry."""

    id: str
    user_id: str
    user_name: str
    action: str
    details: str = ""
    timestamp: str

    model_config = {"frozen": True}


class FAQItem(BaseModel):
    """A frequently asked question."""

    id: str
    category: FAQCategory
    question: str
    answer: str

    model_config = {"frozen": True}
