"""In-memory catalogue store."""

from .async_repository import AsyncRepository
from .exceptions import IntegrityError, NotFoundError, StoreError
from .repository import InMemoryRepository, Repository, next_id

__all__ = [
    "AsyncRepository",
    "InMemoryRepository",
    "IntegrityError",
    "NotFoundError",
    "Repository",
    "StoreError",
    "next_id",
]
