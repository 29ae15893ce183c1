"""Custom exceptions for the catalogue store."""


class StoreError(Exception):
    """Base exception for all store errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class NotFoundError(StoreError):
    """Raised when a record id does not resolve."""

    def __init__(self, resource_type: str, resource_id: str):
        self.resource_type = resource_type
        self.resource_id = resource_id
        super().__init__(f"{resource_type.capitalize()} {resource_id} not found")


class IntegrityError(StoreError):
    """Raised when a write would leave a dangling journal or issue reference."""

    pass
