"""Errors raised by the AI service clients.

The adapter catches ClientError and turns it into a fallback value, so every
client failure must derive from it.
"""


class ClientError(Exception):
    """Base exception for all AI client errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(ClientError):
    """No API key is configured."""

    def __init__(self, message: str = "API key not configured"):
        super().__init__(message)


class ConnectionError(ClientError):
    """The service could not be reached after all retries."""


class APIError(ClientError):
    """The service answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int):
        self.status_code = status_code
        super().__init__(message)


class RateLimitError(APIError):
    """429: the key's quota is exhausted."""

    def __init__(self, message: str = "Rate limit exceeded"):
        super().__init__(message, status_code=429)


class NotFoundError(APIError):
    """404: usually an unknown model name."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, status_code=404)


class ValidationError(ClientError):
    """A reply did not have the expected shape."""

    def __init__(self, message: str, errors: list | None = None):
        self.errors = errors or []
        super().__init__(message)


class RequestInFlightError(ClientError):
    """An AI action was invoked while the same action is still loading."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"A {action} request is already in flight")
