"""HTTP transport shared by AI service clients."""

import logging
from abc import ABC, abstractmethod
from time import sleep
from typing import Any

import httpx

from .exceptions import APIError, ConnectionError, NotFoundError, RateLimitError

logger = logging.getLogger(__name__)

# Failures worth another attempt; HTTP error statuses never are
TRANSIENT_ERRORS = (httpx.ConnectError, httpx.TimeoutException)

STATUS_ERRORS = {
    404: NotFoundError,
    429: RateLimitError,
}


class Client(ABC):
    """Base class for AI service clients.

    Subclasses implement ``generate`` on top of ``get``/``post``. The httpx
    client is created on first use and released by ``close`` or by leaving a
    ``with`` block.

    Config keys:
        base_url (required): Service root, e.g. https://generativelanguage.googleapis.com
        timeout: Per-request timeout in seconds (default: 30)
        retry_attempts: Attempts before a network failure is raised (default: 3)
        retry_delay: Seconds between attempts (default: 1)
        headers: Headers sent with every request
    """

    def __init__(self, config: dict):
        if "base_url" not in config:
            raise ValueError("config must include 'base_url'")

        self._config = config
        self._client: httpx.Client | None = None

        self.base_url = str(config["base_url"])
        self.timeout = float(config.get("timeout", 30))
        self.retry_attempts = max(1, int(config.get("retry_attempts", 3)))
        self.retry_delay = float(config.get("retry_delay", 1))
        self.headers = dict(config.get("headers", {}))

    @property
    def client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url, timeout=self.timeout, headers=self.headers
            )
        return self._client

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def _handle_response(self, response: httpx.Response) -> httpx.Response:
        """Return successful responses; raise the matching APIError otherwise."""
        if response.is_success:
            return response

        error_class = STATUS_ERRORS.get(response.status_code)
        if error_class is not None:
            raise error_class(f"{response.status_code} from {response.url}")
        raise APIError(
            f"Service error {response.status_code}: {response.url}",
            status_code=response.status_code,
        )

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        """Send one request with up to ``retry_attempts`` attempts.

        Raises:
            ConnectionError: If every attempt failed to reach the service
            APIError: On the first non-2xx response
        """
        failure: Exception | None = None

        for attempt in range(1, self.retry_attempts + 1):
            try:
                response = self.client.request(method, path, **kwargs)
            except TRANSIENT_ERRORS as e:
                failure = e
                logger.warning(
                    f"{method} {path} failed (attempt {attempt}/{self.retry_attempts}): {e}"
                )
                if attempt < self.retry_attempts:
                    sleep(self.retry_delay)
                continue
            return self._handle_response(response)

        raise ConnectionError(
            f"Connection failed after {self.retry_attempts} attempts"
        ) from failure

    def get(self, path: str, **kwargs) -> httpx.Response:
        return self._request("GET", path, **kwargs)

    def post(self, path: str, **kwargs) -> httpx.Response:
        return self._request("POST", path, **kwargs)

    @abstractmethod
    def generate(self, prompt: str, **kwargs) -> Any:
        """Send a prompt and return the service's reply."""
