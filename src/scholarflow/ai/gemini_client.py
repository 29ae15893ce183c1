"""Gemini client for abstract summaries and journal semantic matching."""

import json
import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from schemas.gemini import GeminiResponse

from .client import Client
from .exceptions import ConfigurationError, ValidationError
from .prompts import PromptBuilder

logger = logging.getLogger(__name__)


class GeminiClient(Client):
    """Client for the Gemini ``generateContent`` REST endpoint.

    Raises ClientError subclasses on failure; turning failures into fallback
    values is the adapter's job.

    Config keys (in addition to the base Client keys):
        api_key: Gemini API key; calls raise ConfigurationError without one
        model: Model name (default: gemini-2.5-flash)

    Example:
        config = {"base_url": "https://generativelanguage.googleapis.com", "api_key": "..."}
        with GeminiClient(config) as client:
            summary = client.summarize(article.abstract)
    """

    API_PATH = "/v1beta/models/{model}:generateContent"
    DEFAULT_MODEL = "gemini-2.5-flash"

    def __init__(self, config: dict, prompts: PromptBuilder | None = None):
        super().__init__(config)
        self.prompts = prompts or PromptBuilder()

    @property
    def api_key(self) -> str:
        return str(self._config.get("api_key") or "")

    @property
    def model(self) -> str:
        return str(self._config.get("model") or self.DEFAULT_MODEL)

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def generate(self, prompt: str, json_response: bool = False) -> str:
        """Send a single-turn prompt and return the reply text.

        Args:
            prompt: Prompt text
            json_response: Ask the model for an application/json reply

        Returns:
            Text of the first candidate (may be empty)

        Raises:
            ConfigurationError: If no API key is configured
            ValidationError: If the response body is not a generateContent reply
            APIError: If the API returns a non-2xx response
            ConnectionError: If the network connection fails
        """
        if not self.is_configured:
            raise ConfigurationError()

        body: dict[str, Any] = {"contents": [{"parts": [{"text": prompt}]}]}
        if json_response:
            body["generationConfig"] = {"responseMimeType": "application/json"}

        logger.debug(f"Sending generateContent request: model={self.model}")
        response = self.post(
            self.API_PATH.format(model=self.model),
            json=body,
            headers={"x-goog-api-key": self.api_key},
        )

        try:
            payload = response.json()
        except ValueError as e:
            raise ValidationError("Response body is not JSON") from e

        try:
            return GeminiResponse.model_validate(payload).text
        except PydanticValidationError as e:
            raise ValidationError(
                "Response failed validation",
                errors=[str(err) for err in e.errors()],
            ) from e

    def summarize(self, text: str) -> str:
        """Plain-language summary of an abstract; empty if the model said nothing."""
        return self.generate(self.prompts.summarize(text)).strip()

    def semantic_match(self, query: str, candidates: list[str]) -> list[str]:
        """Candidates the model judges relevant to ``query``.

        The reply must be a JSON array of strings. Names that are not exact
        candidates are dropped and candidate order is kept.

        Raises:
            ValidationError: If the reply is not a JSON array of strings
        """
        raw = self.generate(
            self.prompts.semantic_match(query, candidates), json_response=True
        )
        if not raw.strip():
            raise ValidationError("Empty semantic match reply")

        try:
            titles = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Semantic match reply is not JSON: {raw[:200]}") from e

        if not isinstance(titles, list) or not all(isinstance(t, str) for t in titles):
            raise ValidationError("Semantic match reply is not an array of strings")

        wanted = set(titles)
        return [c for c in candidates if c in wanted]
