"""AI augmentation adapter.

Wraps the two AI calls so callers never need an error branch: every failure
collapses into a documented fallback value. Each action runs through its own
small state machine::

    idle -> loading -> (success | failed) -> idle

A second call to an action that is still loading raises RequestInFlightError;
different actions may be in flight at the same time. There is no retry or
timeout at this layer. A cancelled call returns the action to idle and leaves
the last outcome untouched.
"""

import asyncio
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Literal

from schemas import SemanticMatch

from .exceptions import ClientError, ConfigurationError, RequestInFlightError
from .gemini_client import GeminiClient

logger = logging.getLogger(__name__)

SUMMARY_NOT_CONFIGURED = "API Key not configured."
SUMMARY_EMPTY = "Could not generate summary."
SUMMARY_FAILED = "Failed to generate summary. Please check your network or API key."

SUMMARIZE = "summarize"
SEMANTIC_MATCH = "semantic_match"


@dataclass
class ActionState:
    """State of one AI action.

    Attributes:
        status: "loading" while a request is in flight, otherwise "idle"
        last_outcome: Outcome of the most recent completed request
        result: Value returned by the most recent completed request
    """

    status: Literal["idle", "loading"] = "idle"
    last_outcome: Literal["success", "failed"] | None = None
    result: Any = None

    @property
    def in_flight(self) -> bool:
        return self.status == "loading"


class AIAdapter:
    """Fallback-safe front for the Gemini client.

    Args:
        client: Configured GeminiClient, or None when no service is set up
    """

    def __init__(self, client: GeminiClient | None = None):
        self.client = client
        self.states: dict[str, ActionState] = {
            SUMMARIZE: ActionState(),
            SEMANTIC_MATCH: ActionState(),
        }

    @property
    def is_configured(self) -> bool:
        return self.client is not None and self.client.is_configured

    def is_in_flight(self, action: str) -> bool:
        return self.states[action].in_flight

    @contextmanager
    def _running(self, action: str) -> Iterator[ActionState]:
        """Hold ``action`` in loading until the block exits, however it exits."""
        state = self.states[action]
        if state.in_flight:
            raise RequestInFlightError(action)
        state.status = "loading"
        try:
            yield state
        finally:
            state.status = "idle"

    @staticmethod
    def _finish(state: ActionState, outcome: str, result: Any) -> Any:
        state.last_outcome = outcome
        state.result = result
        return result

    async def summarize(self, abstract: str) -> str:
        """Three-sentence plain-language summary of ``abstract``.

        Returns a fixed fallback string when the service is not configured,
        fails, or returns nothing.
        """
        with self._running(SUMMARIZE) as state:
            if not self.is_configured:
                logger.warning("Summary requested but no API key is configured")
                return self._finish(state, "failed", SUMMARY_NOT_CONFIGURED)

            try:
                summary = await asyncio.to_thread(self.client.summarize, abstract)
            except ConfigurationError:
                return self._finish(state, "failed", SUMMARY_NOT_CONFIGURED)
            except ClientError as e:
                logger.error(f"Summary request failed: {e.message}")
                return self._finish(state, "failed", SUMMARY_FAILED)
            except Exception as e:
                logger.error(f"Summary request failed unexpectedly: {e}")
                return self._finish(state, "failed", SUMMARY_FAILED)

            if not summary:
                return self._finish(state, "success", SUMMARY_EMPTY)
            return self._finish(state, "success", summary)

    async def semantic_match(self, query: str, candidates: list[str]) -> SemanticMatch:
        """Candidates judged relevant to ``query``.

        Returns:
            ``matched`` with exact candidate titles, ``none`` when nothing is
            relevant (or there was nothing to ask), ``unavailable`` when the
            service is not configured or the request failed
        """
        with self._running(SEMANTIC_MATCH) as state:
            if not query.strip() or not candidates:
                return self._finish(state, "success", SemanticMatch.none())
            if not self.is_configured:
                logger.warning("Semantic match requested but no API key is configured")
                return self._finish(state, "failed", SemanticMatch.unavailable())

            try:
                titles = await asyncio.to_thread(
                    self.client.semantic_match, query, candidates
                )
            except ClientError as e:
                logger.error(f"Semantic match request failed: {e.message}")
                return self._finish(state, "failed", SemanticMatch.unavailable())
            except Exception as e:
                logger.error(f"Semantic match request failed unexpectedly: {e}")
                return self._finish(state, "failed", SemanticMatch.unavailable())

            return self._finish(state, "success", SemanticMatch.matched(titles))
