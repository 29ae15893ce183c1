"""Generative-AI service client and fallback adapter."""

from .adapter import (
    SUMMARY_EMPTY,
    SUMMARY_FAILED,
    SUMMARY_NOT_CONFIGURED,
    ActionState,
    AIAdapter,
)
from .client import Client
from .exceptions import (
    APIError,
    ClientError,
    ConfigurationError,
    ConnectionError,
    NotFoundError,
    RateLimitError,
    RequestInFlightError,
    ValidationError,
)
from .gemini_client import GeminiClient
from .prompts import PromptBuilder

__all__ = [
    "AIAdapter",
    "APIError",
    "ActionState",
    "Client",
    "ClientError",
    "ConfigurationError",
    "ConnectionError",
    "GeminiClient",
    "NotFoundError",
    "PromptBuilder",
    "RateLimitError",
    "RequestInFlightError",
    "SUMMARY_EMPTY",
    "SUMMARY_FAILED",
    "SUMMARY_NOT_CONFIGURED",
    "ValidationError",
]
