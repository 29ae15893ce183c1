"""Configuration for the AI service client, read from the environment."""

import logging
import os
from collections.abc import Callable, Mapping

logger = logging.getLogger(__name__)

DEFAULT_GEMINI_BASE_URL = "https://generativelanguage.googleapis.com"
DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
DEFAULT_TIMEOUT = 30.0
DEFAULT_RETRY_ATTEMPTS = 2
USER_AGENT = "scholarflow/1.0"


def _number(env: Mapping[str, str], name: str, default, convert: Callable):
    """Read a numeric setting, keeping ``default`` when the value is unusable."""
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return convert(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not a number, using {default}")
        return default


def load_ai_config(env: Mapping[str, str] | None = None, api_key: str | None = None) -> dict:
    """Build the GeminiClient config dict.

    Args:
        env: Environment mapping (default: os.environ)
        api_key: Explicit key; overrides GEMINI_API_KEY and API_KEY

    Returns:
        Config dict with base_url, api_key, model, timeout, retry_attempts and headers
    """
    env = os.environ if env is None else env
    return {
        "base_url": env.get("GEMINI_BASE_URL", DEFAULT_GEMINI_BASE_URL),
        "api_key": api_key or env.get("GEMINI_API_KEY") or env.get("API_KEY", ""),
        "model": env.get("GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
        "timeout": _number(env, "GEMINI_TIMEOUT", DEFAULT_TIMEOUT, float),
        "retry_attempts": _number(env, "GEMINI_RETRY_ATTEMPTS", DEFAULT_RETRY_ATTEMPTS, int),
        "headers": {"User-Agent": USER_AGENT},
    }
