"""Gemini text-completion connector (network + config; no prompt logic)."""

from .client import GeminiHttpError, complete
from .config import GeminiConfig, GeminiConfigError, get_gemini_config

__all__ = ["GeminiConfig", "GeminiConfigError", "GeminiHttpError", "complete", "get_gemini_config"]
