from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()

DEFAULT_MODEL = "gemini-1.5-flash"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"


class GeminiConfigError(RuntimeError):
    pass


@dataclass(frozen=True)
class GeminiConfig:
    api_key: str
    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: int = 30


def get_gemini_config() -> GeminiConfig:
    """
    Load provider configuration from environment variables.

    Reads: GEMINI_API_KEY (required), GEMINI_MODEL, GEMINI_TIMEOUT_SECONDS
    """
    api_key = os.getenv("GEMINI_API_KEY", "").strip()
    if not api_key:
        raise GeminiConfigError("Server misconfiguration: Missing GEMINI_API_KEY.")
    timeout_raw = os.getenv("GEMINI_TIMEOUT_SECONDS", "30").strip() or "30"
    try:
        timeout_seconds = int(timeout_raw)
    except ValueError as exc:
        raise GeminiConfigError(f"GEMINI_TIMEOUT_SECONDS must be an integer, got {timeout_raw!r}.") from exc
    return GeminiConfig(
        api_key=api_key,
        model=os.getenv("GEMINI_MODEL", DEFAULT_MODEL).strip() or DEFAULT_MODEL,
        timeout_seconds=timeout_seconds,
    )
