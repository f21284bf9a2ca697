from __future__ import annotations

import json
import logging
from typing import Any
from urllib.error import HTTPError, URLError
from urllib.parse import quote, urlencode
from urllib.request import Request, urlopen

from .config import GeminiConfig

logger = logging.getLogger(__name__)

EMPTY_RESPONSE_TEXT = "No text response from the model."


class GeminiHttpError(RuntimeError):
    def __init__(self, status: int, message: str, body: str | None = None):
        super().__init__(f"Gemini HTTP {status}: {message}")
        self.status = status
        self.message = message
        self.body = body


def generate_content(config: GeminiConfig, prompt: str) -> dict[str, Any]:
    """POST a single-turn prompt to the provider and return the decoded response."""
    url = (
        f"{config.base_url}/models/{quote(config.model, safe='')}:generateContent?"
        f"{urlencode({'key': config.api_key})}"
    )
    payload = {"contents": [{"parts": [{"text": prompt}]}]}

    req = Request(url, data=json.dumps(payload).encode("utf-8"), method="POST")
    req.add_header("Content-Type", "application/json")
    req.add_header("Accept", "application/json")

    try:
        with urlopen(req, timeout=config.timeout_seconds) as resp:
            raw = resp.read().decode("utf-8")
            return json.loads(raw)
    except HTTPError as exc:
        body = exc.read().decode("utf-8") if exc.fp else None
        logger.warning("Gemini request failed: status=%s reason=%s", exc.code, exc.reason)
        raise GeminiHttpError(exc.code, str(exc.reason), body) from exc
    except URLError as exc:
        logger.warning("Gemini request failed: %s", exc.reason)
        raise GeminiHttpError(0, str(exc.reason)) from exc
    except json.JSONDecodeError as exc:
        raise GeminiHttpError(0, "Provider returned invalid JSON.") from exc


def extract_text(response: dict[str, Any]) -> str:
    candidates = response.get("candidates") or []
    if not candidates or not isinstance(candidates[0], dict):
        return ""
    content = candidates[0].get("content") or {}
    parts = content.get("parts") if isinstance(content, dict) else None
    if not parts or not isinstance(parts[0], dict):
        return ""
    text = parts[0].get("text")
    return text if isinstance(text, str) else ""


def complete(config: GeminiConfig, prompt: str) -> tuple[str, dict[str, Any]]:
    response = generate_content(config, prompt)
    return extract_text(response) or EMPTY_RESPONSE_TEXT, response
