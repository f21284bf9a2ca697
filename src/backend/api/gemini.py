from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, HTTPException

from connectors.gemini import GeminiConfigError, GeminiHttpError, complete, get_gemini_config


router = APIRouter(tags=["gemini"])


@router.post("/gemini")
def gemini_generate(payload: Optional[Dict[str, Any]] = Body(None)):
    prompt = (payload or {}).get("prompt")
    if not isinstance(prompt, str) or not prompt.strip():
        raise HTTPException(status_code=400, detail='Invalid or missing "prompt" in request body.')

    try:
        config = get_gemini_config()
    except GeminiConfigError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    try:
        text, raw = complete(config, prompt)
    except GeminiHttpError as exc:
        raise HTTPException(status_code=exc.status or 502, detail=exc.body or exc.message) from exc

    return {"text": text, "raw": raw}
