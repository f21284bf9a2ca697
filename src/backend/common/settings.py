from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv


load_dotenv()

DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024
DEFAULT_CORS_ORIGINS = ("http://localhost:5173", "http://127.0.0.1:5173")


@dataclass(frozen=True)
class AppSettings:
    max_upload_bytes: int
    scan_max_workers: int
    catalog_path: Optional[str]
    cors_origins: Tuple[str, ...]
    log_level: str
    port: int = 5000


def get_settings() -> AppSettings:
    """
    Load service settings from environment variables (and `.env` when present).

    Reads:
      MAX_UPLOAD_BYTES, SCAN_MAX_WORKERS, COMPLIANCE_CATALOG_PATH,
      CORS_ORIGINS (comma separated), LOG_LEVEL, PORT
    """
    origins_raw = os.getenv("CORS_ORIGINS", "").strip()
    origins = tuple(o.strip() for o in origins_raw.split(",") if o.strip()) or DEFAULT_CORS_ORIGINS

    return AppSettings(
        max_upload_bytes=_int_env("MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES),
        scan_max_workers=_int_env("SCAN_MAX_WORKERS", 1),
        catalog_path=os.getenv("COMPLIANCE_CATALOG_PATH", "").strip() or None,
        cors_origins=origins,
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
        port=_int_env("PORT", 5000),
    )


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"Environment variable {name} must be an integer, got {raw!r}.") from exc
    if value < 1:
        raise ValueError(f"Environment variable {name} must be positive, got {value}.")
    return value
