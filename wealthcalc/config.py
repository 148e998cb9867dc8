"""Application configuration read from the environment."""

from __future__ import annotations

import os
from typing import List

DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


class Config:
    CORS_ORIGINS: List[str] = _split_origins(
        os.getenv("WEALTHCALC_CORS_ORIGINS", ",".join(DEFAULT_CORS_ORIGINS))
    )
    LOG_LEVEL: str = os.getenv("WEALTHCALC_LOG_LEVEL", "INFO")
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY", "")
    INSIGHT_MODEL: str = os.getenv("WEALTHCALC_INSIGHT_MODEL", "gemini-2.0-flash-lite")
    # Any InsightProvider instance; built from GEMINI_API_KEY when left as None.
    INSIGHT_PROVIDER = None
