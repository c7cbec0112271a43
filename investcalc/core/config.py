from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv

DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


@dataclass(frozen=True)
class Settings:
    env: str = "dev"
    log_level: str = "INFO"
    cors_origins: Tuple[str, ...] = DEFAULT_CORS_ORIGINS
    # upper bound the API accepts for the projection horizon
    max_years: int = 100


def _env(key: str) -> Optional[str]:
    # empty variables count as unset
    value = os.getenv(key)
    if value is None or not value.strip():
        return None
    return value.strip()


def load_settings() -> Settings:
    """Build Settings from the environment (after loading a local .env)."""
    load_dotenv()

    origins = _env("CORS_ORIGINS")
    cors_origins = (
        tuple(o.strip() for o in origins.split(",") if o.strip())
        if origins is not None
        else DEFAULT_CORS_ORIGINS
    )

    return Settings(
        env=_env("INVESTCALC_ENV") or "dev",
        log_level=(_env("LOG_LEVEL") or "INFO").upper(),
        cors_origins=cors_origins,
        max_years=int(_env("MAX_YEARS") or 100),
    )
