from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _csv(name: str, default: str) -> list[str]:
    value = _env(name, default) or ""
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    postgres_dsn: str
    jwt_secret: str
    jwt_access_ttl_seconds: int
    refresh_token_ttl_days: int
    polka_key: str
    cors_allow_origins: list[str]


def get_settings() -> Settings:
    return Settings(
        postgres_dsn=_env("DB_URL", ""),
        jwt_secret=_env("JWT_SECRET", ""),
        jwt_access_ttl_seconds=int(_env("JWT_ACCESS_TTL_SECONDS", "3600")),
        refresh_token_ttl_days=int(_env("REFRESH_TOKEN_TTL_DAYS", "60")),
        polka_key=_env("POLKA_KEY", ""),
        cors_allow_origins=_csv("CORS_ALLOW_ORIGINS", "*"),
    )
