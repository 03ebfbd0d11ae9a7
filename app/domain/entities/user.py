from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class User:
    id: str
    email: str
    password_hash: str
    is_chirpy_red: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class RefreshToken:
    token: str
    user_id: str
    created_at: datetime
    updated_at: datetime
    expires_at: datetime
    revoked_at: datetime | None
