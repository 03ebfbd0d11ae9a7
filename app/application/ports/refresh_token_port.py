from __future__ import annotations

from datetime import datetime
from typing import Protocol

from app.domain.entities.user import RefreshToken


class RefreshTokenPort(Protocol):
    def create_refresh_token(
        self,
        *,
        token: str,
        user_id: str,
        created_at: datetime,
        expires_at: datetime,
    ) -> RefreshToken:
        ...

    def get_refresh_token(self, *, token: str) -> RefreshToken | None:
        ...

    def revoke_refresh_token(
        self,
        *,
        token: str,
        revoked_at: datetime,
        updated_at: datetime,
    ) -> RefreshToken | None:
        ...
