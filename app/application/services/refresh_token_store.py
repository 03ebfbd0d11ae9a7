from __future__ import annotations

import logging
import secrets
from datetime import datetime, timedelta, timezone

from app.application.ports.refresh_token_port import RefreshTokenPort
from app.domain.entities.user import RefreshToken
from app.domain.exceptions import RefreshTokenNotFoundError


logger = logging.getLogger(__name__)


REFRESH_TOKEN_BYTES = 32
DEFAULT_REFRESH_TTL = timedelta(days=60)


class RefreshTokenStore:
    """Long-lived opaque refresh tokens backed by the persistence port.

    A record is usable until it expires or is revoked. Revocation is a blind
    write on the row, so revoking twice is not an error.
    """

    def __init__(self, *, refresh_token_port: RefreshTokenPort, ttl: timedelta = DEFAULT_REFRESH_TTL):
        self._refresh_token_port = refresh_token_port
        self._ttl = ttl

    @staticmethod
    def generate() -> str:
        return secrets.token_hex(REFRESH_TOKEN_BYTES)

    def create(self, *, user_id: str, now: datetime | None = None) -> RefreshToken:
        now = now or utcnow()
        record = self._refresh_token_port.create_refresh_token(
            token=self.generate(),
            user_id=user_id,
            created_at=now,
            expires_at=now + self._ttl,
        )
        logger.info("refresh_token_store: created user_id=%s expires_at=%s", user_id, record.expires_at)
        return record

    def lookup(self, *, token: str) -> RefreshToken:
        record = self._refresh_token_port.get_refresh_token(token=token)
        if record is None:
            raise RefreshTokenNotFoundError("Refresh token not found.")
        return record

    @staticmethod
    def is_usable(record: RefreshToken, now: datetime) -> bool:
        return record.revoked_at is None and now < record.expires_at

    def revoke(self, *, token: str, now: datetime | None = None) -> None:
        now = now or utcnow()
        record = self._refresh_token_port.revoke_refresh_token(
            token=token,
            revoked_at=now,
            updated_at=now,
        )
        if record is None:
            raise RefreshTokenNotFoundError("Refresh token not found.")
        logger.info("refresh_token_store: revoked user_id=%s", record.user_id)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
