from __future__ import annotations

import logging

from app.application.dto.auth import AccessTokenOutput, RefreshSessionInput
from app.application.ports.token_port import TokenPort
from app.application.services.refresh_token_store import RefreshTokenStore
from app.domain.exceptions import RefreshTokenInvalidError, RefreshTokenNotFoundError

from .auth_common import utcnow


logger = logging.getLogger(__name__)


class RefreshSessionUseCase:
    def __init__(self, *, refresh_token_store: RefreshTokenStore, token_port: TokenPort):
        self._refresh_token_store = refresh_token_store
        self._token_port = token_port

    def execute(self, command: RefreshSessionInput) -> AccessTokenOutput:
        token = command.refresh_token.strip()
        if not token:
            raise RefreshTokenInvalidError("Invalid refresh token.")

        try:
            record = self._refresh_token_store.lookup(token=token)
        except RefreshTokenNotFoundError:
            logger.info("refresh_session: unknown refresh token")
            raise RefreshTokenInvalidError("Invalid refresh token.") from None

        now = utcnow()
        if not self._refresh_token_store.is_usable(record, now):
            logger.info(
                "refresh_session: unusable refresh token user_id=%s revoked=%s",
                record.user_id,
                record.revoked_at is not None,
            )
            raise RefreshTokenInvalidError("Invalid refresh token.")

        return AccessTokenOutput(
            access_token=self._token_port.issue(user_id=record.user_id, now=now),
        )
