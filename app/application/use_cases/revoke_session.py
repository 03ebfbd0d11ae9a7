from __future__ import annotations

from app.application.dto.auth import RevokeSessionInput
from app.application.services.refresh_token_store import RefreshTokenStore
from app.domain.exceptions import RefreshTokenNotFoundError


class RevokeSessionUseCase:
    def __init__(self, *, refresh_token_store: RefreshTokenStore):
        self._refresh_token_store = refresh_token_store

    def execute(self, command: RevokeSessionInput) -> None:
        token = command.refresh_token.strip()
        if not token:
            raise RefreshTokenNotFoundError("Refresh token not found.")
        self._refresh_token_store.revoke(token=token)
