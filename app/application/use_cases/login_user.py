from __future__ import annotations

import logging

from app.application.dto.auth import AuthTokensOutput, LoginUserInput
from app.application.ports.password_hasher_port import PasswordHasherPort
from app.application.ports.token_port import TokenPort
from app.application.ports.user_port import UserPort
from app.application.services.refresh_token_store import RefreshTokenStore
from app.domain.exceptions import InvalidCredentialsError, UserNotFoundError

from .auth_common import build_auth_user_output, normalize_email, utcnow


logger = logging.getLogger(__name__)


class LoginUserUseCase:
    def __init__(
        self,
        *,
        user_port: UserPort,
        password_hasher: PasswordHasherPort,
        token_port: TokenPort,
        refresh_token_store: RefreshTokenStore,
    ):
        self._user_port = user_port
        self._password_hasher = password_hasher
        self._token_port = token_port
        self._refresh_token_store = refresh_token_store

    def execute(self, command: LoginUserInput) -> AuthTokensOutput:
        email = normalize_email(command.email)
        user = self._user_port.get_user_by_email(email=email)
        if user is None:
            raise UserNotFoundError("User not found.")

        try:
            self._password_hasher.verify(command.password, user.password_hash)
        except InvalidCredentialsError:
            logger.info("login_user: rejected password user_id=%s", user.id)
            raise

        now = utcnow()
        access_token = self._token_port.issue(user_id=user.id, now=now)
        # Prior refresh tokens of this user stay valid; each login adds one.
        refresh = self._refresh_token_store.create(user_id=user.id, now=now)

        return AuthTokensOutput(
            user=build_auth_user_output(user),
            access_token=access_token,
            refresh_token=refresh.token,
        )
