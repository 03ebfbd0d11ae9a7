from __future__ import annotations

from app.application.dto.auth import AuthUserOutput, UpdateCredentialsInput
from app.application.ports.password_hasher_port import PasswordHasherPort
from app.application.ports.token_port import TokenPort
from app.application.ports.user_port import UserPort
from app.domain.exceptions import EmailAlreadyExistsError, UserNotFoundError

from .auth_common import build_auth_user_output, normalize_email, utcnow


class UpdateCredentialsUseCase:
    def __init__(
        self,
        *,
        user_port: UserPort,
        password_hasher: PasswordHasherPort,
        token_port: TokenPort,
    ):
        self._user_port = user_port
        self._password_hasher = password_hasher
        self._token_port = token_port

    def execute(self, command: UpdateCredentialsInput) -> AuthUserOutput:
        user_id = self._token_port.validate(token=command.access_token)

        email = normalize_email(command.email)
        if not email:
            raise ValueError("email is required.")

        password_hash = self._password_hasher.hash(command.password)

        owner = self._user_port.get_user_by_email(email=email)
        if owner is not None and owner.id != user_id:
            raise EmailAlreadyExistsError("Email already in use.")

        user = self._user_port.update_user_credentials(
            user_id=user_id,
            email=email,
            password_hash=password_hash,
            updated_at=utcnow(),
        )
        if user is None:
            raise UserNotFoundError("User not found.")
        return build_auth_user_output(user)
