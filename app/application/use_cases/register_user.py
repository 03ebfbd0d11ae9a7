from __future__ import annotations

from uuid import uuid4

from app.application.dto.auth import AuthUserOutput, RegisterUserInput
from app.application.ports.password_hasher_port import PasswordHasherPort
from app.application.ports.user_port import UserPort
from app.domain.exceptions import EmailAlreadyExistsError

from .auth_common import build_auth_user_output, normalize_email, utcnow


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        user_port: UserPort,
        password_hasher: PasswordHasherPort,
    ):
        self._user_port = user_port
        self._password_hasher = password_hasher

    def execute(self, command: RegisterUserInput) -> AuthUserOutput:
        email = normalize_email(command.email)
        if not email:
            raise ValueError("email is required.")

        password_hash = self._password_hasher.hash(command.password)

        if self._user_port.get_user_by_email(email=email) is not None:
            raise EmailAlreadyExistsError("Email already in use.")

        now = utcnow()
        user = self._user_port.create_user(
            user_id=str(uuid4()),
            email=email,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
        )
        return build_auth_user_output(user)
