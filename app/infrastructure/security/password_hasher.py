from __future__ import annotations

from argon2.exceptions import HashingError as Argon2HashingError
from passlib.context import CryptContext
from passlib.exc import PasswordSizeError

from app.application.ports.password_hasher_port import PasswordHasherPort
from app.domain.exceptions import (
    MalformedPasswordHashError,
    PasswordHashingError,
    PasswordMismatchError,
)


class PasswordHasher(PasswordHasherPort):
    def __init__(self):
        self._ctx = CryptContext(
            schemes=["argon2", "bcrypt"],
            deprecated="auto",
        )

    def hash(self, plain_password: str) -> str:
        try:
            return self._ctx.hash(plain_password)
        except (ValueError, TypeError, RuntimeError, Argon2HashingError) as exc:
            raise PasswordHashingError("Failed to hash password.") from exc

    def verify(self, plain_password: str, password_hash: str) -> None:
        try:
            verified = self._ctx.verify(plain_password, password_hash)
        except PasswordSizeError as exc:
            raise PasswordMismatchError("Invalid credentials.") from exc
        except (ValueError, TypeError) as exc:
            raise MalformedPasswordHashError("Invalid credentials.") from exc
        if not verified:
            raise PasswordMismatchError("Invalid credentials.")
