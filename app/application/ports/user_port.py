from __future__ import annotations

from datetime import datetime
from typing import Protocol

from app.domain.entities.user import User


class UserPort(Protocol):
    def get_user_by_email(self, *, email: str) -> User | None:
        ...

    def create_user(
        self,
        *,
        user_id: str,
        email: str,
        password_hash: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> User:
        ...

    def update_user_credentials(
        self,
        *,
        user_id: str,
        email: str,
        password_hash: str,
        updated_at: datetime,
    ) -> User | None:
        ...
