from __future__ import annotations

from typing import Any, Mapping

from app.domain.entities.user import RefreshToken, User


def _as_str(value: Any) -> str:
    return str(value)


def map_row_to_user(row: Mapping[str, Any]) -> User:
    return User(
        id=_as_str(row["id"]),
        email=row["email"],
        password_hash=row["hashed_password"],
        is_chirpy_red=bool(row["is_chirpy_red"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def map_row_to_refresh_token(row: Mapping[str, Any]) -> RefreshToken:
    return RefreshToken(
        token=row["token"],
        user_id=_as_str(row["user_id"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        expires_at=row["expires_at"],
        revoked_at=row.get("revoked_at"),
    )
