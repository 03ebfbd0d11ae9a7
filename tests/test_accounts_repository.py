from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
import unittest
from uuid import UUID

from app.infrastructure.db.mappers.accounts_mapper import map_row_to_refresh_token, map_row_to_user
from app.infrastructure.db.models.accounts import RefreshTokenModel, UserModel
from app.infrastructure.db.repositories.accounts_repository import (
    REFRESH_TOKEN_COLUMNS,
    USER_COLUMNS,
    SqlAccountsRepository,
)


class AccountsRepositoryTests(unittest.TestCase):
    def test_mapper_maps_user_row(self):
        now = datetime(2026, 2, 1, 10, 0, 0, tzinfo=timezone.utc)
        row = {
            "id": UUID("6f1c5f3e-1d0b-4c7e-9d0f-2a0a3b9c8e11"),
            "email": "walt@breakingbad.com",
            "hashed_password": "$argon2id$v=19$m=65536,t=3,p=4$abc$def",
            "is_chirpy_red": 0,
            "created_at": now,
            "updated_at": now,
        }
        user = map_row_to_user(row)
        self.assertEqual(user.id, "6f1c5f3e-1d0b-4c7e-9d0f-2a0a3b9c8e11")
        self.assertEqual(user.password_hash, row["hashed_password"])
        self.assertIs(user.is_chirpy_red, False)

    def test_mapper_maps_refresh_token_row_without_revocation(self):
        now = datetime(2026, 2, 1, 10, 0, 0, tzinfo=timezone.utc)
        row = {
            "token": "a" * 64,
            "user_id": UUID("6f1c5f3e-1d0b-4c7e-9d0f-2a0a3b9c8e11"),
            "created_at": now,
            "updated_at": now,
            "expires_at": now,
        }
        record = map_row_to_refresh_token(row)
        self.assertEqual(record.user_id, "6f1c5f3e-1d0b-4c7e-9d0f-2a0a3b9c8e11")
        self.assertIsNone(record.revoked_at)

    def test_selected_columns_exist_on_models(self):
        user_columns = {column.strip() for column in USER_COLUMNS.split(",")}
        token_columns = {column.strip() for column in REFRESH_TOKEN_COLUMNS.split(",")}
        self.assertEqual(user_columns, set(UserModel.__table__.columns.keys()))
        self.assertEqual(token_columns, set(RefreshTokenModel.__table__.columns.keys()))

    def test_revoke_is_a_blind_update_by_token(self):
        source = Path("app/infrastructure/db/repositories/accounts_repository.py").read_text(
            encoding="utf-8"
        )
        self.assertIn("SET revoked_at = :revoked_at", source)
        self.assertIn("WHERE token = :token", source)
        self.assertNotIn("revoked_at IS NULL", source)

    def test_users_are_looked_up_by_email_only(self):
        self.assertFalse(hasattr(SqlAccountsRepository, "get_user_by_id"))
        self.assertTrue(hasattr(SqlAccountsRepository, "get_user_by_email"))


if __name__ == "__main__":
    unittest.main()
