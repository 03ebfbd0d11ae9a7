from __future__ import annotations

from datetime import datetime

from sqlalchemy import text

from app.application.ports.refresh_token_port import RefreshTokenPort
from app.application.ports.user_port import UserPort
from app.infrastructure.db.mappers.accounts_mapper import map_row_to_refresh_token, map_row_to_user


USER_COLUMNS = "id, email, hashed_password, is_chirpy_red, created_at, updated_at"
REFRESH_TOKEN_COLUMNS = "token, user_id, created_at, updated_at, expires_at, revoked_at"


class SqlAccountsRepository(UserPort, RefreshTokenPort):
    def __init__(self, engine):
        self._engine = engine

    def get_user_by_email(self, *, email: str):
        sql = f"""
            SELECT {USER_COLUMNS}
            FROM public.users
            WHERE lower(email) = :email
            LIMIT 1
        """
        with self._engine.connect() as conn:
            row = conn.execute(text(sql), {"email": email.lower()}).mappings().first()
        if row is None:
            return None
        return map_row_to_user(row)

    def create_user(
        self,
        *,
        user_id: str,
        email: str,
        password_hash: str,
        created_at: datetime,
        updated_at: datetime,
    ):
        sql = f"""
            INSERT INTO public.users (
                id, email, hashed_password, is_chirpy_red, created_at, updated_at
            ) VALUES (
                :id, :email, :hashed_password, false, :created_at, :updated_at
            )
            RETURNING {USER_COLUMNS}
        """
        params = {
            "id": user_id,
            "email": email,
            "hashed_password": password_hash,
            "created_at": created_at,
            "updated_at": updated_at,
        }
        with self._engine.begin() as conn:
            row = conn.execute(text(sql), params).mappings().one()
        return map_row_to_user(row)

    def update_user_credentials(
        self,
        *,
        user_id: str,
        email: str,
        password_hash: str,
        updated_at: datetime,
    ):
        sql = f"""
            UPDATE public.users
            SET email = :email,
                hashed_password = :hashed_password,
                updated_at = :updated_at
            WHERE id = :user_id
            RETURNING {USER_COLUMNS}
        """
        params = {
            "user_id": user_id,
            "email": email,
            "hashed_password": password_hash,
            "updated_at": updated_at,
        }
        with self._engine.begin() as conn:
            row = conn.execute(text(sql), params).mappings().first()
        if row is None:
            return None
        return map_row_to_user(row)

    def create_refresh_token(
        self,
        *,
        token: str,
        user_id: str,
        created_at: datetime,
        expires_at: datetime,
    ):
        sql = f"""
            INSERT INTO public.refresh_tokens (
                token, user_id, created_at, updated_at, expires_at, revoked_at
            ) VALUES (
                :token, :user_id, :created_at, :created_at, :expires_at, NULL
            )
            RETURNING {REFRESH_TOKEN_COLUMNS}
        """
        params = {
            "token": token,
            "user_id": user_id,
            "created_at": created_at,
            "expires_at": expires_at,
        }
        with self._engine.begin() as conn:
            row = conn.execute(text(sql), params).mappings().one()
        return map_row_to_refresh_token(row)

    def get_refresh_token(self, *, token: str):
        sql = f"""
            SELECT {REFRESH_TOKEN_COLUMNS}
            FROM public.refresh_tokens
            WHERE token = :token
            LIMIT 1
        """
        with self._engine.connect() as conn:
            row = conn.execute(text(sql), {"token": token}).mappings().first()
        if row is None:
            return None
        return map_row_to_refresh_token(row)

    def revoke_refresh_token(
        self,
        *,
        token: str,
        revoked_at: datetime,
        updated_at: datetime,
    ):
        sql = f"""
            UPDATE public.refresh_tokens
            SET revoked_at = :revoked_at,
                updated_at = :updated_at
            WHERE token = :token
            RETURNING {REFRESH_TOKEN_COLUMNS}
        """
        params = {
            "token": token,
            "revoked_at": revoked_at,
            "updated_at": updated_at,
        }
        with self._engine.begin() as conn:
            row = conn.execute(text(sql), params).mappings().first()
        if row is None:
            return None
        return map_row_to_refresh_token(row)
