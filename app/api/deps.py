from __future__ import annotations

from datetime import timedelta
from functools import lru_cache

from fastapi import HTTPException

from app.application.services.refresh_token_store import RefreshTokenStore
from app.application.use_cases.login_user import LoginUserUseCase
from app.application.use_cases.refresh_session import RefreshSessionUseCase
from app.application.use_cases.register_user import RegisterUserUseCase
from app.application.use_cases.revoke_session import RevokeSessionUseCase
from app.application.use_cases.update_credentials import UpdateCredentialsUseCase
from app.infrastructure.db.engine import get_engine
from app.infrastructure.db.repositories.accounts_repository import SqlAccountsRepository
from app.infrastructure.security.password_hasher import PasswordHasher
from app.infrastructure.security.token_service import JwtTokenService
from app.shared.config import get_settings


def _get_db_engine():
    settings = get_settings()
    if not settings.postgres_dsn:
        raise HTTPException(status_code=500, detail="DB_URL is required.")
    return get_engine(settings.postgres_dsn)


def _get_accounts_repository() -> SqlAccountsRepository:
    return SqlAccountsRepository(_get_db_engine())


@lru_cache(maxsize=1)
def _get_password_hasher() -> PasswordHasher:
    return PasswordHasher()


@lru_cache(maxsize=1)
def _get_token_service() -> JwtTokenService:
    settings = get_settings()
    if not settings.jwt_secret:
        raise HTTPException(status_code=500, detail="JWT_SECRET is required.")
    return JwtTokenService(
        jwt_secret=settings.jwt_secret,
        access_ttl=timedelta(seconds=settings.jwt_access_ttl_seconds),
    )


def _get_refresh_token_store() -> RefreshTokenStore:
    settings = get_settings()
    return RefreshTokenStore(
        refresh_token_port=_get_accounts_repository(),
        ttl=timedelta(days=settings.refresh_token_ttl_days),
    )


def get_register_user_use_case() -> RegisterUserUseCase:
    return RegisterUserUseCase(
        user_port=_get_accounts_repository(),
        password_hasher=_get_password_hasher(),
    )


def get_login_user_use_case() -> LoginUserUseCase:
    return LoginUserUseCase(
        user_port=_get_accounts_repository(),
        password_hasher=_get_password_hasher(),
        token_port=_get_token_service(),
        refresh_token_store=_get_refresh_token_store(),
    )


def get_refresh_session_use_case() -> RefreshSessionUseCase:
    return RefreshSessionUseCase(
        refresh_token_store=_get_refresh_token_store(),
        token_port=_get_token_service(),
    )


def get_revoke_session_use_case() -> RevokeSessionUseCase:
    return RevokeSessionUseCase(refresh_token_store=_get_refresh_token_store())


def get_update_credentials_use_case() -> UpdateCredentialsUseCase:
    return UpdateCredentialsUseCase(
        user_port=_get_accounts_repository(),
        password_hasher=_get_password_hasher(),
        token_port=_get_token_service(),
    )


def get_polka_key() -> str:
    settings = get_settings()
    if not settings.polka_key:
        raise HTTPException(status_code=500, detail="POLKA_KEY is required.")
    return settings.polka_key
