from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class AuthUserOutput:
    id: str
    email: str
    is_chirpy_red: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class RegisterUserInput:
    email: str
    password: str


@dataclass(frozen=True)
class LoginUserInput:
    email: str
    password: str


@dataclass(frozen=True)
class RefreshSessionInput:
    refresh_token: str


@dataclass(frozen=True)
class RevokeSessionInput:
    refresh_token: str


@dataclass(frozen=True)
class UpdateCredentialsInput:
    access_token: str
    email: str
    password: str


@dataclass(frozen=True)
class AuthTokensOutput:
    user: AuthUserOutput
    access_token: str
    refresh_token: str


@dataclass(frozen=True)
class AccessTokenOutput:
    access_token: str
