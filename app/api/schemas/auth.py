from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class CredentialsRequest(BaseModel):
    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., max_length=1024)


class UserResponse(BaseModel):
    id: str
    created_at: datetime
    updated_at: datetime
    email: str
    is_chirpy_red: bool


class LoginResponse(UserResponse):
    token: str
    refresh_token: str


class AccessTokenResponse(BaseModel):
    token: str
