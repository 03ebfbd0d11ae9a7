from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from app.application.ports.token_port import TokenPort
from app.domain.exceptions import InvalidTokenError, TokenSigningError


logger = logging.getLogger(__name__)


ACCESS_TOKEN_ISSUER = "access-token-class"
ACCESS_TOKEN_ALGORITHM = "HS256"
DEFAULT_ACCESS_TTL = timedelta(hours=1)


class JwtTokenService(TokenPort):
    """Stateless access tokens signed with a shared HMAC secret.

    Nothing is stored: a token is valid while its signature matches the
    secret and its ``exp`` claim is in the future. Rotating the secret
    invalidates every outstanding token at once.
    """

    def __init__(self, *, jwt_secret: str, access_ttl: timedelta = DEFAULT_ACCESS_TTL):
        self._jwt_secret = jwt_secret
        self._access_ttl = access_ttl

    def issue(
        self,
        *,
        user_id: str,
        ttl: timedelta | None = None,
        now: datetime | None = None,
    ) -> str:
        now = now or utcnow()
        exp = now + (self._access_ttl if ttl is None else ttl)
        payload = {
            "iss": ACCESS_TOKEN_ISSUER,
            "sub": str(user_id),
            "iat": int(now.timestamp()),
            "exp": int(exp.timestamp()),
        }
        try:
            return jwt.encode(payload, self._jwt_secret, algorithm=ACCESS_TOKEN_ALGORITHM)
        except (jwt.PyJWTError, TypeError, ValueError) as exc:
            raise TokenSigningError("Failed to sign access token.") from exc

    def validate(self, *, token: str, now: datetime | None = None) -> str:
        try:
            return self._validate(token=token, now=now or utcnow())
        except InvalidTokenError as exc:
            logger.debug("token_service: rejected access token reason=%s", exc)
            raise InvalidTokenError("Invalid token.") from None

    def _validate(self, *, token: str, now: datetime) -> str:
        try:
            header = jwt.get_unverified_header(token)
        except jwt.PyJWTError as exc:
            raise InvalidTokenError(f"unreadable header: {exc}") from exc

        # Only HS256 is accepted; the header is checked before the key is touched.
        if header.get("alg") != ACCESS_TOKEN_ALGORITHM:
            raise InvalidTokenError(f"unexpected algorithm {header.get('alg')!r}")

        try:
            payload = jwt.decode(
                token,
                self._jwt_secret,
                algorithms=[ACCESS_TOKEN_ALGORITHM],
                issuer=ACCESS_TOKEN_ISSUER,
                options={
                    "require": ["iss", "sub", "iat", "exp"],
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
        except jwt.PyJWTError as exc:
            raise InvalidTokenError(f"{exc.__class__.__name__}: {exc}") from exc

        exp = payload["exp"]
        if not isinstance(exp, (int, float)) or now.timestamp() >= exp:
            raise InvalidTokenError("expired")

        try:
            return str(UUID(payload["sub"]))
        except (TypeError, ValueError, AttributeError) as exc:
            raise InvalidTokenError("subject is not a user id") from exc


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
