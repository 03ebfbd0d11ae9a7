from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class AuthenticationError(DomainError):
    """Caller could not be authenticated."""


class CredentialHeaderError(AuthenticationError):
    """Authorization header could not be used."""


class MissingHeaderError(CredentialHeaderError):
    """Authorization header is absent or empty."""


class MalformedHeaderError(CredentialHeaderError):
    """Authorization header does not match the expected scheme."""


class InvalidCredentialsError(AuthenticationError):
    """Email/password pair was rejected."""


class PasswordMismatchError(InvalidCredentialsError):
    """Password does not match the stored hash."""


class MalformedPasswordHashError(InvalidCredentialsError):
    """Stored hash could not be parsed."""


class InvalidTokenError(AuthenticationError):
    """Access token failed validation."""


class RefreshTokenInvalidError(AuthenticationError):
    """Refresh token is unknown, expired or revoked."""


class UserNotFoundError(DomainError):
    """User does not exist."""


class RefreshTokenNotFoundError(DomainError):
    """No refresh token row matches the given value."""


class EmailAlreadyExistsError(DomainError):
    """Email is already owned by another user."""


class InternalAuthError(DomainError):
    """Unexpected failure inside the credential subsystem."""


class PasswordHashingError(InternalAuthError):
    """Password could not be hashed."""


class TokenSigningError(InternalAuthError):
    """Access token could not be signed."""
