"""Parsing of the ``Authorization`` header.

Two schemes are understood: ``Bearer <token>`` for session tokens and
``ApiKey <key>`` for service-to-service calls. Which one applies is decided
by the endpoint, never by inspecting the value.
"""
from __future__ import annotations

from typing import Mapping

from app.domain.exceptions import MalformedHeaderError, MissingHeaderError


AUTHORIZATION_HEADER = "authorization"
BEARER_SCHEME = "bearer"
API_KEY_SCHEME = "apikey"


def _get_authorization(headers: Mapping[str, str]) -> str:
    value = None
    for name, header_value in headers.items():
        if name.lower() == AUTHORIZATION_HEADER:
            value = header_value
            break
    if not value:
        raise MissingHeaderError("Missing authorization header.")
    return value


def _split_scheme(value: str, expected_scheme: str) -> str:
    scheme, _, credential = value.partition(" ")
    if scheme.lower() != expected_scheme:
        raise MalformedHeaderError("Malformed authorization header.")
    return credential


def extract_bearer(headers: Mapping[str, str]) -> str:
    token = _split_scheme(_get_authorization(headers), BEARER_SCHEME).strip()
    if not token:
        raise MalformedHeaderError("Malformed authorization header.")
    return token


def extract_api_key(headers: Mapping[str, str]) -> str:
    key = _split_scheme(_get_authorization(headers), API_KEY_SCHEME).strip()
    if not key:
        raise MalformedHeaderError("Malformed authorization header.")
    return key
