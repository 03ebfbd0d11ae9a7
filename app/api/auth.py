"""Request authentication dependencies; require_api_key is for the payment-provider webhook collaborator."""

from __future__ import annotations

import hmac

from fastapi import Depends, HTTPException, Request

from app.api.deps import get_polka_key
from app.domain.exceptions import CredentialHeaderError
from app.infrastructure.security.credential_extractor import extract_api_key, extract_bearer


def require_bearer_token(request: Request) -> str:
    try:
        return extract_bearer(request.headers)
    except CredentialHeaderError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc


def require_api_key(request: Request, polka_key: str = Depends(get_polka_key)) -> str:
    try:
        key = extract_api_key(request.headers)
    except CredentialHeaderError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc
    if not hmac.compare_digest(key.encode("utf-8"), polka_key.encode("utf-8")):
        raise HTTPException(status_code=401, detail="Invalid API key.")
    return key
