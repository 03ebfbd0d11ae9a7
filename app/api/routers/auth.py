from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response

from app.api.auth import require_bearer_token
from app.api.deps import (
    get_login_user_use_case,
    get_refresh_session_use_case,
    get_revoke_session_use_case,
)
from app.api.schemas.auth import AccessTokenResponse, CredentialsRequest, LoginResponse
from app.application.dto.auth import LoginUserInput, RefreshSessionInput, RevokeSessionInput
from app.application.use_cases.login_user import LoginUserUseCase
from app.application.use_cases.refresh_session import RefreshSessionUseCase
from app.application.use_cases.revoke_session import RevokeSessionUseCase
from app.domain.exceptions import (
    InternalAuthError,
    InvalidCredentialsError,
    RefreshTokenInvalidError,
    RefreshTokenNotFoundError,
    UserNotFoundError,
)


router = APIRouter()


@router.post("/api/login", response_model=LoginResponse)
def login_user(
    req: CredentialsRequest,
    use_case: LoginUserUseCase = Depends(get_login_user_use_case),
):
    try:
        output = use_case.execute(LoginUserInput(email=req.email, password=req.password))
    except UserNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except InvalidCredentialsError as exc:
        raise HTTPException(status_code=401, detail="Incorrect email or password.") from exc
    except InternalAuthError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return LoginResponse(
        id=output.user.id,
        created_at=output.user.created_at,
        updated_at=output.user.updated_at,
        email=output.user.email,
        is_chirpy_red=output.user.is_chirpy_red,
        token=output.access_token,
        refresh_token=output.refresh_token,
    )


@router.post("/api/refresh", response_model=AccessTokenResponse)
def refresh_session(
    token: str = Depends(require_bearer_token),
    use_case: RefreshSessionUseCase = Depends(get_refresh_session_use_case),
):
    try:
        output = use_case.execute(RefreshSessionInput(refresh_token=token))
    except RefreshTokenInvalidError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc
    except InternalAuthError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return AccessTokenResponse(token=output.access_token)


@router.post("/api/revoke", status_code=204)
def revoke_session(
    token: str = Depends(require_bearer_token),
    use_case: RevokeSessionUseCase = Depends(get_revoke_session_use_case),
):
    try:
        use_case.execute(RevokeSessionInput(refresh_token=token))
    except RefreshTokenNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    return Response(status_code=204)
