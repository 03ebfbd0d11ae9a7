from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from app.api.auth import require_bearer_token
from app.api.deps import get_register_user_use_case, get_update_credentials_use_case
from app.api.schemas.auth import CredentialsRequest, UserResponse
from app.application.dto.auth import AuthUserOutput, RegisterUserInput, UpdateCredentialsInput
from app.application.use_cases.register_user import RegisterUserUseCase
from app.application.use_cases.update_credentials import UpdateCredentialsUseCase
from app.domain.exceptions import (
    EmailAlreadyExistsError,
    InternalAuthError,
    InvalidTokenError,
    UserNotFoundError,
)


router = APIRouter()


def _user_response(user: AuthUserOutput) -> UserResponse:
    return UserResponse(
        id=user.id,
        created_at=user.created_at,
        updated_at=user.updated_at,
        email=user.email,
        is_chirpy_red=user.is_chirpy_red,
    )


@router.post("/api/users", response_model=UserResponse, status_code=201)
def register_user(
    req: CredentialsRequest,
    use_case: RegisterUserUseCase = Depends(get_register_user_use_case),
):
    try:
        output = use_case.execute(RegisterUserInput(email=req.email, password=req.password))
    except EmailAlreadyExistsError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except InternalAuthError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return _user_response(output)


@router.put("/api/users", response_model=UserResponse)
def update_credentials(
    req: CredentialsRequest,
    token: str = Depends(require_bearer_token),
    use_case: UpdateCredentialsUseCase = Depends(get_update_credentials_use_case),
):
    try:
        output = use_case.execute(
            UpdateCredentialsInput(access_token=token, email=req.email, password=req.password)
        )
    except InvalidTokenError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc
    except UserNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except EmailAlreadyExistsError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except InternalAuthError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return _user_response(output)
