from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.api.routers.auth import router as auth_router
from app.api.routers.health import router as health_router
from app.api.routers.users import router as users_router
from app.shared.config import get_settings


logger = logging.getLogger(__name__)


app = FastAPI(title="Chirpy API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def malformed_request_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"detail": "Malformed request.", "errors": jsonable_errors(exc)},
    )


@app.exception_handler(SQLAlchemyError)
async def persistence_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("main: persistence failure path=%s error=%s", request.url.path, exc.__class__.__name__)
    return JSONResponse(status_code=500, content={"detail": "Internal server error."})


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]


app.include_router(health_router)
app.include_router(users_router)
app.include_router(auth_router)
