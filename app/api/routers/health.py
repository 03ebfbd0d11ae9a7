from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse


router = APIRouter()


@router.get("/api/healthz", response_class=PlainTextResponse)
def readiness() -> str:
    return "OK"
