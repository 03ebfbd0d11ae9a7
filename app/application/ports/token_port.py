from __future__ import annotations

from datetime import datetime, timedelta
from typing import Protocol


class TokenPort(Protocol):
    def issue(
        self,
        *,
        user_id: str,
        ttl: timedelta | None = None,
        now: datetime | None = None,
    ) -> str:
        ...

    def validate(self, *, token: str, now: datetime | None = None) -> str:
        ...
