from __future__ import annotations

from typing import Protocol


class TokenStore(Protocol):
    def get_token(self) -> str | None: ...

    def set_token(self, token: str, ttl_days: float) -> None: ...

    def clear_token(self) -> None: ...

    def has_valid_session(self) -> bool: ...
