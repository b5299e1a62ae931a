"""Exchange API context shared with BDD step definitions."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from exchange_bdd.config import RunnerConfig


@dataclass(frozen=True)
class ApiContext:
    """Credentials and endpoints for one exchange host."""

    api_key: str
    api_host: str
    secret_key: str = field(repr=False)
    otp: str = field(default="", repr=False)

    @classmethod
    def from_config(cls, config: RunnerConfig) -> "ApiContext":
        """Build from a validated RunnerConfig."""
        return cls(
            api_key=config.api_key,
            api_host=config.api_host,
            secret_key=config.secret_key,
            otp=config.otp or "",
        )

    @property
    def public_api_url(self) -> str:
        return f"https://{self.api_host}/0/public/"

    @property
    def private_api_url(self) -> str:
        return f"https://{self.api_host}/0/private/"

    @staticmethod
    def get_nonce() -> int:
        """Nonce for private calls (UNIX time in seconds)."""
        return int(time.time())
