"""
Client identity for the ftrack API.

Values passed explicitly win over the environment. Call ``load_env()`` first
to pick up a local ``.env`` file.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .ftrack_client.errors import ConfigurationError

SERVER_ENV = "FTRACK_SERVER"
API_USER_ENV = "FTRACK_API_USER"
API_KEY_ENV = "FTRACK_API_KEY"
TIMEOUT_ENV = "FTRACK_TIMEOUT"

DEFAULT_TIMEOUT = 30.0


def load_env(env_file: Optional[str] = None) -> None:
    """Load environment variables from a .env file (existing values are kept)."""
    load_dotenv(dotenv_path=env_file, override=False)


def _timeout_from_env() -> float:
    raw = os.getenv(TIMEOUT_ENV)
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigurationError.invalid(TIMEOUT_ENV, raw, "a number of seconds") from None
    if timeout <= 0:
        raise ConfigurationError.invalid(TIMEOUT_ENV, raw, "a positive number of seconds")
    return timeout


@dataclass(frozen=True)
class FtrackSettings:
    """Immutable ftrack connection settings."""

    server_url: str
    api_user: str
    api_key: str
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        missing = [
            env_name
            for env_name, value in (
                (SERVER_ENV, self.server_url),
                (API_USER_ENV, self.api_user),
                (API_KEY_ENV, self.api_key),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(missing)
        object.__setattr__(self, "server_url", self.server_url.rstrip("/"))

    @property
    def api_endpoint(self) -> str:
        return f"{self.server_url}/api"

    @classmethod
    def from_env(
        cls,
        server_url: Optional[str] = None,
        api_user: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> "FtrackSettings":
        """Resolve settings from arguments, falling back to environment variables."""
        if timeout is None:
            timeout = _timeout_from_env()
        return cls(
            server_url=server_url or os.getenv(SERVER_ENV, ""),
            api_user=api_user or os.getenv(API_USER_ENV, ""),
            api_key=api_key or os.getenv(API_KEY_ENV, ""),
            timeout=timeout,
        )
