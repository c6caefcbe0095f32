"""Connection settings for an OSDF server.

Architecture:
    ``ClientSettings`` is an immutable Pydantic model describing how to reach
    the server. It can be built from keyword arguments, from the plain
    ``{"host", "port", "auth", "ssl"}`` mapping used by existing OSDF
    tooling, or from ``OSDF_*`` environment variables.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8123
DEFAULT_TIMEOUT = 30.0

# Environment variable -> settings field
ENV_VARS = {
    "OSDF_HOST": "host",
    "OSDF_PORT": "port",
    "OSDF_AUTH": "auth",
    "OSDF_SSL": "ssl",
    "OSDF_TIMEOUT": "timeout",
}


class ClientSettings(BaseModel):
    """Server connection details."""

    host: str = Field(DEFAULT_HOST, min_length=1)
    port: int = Field(DEFAULT_PORT, gt=0, lt=65536)
    auth: str | None = None  # "username:password"
    ssl: bool = False
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @field_validator("auth")
    @classmethod
    def validate_auth(cls, v: str | None) -> str | None:
        """Validate auth is of the form username:password."""
        if v is None or v == "":
            return None
        username, sep, _ = v.partition(":")
        if not sep or not username:
            raise ValueError("auth must be of the form 'username:password'")
        return v

    @property
    def scheme(self) -> str:
        return "https" if self.ssl else "http"

    @property
    def base_url(self) -> str:
        """Root URL every request path is appended to."""
        return f"{self.scheme}://{self.host}:{self.port}"

    @property
    def credentials(self) -> tuple[str, str] | None:
        """(username, password) for HTTP Basic auth, if configured."""
        if self.auth is None:
            return None
        username, _, password = self.auth.partition(":")
        return username, password

    @classmethod
    def from_mapping(cls, settings: Mapping[str, Any]) -> ClientSettings:
        """Build settings from a plain mapping, ignoring unset (None) values."""
        return cls(**{k: v for k, v in settings.items() if v is not None})

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientSettings:
        """Build settings from ``OSDF_*`` environment variables."""
        environ = os.environ if environ is None else environ
        values = {field: environ[var] for var, field in ENV_VARS.items() if environ.get(var)}
        return cls(**values)
