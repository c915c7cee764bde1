"""Data models for the REST connection and batch read results."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional

from obsidian_rest.constants import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_PROTOCOL,
    DEFAULT_TIMEOUT,
    DEFAULT_VERIFY_SSL,
)


@dataclass(frozen=True)
class RemoteConfig:
    """Connection settings for the Obsidian Local REST API.

    Built once at startup by :func:`obsidian_rest.config.load_remote_config`
    and shared read-only by the client.
    """

    api_key: str
    protocol: str = DEFAULT_PROTOCOL
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    verify_ssl: bool = DEFAULT_VERIFY_SSL
    timeout: float = DEFAULT_TIMEOUT

    @property
    def base_url(self) -> str:
        return f"{self.protocol}://{self.host}:{self.port}"

    def as_payload(self) -> dict[str, Any]:
        """Return a serializable payload representation (API key omitted)."""
        return {
            "base_url": self.base_url,
            "verify_ssl": self.verify_ssl,
            "timeout": self.timeout,
        }


@dataclass(frozen=True)
class BatchFileResult:
    """Outcome of reading one file during a batch read.

    Exactly one of ``content`` and ``error`` is set.
    """

    filepath: str
    content: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def render(self) -> str:
        """Frame the result with its filename header and divider."""
        body = self.content if self.ok else f"Error reading file: {self.error}"
        return f"# {self.filepath}\n\n{body}\n\n---\n\n"
