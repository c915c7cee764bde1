"""Exception types raised while talking to the Obsidian Local REST API."""

from __future__ import annotations

from typing import Optional


class ObsidianError(Exception):
    """Base class for failures of a remote vault operation."""


class ObsidianAPIError(ObsidianError):
    """The REST API answered with an error status.

    ``code`` and ``message`` come from the response body (``errorCode`` and
    ``message``), falling back to ``-1`` and ``"<unknown>"``.
    """

    def __init__(self, code: int, message: str, status_code: Optional[int] = None) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(f"Error {code}: {message}")


class ObsidianTransportError(ObsidianError):
    """The request never produced a response (connection, timeout, TLS)."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Request failed: {reason}")


class UnknownToolError(ValueError):
    """A tool name was dispatched that is not in the catalog."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")
