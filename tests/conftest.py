"""Shared fixtures: a fake Local REST API built on httpx.MockTransport."""

from __future__ import annotations

from typing import Any, Callable, Optional

import httpx
import pytest

from obsidian_rest.client import ObsidianClient
from obsidian_rest.context import create_app_context
from obsidian_rest.data_models import RemoteConfig


class FakeObsidianAPI:
    """Records every request and answers from a small in-memory vault."""

    def __init__(self, files: Optional[dict[str, str]] = None) -> None:
        self.files = dict(files or {})
        self.requests: list[httpx.Request] = []
        self.search_results: list[dict[str, Any]] = []
        self.jsonlogic_results: list[dict[str, Any]] = []
        self.responder: Optional[Callable[[httpx.Request], httpx.Response]] = None

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.responder is not None:
            return self.responder(request)

        path = request.url.path
        if path == "/search/simple/":
            return httpx.Response(200, json=self.search_results)
        if path == "/search/":
            return httpx.Response(200, json=self.jsonlogic_results)
        if not path.startswith("/vault/"):
            return _not_found()

        relative = path[len("/vault/"):]
        if request.method == "GET" and (relative == "" or relative.endswith("/")):
            prefix = relative
            entries = sorted(
                {
                    name[len(prefix):].split("/")[0] + ("/" if "/" in name[len(prefix):] else "")
                    for name in self.files
                    if name.startswith(prefix)
                }
            )
            if prefix and not entries:
                return httpx.Response(404, json={"errorCode": 40400, "message": "Not Found"})
            return httpx.Response(200, json={"files": entries})
        if request.method == "GET":
            if relative not in self.files:
                return _not_found()
            return httpx.Response(200, text=self.files[relative])
        if request.method == "POST":
            self.files[relative] = self.files.get(relative, "") + request.content.decode("utf-8")
            return httpx.Response(204)
        if request.method == "PATCH":
            if relative not in self.files:
                return _not_found()
            return httpx.Response(200)
        return httpx.Response(405, json={"errorCode": 40500, "message": "Method Not Allowed"})


def _not_found() -> httpx.Response:
    return httpx.Response(404, json={"errorCode": 40400, "message": "File does not exist"})


@pytest.fixture
def remote_config() -> RemoteConfig:
    return RemoteConfig(api_key="test-key")


@pytest.fixture
def fake_api() -> FakeObsidianAPI:
    return FakeObsidianAPI(
        files={
            "A.md": "# A\n\nAlpha content",
            "Daily Notes/2025-01-01.md": "New year",
            "Projects/Project X.md": "# Project X",
        }
    )


@pytest.fixture
def client(remote_config: RemoteConfig, fake_api: FakeObsidianAPI) -> ObsidianClient:
    return ObsidianClient(remote_config, transport=fake_api.transport())


@pytest.fixture
def app_context(remote_config: RemoteConfig, fake_api: FakeObsidianAPI):
    return create_app_context(remote_config, transport=fake_api.transport())
