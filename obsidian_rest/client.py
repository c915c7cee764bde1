"""Async client for the Obsidian Local REST API."""

from __future__ import annotations

import json
import logging
from typing import Any, Optional, Sequence
from urllib.parse import quote

import httpx

from obsidian_rest.constants import (
    DEFAULT_CONTEXT_LENGTH,
    JSONLOGIC_CONTENT_TYPE,
    MARKDOWN_CONTENT_TYPE,
)
from obsidian_rest.data_models import BatchFileResult, RemoteConfig
from obsidian_rest.errors import ObsidianAPIError, ObsidianError, ObsidianTransportError
from obsidian_rest.models.base import validate_vault_path

logger = logging.getLogger(__name__)

# Characters JavaScript's encodeURIComponent leaves untouched beyond quote()'s defaults
_TARGET_SAFE_CHARS = "!*'()"


def encode_target(target: str) -> str:
    """Percent-encode a patch target for the ``Target`` header."""
    return quote(target, safe=_TARGET_SAFE_CHARS)


def _vault_path(path: str, directory: bool = False) -> str:
    encoded = quote(path, safe="/")
    return f"/vault/{encoded}/" if directory else f"/vault/{encoded}"


class ObsidianClient:
    """Thin wrapper over the Local REST API endpoints.

    Every method issues exactly one request (except the batch read, which
    issues one per file, sequentially). Error statuses raise
    :class:`ObsidianAPIError`; transport failures raise
    :class:`ObsidianTransportError`. Nothing is retried.
    """

    def __init__(
        self,
        config: RemoteConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.config.api_key}"}

    def _http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.config.base_url,
            headers=self._headers(),
            verify=self.config.verify_ssl,
            timeout=self.config.timeout,
            transport=self._transport,
        )

    @staticmethod
    def _api_error(response: httpx.Response) -> ObsidianAPIError:
        try:
            body = response.json()
        except ValueError:
            body = None
        if not isinstance(body, dict):
            body = {}

        code = body.get("errorCode") or -1
        message = body.get("message") or "<unknown>"
        return ObsidianAPIError(code, message, status_code=response.status_code)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any]] = None,
        content: Optional[str] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> httpx.Response:
        logger.debug("%s %s", method, path)
        try:
            async with self._http_client() as client:
                response = await client.request(
                    method,
                    path,
                    params=params,
                    content=content.encode("utf-8") if content is not None else None,
                    headers=headers,
                )
        except httpx.HTTPError as exc:
            reason = str(exc) or exc.__class__.__name__
            logger.warning("%s %s failed: %s", method, path, reason)
            raise ObsidianTransportError(reason) from exc

        if response.status_code >= 400:
            error = self._api_error(response)
            logger.warning("%s %s returned HTTP %s: %s", method, path, response.status_code, error)
            raise error
        return response

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            logger.warning("Malformed JSON body from %s: %s", response.request.url.path, exc)
            raise ObsidianAPIError(-1, "<unknown>", response.status_code) from exc

    def _files(self, response: httpx.Response) -> list[str]:
        body = self._json(response)
        if not isinstance(body, dict):
            raise ObsidianAPIError(-1, "<unknown>", response.status_code)
        return body.get("files", [])

    async def list_files_in_vault(self) -> list[str]:
        response = await self._request("GET", "/vault/")
        return self._files(response)

    async def list_files_in_dir(self, dirpath: str) -> list[str]:
        """List a directory. Empty directories are not reported by the API."""
        response = await self._request("GET", _vault_path(dirpath, directory=True))
        return self._files(response)

    async def get_file_contents(self, filepath: str) -> str:
        response = await self._request("GET", _vault_path(filepath))
        return response.text

    async def fetch_batch_file_contents(self, filepaths: Sequence[str]) -> list[BatchFileResult]:
        """Read each file in order, capturing per-file failures.

        Files are fetched one after another. A failing file yields a
        :class:`BatchFileResult` carrying the error message and the remaining
        files are still read. Invalid paths fail the same way, without a
        request being made for them.
        """
        results: list[BatchFileResult] = []
        for filepath in filepaths:
            try:
                content = await self.get_file_contents(validate_vault_path(filepath))
            except ValueError as exc:
                logger.info("Batch read skipped invalid path '%s': %s", filepath, exc)
                results.append(BatchFileResult(filepath=filepath, error=str(exc)))
                continue
            except ObsidianError as exc:
                logger.info("Batch read of '%s' failed: %s", filepath, exc)
                results.append(BatchFileResult(filepath=filepath, error=str(exc)))
            else:
                results.append(BatchFileResult(filepath=filepath, content=content))
        return results

    async def get_batch_file_contents(self, filepaths: Sequence[str]) -> str:
        results = await self.fetch_batch_file_contents(filepaths)
        return "".join(result.render() for result in results)

    # ------------------------------------------------------------------
    # Search operations
    # ------------------------------------------------------------------

    async def search(self, query: str, context_length: int = DEFAULT_CONTEXT_LENGTH) -> Any:
        response = await self._request(
            "POST",
            "/search/simple/",
            params={"query": query, "contextLength": context_length},
        )
        return self._json(response)

    async def search_json(self, query: dict[str, Any]) -> Any:
        """Run a JsonLogic query against the vault index."""
        response = await self._request(
            "POST",
            "/search/",
            content=json.dumps(query),
            headers={"Content-Type": JSONLOGIC_CONTENT_TYPE},
        )
        return self._json(response)

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    async def append_content(self, filepath: str, content: str) -> None:
        await self._request(
            "POST",
            _vault_path(filepath),
            content=content,
            headers={"Content-Type": MARKDOWN_CONTENT_TYPE},
        )

    async def patch_content(
        self,
        filepath: str,
        operation: str,
        target_type: str,
        target: str,
        content: str,
    ) -> None:
        """Insert or replace content relative to a heading, block or frontmatter field.

        Target resolution is done entirely by the REST API; this only passes the
        instruction along in the ``Operation``, ``Target-Type`` and ``Target``
        headers.
        """
        await self._request(
            "PATCH",
            _vault_path(filepath),
            content=content,
            headers={
                "Content-Type": MARKDOWN_CONTENT_TYPE,
                "Operation": operation,
                "Target-Type": target_type,
                "Target": encode_target(target),
            },
        )
