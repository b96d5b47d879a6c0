"""
HTTP client for the catalog API.

The caller owns the ``httpx.AsyncClient`` (base URL, transport, timeouts);
every method maps to one endpoint and raises ``ClientError`` on any non-2xx
response, carrying the server's message when it sent one.
"""
from typing import Any
from urllib.parse import quote

import httpx

JSON = dict[str, Any]


class ClientError(Exception):
    """A failed API call, with a message fit to show the user."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class CatalogClient:
    def __init__(self, http: httpx.AsyncClient):
        self.http = http

    async def _request(self, method: str, url: str, fallback: str, **kwargs) -> httpx.Response:
        try:
            response = await self.http.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise ClientError(f"{fallback}: {exc}") from exc
        if response.is_error:
            raise ClientError(_error_message(response, fallback), response.status_code)
        return response

    # Tools

    async def list_tools(self) -> list[JSON]:
        return (await self._request("GET", "/api/tools", "Failed to load tools")).json()

    async def get_tool(self, tool_id: int) -> JSON:
        return (await self._request("GET", f"/api/tools/{tool_id}", "Failed to load tool")).json()

    async def create_tool(self, payload: JSON) -> JSON:
        response = await self._request("POST", "/api/tools", "Failed to create tool", json=payload)
        return response.json()

    async def update_tool(self, tool_id: int, payload: JSON) -> JSON:
        response = await self._request(
            "PUT", f"/api/tools/{tool_id}", "Failed to update tool", json=payload
        )
        return response.json()

    async def delete_tool(self, tool_id: int) -> None:
        await self._request("DELETE", f"/api/tools/{tool_id}", "Failed to delete tool")

    # Details

    async def get_tool_detail_by_tool(self, tool_id: int) -> JSON | None:
        response = await self._request(
            "GET", f"/api/tool-details/by-tool/{tool_id}", "Failed to load details"
        )
        return response.json()

    async def get_tool_page(self, slug: str) -> JSON:
        # A slug that was never normalized must stay a single path segment
        path = f"/api/tool-details/{quote(slug, safe='')}"
        response = await self._request("GET", path, "Details not found")
        return response.json()

    async def upsert_tool_detail(self, payload: JSON) -> JSON:
        response = await self._request(
            "POST", "/api/tool-details", "Failed to save details", json=payload
        )
        return response.json()

    # Assets

    async def upload_image(self, content: bytes, filename: str) -> str:
        response = await self._request(
            "POST", "/api/upload", "Upload failed", files={"image": (filename, content)}
        )
        return response.json()["url"]


def _error_message(response: httpx.Response, fallback: str) -> str:
    try:
        body = response.json()
    except ValueError:
        return fallback
    if isinstance(body, dict) and body.get("detail"):
        return str(body["detail"])
    return fallback
