"""Client for the Roblox Open Cloud group-management API."""

import asyncio
import json
from typing import Any
from urllib.parse import quote

import aiohttp
from fastapi import status

from src.api.core.constants import CLOUD_API_KEY_HEADER
from src.api.core.exceptions.base import RankRelayException
from src.api.core.messages import MessageCode
from src.utils.logger import get_logger
from src.utils.settings.cloud import CloudSettings

logger = get_logger(__name__)


class CloudApiError(RankRelayException):
    """Upstream call failed, either with a non-2xx status or in transport."""

    def __init__(self, status_code: int, message: str, payload: Any = None):
        self.payload = payload
        super().__init__(
            MessageCode.EXTERNAL_SERVICE_ERROR,
            status_code,
            {"status": status_code, "payload": payload},
            message=message,
        )


def _parse_body(text: str) -> Any:
    """Parse a response body, treating empty or non-JSON bodies as absent."""
    if not text or not text.strip():
        return None
    try:
        return json.loads(text)
    except ValueError:
        return None


def _segment(value: Any) -> str:
    """Percent-encode one path segment so ids cannot change the endpoint."""
    return quote(str(value), safe="")


def build_error_message(payload: Any, fallback: str) -> str:
    """Join the structured `errors` entries of a payload as "CODE: message"."""
    errors = payload.get("errors") if isinstance(payload, dict) else None
    if isinstance(errors, list):
        parts = [
            f"{error.get('code')}: {error.get('message')}"
            for error in errors
            if isinstance(error, dict)
        ]
        if parts:
            return " | ".join(parts)
    return fallback


class CloudClient:
    """Makes authenticated, single-attempt calls to Open Cloud."""

    def __init__(self, settings: CloudSettings):
        self.base_url = settings.CLOUD_BASE_URL
        self.timeout = aiohttp.ClientTimeout(total=settings.CLOUD_TIMEOUT_SECONDS)
        self._api_key = settings.ROBLOX_API_KEY.get_secret_value()

    def _resolve_url(self, url: str) -> str:
        if url.startswith(("http://", "https://")):
            return url
        return f"{self.base_url}/{url.lstrip('/')}"

    async def call(
        self,
        url: str,
        method: str = "GET",
        headers: dict[str, str] | None = None,
        body: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Issue one request and return the parsed body, or {} when there is none.

        Raises CloudApiError for any non-2xx status, carrying the status code,
        the joined upstream error list (or the reason phrase) and the raw
        payload. Transport failures surface as a 502 CloudApiError.
        """
        request_headers = {CLOUD_API_KEY_HEADER: self._api_key}
        if headers:
            request_headers.update(headers)
        query = {k: str(v) for k, v in (params or {}).items() if v is not None}
        target = self._resolve_url(url)

        async with aiohttp.ClientSession(timeout=self.timeout) as session:
            try:
                async with session.request(
                    method,
                    target,
                    headers=request_headers,
                    params=query or None,
                    json=body,
                ) as response:
                    raw = await response.read()
                    payload = _parse_body(raw.decode("utf-8", errors="replace"))

                    if not 200 <= response.status < 300:
                        fallback = response.reason or f"HTTP {response.status}"
                        message = build_error_message(payload, fallback)
                        logger.warning(
                            "Cloud API call failed",
                            method=method,
                            url=target,
                            status_code=response.status,
                            error=message,
                        )
                        raise CloudApiError(response.status, message, payload)

                    return payload if payload is not None else {}
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                logger.error(
                    "Cloud API unreachable", method=method, url=target, error=str(e)
                )
                raise CloudApiError(
                    status.HTTP_502_BAD_GATEWAY,
                    f"Cloud API unreachable: {str(e) or type(e).__name__}",
                ) from e

    async def list_roles(self, group_id: int | str, max_page_size: int) -> Any:
        return await self.call(
            f"groups/{_segment(group_id)}/roles",
            params={"maxPageSize": max_page_size},
        )

    async def list_memberships(
        self,
        group_id: int | str,
        max_page_size: int,
        page_token: str | None = None,
    ) -> Any:
        return await self.call(
            f"groups/{_segment(group_id)}/memberships",
            params={"maxPageSize": max_page_size, "pageToken": page_token},
        )

    async def update_membership_role(
        self, group_id: int | str, membership_id: str, role_id: int | str
    ) -> Any:
        """PATCH a membership so it points at groups/{group}/roles/{role}."""
        return await self.call(
            f"groups/{_segment(group_id)}/memberships/{_segment(membership_id)}",
            method="PATCH",
            body={"role": f"groups/{group_id}/roles/{role_id}"},
        )
