"""Async HTTP client for the FinTrack backend.

One method per endpoint. Every method returns the raw status and body text;
interpreting them is left to the page that made the call.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import aiohttp

logger = logging.getLogger(__name__)

LOGIN_SENTINEL = "_login"


class ApiClientError(Exception):
    """Raised when the backend cannot be reached or the transfer fails."""


@dataclass
class ApiResponse:
    status: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class ApiClient:
    def __init__(self, base_url: str = "http://localhost:8000", timeout: float = 10.0) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session: Optional[aiohttp.ClientSession] = None

    async def _ensure_session(self) -> aiohttp.ClientSession:
        if self._session and not self._session.closed:
            return self._session
        self._session = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self.timeout))
        return self._session

    async def close(self) -> None:
        if self._session:
            await self._session.close()
        self._session = None

    # -----------------------------
    # Endpoints
    # -----------------------------
    async def signup(self, username: str, email: str, password: str) -> ApiResponse:
        return await self.req("POST", "/signup", json={"username": username, "email": email, "password": password})

    async def login(self, email: str, password: str) -> ApiResponse:
        # the backend tells login from signup by the sentinel username
        return await self.signup(LOGIN_SENTINEL, email, password)

    async def report_overview(self, email: str) -> ApiResponse:
        return await self.req("GET", "/report_overview", params={"email": email})

    async def report_details(self, email: str) -> ApiResponse:
        return await self.req("GET", "/report_details", params={"email": email})

    async def category_summary(self, email: str) -> ApiResponse:
        return await self.req("GET", "/category_summary", params={"email": email})

    async def create_category(self, category: Dict[str, Any]) -> ApiResponse:
        return await self.req("POST", "/category_create", json=category)

    async def delete_category(self, email: str, nickname: str) -> ApiResponse:
        return await self.req(
            "DELETE", "/delete_category", params={"email": email, "category_nickname": nickname}
        )

    async def account_summary(self, email: str) -> ApiResponse:
        return await self.req("GET", "/account_summary", params={"email": email})

    # -----------------------------
    # Internal helpers
    # -----------------------------
    async def req(self, method: str, path: str, json: Any = None, params: Optional[Dict[str, str]] = None) -> ApiResponse:
        session = await self._ensure_session()
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, path)
        try:
            async with session.request(method, url, json=json, params=params) as resp:
                text = await resp.text(errors="replace")
        except asyncio.TimeoutError as exc:
            raise ApiClientError(f"timed out after {self.timeout:g}s") from exc
        except (aiohttp.ClientError, OSError) as exc:
            raise ApiClientError(str(exc) or exc.__class__.__name__) from exc
        logger.info("%s %s -> %s", method, path, resp.status)
        return ApiResponse(status=resp.status, text=text)
