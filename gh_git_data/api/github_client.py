"""Shared asynchronous GitHub API client."""

import logging
from typing import Any, Dict, Optional

import httpx

from .json_codec import JsonCodec
from .rate_limiter import RateLimiter
from ..utils.errors import ApiError, TransportError
from ..config import (
    DEFAULT_TIMEOUT_SECONDS,
    GITHUB_API_VERSION,
    GITHUB_MEDIA_TYPE,
    USER_AGENT,
    get_base_url,
    get_token,
)

logger = logging.getLogger(__name__)


class GitHubClient:
    """
    Async HTTP client shared by the GitHub sub-clients.

    Owns a single ``httpx.AsyncClient`` (and with it the connection pool),
    applies authentication and API version headers, and turns transport
    failures and non-2xx responses into library exceptions.

    Example:
        async with GitHubClient() as github:
            refs = ReferenceClient(github, "owner", "repo")
            branch = await refs.get_branch_reference("main")
    """

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        rate_limiter: Optional[RateLimiter] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize GitHub client.

        Args:
            token: GitHub token (defaults to GH_GIT_DATA_TOKEN or GITHUB_TOKEN env var)
            base_url: API root (defaults to GH_GIT_DATA_API_URL or api.github.com)
            timeout: Request timeout in seconds
            rate_limiter: Optional rate limiter instance
            transport: Optional httpx transport, e.g. ``httpx.MockTransport``
        """
        self.token = token or get_token()
        self.base_url = (base_url or get_base_url()).rstrip("/")
        self.timeout = timeout
        self.rate_limiter = rate_limiter or RateLimiter()
        self._transport = transport
        self._json = JsonCodec()
        self._client: Optional[httpx.AsyncClient] = None

    def json(self) -> JsonCodec:
        """Codec used for request bodies and responses."""
        return self._json

    def _headers(self) -> Dict[str, str]:
        """Generate standard headers for API calls."""
        headers = {
            "Accept": GITHUB_MEDIA_TYPE,
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
            "User-Agent": USER_AGENT,
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create reusable HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers=self._headers(),
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        """Close HTTP client. Call this when shutting down."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def _send(
        self, method: str, path: str, body: Optional[bytes] = None
    ) -> httpx.Response:
        """
        Send a request and check its status.

        Args:
            method: HTTP method
            path: API path, e.g. ``/repos/owner/repo/git/refs``
            body: Optional encoded JSON payload

        Returns:
            Successful response
        """
        await self.rate_limiter.wait_if_needed()

        headers = {"Content-Type": "application/json"} if body is not None else None
        logger.debug("%s %s", method, path)
        try:
            response = await self._get_client().request(
                method, path, content=body, headers=headers
            )
        except httpx.TransportError as e:
            raise TransportError(f"{method} {path} failed: {e}") from e

        logger.debug("%s %s -> %s", method, path, response.status_code)
        if not response.is_success:
            raise ApiError(response.status_code, response.text, method, path)
        return response

    async def get(self, path: str, response_type: Any) -> Any:
        """GET ``path`` and decode the body into ``response_type``."""
        response = await self._send("GET", path)
        return self._json.from_json(response.content, response_type)

    async def post(self, path: str, body: bytes, response_type: Any) -> Any:
        """POST an encoded JSON ``body`` and decode the response."""
        response = await self._send("POST", path, body)
        return self._json.from_json(response.content, response_type)

    async def delete(self, path: str) -> None:
        """DELETE ``path``; any response body is ignored."""
        await self._send("DELETE", path)
