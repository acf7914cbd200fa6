"""GitHub API client and HTTP transport"""

import json
import logging
import re
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlencode

import aiohttp

from ..configuration import GitHubConfig, load_config_from_env
from ..constants import GitHubAPIDefaults
from ..logging_config import set_library_log_level
from ..protocols import GitHubTransport

logger = logging.getLogger(__name__)


@dataclass
class GitHubRequest:
    """One outgoing API call."""

    method: str
    url: str
    headers: Dict[str, str]
    json: Optional[Dict[str, Any]] = None


@dataclass
class GitHubResponse:
    """Status and decoded JSON body of one API call."""

    status: int
    body: Any = None
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


def decode_body(text: str) -> Any:
    """Decode a response body; empty bodies become None."""
    if not text.strip():
        return None
    try:
        return json.loads(text)
    except ValueError:
        # HTML error pages from proxies and the like
        return {"message": text}


class AiohttpTransport:
    """GitHubTransport backed by an aiohttp ClientSession."""

    def __init__(self, session: aiohttp.ClientSession):
        self.session = session

    async def send(self, request: GitHubRequest) -> GitHubResponse:
        async with self.session.request(
            request.method,
            request.url,
            headers=request.headers,
            json=request.json,
        ) as response:
            text = await response.text()
            return GitHubResponse(
                status=response.status,
                body=decode_body(text),
                headers=dict(response.headers),
            )

    async def close(self) -> None:
        if not self.session.closed:
            await self.session.close()


@dataclass
class GitHubClient:
    """GitHub REST API client over an injected transport.

    ``token`` is the default credential; every call may pass its own token,
    which takes precedence. With no token the request is sent
    unauthenticated.
    """

    transport: GitHubTransport
    token: Optional[str] = None
    base_url: str = GitHubAPIDefaults.BASE_URL
    api_version: str = GitHubAPIDefaults.API_VERSION
    user_agent: str = GitHubAPIDefaults.USER_AGENT

    def __post_init__(self):
        """Validate GitHub token format"""
        self.base_url = self.base_url.rstrip("/")
        if self.token and not self._is_valid_github_token(self.token):
            logger.warning("⚠️ GitHub token format appears invalid")

    @staticmethod
    def _is_valid_github_token(token: str) -> bool:
        """Validate GitHub token format"""
        if not token or len(token.strip()) == 0:
            return False

        patterns = [
            r"^ghp_[a-zA-Z0-9]{36}$",  # Personal access tokens (classic)
            r"^github_pat_[a-zA-Z0-9_]{82}$",  # Fine-grained personal access tokens
            r"^gho_[a-zA-Z0-9]{36}$",  # OAuth access tokens
            r"^ghs_[a-zA-Z0-9]{36}$",  # GitHub App installation tokens
            r"^ghu_[a-zA-Z0-9]{36}$",  # GitHub App user tokens
        ]

        return any(re.match(pattern, token.strip()) for pattern in patterns)

    def build_headers(self, token: Optional[str] = None) -> Dict[str, str]:
        """Request headers; authorization only when a token is available."""
        headers = {
            "accept": GitHubAPIDefaults.ACCEPT,
            "X-GitHub-Api-Version": self.api_version,
            "User-Agent": self.user_agent,
        }
        resolved = token if token is not None else self.token
        if resolved:
            headers["authorization"] = f"Bearer {resolved}"
        return headers

    def build_url(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Absolute URL for ``endpoint``; path segments are used verbatim."""
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        if params:
            url = f"{url}?{urlencode(params)}"
        return url

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        token: Optional[str] = None,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> GitHubResponse:
        """Make exactly one request to the GitHub API"""
        request = GitHubRequest(
            method=method,
            url=self.build_url(endpoint, params),
            headers=self.build_headers(token),
            json=json,
        )
        context = {"method": method, "endpoint": endpoint}
        logger.debug(f"GitHub request {method} {endpoint}", extra=context)

        started = time.monotonic()
        response = await self.transport.send(request)
        duration_ms = round((time.monotonic() - started) * 1000, 2)

        context.update(status=response.status, duration_ms=duration_ms)
        if response.ok:
            logger.debug(
                f"GitHub response {response.status} for {method} {endpoint}",
                extra=context,
            )
        else:
            logger.warning(
                f"GitHub returned {response.status} for {method} {endpoint}",
                extra=context,
            )
        return response

    async def get(self, endpoint: str, **kwargs) -> GitHubResponse:
        """Make GET request to GitHub API"""
        return await self.request("GET", endpoint, **kwargs)

    async def post(self, endpoint: str, **kwargs) -> GitHubResponse:
        """Make POST request to GitHub API"""
        return await self.request("POST", endpoint, **kwargs)

    async def patch(self, endpoint: str, **kwargs) -> GitHubResponse:
        """Make PATCH request to GitHub API"""
        return await self.request("PATCH", endpoint, **kwargs)

    async def put(self, endpoint: str, **kwargs) -> GitHubResponse:
        """Make PUT request to GitHub API"""
        return await self.request("PUT", endpoint, **kwargs)

    async def delete(self, endpoint: str, **kwargs) -> GitHubResponse:
        """Make DELETE request to GitHub API"""
        return await self.request("DELETE", endpoint, **kwargs)

    async def close(self) -> None:
        await self.transport.close()

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()


def get_github_client(config: Optional[GitHubConfig] = None) -> GitHubClient:
    """Get GitHub client configured from ``config`` or the environment."""
    if config is None:
        config = load_config_from_env()
    set_library_log_level(config.log_level)

    if config.token:
        logger.debug("✅ GitHub token configured")
    else:
        logger.debug("🔍 No GitHub token configured, requests are unauthenticated")

    # Caller is responsible for closing (client.close() or async with)
    session = aiohttp.ClientSession()
    return GitHubClient(
        transport=AiohttpTransport(session),
        token=config.token,
        base_url=config.api_url,
        api_version=config.api_version,
        user_agent=config.user_agent,
    )
