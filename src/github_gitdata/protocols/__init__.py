"""Protocol definitions for github-gitdata.

The HTTP capability is injected rather than ambient: every operation talks to
GitHub through a ``GitHubTransport``. Production code uses
``github_gitdata.github.client.AiohttpTransport``; tests substitute a double
that records requests and answers with canned or simulated responses.
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..github.client import GitHubRequest, GitHubResponse


@runtime_checkable
class GitHubTransport(Protocol):
    """Sends one HTTP request and returns the decoded response."""

    async def send(self, request: "GitHubRequest") -> "GitHubResponse":
        """
        Perform exactly one HTTP exchange.

        Args:
            request: Fully built request (absolute URL, headers, JSON body)

        Returns:
            Status code and decoded JSON body (``None`` when the body is empty)

        Raises:
            Any network-level error of the underlying client, unchanged.
        """
        ...

    async def close(self) -> None:
        """Release any connection resources held by the transport."""
        ...


__all__ = [
    "GitHubTransport",
]
