"""Error types for GitHub API failures."""

import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)


class GitHubAPIError(Exception):
    """A GitHub API call answered with an unexpected status.

    ``detail`` carries the parsed response body unchanged, typically a mapping
    with ``message`` and ``documentation_url``.
    """

    def __init__(self, status: int, detail: Any = None):
        self.status = status
        self.detail = detail
        super().__init__(f"GitHub API returned {status}: {self.message}")

    @property
    def message(self) -> str:
        if isinstance(self.detail, dict) and self.detail.get("message"):
            return str(self.detail["message"])
        if self.detail:
            return str(self.detail)
        return "no response body"

    @property
    def documentation_url(self) -> Optional[str]:
        if isinstance(self.detail, dict):
            return self.detail.get("documentation_url")
        return None


def is_error_body(body: Any) -> bool:
    """Return True when a failure body carries a usable ``message``.

    Only meaningful for non-2xx responses; any extra keys are kept.
    """
    return isinstance(body, dict) and isinstance(body.get("message"), str)
