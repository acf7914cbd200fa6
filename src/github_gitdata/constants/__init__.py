"""Constants module for github-gitdata.

Constants are organized into logical groups:
    GitHubAPIDefaults: endpoint, media type and API version defaults
    GitObjectDefaults: fixed values used when writing git objects

Usage examples:
    >>> from github_gitdata.constants import GitHubAPIDefaults
    >>> GitHubAPIDefaults.BASE_URL
    'https://api.github.com'
"""

from typing import Final


class GitHubAPIDefaults:
    """Default values for GitHub REST API requests."""

    BASE_URL: Final[str] = "https://api.github.com"
    API_VERSION: Final[str] = "2022-11-28"
    ACCEPT: Final[str] = "application/vnd.github+json"
    USER_AGENT: Final[str] = "github-gitdata/0.1.0"


class GitObjectDefaults:
    """Values the git data operations write on the caller's behalf."""

    # Regular, non-executable file
    BLOB_FILE_MODE: Final[str] = "100644"
    BLOB_TYPE: Final[str] = "blob"
    CONTENT_ENCODING: Final[str] = "base64"
    BRANCH_REF_PREFIX: Final[str] = "refs/heads/"
    # Reference deletion answers with no body
    DELETE_SUCCESS_STATUS: Final[int] = 204


__all__ = [
    "GitHubAPIDefaults",
    "GitObjectDefaults",
]
