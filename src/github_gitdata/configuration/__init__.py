"""Configuration module for github-gitdata.

Configuration is a single pydantic model, ``GitHubConfig``, validated on
construction. The authentication token is the only secret; everything else
has a default suitable for api.github.com.

Usage examples:
    >>> from github_gitdata.configuration import load_config_from_env
    >>>
    >>> # Reads .env (if present) and GITHUB_* environment variables
    >>> config = load_config_from_env()
    >>>
    >>> # Explicit construction
    >>> config = GitHubConfig(token="ghp_...", api_url="https://ghe.example.com/api/v3")

Environment variable binding:
    ```bash
    export GITHUB_TOKEN=ghp_xxxxxxxxxxxx
    export GITHUB_API_URL=https://api.github.com
    export GITHUB_API_VERSION=2022-11-28
    export GITHUB_GITDATA_LOG_LEVEL=DEBUG
    ```

Configuration testing:
    >>> from github_gitdata.configuration import create_test_config
    >>> test_config = create_test_config(token="test_token")
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

from ..constants import GitHubAPIDefaults

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GitHubConfig(BaseModel):
    """Settings for talking to a GitHub REST API endpoint."""

    api_url: str = GitHubAPIDefaults.BASE_URL
    api_version: str = GitHubAPIDefaults.API_VERSION
    user_agent: str = GitHubAPIDefaults.USER_AGENT
    token: Optional[str] = None
    log_level: str = "INFO"

    @field_validator("api_url")
    @classmethod
    def _validate_api_url(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value.startswith(("https://", "http://")):
            raise ValueError("api_url must be an http(s) URL")
        return value

    @field_validator("token")
    @classmethod
    def _empty_token_is_none(cls, value: Optional[str]) -> Optional[str]:
        # An empty token must not turn into a bare "Bearer " header
        if value is None or not value.strip():
            return None
        return value.strip()

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return value

    def __repr__(self) -> str:
        token = "***" if self.token else None
        return (
            f"GitHubConfig(api_url={self.api_url!r}, api_version={self.api_version!r}, "
            f"user_agent={self.user_agent!r}, token={token!r}, log_level={self.log_level!r})"
        )


def load_config_from_env(env_file: Optional[Path] = None) -> GitHubConfig:
    """Build a GitHubConfig from a .env file and the process environment.

    Values already present in the environment win over the .env file.
    """
    if env_file is not None:
        if env_file.exists():
            load_dotenv(env_file)
            logger.info(f"Loaded environment variables from {env_file}")
        else:
            logger.warning(f"Environment file not found: {env_file}")
    else:
        load_dotenv()

    values: dict[str, Any] = {}
    env_map = {
        "token": "GITHUB_TOKEN",
        "api_url": "GITHUB_API_URL",
        "api_version": "GITHUB_API_VERSION",
        "log_level": "GITHUB_GITDATA_LOG_LEVEL",
    }
    for field_name, env_name in env_map.items():
        value = os.getenv(env_name)
        if value is not None:
            values[field_name] = value

    if not values.get("token"):
        logger.debug("No GitHub token found in environment (GITHUB_TOKEN)")
    return GitHubConfig(**values)


def create_test_config(**overrides: Any) -> GitHubConfig:
    """Configuration for tests; never reads the environment."""
    values: dict[str, Any] = {"token": "test_token", "log_level": "DEBUG"}
    values.update(overrides)
    return GitHubConfig(**values)


__all__ = [
    "GitHubConfig",
    "load_config_from_env",
    "create_test_config",
]
