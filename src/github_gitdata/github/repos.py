"""Repository and branch operations"""

import logging
from typing import Optional

from ..constants import GitObjectDefaults
from ..error_handling import GitHubAPIError
from .client import GitHubClient
from .models import Branch, Reference, Repository
from .results import GitHubResult, parse_result

logger = logging.getLogger(__name__)


async def create_repository(
    client: GitHubClient,
    name: str,
    description: Optional[str] = None,
    is_private: bool = False,
    token: Optional[str] = None,
) -> GitHubResult[Repository]:
    """Create a repository for the authenticated user.

    The repository is auto-initialized with a first commit: git data writes
    (blobs, trees) against an empty repository are rejected with 409.
    """
    payload = {
        "name": name,
        "private": is_private,
        "auto_init": True,
    }
    if description is not None:
        payload["description"] = description

    response = await client.post("/user/repos", token=token, json=payload)
    return parse_result(response, Repository)


async def get_reference(
    client: GitHubClient,
    owner: str,
    repo: str,
    branch_name: str,
    token: Optional[str] = None,
) -> GitHubResult[Reference]:
    """Get the commit sha that refs/heads/<branch_name> points to"""
    response = await client.get(
        f"/repos/{owner}/{repo}/git/ref/heads/{branch_name}", token=token
    )
    return parse_result(response, Reference)


async def get_branch(
    client: GitHubClient,
    owner: str,
    repo: str,
    branch_name: str,
    token: Optional[str] = None,
) -> GitHubResult[Branch]:
    """Get branch metadata, including the tip commit and its parents"""
    response = await client.get(
        f"/repos/{owner}/{repo}/branches/{branch_name}", token=token
    )
    return parse_result(response, Branch)


async def create_branch(
    client: GitHubClient,
    owner: str,
    repo: str,
    branch_name: str,
    sha: str,
    token: Optional[str] = None,
) -> GitHubResult[Reference]:
    """Create refs/heads/<branch_name> pointing at ``sha``"""
    payload = {
        "ref": f"{GitObjectDefaults.BRANCH_REF_PREFIX}{branch_name}",
        "sha": sha,
    }
    response = await client.post(
        f"/repos/{owner}/{repo}/git/refs", token=token, json=payload
    )
    return parse_result(response, Reference)


async def delete_branch(
    client: GitHubClient,
    owner: str,
    repo: str,
    branch_name: str,
    token: Optional[str] = None,
) -> None:
    """Delete a branch.

    Raises:
        GitHubAPIError: for any status other than 204, with the parsed
            response body as ``detail``.
    """
    response = await client.delete(
        f"/repos/{owner}/{repo}/git/refs/heads/{branch_name}", token=token
    )
    if response.status != GitObjectDefaults.DELETE_SUCCESS_STATUS:
        raise GitHubAPIError(response.status, response.body)
    logger.info(f"Deleted branch {branch_name} in {owner}/{repo}")
