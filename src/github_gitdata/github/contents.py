"""File content operations (the contents API)"""

import logging
from typing import Optional, Union

from .client import GitHubClient
from .git_data import encode_content
from .models import FileCommit, FileContent, GitHubErrorBody
from .results import Err, GitHubResult, parse_result

logger = logging.getLogger(__name__)


async def get_file(
    client: GitHubClient,
    owner: str,
    repo: str,
    path: str,
    branch_name: Optional[str] = None,
    token: Optional[str] = None,
) -> GitHubResult[FileContent]:
    """Get a file's metadata and base64 content, at the default branch unless given

    A directory path answers 200 with a listing; that comes back as an Err
    whose ``entries`` hold the listing.
    """
    params = {"ref": branch_name} if branch_name else None
    response = await client.get(
        f"/repos/{owner}/{repo}/contents/{path}", token=token, params=params
    )
    if response.ok and isinstance(response.body, list):
        logger.info(f"{path} in {owner}/{repo} is a directory, not a file")
        error = GitHubErrorBody(message=f"{path} is a directory", entries=response.body)
        return Err(error=error, status=response.status)
    return parse_result(response, FileContent)


async def create_or_update_file(
    client: GitHubClient,
    file_content: Union[str, bytes],
    commit_message: str,
    *,
    owner: str,
    repo: str,
    path: str,
    sha: Optional[str] = None,
    branch_name: Optional[str] = None,
    token: Optional[str] = None,
) -> GitHubResult[FileCommit]:
    """Create a file, or overwrite it when ``sha`` is its current blob sha.

    A missing or stale ``sha`` for an existing file comes back as an Err.
    """
    payload = {
        "message": commit_message,
        "content": encode_content(file_content),
    }
    if sha:
        payload["sha"] = sha
    if branch_name:
        payload["branch"] = branch_name

    response = await client.put(
        f"/repos/{owner}/{repo}/contents/{path}", token=token, json=payload
    )
    return parse_result(response, FileCommit)


async def delete_file(
    client: GitHubClient,
    commit_message: str,
    *,
    owner: str,
    repo: str,
    path: str,
    sha: str,
    branch_name: Optional[str] = None,
    token: Optional[str] = None,
) -> GitHubResult[FileCommit]:
    """Delete a file in a single commit; ``sha`` is the file's current blob sha"""
    payload = {"message": commit_message, "sha": sha}
    if branch_name:
        payload["branch"] = branch_name

    response = await client.delete(
        f"/repos/{owner}/{repo}/contents/{path}", token=token, json=payload
    )
    return parse_result(response, FileCommit)
