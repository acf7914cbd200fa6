"""Git data primitives: blobs, trees, commits and references

These compose into a commit built without a working directory::

    blob = (await create_blob(client, owner, repo, "hello")).unwrap()
    tree = (await create_tree(client, owner, repo, [TreeBlob(path="a.txt", sha=blob.sha)],
                              base_tree_sha=base_tree)).unwrap()
    commit = (await create_commit(client, owner, repo, "init", tree.sha, [parent])).unwrap()
    await update_reference(client, owner, repo, "main", commit.sha)

Nothing here is transactional: a failure midway leaves unreferenced objects
behind, which the remote garbage-collects.
"""

import base64
import logging
from typing import Any, Iterable, List, Mapping, Optional, Union

from ..constants import GitObjectDefaults
from .client import GitHubClient
from .models import Blob, GitCommit, Reference, Tree, TreeBlob
from .results import GitHubResult, parse_result

logger = logging.getLogger(__name__)


def encode_content(content: Union[str, bytes]) -> str:
    """Base64 text for ``content``; str is encoded as UTF-8 first."""
    if isinstance(content, str):
        content = content.encode("utf-8")
    return base64.b64encode(content).decode("ascii")


async def create_blob(
    client: GitHubClient,
    owner: str,
    repo: str,
    content: Union[str, bytes],
    token: Optional[str] = None,
) -> GitHubResult[Blob]:
    """Create a blob; identical content always yields the same sha"""
    payload = {
        "content": encode_content(content),
        "encoding": GitObjectDefaults.CONTENT_ENCODING,
    }
    response = await client.post(
        f"/repos/{owner}/{repo}/git/blobs", token=token, json=payload
    )
    return parse_result(response, Blob)


async def get_blob(
    client: GitHubClient,
    owner: str,
    repo: str,
    sha: str,
    token: Optional[str] = None,
) -> GitHubResult[Blob]:
    """Get a blob with its base64 content"""
    response = await client.get(f"/repos/{owner}/{repo}/git/blobs/{sha}", token=token)
    return parse_result(response, Blob)


def _tree_entries(blobs: Iterable[Union[TreeBlob, Mapping[str, Any]]]) -> List[dict]:
    entries = []
    for blob in blobs:
        item = blob if isinstance(blob, TreeBlob) else TreeBlob.model_validate(blob)
        entries.append(
            {
                "path": item.path,
                "sha": item.sha,
                "mode": GitObjectDefaults.BLOB_FILE_MODE,
                "type": GitObjectDefaults.BLOB_TYPE,
            }
        )
    return entries


async def create_tree(
    client: GitHubClient,
    owner: str,
    repo: str,
    blobs: Iterable[Union[TreeBlob, Mapping[str, Any]]],
    base_tree_sha: Optional[str] = None,
    token: Optional[str] = None,
) -> GitHubResult[Tree]:
    """Create a tree of regular files (mode 100644).

    With ``base_tree_sha`` the new entries are layered over the base tree:
    paths not listed are inherited, listed paths are replaced.
    """
    payload: dict = {"tree": _tree_entries(blobs)}
    if base_tree_sha:
        payload["base_tree"] = base_tree_sha

    response = await client.post(
        f"/repos/{owner}/{repo}/git/trees", token=token, json=payload
    )
    return parse_result(response, Tree)


async def get_tree(
    client: GitHubClient,
    owner: str,
    repo: str,
    ref: str,
    recursive: bool = False,
    token: Optional[str] = None,
) -> GitHubResult[Tree]:
    """Get a tree by tree sha, commit sha or branch name.

    Large trees come back with ``truncated=True``; fetching the rest is left
    to the caller.
    """
    params = {"recursive": "1"} if recursive else None
    response = await client.get(
        f"/repos/{owner}/{repo}/git/trees/{ref}", token=token, params=params
    )
    result = parse_result(response, Tree)
    if result.ok and result.value.truncated:
        logger.info(f"Tree {ref} in {owner}/{repo} was truncated by GitHub")
    return result


async def create_commit(
    client: GitHubClient,
    owner: str,
    repo: str,
    message: str,
    tree_sha: str,
    parent_shas: Optional[List[str]] = None,
    token: Optional[str] = None,
) -> GitHubResult[GitCommit]:
    """Create a commit object; no parents is only valid for a root commit"""
    payload: dict = {"message": message, "tree": tree_sha}
    if parent_shas is not None:
        payload["parents"] = list(parent_shas)

    response = await client.post(
        f"/repos/{owner}/{repo}/git/commits", token=token, json=payload
    )
    return parse_result(response, GitCommit)


async def update_reference(
    client: GitHubClient,
    owner: str,
    repo: str,
    branch_name: str,
    commit_sha: str,
    token: Optional[str] = None,
) -> GitHubResult[Reference]:
    """Move refs/heads/<branch_name> to ``commit_sha``.

    Never forces: GitHub rejects the update unless it is a fast-forward.
    """
    payload = {"sha": commit_sha, "force": False}
    response = await client.patch(
        f"/repos/{owner}/{repo}/git/refs/heads/{branch_name}", token=token, json=payload
    )
    return parse_result(response, Reference)
