"""Merge and comparison operations"""

import logging
from typing import Optional

from .client import GitHubClient
from .models import Comparison, MergeCommit
from .results import GitHubResult, parse_optional_result, parse_result

logger = logging.getLogger(__name__)


async def merge(
    client: GitHubClient,
    owner: str,
    repo: str,
    base: str,
    head: str,
    commit_message: Optional[str] = None,
    token: Optional[str] = None,
) -> GitHubResult[Optional[MergeCommit]]:
    """Merge ``head`` (branch name or commit sha) into the ``base`` branch.

    Ok(MergeCommit) when a commit was made, Ok(None) when ``base`` already
    contains ``head``; conflicts (409) and missing refs (404) are Err.
    """
    payload = {"base": base, "head": head}
    if commit_message:
        payload["commit_message"] = commit_message

    response = await client.post(f"/repos/{owner}/{repo}/merges", token=token, json=payload)
    result = parse_optional_result(response, MergeCommit)
    if result.ok and result.value is None:
        logger.info(f"Nothing to merge: {base} already contains {head}")
    return result


async def compare_commits(
    client: GitHubClient,
    owner: str,
    repo: str,
    base: str,
    head: str,
    token: Optional[str] = None,
) -> GitHubResult[Comparison]:
    """Compare two commit-ish references (ahead/behind counts, commits, files)"""
    response = await client.get(
        f"/repos/{owner}/{repo}/compare/{base}...{head}", token=token
    )
    return parse_result(response, Comparison)
