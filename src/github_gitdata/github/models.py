"""Pydantic models for GitHub REST API payloads

Each response model keeps unknown fields (``extra="allow"``) so nothing the
API returns is lost; only the fields callers rely on are declared.
"""

import base64
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict


class GitHubModel(BaseModel):
    model_config = ConfigDict(extra="allow")


class GitHubErrorBody(GitHubModel):
    """The documented error schema: message plus a documentation link."""

    message: str
    documentation_url: Optional[str] = None
    status: Optional[str] = None
    errors: Optional[List[Any]] = None


# Input models


class TreeBlob(BaseModel):
    """A (path, blob sha) pair to place in a new tree."""

    path: str
    sha: str


# Repositories and references


class Repository(GitHubModel):
    id: int
    node_id: Optional[str] = None
    name: str
    full_name: str
    private: bool
    html_url: Optional[str] = None
    description: Optional[str] = None
    visibility: Optional[str] = None
    default_branch: Optional[str] = None
    blobs_url: Optional[str] = None


class GitObject(GitHubModel):
    sha: str
    type: Optional[str] = None
    url: Optional[str] = None


class Reference(GitHubModel):
    """A named pointer, ``ref`` takes the form ``refs/heads/<branch>``."""

    ref: str
    node_id: Optional[str] = None
    url: Optional[str] = None
    object: GitObject

    @property
    def sha(self) -> str:
        return self.object.sha


# Commits


class GitActor(GitHubModel):
    name: Optional[str] = None
    email: Optional[str] = None
    date: Optional[str] = None


class Verification(GitHubModel):
    verified: bool = False
    reason: Optional[str] = None
    signature: Optional[str] = None
    payload: Optional[str] = None


class TreeRef(GitHubModel):
    sha: str
    url: Optional[str] = None


class ParentCommit(GitHubModel):
    sha: str
    url: Optional[str] = None
    html_url: Optional[str] = None


class CommitDetails(GitHubModel):
    """The ``commit`` object nested inside branch, merge and compare payloads."""

    message: str
    tree: TreeRef
    url: Optional[str] = None
    author: Optional[GitActor] = None
    committer: Optional[GitActor] = None
    comment_count: Optional[int] = None
    verification: Optional[Verification] = None


class CommitSummary(GitHubModel):
    """A commit as the commits/branches/merges endpoints report it."""

    sha: str
    node_id: Optional[str] = None
    url: Optional[str] = None
    html_url: Optional[str] = None
    commit: CommitDetails
    parents: List[ParentCommit] = []


class GitCommit(GitHubModel):
    """A commit object from the git data API."""

    sha: str
    node_id: Optional[str] = None
    url: Optional[str] = None
    html_url: Optional[str] = None
    message: str
    tree: TreeRef
    parents: List[ParentCommit] = []
    author: Optional[GitActor] = None
    committer: Optional[GitActor] = None
    verification: Optional[Verification] = None


class Branch(GitHubModel):
    name: str
    commit: CommitSummary
    protected: Optional[bool] = None


# Blobs and trees


class Blob(GitHubModel):
    """Blob identity; ``content`` is only present when the blob is read back."""

    sha: str
    url: Optional[str] = None
    size: Optional[int] = None
    content: Optional[str] = None
    encoding: Optional[str] = None

    def decoded(self) -> bytes:
        if self.content is None:
            raise ValueError(f"Blob {self.sha} carries no content")
        if self.encoding not in (None, "base64"):
            return self.content.encode("utf-8")
        return base64.b64decode(self.content)


class TreeEntry(GitHubModel):
    path: str
    mode: str
    type: str
    sha: str
    size: Optional[int] = None
    url: Optional[str] = None


class Tree(GitHubModel):
    sha: str
    url: Optional[str] = None
    truncated: bool = False
    tree: List[TreeEntry] = []

    def entry(self, path: str) -> Optional[TreeEntry]:
        for item in self.tree:
            if item.path == path:
                return item
        return None


# Contents API


class FileContent(GitHubModel):
    type: str = "file"
    name: str
    path: str
    sha: str
    size: Optional[int] = None
    url: Optional[str] = None
    html_url: Optional[str] = None
    git_url: Optional[str] = None
    download_url: Optional[str] = None
    content: Optional[str] = None
    encoding: Optional[str] = None

    def decoded(self) -> bytes:
        if self.content is None:
            raise ValueError(f"{self.path} carries no content")
        # Files over 1 MB come back with encoding "none" and empty content
        if self.encoding not in (None, "base64") or (not self.content and (self.size or 0) > 0):
            raise ValueError(
                f"{self.path} content was not returned inline (encoding={self.encoding!r}); "
                f"read it with get_blob({self.sha!r})"
            )
        # GitHub wraps base64 at 60 columns; b64decode drops the newlines
        return base64.b64decode(self.content)


class FileCommit(GitHubModel):
    """Response of a contents write: the new file (None on delete) and commit."""

    content: Optional[FileContent] = None
    commit: GitCommit


# Merges and comparisons


class MergeCommit(CommitSummary):
    pass


class FileChange(GitHubModel):
    filename: str
    status: str
    sha: Optional[str] = None
    additions: Optional[int] = None
    deletions: Optional[int] = None
    changes: Optional[int] = None
    patch: Optional[str] = None


class Comparison(GitHubModel):
    status: str
    ahead_by: int
    behind_by: int
    total_commits: int
    url: Optional[str] = None
    html_url: Optional[str] = None
    base_commit: Optional[CommitSummary] = None
    merge_base_commit: Optional[CommitSummary] = None
    commits: List[CommitSummary] = []
    files: Optional[List[FileChange]] = None
