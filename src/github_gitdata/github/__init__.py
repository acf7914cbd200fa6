"""GitHub REST API operations for github-gitdata"""

from .client import (
    AiohttpTransport,
    GitHubClient,
    GitHubRequest,
    GitHubResponse,
    get_github_client,
)
from .contents import create_or_update_file, delete_file, get_file
from .git_data import (
    create_blob,
    create_commit,
    create_tree,
    get_blob,
    get_tree,
    update_reference,
)
from .merges import compare_commits, merge
from .models import (
    Blob,
    Branch,
    Comparison,
    FileCommit,
    FileContent,
    GitCommit,
    GitHubErrorBody,
    MergeCommit,
    Reference,
    Repository,
    Tree,
    TreeBlob,
    TreeEntry,
)
from .repos import (
    create_branch,
    create_repository,
    delete_branch,
    get_branch,
    get_reference,
)
from .results import Err, GitHubResult, Ok

__all__ = [
    "AiohttpTransport",
    "GitHubClient",
    "GitHubRequest",
    "GitHubResponse",
    "get_github_client",
    # Repository and branch operations
    "create_repository",
    "get_reference",
    "get_branch",
    "create_branch",
    "delete_branch",
    # Git data primitives
    "create_blob",
    "get_blob",
    "create_tree",
    "get_tree",
    "create_commit",
    "update_reference",
    # File contents
    "get_file",
    "create_or_update_file",
    "delete_file",
    # Merge and compare
    "merge",
    "compare_commits",
    # Results
    "Ok",
    "Err",
    "GitHubResult",
    # Models
    "Blob",
    "Branch",
    "Comparison",
    "FileCommit",
    "FileContent",
    "GitCommit",
    "GitHubErrorBody",
    "MergeCommit",
    "Reference",
    "Repository",
    "Tree",
    "TreeBlob",
    "TreeEntry",
]
