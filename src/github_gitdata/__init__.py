"""github-gitdata: typed async wrappers around the GitHub REST API.

One request per call, tagged Ok/Err results, and an injected transport.
"""

from .configuration import GitHubConfig, create_test_config, load_config_from_env
from .error_handling import GitHubAPIError
from .github import *  # noqa: F401,F403
from .github import __all__ as _github_all
from .logging_config import configure_logging, set_library_log_level

__version__ = "0.1.0"

__all__ = [
    "GitHubConfig",
    "GitHubAPIError",
    "configure_logging",
    "set_library_log_level",
    "create_test_config",
    "load_config_from_env",
    *_github_all,
]
