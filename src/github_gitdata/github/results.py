"""Tagged results for GitHub API calls

Every operation returns either ``Ok`` (2xx, body parsed into the endpoint's
success model) or ``Err`` (any other status, body parsed as the documented
error schema). Callers branch on ``result.ok`` or call ``unwrap()``.
"""

from dataclasses import dataclass
from typing import Generic, NoReturn, Optional, Type, TypeVar, Union

from pydantic import BaseModel

from ..error_handling import GitHubAPIError, is_error_body
from .client import GitHubResponse
from .models import GitHubErrorBody

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T
    status: int

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    error: GitHubErrorBody
    status: int

    @property
    def ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return self.error.message

    def unwrap(self) -> NoReturn:
        raise GitHubAPIError(self.status, self.error.model_dump(exclude_none=True))


GitHubResult = Union[Ok[T], Err]


def error_from_response(response: GitHubResponse) -> Err:
    body = response.body
    if not is_error_body(body):
        # Keep whatever came back, under the documented error shape
        body = {"message": f"HTTP {response.status}", "body": body}
    return Err(error=GitHubErrorBody.model_validate(body), status=response.status)


def parse_result(response: GitHubResponse, model: Type[M]) -> GitHubResult[M]:
    """Turn a response into Ok(model) or Err(GitHubErrorBody)."""
    if not response.ok:
        return error_from_response(response)
    return Ok(value=model.model_validate(response.body), status=response.status)


def parse_optional_result(
    response: GitHubResponse, model: Type[M]
) -> GitHubResult[Optional[M]]:
    """Like parse_result, but a 2xx without a body is Ok(None)."""
    if response.ok and response.body is None:
        return Ok(value=None, status=response.status)
    return parse_result(response, model)
