"""Tests for API error types and Ok/Err result handling."""

import pytest

from github_gitdata.error_handling import GitHubAPIError, is_error_body
from github_gitdata.github.client import GitHubResponse
from github_gitdata.github.models import Reference
from github_gitdata.github.results import (
    Err,
    Ok,
    error_from_response,
    parse_optional_result,
    parse_result,
)


class TestGitHubAPIError:
    def test_message_and_documentation_url(self):
        error = GitHubAPIError(
            422, {"message": "Reference does not exist", "documentation_url": "https://docs.github.com/rest"}
        )

        assert error.status == 422
        assert error.message == "Reference does not exist"
        assert error.documentation_url == "https://docs.github.com/rest"
        assert str(error) == "GitHub API returned 422: Reference does not exist"

    def test_non_mapping_detail(self):
        error = GitHubAPIError(502, "Bad gateway")
        assert error.message == "Bad gateway"
        assert error.documentation_url is None

    def test_empty_detail(self):
        assert GitHubAPIError(500).message == "no response body"


class TestIsErrorBody:
    @pytest.mark.parametrize(
        "body",
        [
            {"message": "Not Found", "documentation_url": "https://docs.github.com/rest"},
            {"message": "Bad credentials"},
            {"message": "Validation Failed", "errors": [{"code": "missing"}], "status": "422"},
            {"message": "Merge conflict", "request_id": "ABCD:1234"},
        ],
    )
    def test_error_shapes(self, body):
        assert is_error_body(body)

    @pytest.mark.parametrize(
        "body",
        [None, "text", [], {"sha": "abc"}, {"message": None}, {"message": ["a", "b"]}],
    )
    def test_other_shapes(self, body):
        assert not is_error_body(body)


class TestResults:
    def test_ok_unwrap(self):
        result = Ok(value="payload", status=200)
        assert result.ok
        assert result.unwrap() == "payload"

    def test_err_unwrap_raises_with_body(self):
        result = error_from_response(
            GitHubResponse(404, {"message": "Not Found", "documentation_url": "https://docs.github.com/rest"})
        )

        assert isinstance(result, Err)
        assert not result.ok
        assert result.message == "Not Found"
        with pytest.raises(GitHubAPIError) as excinfo:
            result.unwrap()
        assert excinfo.value.status == 404
        assert excinfo.value.detail == {"message": "Not Found", "documentation_url": "https://docs.github.com/rest"}

    def test_message_with_extra_keys_is_kept(self):
        result = error_from_response(GitHubResponse(409, {"message": "Merge conflict", "request_id": "ABCD:1234"}))
        assert result.message == "Merge conflict"
        assert result.error.request_id == "ABCD:1234"

    def test_body_without_message_is_wrapped(self):
        result = error_from_response(GitHubResponse(502, {"error": "upstream", "x": 1}))
        assert result.message == "HTTP 502"
        assert result.error.body == {"error": "upstream", "x": 1}

    def test_error_without_body(self):
        result = error_from_response(GitHubResponse(500, None))
        assert result.message == "HTTP 500"
        assert result.error.body is None

    def test_parse_result_success(self, github_response_factory):
        body = github_response_factory.reference_response(sha="abc")
        result = parse_result(GitHubResponse(200, body), Reference)

        assert isinstance(result, Ok)
        assert isinstance(result.value, Reference)
        assert result.value.sha == "abc"
        # unknown fields survive
        assert result.value.node_id == "REF_kwDOTest"

    def test_parse_result_error_status(self):
        result = parse_result(GitHubResponse(401, {"message": "Bad credentials"}), Reference)
        assert isinstance(result, Err)
        assert result.status == 401

    def test_parse_optional_result(self):
        assert parse_optional_result(GitHubResponse(204, None), Reference) == Ok(value=None, status=204)
        assert isinstance(parse_optional_result(GitHubResponse(404, {"message": "Not Found"}), Reference), Err)
