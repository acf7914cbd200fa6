"""Tests for repository and branch operations."""

import pytest

from github_gitdata.error_handling import GitHubAPIError
from github_gitdata.github.models import Branch, Reference, Repository
from github_gitdata.github.repos import (
    create_branch,
    create_repository,
    delete_branch,
    get_branch,
    get_reference,
)
from github_gitdata.github.results import Err, Ok

from fixtures.fake_github import OWNER, REPO


class TestCreateRepository:
    @pytest.mark.asyncio
    async def test_creates_auto_initialized_repository(self, client, fake_github):
        result = await create_repository(client, "tools", description="Tooling", is_private=True)

        assert isinstance(result, Ok)
        assert result.status == 201
        repo = result.value
        assert isinstance(repo, Repository)
        assert repo.full_name == "acme/tools"
        assert repo.private is True
        assert repo.visibility == "private"
        assert repo.description == "Tooling"
        assert fake_github.last_request.json == {
            "name": "tools",
            "private": True,
            "auto_init": True,
            "description": "Tooling",
        }
        # auto_init leaves a first commit on the default branch
        assert fake_github.repository("acme", "tools").branch_tip("main") is not None

    @pytest.mark.asyncio
    async def test_duplicate_name_is_an_error_result(self, client):
        result = await create_repository(client, REPO)

        assert isinstance(result, Err)
        assert result.status == 422
        assert result.message == "Repository creation failed."
        assert result.error.errors[0]["message"] == "name already exists on this account"

    @pytest.mark.asyncio
    async def test_requires_authentication(self, anonymous_client):
        result = await create_repository(anonymous_client, "tools")
        assert not result.ok
        assert result.status == 401


class TestReferences:
    @pytest.mark.asyncio
    async def test_get_reference(self, client, demo_repo):
        result = await get_reference(client, OWNER, REPO, "main")

        reference = result.unwrap()
        assert isinstance(reference, Reference)
        assert reference.ref == "refs/heads/main"
        assert reference.sha == demo_repo.branch_tip("main")
        assert reference.object.type == "commit"

    @pytest.mark.asyncio
    async def test_get_reference_without_token(self, anonymous_client, fake_github):
        result = await get_reference(anonymous_client, OWNER, REPO, "main")
        assert result.ok
        assert "authorization" not in fake_github.last_request.headers

    @pytest.mark.asyncio
    async def test_get_missing_reference(self, client):
        result = await get_reference(client, OWNER, REPO, "nope")
        assert isinstance(result, Err)
        assert result.status == 404

    @pytest.mark.asyncio
    async def test_get_branch_reports_tip_and_parents(self, client, fake_github, demo_repo):
        first = demo_repo.branch_tip("main")
        second = fake_github.commit_files(demo_repo, {"CHANGELOG.md": "v1\n"}, "Add changelog", branch="main")

        branch = (await get_branch(client, OWNER, REPO, "main")).unwrap()

        assert isinstance(branch, Branch)
        assert branch.name == "main"
        assert branch.commit.sha == second
        assert branch.commit.commit.message == "Add changelog"
        assert [parent.sha for parent in branch.commit.parents] == [first]

    @pytest.mark.asyncio
    async def test_create_branch(self, client, fake_github, demo_repo):
        tip = demo_repo.branch_tip("main")
        result = await create_branch(client, OWNER, REPO, "feature", tip)

        assert result.status == 201
        assert result.value.ref == "refs/heads/feature"
        assert result.value.sha == tip
        assert fake_github.last_request.json == {"ref": "refs/heads/feature", "sha": tip}
        assert demo_repo.branch_tip("feature") == tip

    @pytest.mark.asyncio
    async def test_create_existing_branch_fails(self, client, demo_repo):
        result = await create_branch(client, OWNER, REPO, "main", demo_repo.branch_tip("main"))
        assert isinstance(result, Err)
        assert result.message == "Reference already exists"

    @pytest.mark.asyncio
    async def test_create_branch_at_unknown_sha_fails(self, client):
        result = await create_branch(client, OWNER, REPO, "feature", "0" * 40)
        assert isinstance(result, Err)
        assert result.status == 422
        assert result.message == "Object does not exist"


class TestDeleteBranch:
    @pytest.mark.asyncio
    async def test_returns_none_on_204(self, client, demo_repo):
        demo_repo.refs["heads/old"] = demo_repo.branch_tip("main")

        assert await delete_branch(client, OWNER, REPO, "old") is None
        assert demo_repo.branch_tip("old") is None

    @pytest.mark.asyncio
    async def test_raises_with_parsed_body_on_other_status(self, recording_client, recording_transport):
        recording_transport.queue(422, {"message": "Reference does not exist"})

        with pytest.raises(GitHubAPIError) as excinfo:
            await delete_branch(recording_client, OWNER, REPO, "ghost")

        assert excinfo.value.status == 422
        assert excinfo.value.detail == {"message": "Reference does not exist"}
        sent = recording_transport.last_request
        assert sent.method == "DELETE"
        assert sent.url == "https://api.github.com/repos/acme/demo/git/refs/heads/ghost"

    @pytest.mark.asyncio
    async def test_even_a_200_is_a_failure(self, recording_client, recording_transport):
        recording_transport.queue(200, {"message": "unexpected"})
        with pytest.raises(GitHubAPIError):
            await delete_branch(recording_client, OWNER, REPO, "main")

    @pytest.mark.asyncio
    async def test_missing_branch_on_simulated_remote(self, client):
        with pytest.raises(GitHubAPIError) as excinfo:
            await delete_branch(client, OWNER, REPO, "ghost")
        assert excinfo.value.message == "Reference does not exist"
