"""
Global pytest configuration and fixtures.

This file provides:
1. A simulated GitHub remote (``fake_github``) seeded with acme/demo
2. A recording transport with canned responses (``recording_transport``)
3. Clients wired to either of them
4. Automatic marking of tests by location
"""

import logging

import pytest

from fixtures.fake_github import OWNER, REPO, TOKEN, FakeGitHub
from fixtures.github_responses import GitHubResponseFactory, RecordingTransport
from github_gitdata.github.client import GitHubClient


@pytest.fixture
def fake_github() -> FakeGitHub:
    """Simulated remote with acme/demo: README.md and docs/guide.md on main."""
    remote = FakeGitHub(tokens={TOKEN: OWNER, "other-token": "someone-else"})
    remote.add_repository(
        OWNER,
        REPO,
        files={"README.md": "# demo\n", "docs/guide.md": "Guide\n"},
        description="Demo repository",
    )
    return remote


@pytest.fixture
def demo_repo(fake_github):
    return fake_github.repository(OWNER, REPO)


@pytest.fixture
def client(fake_github) -> GitHubClient:
    """Client talking to the simulated remote with the acme token."""
    return GitHubClient(transport=fake_github, token=TOKEN)


@pytest.fixture
def anonymous_client(fake_github) -> GitHubClient:
    return GitHubClient(transport=fake_github)


@pytest.fixture
def recording_transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def recording_client(recording_transport) -> GitHubClient:
    """Client whose requests are recorded and answered from a queue."""
    return GitHubClient(transport=recording_transport, token=TOKEN)


@pytest.fixture
def github_response_factory():
    """Provide access to GitHubResponseFactory."""
    return GitHubResponseFactory


@pytest.fixture(autouse=True)
def restore_library_log_level():
    """Keep log level changes made by a test from leaking into the next one."""
    library_logger = logging.getLogger("github_gitdata")
    saved = library_logger.level
    yield
    library_logger.setLevel(saved)


def pytest_collection_modifyitems(config, items):
    """Mark tests that run against the simulated remote as integration tests."""
    for item in items:
        if "fake_github" in item.fixturenames:
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)
