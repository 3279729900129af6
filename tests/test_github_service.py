"""Tests for GitHub service."""

import pytest
from unittest.mock import Mock, patch
from github import GithubException
from github.Issue import Issue as GithubIssue
from github.NamedUser import NamedUser
from github.Repository import Repository

from auto_assign.models.core import RepositoryRef
from auto_assign.services.github import GitHubAPIError, GitHubService


REPO = RepositoryRef(owner="owner", repo="test-repo")


@pytest.fixture
def github_service():
    """Create a GitHub service instance for testing."""
    with patch("auto_assign.services.github.settings") as mock_settings:
        mock_settings.github_token = "test_token"
        mock_settings.github_api_url = "https://api.github.com"
        return GitHubService()


def make_user(login):
    user = Mock(spec=NamedUser)
    user.login = login
    return user


@pytest.fixture
def mock_issue():
    """Create a mock GitHub issue whose assignees update when logins are added."""
    issue = Mock(spec=GithubIssue)
    issue.number = 42
    issue.assignees = []

    def add_to_assignees(*logins):
        issue.assignees = issue.assignees + [make_user(login) for login in logins]

    issue.add_to_assignees.side_effect = add_to_assignees
    return issue


@pytest.fixture
def mock_github_client(mock_issue):
    """Create a mock GitHub client returning the mock issue."""
    repo = Mock(spec=Repository)
    repo.get_issue.return_value = mock_issue
    client = Mock()
    client.get_repo.return_value = repo
    return client


class TestGitHubService:
    """Test cases for GitHubService."""

    def test_init_with_token(self):
        """Test initialization with custom token."""
        service = GitHubService(token="custom_token", base_url="https://ghe.example.com/api/v3")
        assert service.token == "custom_token"
        assert service.base_url == "https://ghe.example.com/api/v3"

    def test_init_with_settings_token(self, github_service):
        """Test initialization with settings token."""
        assert github_service.token == "test_token"
        assert github_service.base_url == "https://api.github.com"

    @patch("auto_assign.services.github.Github")
    def test_github_client_lazy_initialization(self, mock_github_class, github_service):
        """Test that GitHub client is lazily initialized."""
        mock_client = Mock()
        mock_github_class.return_value = mock_client

        client1 = github_service.github_client
        assert client1 == mock_client
        assert mock_github_class.call_count == 1
        assert mock_github_class.call_args.kwargs["base_url"] == "https://api.github.com"
        assert mock_github_class.call_args.kwargs["lazy"] is True

        client2 = github_service.github_client
        assert client2 == mock_client
        assert mock_github_class.call_count == 1

    @pytest.mark.asyncio
    async def test_add_assignees(self, github_service, mock_github_client, mock_issue):
        """Test adding assignees returns the issue's assignees after the request."""
        mock_issue.assignees = [make_user("existing")]
        github_service._github_client = mock_github_client

        assigned = await github_service.add_assignees(REPO, 42, ["alice", "bob"])

        mock_github_client.get_repo.assert_called_once_with("owner/test-repo")
        mock_github_client.get_repo.return_value.get_issue.assert_called_once_with(42)
        mock_issue.add_to_assignees.assert_called_once_with("alice", "bob")
        assert assigned == ["existing", "alice", "bob"]

    @pytest.mark.asyncio
    async def test_add_assignees_dropped_by_github(self, github_service, mock_github_client, mock_issue):
        """Test that logins GitHub ignores are absent from the result."""
        mock_issue.add_to_assignees.side_effect = lambda *logins: None
        github_service._github_client = mock_github_client

        assigned = await github_service.add_assignees(REPO, 42, ["outsider"])

        assert assigned == []

    @pytest.mark.asyncio
    async def test_add_assignees_api_error(self, github_service, mock_github_client, mock_issue):
        """Test that GitHub errors are wrapped in GitHubAPIError."""
        mock_issue.add_to_assignees.side_effect = GithubException(404, {"message": "Not Found"})
        github_service._github_client = mock_github_client

        with pytest.raises(GitHubAPIError) as exc_info:
            await github_service.add_assignees(REPO, 42, ["alice"])

        assert exc_info.value.status_code == 404
        assert "issue #42" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_close(self, github_service, mock_github_client):
        """Test closing releases the client."""
        github_service._github_client = mock_github_client

        await github_service.close()

        mock_github_client.close.assert_called_once()
        assert github_service._github_client is None

    @pytest.mark.asyncio
    async def test_close_without_client(self, github_service):
        """Test closing before the client was ever created."""
        await github_service.close()
        assert github_service._github_client is None
