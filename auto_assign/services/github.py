"""GitHub API service for issue assignment."""

import logging
from typing import List, Optional

from github import Auth, Github, GithubException

from auto_assign.config import settings
from auto_assign.core.exceptions import AutoAssignError, ErrorCategory
from auto_assign.models.core import RepositoryRef


logger = logging.getLogger(__name__)


class GitHubAPIError(AutoAssignError):
    """Custom exception for GitHub API errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(
            message,
            category=ErrorCategory.GITHUB_API,
            context={"status_code": status_code} if status_code else None,
        )
        self.status_code = status_code


class GitHubService:
    """Service for interacting with GitHub API."""

    def __init__(self, token: Optional[str] = None, base_url: Optional[str] = None):
        """Initialize GitHub service with authentication token."""
        self.token = token or settings.github_token
        self.base_url = base_url or settings.github_api_url
        self._github_client: Optional[Github] = None

    @property
    def github_client(self) -> Github:
        """Lazy initialization of GitHub client."""
        if self._github_client is None:
            self._github_client = Github(auth=Auth.Token(self.token), base_url=self.base_url, lazy=True)
        return self._github_client

    async def add_assignees(
        self, repository: RepositoryRef, issue_number: int, assignees: List[str]
    ) -> List[str]:
        """
        Add assignees to an issue.

        GitHub silently drops logins that cannot be assigned, so the caller
        should compare the returned list with what it asked for.

        Args:
            repository: Repository the issue belongs to
            issue_number: Issue number
            assignees: Logins to add

        Returns:
            Logins assigned to the issue after the request, as reported by GitHub
        """
        try:
            repo = self.github_client.get_repo(repository.full_name)
            issue = repo.get_issue(issue_number)
            issue.add_to_assignees(*assignees)
        except GithubException as e:
            logger.error(f"Failed to add assignees to {repository.full_name}#{issue_number}: {e}")
            raise GitHubAPIError(
                f"Failed to add assignees to issue #{issue_number}: {e}", status_code=e.status
            )

        assigned = [assignee.login for assignee in issue.assignees or []]
        logger.debug(f"Issue #{issue_number} assignees after request: {assigned}")
        return assigned

    async def close(self) -> None:
        """Clean up resources."""
        if self._github_client:
            self._github_client.close()
            self._github_client = None
        logger.debug("GitHub service closed")
