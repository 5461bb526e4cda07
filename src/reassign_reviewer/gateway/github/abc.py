"""Abstract base class for the GitHub operations reassign-reviewer needs."""

from abc import ABC, abstractmethod
from pathlib import Path

from reassign_reviewer.gateway.github.types import PullRequestInfo, RepoInfo, UserRef


class GitHub(ABC):
    """Abstract interface for GitHub operations.

    All implementations (real, fake and dry-run) must implement this interface.
    Failures are reported with the errors in reassign_reviewer.errors.
    """

    @abstractmethod
    def get_repo_info(self, cwd: Path) -> RepoInfo:
        """Get owner and name of the repository checked out at cwd.

        Raises:
            ReassignError: If the directory is not a GitHub repository or the
                lookup fails
        """
        ...

    @abstractmethod
    def get_current_user_login(self) -> str:
        """Get the login of the authenticated user.

        Raises:
            AuthError: If the credentials are missing or rejected
            NetworkError: If GitHub could not be reached
        """
        ...

    @abstractmethod
    def get_assigned_open_prs(self, repo: RepoInfo, login: str) -> list[PullRequestInfo]:
        """List open pull requests in repo assigned to login.

        Only the first page of search results (up to 100) is returned.

        Returns:
            Pull requests ordered newest-created first. An empty list is a
            valid answer.

        Raises:
            NetworkError: If GitHub could not be reached
            ApiError: If GitHub answered with an error
        """
        ...

    @abstractmethod
    def get_review_authors(self, repo: RepoInfo, pr_number: int) -> list[UserRef]:
        """Get the author of every submitted review on a pull request, in order."""
        ...

    @abstractmethod
    def get_issue_comment_authors(self, repo: RepoInfo, pr_number: int) -> list[UserRef]:
        """Get the author of every conversation comment on a pull request, in order."""
        ...

    @abstractmethod
    def request_reviewers(self, repo: RepoInfo, pr_number: int, reviewers: list[str]) -> None:
        """Request review from the given logins.

        This is a single write with no retry. Calling it twice sends the same
        request twice.

        Raises:
            ApiError: If GitHub rejects the request
        """
        ...
