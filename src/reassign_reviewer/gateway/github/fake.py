"""Fake GitHub operations for testing."""

from pathlib import Path

from reassign_reviewer.errors import AuthError, ReassignError
from reassign_reviewer.gateway.github.abc import GitHub
from reassign_reviewer.gateway.github.types import PullRequestInfo, RepoInfo, UserRef


class FakeGitHub(GitHub):
    """In-memory fake implementation of GitHub operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults. Every call is recorded in
    `calls` (operation name, in order) so tests can assert which requests were
    made and which were not.
    """

    def __init__(
        self,
        *,
        repo_info: RepoInfo | None = None,
        current_user: str | None = "test-user",
        assigned_prs: list[PullRequestInfo] | None = None,
        review_authors: dict[int, list[UserRef]] | None = None,
        comment_authors: dict[int, list[UserRef]] | None = None,
        request_reviewers_error: ReassignError | None = None,
    ) -> None:
        """Create FakeGitHub with pre-configured state.

        Args:
            repo_info: Returned by get_repo_info()
            current_user: Login of the authenticated user, or None to make
                get_current_user_login() raise AuthError
            assigned_prs: Returned by get_assigned_open_prs()
            review_authors: Mapping of PR number to review authors
            comment_authors: Mapping of PR number to issue-comment authors
            request_reviewers_error: Raised by request_reviewers() if set
        """
        self._repo_info = repo_info or RepoInfo(owner="test-owner", name="test-repo")
        self._current_user = current_user
        self._assigned_prs = assigned_prs or []
        self._review_authors = review_authors or {}
        self._comment_authors = comment_authors or {}
        self._request_reviewers_error = request_reviewers_error
        self._calls: list[str] = []
        self._assigned_pr_queries: list[tuple[RepoInfo, str]] = []
        self._requested_reviewers: list[tuple[RepoInfo, int, list[str]]] = []

    def get_repo_info(self, cwd: Path) -> RepoInfo:
        self._calls.append("get_repo_info")
        return self._repo_info

    def get_current_user_login(self) -> str:
        self._calls.append("get_current_user_login")
        if self._current_user is None:
            msg = "GitHub rejected the credentials while trying to fetch the current user"
            raise AuthError(msg)
        return self._current_user

    def get_assigned_open_prs(self, repo: RepoInfo, login: str) -> list[PullRequestInfo]:
        self._calls.append("get_assigned_open_prs")
        self._assigned_pr_queries.append((repo, login))
        return list(self._assigned_prs)

    def get_review_authors(self, repo: RepoInfo, pr_number: int) -> list[UserRef]:
        self._calls.append("get_review_authors")
        return list(self._review_authors.get(pr_number, []))

    def get_issue_comment_authors(self, repo: RepoInfo, pr_number: int) -> list[UserRef]:
        self._calls.append("get_issue_comment_authors")
        return list(self._comment_authors.get(pr_number, []))

    def request_reviewers(self, repo: RepoInfo, pr_number: int, reviewers: list[str]) -> None:
        self._calls.append("request_reviewers")
        if self._request_reviewers_error is not None:
            raise self._request_reviewers_error
        self._requested_reviewers.append((repo, pr_number, list(reviewers)))

    @property
    def calls(self) -> list[str]:
        """Get the names of all operations called, in order.

        This property is for test assertions only.
        """
        return self._calls

    @property
    def assigned_pr_queries(self) -> list[tuple[RepoInfo, str]]:
        """Get the (repo, login) pairs passed to get_assigned_open_prs().

        This property is for test assertions only.
        """
        return self._assigned_pr_queries

    @property
    def requested_reviewers(self) -> list[tuple[RepoInfo, int, list[str]]]:
        """Get the (repo, pr_number, reviewers) tuples successfully submitted.

        This property is for test assertions only.
        """
        return self._requested_reviewers
