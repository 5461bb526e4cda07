"""No-op GitHub wrapper for dry-run mode.

Reads go to the wrapped implementation; the write only prints what would
have been sent.
"""

from pathlib import Path

from reassign_reviewer.gateway.github.abc import GitHub
from reassign_reviewer.gateway.github.types import PullRequestInfo, RepoInfo, UserRef
from reassign_reviewer.output.output import user_output


class DryRunGitHub(GitHub):
    """Dry-run wrapper that delegates reads and skips the reviewer request."""

    def __init__(self, wrapped: GitHub) -> None:
        """Create a dry-run wrapper around a GitHub implementation.

        Args:
            wrapped: The GitHub implementation to wrap
        """
        self._wrapped = wrapped

    def get_repo_info(self, cwd: Path) -> RepoInfo:
        return self._wrapped.get_repo_info(cwd)

    def get_current_user_login(self) -> str:
        return self._wrapped.get_current_user_login()

    def get_assigned_open_prs(self, repo: RepoInfo, login: str) -> list[PullRequestInfo]:
        return self._wrapped.get_assigned_open_prs(repo, login)

    def get_review_authors(self, repo: RepoInfo, pr_number: int) -> list[UserRef]:
        return self._wrapped.get_review_authors(repo, pr_number)

    def get_issue_comment_authors(self, repo: RepoInfo, pr_number: int) -> list[UserRef]:
        return self._wrapped.get_issue_comment_authors(repo, pr_number)

    def request_reviewers(self, repo: RepoInfo, pr_number: int, reviewers: list[str]) -> None:
        """No-op for the reviewer request in dry-run mode."""
        names = ", ".join(reviewers)
        user_output(
            f"[DRY RUN] Would request review from {names} on {repo.full_name}#{pr_number}"
        )
