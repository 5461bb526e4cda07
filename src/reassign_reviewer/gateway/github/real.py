"""Production implementation of GitHub operations using the gh CLI."""

import json
import logging
from pathlib import Path

from reassign_reviewer.errors import NetworkError
from reassign_reviewer.gateway.github.abc import GitHub
from reassign_reviewer.gateway.github.graphql_queries import (
    SEARCH_ASSIGNED_PRS_QUERY,
    SEARCH_PAGE_SIZE,
    build_assigned_prs_search,
)
from reassign_reviewer.gateway.github.parsing import (
    has_graphql_errors,
    parse_assigned_prs,
    parse_current_user_login,
    parse_gh_api_failure,
    parse_repo_info,
    parse_user_refs,
)
from reassign_reviewer.gateway.github.types import PullRequestInfo, RepoInfo, UserRef
from reassign_reviewer.subprocess_utils import run_subprocess_with_context

logger = logging.getLogger(__name__)

# REST list endpoints default to 30 items per page
_LIST_PAGE_SIZE = 100


class RealGitHub(GitHub):
    """Production implementation using gh CLI.

    gh supplies the host, the credentials and the current repository, so
    this class holds no state.
    """

    def _run_gh(
        self,
        args: list[str],
        operation: str,
        *,
        stdin: str | None = None,
        cwd: Path | None = None,
        graphql: bool = False,
    ) -> str:
        """Run a gh command and return stdout, mapping failures to typed errors.

        With graphql set, a failed call whose stdout holds a GraphQL error
        payload returns that payload so the caller's parser reports it.
        """
        cmd = ["gh", *args]
        try:
            result = run_subprocess_with_context(
                cmd,
                operation_context=operation,
                cwd=cwd,
                input=stdin,
                check=False,
            )
        except FileNotFoundError as e:
            raise NetworkError("GitHub CLI (gh) is not installed or not on PATH") from e

        if result.returncode != 0:
            if graphql and has_graphql_errors(result.stdout):
                return result.stdout
            raise parse_gh_api_failure(result.stderr, operation)
        return result.stdout

    def get_repo_info(self, cwd: Path) -> RepoInfo:
        """Get repository owner and name via `gh repo view --json owner,name`.

        gh honours GH_REPO here, like every other gh command.
        """
        try:
            stdout = self._run_gh(
                ["repo", "view", "--json", "owner,name"],
                "determine the current repository",
                cwd=cwd,
            )
        except NetworkError as e:
            # gh reports "not a git repository" and "no git remotes" without a status
            msg = f"{e}\nRun inside a GitHub repository checkout or pass --repo OWNER/NAME"
            raise NetworkError(msg) from e
        return parse_repo_info(stdout)

    def get_current_user_login(self) -> str:
        stdout = self._run_gh(["api", "user"], "fetch the current user")
        return parse_current_user_login(stdout)

    def get_assigned_open_prs(self, repo: RepoInfo, login: str) -> list[PullRequestInfo]:
        """Search open PRs assigned to login via `gh api graphql`.

        endCursor is omitted so the first page is returned.
        """
        search = build_assigned_prs_search(repo.owner, repo.name, login)
        logger.debug("Searching pull requests: %s", search)
        stdout = self._run_gh(
            [
                "api",
                "graphql",
                "-f",
                f"query={SEARCH_ASSIGNED_PRS_QUERY}",
                "-f",
                f"searchQuery={search}",
                "-F",
                f"first={SEARCH_PAGE_SIZE}",
            ],
            "fetch assigned pull requests",
            graphql=True,
        )
        return parse_assigned_prs(stdout)

    def get_review_authors(self, repo: RepoInfo, pr_number: int) -> list[UserRef]:
        path = f"repos/{repo.owner}/{repo.name}/pulls/{pr_number}/reviews"
        stdout = self._run_gh(
            ["api", f"{path}?per_page={_LIST_PAGE_SIZE}"],
            f"fetch reviews for PR #{pr_number}",
        )
        return parse_user_refs(stdout)

    def get_issue_comment_authors(self, repo: RepoInfo, pr_number: int) -> list[UserRef]:
        path = f"repos/{repo.owner}/{repo.name}/issues/{pr_number}/comments"
        stdout = self._run_gh(
            ["api", f"{path}?per_page={_LIST_PAGE_SIZE}"],
            f"fetch comments for PR #{pr_number}",
        )
        return parse_user_refs(stdout)

    def request_reviewers(self, repo: RepoInfo, pr_number: int, reviewers: list[str]) -> None:
        """POST the reviewers as a JSON body read from stdin."""
        path = f"repos/{repo.owner}/{repo.name}/pulls/{pr_number}/requested_reviewers"
        body = json.dumps({"reviewers": reviewers})
        self._run_gh(
            ["api", "--method", "POST", path, "--input", "-"],
            f"request review on PR #{pr_number}",
            stdin=body,
        )
