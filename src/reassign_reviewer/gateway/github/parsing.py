"""Parsing utilities for gh CLI output."""

import json
import re
from typing import Any

from reassign_reviewer.errors import (
    ApiError,
    AuthError,
    NetworkError,
    ReassignError,
    ValidationError,
)
from reassign_reviewer.gateway.github.types import PullRequestInfo, RepoInfo, UserRef

_HTTP_STATUS_PATTERN = re.compile(r"HTTP (\d{3})")

# gh prints this when no token is configured at all
_NOT_LOGGED_IN_MARKER = "gh auth login"


def parse_gh_api_failure(stderr: str, operation: str) -> ReassignError:
    """Turn the stderr of a failed `gh api` call into a typed error.

    gh reports HTTP failures as e.g. "gh: Not Found (HTTP 404)". Missing or
    rejected credentials map to AuthError, any other status to ApiError, and
    output without a status (DNS, refused connection) to NetworkError.

    Args:
        stderr: Captured stderr of the gh process
        operation: Short description of what was attempted, for the message

    Returns:
        The error to raise
    """
    detail = stderr.strip()
    match = _HTTP_STATUS_PATTERN.search(detail)
    status = int(match.group(1)) if match else None

    if status == 401 or _NOT_LOGGED_IN_MARKER in detail:
        return AuthError(f"GitHub rejected the credentials while trying to {operation}: {detail}")
    if status is not None:
        return ApiError(f"Failed to {operation} (HTTP {status}): {detail}", status=status)
    return NetworkError(f"Failed to {operation}: {detail or 'gh exited without output'}")


def has_graphql_errors(stdout: str) -> bool:
    """Check whether gh printed a GraphQL response carrying an `errors` list.

    `gh api graphql` exits 1 on such responses but still writes the body to
    stdout, with no HTTP status on stderr.
    """
    try:
        data = json.loads(stdout)
    except json.JSONDecodeError:
        return False
    return isinstance(data, dict) and bool(data.get("errors"))


def parse_current_user_login(json_str: str) -> str:
    """Extract the login from `gh api user` output."""
    data = json.loads(json_str)
    login = data.get("login") or ""
    if not login:
        raise AuthError("GitHub did not return a login for the authenticated user")
    return login


def parse_repo_info(json_str: str) -> RepoInfo:
    """Parse `gh repo view --json owner,name` output."""
    data = json.loads(json_str)
    return RepoInfo(owner=data["owner"]["login"], name=data["name"])


def parse_repo_argument(value: str) -> RepoInfo:
    """Parse an OWNER/NAME repository argument.

    A leading host ("github.com/owner/name") is accepted and dropped.
    """
    parts = value.strip().split("/")
    if len(parts) == 3:
        parts = parts[1:]
    if len(parts) != 2 or not all(parts):
        raise ValidationError(f"Invalid repository '{value}': expected OWNER/NAME")
    return RepoInfo(owner=parts[0], name=parts[1])


def parse_assigned_prs(json_str: str) -> list[PullRequestInfo]:
    """Parse the GraphQL search response into PullRequestInfo objects.

    Search results can include non-PR nodes, which come back as empty objects
    through the `... on PullRequest` fragment; those are skipped. Order is
    preserved.

    Raises:
        ApiError: If the response carries GraphQL errors
    """
    data = json.loads(json_str)
    errors = data.get("errors")
    if errors:
        messages = "; ".join(str(e.get("message", e)) for e in errors)
        raise ApiError(f"GitHub search for assigned pull requests failed: {messages}")

    nodes = data.get("data", {}).get("search", {}).get("nodes", [])
    prs: list[PullRequestInfo] = []
    for node in nodes:
        if not node or "number" not in node:
            continue
        author = node.get("author") or {}
        prs.append(
            PullRequestInfo(
                number=node["number"],
                title=node.get("title", ""),
                author=author.get("login", "ghost"),
                state=node.get("state", "OPEN"),
                is_draft=node.get("isDraft", False),
                updated_at=node.get("updatedAt", ""),
                created_at=node.get("createdAt", ""),
            )
        )
    return prs


def _user_ref_from_item(item: dict[str, Any]) -> UserRef:
    user = item.get("user") or {}
    return UserRef(login=user.get("login") or "", kind=user.get("type") or "")


def parse_user_refs(json_str: str) -> list[UserRef]:
    """Parse the authors out of a REST list of reviews or issue comments."""
    items = json.loads(json_str)
    return [_user_ref_from_item(item) for item in items]
