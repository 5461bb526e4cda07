"""Type definitions for GitHub operations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RepoInfo:
    """Owner and name of a GitHub repository."""

    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True)
class PullRequestInfo:
    """Snapshot of a pull request returned by the assigned-PR search."""

    number: int
    title: str
    author: str  # Login of the PR author ("ghost" for deleted accounts)
    state: str  # Always "OPEN" because the search filters on state:open
    is_draft: bool
    updated_at: str  # ISO-8601, display only
    created_at: str  # ISO-8601, display only


@dataclass(frozen=True)
class UserRef:
    """Author of a review or an issue comment.

    kind mirrors GitHub's `type` field ("User", "Bot", "Organization").
    Deleted accounts come back as `user: null` and are represented with an
    empty login.
    """

    login: str
    kind: str
