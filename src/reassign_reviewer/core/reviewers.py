"""Collection of candidate reviewers for a pull request."""

import logging

from reassign_reviewer.gateway.github.abc import GitHub
from reassign_reviewer.gateway.github.types import RepoInfo, UserRef

logger = logging.getLogger(__name__)

BOT_SUFFIX = "[bot]"
BOT_KIND = "bot"


def is_candidate_reviewer(user: UserRef, self_login: str) -> bool:
    """Check whether a review or comment author can be asked to review again.

    Excluded: deleted accounts (empty login), the invoking user, accounts of
    kind Bot and logins ending in "[bot]". GitHub logins are
    case-insensitive, so all comparisons are too.
    """
    login = user.login.lower()
    if not login:
        return False
    if login == self_login.lower():
        return False
    if login.endswith(BOT_SUFFIX):
        return False
    return user.kind.lower() != BOT_KIND


def filter_candidate_reviewers(users: list[UserRef], self_login: str) -> list[str]:
    """Reduce authors to unique candidate logins, keeping first-seen order."""
    candidates: dict[str, None] = {}
    for user in users:
        if is_candidate_reviewer(user, self_login):
            candidates.setdefault(user.login, None)
    return list(candidates)


def collect_candidate_reviewers(
    github: GitHub, repo: RepoInfo, pr_number: int, self_login: str
) -> list[str]:
    """Collect everyone who reviewed or commented on a pull request.

    Review authors come first, then issue-comment authors, each login listed
    once at its first appearance.

    Args:
        github: GitHub gateway
        repo: Repository holding the pull request
        pr_number: Pull request number
        self_login: Login of the invoking user, who is never a candidate

    Returns:
        Candidate logins, possibly empty
    """
    review_authors = github.get_review_authors(repo, pr_number)
    comment_authors = github.get_issue_comment_authors(repo, pr_number)
    candidates = filter_candidate_reviewers(review_authors + comment_authors, self_login)
    logger.debug(
        "PR #%d: %d review authors, %d comment authors, %d candidates",
        pr_number,
        len(review_authors),
        len(comment_authors),
        len(candidates),
    )
    return candidates
