"""The reassign-reviewer workflow.

resolve self -> choose PR -> collect candidates -> pick -> confirm -> submit.
Each step either returns a value for the next one or raises a ReassignError
that ends the run; nothing is retried.
"""

import logging
import re
from dataclasses import dataclass

from reassign_reviewer.core.context import ReassignContext
from reassign_reviewer.core.reviewers import collect_candidate_reviewers
from reassign_reviewer.errors import EmptyResultError, UserCancelled, ValidationError

logger = logging.getLogger(__name__)

_PR_NUMBER_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class ReassignmentResult:
    """Outcome of a completed reassignment."""

    pr_number: int
    reviewer: str
    dry_run: bool


def parse_pr_number(raw: str) -> int:
    """Validate a PR number given on the command line.

    Raises:
        ValidationError: If raw is not an integer or is not positive
    """
    text = raw.strip()
    # int() would also take "4_2" and non-ASCII digits
    if _PR_NUMBER_PATTERN.fullmatch(text) is None:
        raise ValidationError(f"Invalid PR number '{raw}': must be an integer")
    pr_number = int(text)
    if pr_number <= 0:
        raise ValidationError(f"Invalid PR number '{raw}': must be positive")
    return pr_number


def resolve_pr_number(ctx: ReassignContext, pr_number: int | None, self_login: str) -> int:
    """Use the given PR number, or let the user pick one of their assigned PRs.

    Raises:
        EmptyResultError: If no PR number was given and no open PRs are
            assigned to self_login
        UserCancelled: If the user aborts the PR list
    """
    if pr_number is not None:
        return pr_number

    prs = ctx.github.get_assigned_open_prs(ctx.repo, self_login)
    if not prs:
        raise EmptyResultError(
            f"No open pull requests assigned to {self_login} in {ctx.repo.full_name}"
        )
    index = ctx.prompter.pick_pr(prs)
    return prs[index].number


def run_reassignment(ctx: ReassignContext, pr_number: int | None) -> ReassignmentResult:
    """Re-request review from a past reviewer or commenter.

    Args:
        ctx: Context with the gateways and repository to use
        pr_number: Validated PR number, or None to choose interactively

    Returns:
        The PR and reviewer the request was sent for

    Raises:
        ReassignError: Whatever failed first; see reassign_reviewer.errors
    """
    self_login = ctx.github.get_current_user_login()
    logger.debug("Authenticated as %s", self_login)

    number = resolve_pr_number(ctx, pr_number, self_login)

    reviewers = collect_candidate_reviewers(ctx.github, ctx.repo, number, self_login)
    if not reviewers:
        raise EmptyResultError(f"No available reviewers to re-request on PR #{number}")

    reviewer = reviewers[ctx.prompter.pick_reviewer(reviewers)]

    if not ctx.prompter.confirm_reviewer(reviewer):
        raise UserCancelled("Reviewer selection cancelled", declined=True)

    ctx.github.request_reviewers(ctx.repo, number, [reviewer])
    return ReassignmentResult(pr_number=number, reviewer=reviewer, dry_run=ctx.dry_run)
