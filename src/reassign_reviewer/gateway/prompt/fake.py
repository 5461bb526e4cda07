"""Fake Prompter implementation for testing.

FakePrompter answers from constructor-supplied values and records what it
was shown, enabling fast and deterministic workflow tests.
"""

from reassign_reviewer.errors import UserCancelled
from reassign_reviewer.gateway.github.types import PullRequestInfo
from reassign_reviewer.gateway.prompt.abc import Prompter


class FakePrompter(Prompter):
    """In-memory fake implementation that returns configured answers.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(
        self,
        *,
        pr_index: int | None = 0,
        reviewer_index: int | None = 0,
        confirm: bool = True,
    ) -> None:
        """Create FakePrompter with scripted answers.

        Args:
            pr_index: Index returned by pick_pr(), or None to simulate the
                user aborting the list
            reviewer_index: Index returned by pick_reviewer(), or None to
                simulate the user aborting the list
            confirm: Answer returned by confirm_reviewer()
        """
        self._pr_index = pr_index
        self._reviewer_index = reviewer_index
        self._confirm = confirm
        self._pr_choices: list[list[PullRequestInfo]] = []
        self._reviewer_choices: list[list[str]] = []
        self._confirmations: list[str] = []

    def pick_pr(self, prs: list[PullRequestInfo]) -> int:
        self._pr_choices.append(list(prs))
        if self._pr_index is None:
            raise UserCancelled("Select PR cancelled")
        return self._pr_index

    def pick_reviewer(self, reviewers: list[str]) -> int:
        self._reviewer_choices.append(list(reviewers))
        if self._reviewer_index is None:
            raise UserCancelled("Select reviewer cancelled")
        return self._reviewer_index

    def confirm_reviewer(self, reviewer: str) -> bool:
        self._confirmations.append(reviewer)
        return self._confirm

    @property
    def pr_choices(self) -> list[list[PullRequestInfo]]:
        """Get the lists passed to pick_pr(), one per call.

        This property is for test assertions only.
        """
        return self._pr_choices

    @property
    def reviewer_choices(self) -> list[list[str]]:
        """Get the lists passed to pick_reviewer(), one per call.

        This property is for test assertions only.
        """
        return self._reviewer_choices

    @property
    def confirmations(self) -> list[str]:
        """Get the reviewers passed to confirm_reviewer(), one per call.

        This property is for test assertions only.
        """
        return self._confirmations
