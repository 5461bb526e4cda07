"""Interactive prompt abstraction for testing.

Selection lists and the yes/no confirmation sit behind this ABC so the
workflow can run against scripted answers in tests.
"""

from abc import ABC, abstractmethod

from reassign_reviewer.gateway.github.types import PullRequestInfo


class Prompter(ABC):
    """Abstract interactive prompt operations for dependency injection."""

    @abstractmethod
    def pick_pr(self, prs: list[PullRequestInfo]) -> int:
        """Let the user choose a pull request.

        Args:
            prs: Non-empty list of pull requests to choose from

        Returns:
            Index of the chosen pull request in prs

        Raises:
            UserCancelled: If the user aborts the selection
        """
        ...

    @abstractmethod
    def pick_reviewer(self, reviewers: list[str]) -> int:
        """Let the user choose a reviewer login.

        Args:
            reviewers: Non-empty list of logins to choose from

        Returns:
            Index of the chosen login in reviewers

        Raises:
            UserCancelled: If the user aborts the selection
        """
        ...

    @abstractmethod
    def confirm_reviewer(self, reviewer: str) -> bool:
        """Ask the user to confirm the chosen reviewer.

        Returns:
            True for yes, False for no
        """
        ...
