"""Production prompts: Textual selection lists and a line-based confirmation."""

import click

from reassign_reviewer.core.display import format_pr_row
from reassign_reviewer.errors import UserCancelled
from reassign_reviewer.gateway.github.types import PullRequestInfo
from reassign_reviewer.gateway.prompt.abc import Prompter
from reassign_reviewer.output.output import user_output, user_prompt
from reassign_reviewer.tui.selection_app import SelectionApp

YES_ANSWERS = frozenset({"y", "yes"})
NO_ANSWERS = frozenset({"n", "no"})


def parse_confirmation(answer: str) -> bool | None:
    """Interpret a confirmation answer.

    Returns:
        True for y/yes, False for n/no (any case), None for anything else
    """
    normalized = answer.strip().lower()
    if normalized in YES_ANSWERS:
        return True
    if normalized in NO_ANSWERS:
        return False
    return None


class RealPrompter(Prompter):
    """Production implementation that talks to the terminal."""

    def _select(self, title: str, items: list[str]) -> int:
        # Inline mode keeps the list below the prompt instead of taking over the screen
        index = SelectionApp(title, items).run(inline=True)
        if index is None:
            raise UserCancelled(f"{title} cancelled")
        return index

    def pick_pr(self, prs: list[PullRequestInfo]) -> int:
        return self._select("Select PR", [format_pr_row(pr) for pr in prs])

    def pick_reviewer(self, reviewers: list[str]) -> int:
        return self._select("Select reviewer", reviewers)

    def confirm_reviewer(self, reviewer: str) -> bool:
        """Ask until the answer is one of y, yes, n, no."""
        while True:
            try:
                answer = user_prompt(f"You selected: {reviewer}. Is this correct? (y/n):")
            except click.Abort:
                # EOF or Ctrl+C at the prompt
                raise UserCancelled("Reviewer selection cancelled") from None
            confirmed = parse_confirmation(answer)
            if confirmed is not None:
                return confirmed
            user_output("Please enter 'y' or 'n'.")
