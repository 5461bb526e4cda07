"""Formatting of selection-list rows."""

from rich.cells import cell_len, set_cell_size

from reassign_reviewer.gateway.github.types import PullRequestInfo

NUMBER_WIDTH = 7
TITLE_WIDTH = 75
AUTHOR_WIDTH = 15
STATE_WIDTH = 10
UPDATED_WIDTH = 20


def pad_right(text: str, width: int) -> str:
    """Pad text with spaces to width terminal cells.

    Wide characters (CJK, emoji) count as two cells. Text already at least
    width cells wide is returned unchanged.
    """
    length = cell_len(text)
    if length < width:
        return text + " " * (width - length)
    return text


def truncate_title(title: str) -> str:
    """Cut titles wider than TITLE_WIDTH cells down to fit, ending in '...'."""
    if cell_len(title) > TITLE_WIDTH:
        return set_cell_size(title, TITLE_WIDTH - 3).rstrip() + "..."
    return title


def format_pr_row(pr: PullRequestInfo) -> str:
    """Format a pull request as one aligned row of the PR selection list."""
    state = pr.state
    if pr.is_draft:
        state += " (Draft)"
    return " ".join(
        [
            "#" + pad_right(str(pr.number), NUMBER_WIDTH),
            pad_right(truncate_title(pr.title), TITLE_WIDTH),
            pad_right(pr.author, AUTHOR_WIDTH),
            pad_right(state, STATE_WIDTH),
            pad_right(pr.updated_at, UPDATED_WIDTH),
        ]
    )
