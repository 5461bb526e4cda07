"""Tests for RealPrompter with the terminal patched out."""

from unittest.mock import MagicMock, patch

import click
import pytest

from reassign_reviewer.errors import UserCancelled
from reassign_reviewer.gateway.github.types import PullRequestInfo
from reassign_reviewer.gateway.prompt.real import RealPrompter, parse_confirmation

PROMPT_PATH = "reassign_reviewer.gateway.prompt.real.user_prompt"
OUTPUT_PATH = "reassign_reviewer.gateway.prompt.real.user_output"
APP_PATH = "reassign_reviewer.gateway.prompt.real.SelectionApp"


@pytest.mark.parametrize(
    ("answer", "expected"),
    [
        ("y", True),
        ("Y", True),
        ("yes", True),
        ("YeS", True),
        (" yes ", True),
        ("n", False),
        ("N", False),
        ("no", False),
        ("NO", False),
        ("maybe", None),
        ("", None),
        ("yep", None),
    ],
)
def test_parse_confirmation(answer: str, expected: bool | None) -> None:
    assert parse_confirmation(answer) is expected


def test_confirm_reviewer_returns_true_on_yes() -> None:
    with patch(PROMPT_PATH, side_effect=["yes"]) as mock_prompt:
        assert RealPrompter().confirm_reviewer("alice") is True

    mock_prompt.assert_called_once_with("You selected: alice. Is this correct? (y/n):")


def test_confirm_reviewer_reprompts_until_recognized() -> None:
    with (
        patch(PROMPT_PATH, side_effect=["maybe", "what", "N"]) as mock_prompt,
        patch(OUTPUT_PATH) as mock_output,
    ):
        assert RealPrompter().confirm_reviewer("alice") is False

    assert mock_prompt.call_count == 3
    assert mock_output.call_count == 2
    mock_output.assert_called_with("Please enter 'y' or 'n'.")


def test_pick_reviewer_returns_selected_index() -> None:
    app = MagicMock()
    app.run.return_value = 2
    with patch(APP_PATH, return_value=app) as mock_app_cls:
        index = RealPrompter().pick_reviewer(["alice", "bob", "carol"])

    assert index == 2
    mock_app_cls.assert_called_once_with("Select reviewer", ["alice", "bob", "carol"])
    app.run.assert_called_once_with(inline=True)


def test_pick_pr_shows_formatted_rows() -> None:
    pr = PullRequestInfo(
        number=42,
        title="Add caching",
        author="alice",
        state="OPEN",
        is_draft=False,
        updated_at="2024-05-02T10:00:00Z",
        created_at="2024-05-01T10:00:00Z",
    )
    app = MagicMock()
    app.run.return_value = 0
    with patch(APP_PATH, return_value=app) as mock_app_cls:
        assert RealPrompter().pick_pr([pr]) == 0

    title, rows = mock_app_cls.call_args[0]
    assert title == "Select PR"
    assert rows[0].startswith("#42 ")
    assert "Add caching" in rows[0]


def test_aborted_selection_raises_user_cancelled() -> None:
    app = MagicMock()
    app.run.return_value = None
    with patch(APP_PATH, return_value=app):
        with pytest.raises(UserCancelled, match="Select reviewer cancelled") as exc_info:
            RealPrompter().pick_reviewer(["alice"])

    assert exc_info.value.declined is False


def test_confirm_reviewer_abort_raises_user_cancelled() -> None:
    """EOF or Ctrl+C at the prompt ends the run as a cancellation error."""
    with patch(PROMPT_PATH, side_effect=click.Abort()):
        with pytest.raises(UserCancelled, match="Reviewer selection cancelled") as exc_info:
            RealPrompter().confirm_reviewer("alice")

    assert exc_info.value.declined is False
    assert exc_info.value.exit_code == 1
