"""Tests for the reassign-reviewer command."""

import pytest
from click.testing import CliRunner

from reassign_reviewer.cli.cli import cli
from reassign_reviewer.core.context import context_for_test
from reassign_reviewer.errors import ApiError
from reassign_reviewer.gateway.github.fake import FakeGitHub
from reassign_reviewer.gateway.github.types import PullRequestInfo, RepoInfo, UserRef
from reassign_reviewer.gateway.prompt.fake import FakePrompter

REPO = RepoInfo(owner="octo", name="widgets")


def _pr(number: int) -> PullRequestInfo:
    return PullRequestInfo(
        number=number,
        title=f"Change {number}",
        author="me",
        state="OPEN",
        is_draft=False,
        updated_at="2024-05-02T10:00:00Z",
        created_at="2024-05-01T10:00:00Z",
    )


def _github(**kwargs: object) -> FakeGitHub:
    defaults: dict[str, object] = {
        "current_user": "me",
        "review_authors": {42: [UserRef("alice", "User"), UserRef("me", "User")]},
        "comment_authors": {42: [UserRef("bob", "User")]},
    }
    defaults.update(kwargs)
    return FakeGitHub(**defaults)  # type: ignore[arg-type]


def test_reassign_with_pr_number_argument() -> None:
    """A PR number argument skips the PR list."""
    runner = CliRunner()
    github = _github()
    prompter = FakePrompter(reviewer_index=1)
    ctx = context_for_test(github=github, prompter=prompter, repo=REPO)

    result = runner.invoke(cli, ["42"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Re-requested review from bob on PR #42" in result.output
    assert prompter.pr_choices == []
    assert prompter.reviewer_choices == [["alice", "bob"]]
    assert github.requested_reviewers == [(REPO, 42, ["bob"])]


@pytest.mark.parametrize("raw", ["0", "-5", "abc"])
def test_invalid_pr_number_rejected_before_any_call(raw: str) -> None:
    runner = CliRunner()
    github = _github()
    prompter = FakePrompter()
    ctx = context_for_test(github=github, prompter=prompter, repo=REPO)

    result = runner.invoke(cli, [raw], obj=ctx)

    assert result.exit_code == 1
    assert "Error: " in result.output
    assert f"Invalid PR number '{raw}'" in result.output
    assert github.calls == []
    assert prompter.pr_choices == []


def test_reassign_picks_from_assigned_prs() -> None:
    runner = CliRunner()
    github = _github(
        assigned_prs=[_pr(50), _pr(42)],
        review_authors={42: [UserRef("alice", "User")]},
        comment_authors={},
    )
    prompter = FakePrompter(pr_index=1)
    ctx = context_for_test(github=github, prompter=prompter, repo=REPO)

    result = runner.invoke(cli, [], obj=ctx)

    assert result.exit_code == 0, result.output
    assert github.assigned_pr_queries == [(REPO, "me")]
    assert github.requested_reviewers == [(REPO, 42, ["alice"])]


def test_no_assigned_prs_fails() -> None:
    runner = CliRunner()
    github = _github(assigned_prs=[])
    prompter = FakePrompter()
    ctx = context_for_test(github=github, prompter=prompter, repo=REPO)

    result = runner.invoke(cli, [], obj=ctx)

    assert result.exit_code == 1
    assert "No open pull requests assigned to me in octo/widgets" in result.output
    assert github.calls == ["get_current_user_login", "get_assigned_open_prs"]
    assert prompter.pr_choices == []


def test_no_candidate_reviewers_fails_before_picker() -> None:
    runner = CliRunner()
    github = _github(review_authors={42: [UserRef("me", "User")]}, comment_authors={})
    prompter = FakePrompter()
    ctx = context_for_test(github=github, prompter=prompter, repo=REPO)

    result = runner.invoke(cli, ["42"], obj=ctx)

    assert result.exit_code == 1
    assert "No available reviewers to re-request on PR #42" in result.output
    assert prompter.reviewer_choices == []


def test_declined_confirmation_exits_zero_without_request() -> None:
    runner = CliRunner()
    github = _github()
    ctx = context_for_test(github=github, prompter=FakePrompter(confirm=False), repo=REPO)

    result = runner.invoke(cli, ["42"], obj=ctx)

    assert result.exit_code == 0
    assert "Reviewer selection cancelled" in result.output
    assert "Error" not in result.output
    assert github.requested_reviewers == []


def test_aborted_picker_exits_non_zero() -> None:
    runner = CliRunner()
    github = _github()
    ctx = context_for_test(github=github, prompter=FakePrompter(reviewer_index=None), repo=REPO)

    result = runner.invoke(cli, ["42"], obj=ctx)

    assert result.exit_code == 1
    assert "Select reviewer cancelled" in result.output
    assert github.requested_reviewers == []


def test_auth_failure_exits_non_zero() -> None:
    runner = CliRunner()
    github = _github(current_user=None)
    ctx = context_for_test(github=github, repo=REPO)

    result = runner.invoke(cli, ["42"], obj=ctx)

    assert result.exit_code == 1
    assert "rejected the credentials" in result.output
    assert github.calls == ["get_current_user_login"]


def test_api_error_on_request_exits_non_zero() -> None:
    runner = CliRunner()
    error = ApiError("Failed to request review on PR #42 (HTTP 422): nope", status=422)
    github = _github(request_reviewers_error=error)
    ctx = context_for_test(github=github, repo=REPO)

    result = runner.invoke(cli, ["42"], obj=ctx)

    assert result.exit_code == 1
    assert "HTTP 422" in result.output
    assert github.calls.count("request_reviewers") == 1


def test_repo_option_overrides_repository() -> None:
    runner = CliRunner()
    github = _github()
    ctx = context_for_test(github=github, repo=REPO)

    result = runner.invoke(cli, ["--repo", "other/place", "42"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert github.requested_reviewers == [(RepoInfo("other", "place"), 42, ["alice"])]


def test_malformed_repo_option_fails() -> None:
    runner = CliRunner()
    github = _github()
    ctx = context_for_test(github=github, repo=REPO)

    result = runner.invoke(cli, ["-R", "nope", "42"], obj=ctx)

    assert result.exit_code == 1
    assert "expected OWNER/NAME" in result.output
    assert github.calls == []


def test_dry_run_prints_request_without_sending() -> None:
    runner = CliRunner()
    github = _github()
    ctx = context_for_test(github=github, repo=REPO)

    result = runner.invoke(cli, ["--dry-run", "42"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "[DRY RUN] Would request review from alice on octo/widgets#42" in result.output
    assert "Re-requested review" not in result.output
    assert github.requested_reviewers == []


@pytest.mark.parametrize("flag", ["--dryrun", "-x", "--verbose"])
def test_unknown_option_is_usage_error(flag: str) -> None:
    runner = CliRunner()
    github = _github()
    ctx = context_for_test(github=github, repo=REPO)

    result = runner.invoke(cli, [flag], obj=ctx)

    assert result.exit_code == 2
    assert f"No such option: {flag}" in result.output
    assert "Invalid PR number" not in result.output
    assert github.calls == []
