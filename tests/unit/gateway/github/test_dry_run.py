"""Tests for DryRunGitHub."""

import pytest

from reassign_reviewer.gateway.github.dry_run import DryRunGitHub
from reassign_reviewer.gateway.github.fake import FakeGitHub
from reassign_reviewer.gateway.github.types import RepoInfo, UserRef

REPO = RepoInfo(owner="octo", name="widgets")


def test_reads_are_delegated() -> None:
    fake = FakeGitHub(current_user="me", review_authors={3: [UserRef("alice", "User")]})
    github = DryRunGitHub(fake)

    assert github.get_current_user_login() == "me"
    assert github.get_review_authors(REPO, 3) == [UserRef("alice", "User")]
    assert fake.calls == ["get_current_user_login", "get_review_authors"]


def test_request_reviewers_prints_instead_of_sending(capsys: pytest.CaptureFixture[str]) -> None:
    fake = FakeGitHub()
    github = DryRunGitHub(fake)

    github.request_reviewers(REPO, 3, ["alice"])

    assert fake.calls == []
    assert fake.requested_reviewers == []
    captured = capsys.readouterr()
    assert "[DRY RUN] Would request review from alice on octo/widgets#3" in captured.err
