"""Context holding all dependencies for a reassign-reviewer run."""

from dataclasses import dataclass
from pathlib import Path

from reassign_reviewer.gateway.github.abc import GitHub
from reassign_reviewer.gateway.github.dry_run import DryRunGitHub
from reassign_reviewer.gateway.github.parsing import parse_repo_argument
from reassign_reviewer.gateway.github.real import RealGitHub
from reassign_reviewer.gateway.github.types import RepoInfo
from reassign_reviewer.gateway.prompt.abc import Prompter
from reassign_reviewer.gateway.prompt.real import RealPrompter


@dataclass(frozen=True)
class ReassignContext:
    """Immutable context holding all dependencies for one invocation.

    Created at the CLI entry point and passed through Click's context object.
    Frozen to prevent accidental modification at runtime.
    """

    github: GitHub
    prompter: Prompter

    # Current working directory at CLI invocation
    cwd: Path

    # Repository the command operates on
    repo: RepoInfo

    dry_run: bool


def create_context(*, repo: str | None, dry_run: bool) -> ReassignContext:
    """Create production context with real implementations.

    Args:
        repo: OWNER/NAME given on the command line, or None to ask gh for
            the repository of the current directory
        dry_run: If True, wrap GitHub so the reviewer request is printed
            instead of sent

    Raises:
        ValidationError: If repo is not of the form OWNER/NAME
        ReassignError: If the current repository cannot be determined
    """
    cwd = Path.cwd()
    github: GitHub = RealGitHub()

    if repo is not None:
        repo_info = parse_repo_argument(repo)
    else:
        repo_info = github.get_repo_info(cwd)

    if dry_run:
        github = DryRunGitHub(github)

    return ReassignContext(
        github=github,
        prompter=RealPrompter(),
        cwd=cwd,
        repo=repo_info,
        dry_run=dry_run,
    )


def context_for_test(
    *,
    github: GitHub | None = None,
    prompter: Prompter | None = None,
    cwd: Path | None = None,
    repo: RepoInfo | None = None,
    dry_run: bool = False,
) -> ReassignContext:
    """Create test context with fakes for anything not supplied.

    Example:
        >>> github = FakeGitHub(current_user="alice")
        >>> ctx = context_for_test(github=github, prompter=FakePrompter(confirm=False))
    """
    from reassign_reviewer.gateway.github.fake import FakeGitHub
    from reassign_reviewer.gateway.prompt.fake import FakePrompter

    resolved_github: GitHub = github if github is not None else FakeGitHub()
    if dry_run:
        resolved_github = DryRunGitHub(resolved_github)

    return ReassignContext(
        github=resolved_github,
        prompter=prompter if prompter is not None else FakePrompter(),
        cwd=cwd if cwd is not None else Path("/test/default/cwd"),
        repo=repo if repo is not None else RepoInfo(owner="test-owner", name="test-repo"),
        dry_run=dry_run,
    )
