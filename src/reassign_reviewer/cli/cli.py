import logging
import re
from dataclasses import replace

import click

from reassign_reviewer.core.context import ReassignContext, create_context
from reassign_reviewer.core.workflow import parse_pr_number, run_reassignment
from reassign_reviewer.errors import ReassignError, UserCancelled
from reassign_reviewer.gateway.github.dry_run import DryRunGitHub
from reassign_reviewer.gateway.github.parsing import parse_repo_argument
from reassign_reviewer.output.output import user_output

CONTEXT_SETTINGS = dict(
    help_option_names=["-h", "--help"],  # terse help flags
    ignore_unknown_options=True,  # so "-5" reaches PR_NUMBER validation
)

_NEGATIVE_NUMBER_PATTERN = re.compile(r"-[0-9]+")


def _prepare_context(
    existing: ReassignContext | None, *, repo: str | None, dry_run: bool
) -> ReassignContext:
    """Build the production context, or adjust one supplied by tests."""
    if existing is None:
        return create_context(repo=repo, dry_run=dry_run)

    ctx = existing
    if repo is not None:
        ctx = replace(ctx, repo=parse_repo_argument(repo))
    if dry_run and not ctx.dry_run:
        ctx = replace(ctx, github=DryRunGitHub(ctx.github), dry_run=True)
    return ctx


@click.command("reassign-reviewer", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="reassign-reviewer")
@click.argument("pr_number", required=False)
@click.option(
    "-R",
    "--repo",
    metavar="OWNER/NAME",
    help="Repository to use instead of the one in the current directory",
)
@click.option("--dry-run", is_flag=True, help="Print the review request instead of sending it")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(
    ctx: click.Context, pr_number: str | None, repo: str | None, dry_run: bool, debug: bool
) -> None:
    """Re-request review from someone who already reviewed or commented on a PR.

    Without PR_NUMBER, pick from the open pull requests assigned to you.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Unknown options land in PR_NUMBER; only negative numbers may pass through
    if (
        pr_number is not None
        and pr_number.startswith("-")
        and _NEGATIVE_NUMBER_PATTERN.fullmatch(pr_number) is None
    ):
        raise click.UsageError(f"No such option: {pr_number}", ctx=ctx)

    try:
        # Validate before building the context, which already talks to GitHub
        number = parse_pr_number(pr_number) if pr_number is not None else None
        ctx.obj = _prepare_context(ctx.obj, repo=repo, dry_run=dry_run)
        result = run_reassignment(ctx.obj, number)
    except UserCancelled as e:
        if e.declined:
            user_output(str(e))
        else:
            user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(e.exit_code) from None
    except ReassignError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(e.exit_code) from None

    if result.dry_run:
        return
    user_output(
        click.style("✓ ", fg="green")
        + f"Re-requested review from {result.reviewer} on PR #{result.pr_number}"
    )


def main() -> None:
    """CLI entry point used by the `reassign-reviewer` console script."""
    cli()
