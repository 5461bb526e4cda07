"""Output helpers that keep user-facing messages on stderr."""

import sys

import click


def user_output(message: str = "", *, nl: bool = True) -> None:
    """Write a user-facing message to stderr.

    Diagnostics and prompts go to stderr so stdout stays free for anything a
    caller might want to pipe.
    """
    click.echo(message, err=True, nl=nl)


def user_prompt(text: str) -> str:
    """Read one line of input from the user after a prompt on stderr.

    stderr is flushed first so buffered messages appear before the prompt.
    """
    sys.stderr.flush()
    return click.prompt(text, err=True, prompt_suffix=" ", show_default=False)
