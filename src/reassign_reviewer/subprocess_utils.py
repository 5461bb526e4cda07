"""Subprocess helpers with timing logs and enriched error context."""

import logging
import subprocess
import time
from pathlib import Path

logger = logging.getLogger(__name__)


def _build_timing_description(cmd: list[str]) -> str:
    """Describe a command for debug logs.

    GraphQL query bodies are replaced with their length so multi-line queries
    don't flood the log.
    """
    parts: list[str] = []
    for arg in cmd:
        if arg.startswith("query="):
            parts.append(f"query=<{len(arg) - len('query=')} chars>")
        else:
            parts.append(arg)
    return " ".join(parts)


def run_subprocess_with_context(
    cmd: list[str],
    *,
    operation_context: str,
    cwd: Path | None = None,
    input: str | None = None,
    check: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Run a command, capturing text output.

    Args:
        cmd: Command and arguments to execute
        operation_context: What the command is for, e.g. "fetch current user".
            Used in error messages.
        cwd: Working directory, or None for the current one
        input: Text written to the command's stdin
        check: If True, a non-zero exit raises RuntimeError

    Returns:
        The completed process with text stdout and stderr

    Raises:
        RuntimeError: If check is True and the command exits non-zero
        FileNotFoundError: If the executable is not installed
    """
    description = _build_timing_description(cmd)
    logger.debug("Running: %s", description)
    start = time.monotonic()
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            input=input,
            capture_output=True,
            text=True,
            check=check,
        )
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        msg = f"Failed to {operation_context}\nCommand: {description}\nExit code: {e.returncode}"
        if stderr:
            msg += f"\nstderr: {stderr}"
        raise RuntimeError(msg) from e
    finally:
        logger.debug("Finished in %.2fs: %s", time.monotonic() - start, description)
    return result
