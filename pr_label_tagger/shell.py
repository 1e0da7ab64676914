"""Shell, git and gh utilities.

Provides simple wrappers around subprocess calls for running git and the
GitHub CLI, plus output helpers that speak the GitHub Actions workflow
command syntax (::debug::, ::warning::, ::error::).
"""

from __future__ import annotations

import os
import subprocess
import sys

from .errors import GitError, GitHubError


def git(*args: str, check: bool = True) -> str:
    """Run a git command and return stdout.

    Args:
        *args: Arguments to pass to git (e.g., "tag", "--list").
        check: If True (default), raise GitError on non-zero exit. Set to
               False for commands that may legitimately fail.

    Returns:
        Stripped stdout from the git command.

    Raises:
        GitError: If git can't be started or its output isn't text, or if
                  check is set and git exits non-zero. The exit message
                  carries both captured streams.
    """
    try:
        result = subprocess.run(["git", *args], capture_output=True, text=True)
    except (OSError, UnicodeDecodeError) as exc:
        raise GitError(f"Call to git failed: {exc}") from exc
    if check and result.returncode != 0:
        raise GitError(
            f"Call to git failed:\n{result.stdout.strip()}\n{result.stderr.strip()}",
            stdout=result.stdout.strip(),
            stderr=result.stderr.strip(),
        )
    return result.stdout.strip()


def gh(*args: str, token: str | None = None) -> str:
    """Run a GitHub CLI command and return stdout.

    Args:
        *args: Arguments to pass to gh (e.g., "api", "repos/o/r/pulls/1").
        token: Access token handed to gh through GH_TOKEN. Falls back to
               whatever gh is already authenticated with when omitted.

    Raises:
        GitHubError: If gh can't be started or exits non-zero.
    """
    env = dict(os.environ)
    if token:
        env["GH_TOKEN"] = token
    try:
        result = subprocess.run(
            ["gh", *args], capture_output=True, text=True, env=env
        )
    except (OSError, UnicodeDecodeError) as exc:
        raise GitHubError(f"Call to gh {' '.join(args[:2])} failed: {exc}") from exc
    if result.returncode != 0:
        raise GitHubError(
            f"Call to gh {' '.join(args[:2])} failed: {result.stderr.strip()}"
        )
    return result.stdout


def _escape(msg: str) -> str:
    # Workflow commands are line-based; encode what would break them.
    return msg.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def debug(msg: str) -> None:
    """Emit a debug line, shown only when step debugging is enabled."""
    print(f"::debug::{_escape(msg)}")


def info(msg: str) -> None:
    """Emit a plain log line."""
    print(msg)


def warning(msg: str) -> None:
    """Emit a warning annotation."""
    print(f"::warning::{_escape(msg)}")


def error(msg: str) -> None:
    """Emit an error annotation on stderr."""
    print(f"::error::{_escape(msg)}", file=sys.stderr)


def step(msg: str) -> None:
    """Print a visually distinct step header.

    Used to separate the phases of a run in the job log.
    """
    print(f"\n{'─' * 60}\n{msg}\n{'─' * 60}")


def fatal(msg: str) -> None:
    """Report an error and exit with code 1.

    Use for unrecoverable errors that should fail the workflow run.
    """
    error(msg)
    sys.exit(1)
