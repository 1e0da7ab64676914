"""Exceptions raised by pr-label-tagger.

Every failure that should end a run derives from TaggerError. The CLI
catches TaggerError once and reports its message as the run's failure;
nothing below the CLI retries or recovers.
"""

from __future__ import annotations


class TaggerError(RuntimeError):
    """Base class for errors that fail the run."""


class ConfigError(TaggerError):
    """A required action input is missing or invalid."""


class ContextError(TaggerError):
    """The run was triggered by an event this action can't handle."""


class GitError(TaggerError):
    """A git command exited non-zero.

    Attributes:
        stdout: Captured standard output of the failed command.
        stderr: Captured standard error of the failed command.
    """

    def __init__(self, message: str, stdout: str = "", stderr: str = "") -> None:
        super().__init__(message)
        self.stdout = stdout
        self.stderr = stderr


class PublishError(GitError):
    """Creating or pushing the release tag failed."""


class GitHubError(TaggerError):
    """A GitHub API call failed or returned something unexpected."""


class VersionBumpError(TaggerError):
    """The current version can't be bumped."""


class UnknownBumpError(TaggerError):
    """A matched bump label doesn't resolve to a bump kind."""
