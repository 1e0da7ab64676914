"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from pr_label_tagger.config import ActionInputs
from pr_label_tagger.models import (
    BumpLabels,
    IssueComment,
    PullRequest,
    RunContext,
    Workflow,
)


class FakeGitHubClient:
    """In-memory stand-in for GitHubClient.

    Records every mutation so tests can assert on what the action did.
    """

    def __init__(
        self,
        labels: list[str] | None = None,
        comments: list[IssueComment] | None = None,
        workflows: list[Workflow] | None = None,
    ) -> None:
        self.labels = labels or []
        self.comments = comments or []
        self.workflows = workflows or []
        self.created: list[tuple[int, str]] = []
        self.updated: list[tuple[int, str]] = []
        self.dispatched: list[tuple[int, str]] = []
        self._next_id = 1000

    def get_pull_request_labels(self, number: int) -> list[str]:
        return list(self.labels)

    def list_comments(self, number: int) -> list[IssueComment]:
        return list(self.comments)

    def create_comment(self, number: int, body: str) -> None:
        self.created.append((number, body))
        self._next_id += 1
        self.comments.append(
            IssueComment(
                id=self._next_id,
                body=body,
                author="github-actions[bot]",
                created_at=f"2024-06-01T00:00:{len(self.comments):02d}Z",
            )
        )

    def update_comment(self, comment_id: int, body: str) -> None:
        self.updated.append((comment_id, body))
        self.comments = [
            c.model_copy(update={"body": body}) if c.id == comment_id else c
            for c in self.comments
        ]

    def list_workflows(self) -> list[Workflow]:
        return list(self.workflows)

    def dispatch_workflow(self, workflow_id: int, ref: str) -> None:
        self.dispatched.append((workflow_id, ref))


@pytest.fixture
def bump_labels() -> BumpLabels:
    """Default bump label configuration."""
    return BumpLabels(patch="bump:patch", minor="bump:minor", major="bump:major")


@pytest.fixture
def inputs(bump_labels: BumpLabels) -> ActionInputs:
    """Action inputs with default comment templates and no triggers."""
    return ActionInputs(labels=bump_labels, token="mock-token")


@pytest.fixture
def make_context() -> Callable[..., RunContext]:
    """Factory for pull_request run contexts."""

    def _make(
        action: str = "synchronize",
        merged: bool = False,
        merge_commit_sha: str | None = None,
    ) -> RunContext:
        return RunContext(
            event_name="pull_request",
            action=action,
            owner="projectsyn",
            repo="pr-label-tag-action",
            pull_request=PullRequest(
                number=123, merged=merged, merge_commit_sha=merge_commit_sha
            ),
        )

    return _make


@pytest.fixture
def pr_context(make_context: Callable[..., RunContext]) -> RunContext:
    """Context for an open pull request."""
    return make_context()


@pytest.fixture
def push_context() -> RunContext:
    """Context for a non-PR event."""
    return RunContext(
        event_name="push", owner="projectsyn", repo="pr-label-tag-action"
    )


@pytest.fixture
def make_client() -> type[FakeGitHubClient]:
    """Factory for in-memory GitHub clients."""
    return FakeGitHubClient
