"""Data models for pr-label-tagger.

These Pydantic models represent the core data structures passed between
the classifier, the version calculator, the comment manager and the
release pipeline.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class BumpKind(str, Enum):
    """Semantic-version component a release increments."""

    PATCH = "patch"
    MINOR = "minor"
    MAJOR = "major"


class LifecyclePhase(str, Enum):
    """Pull-request state relevant to the release decision."""

    OPEN = "open"
    MERGED = "merged"
    CLOSED_UNMERGED = "closed-unmerged"


class BumpLabels(BaseModel):
    """Label names that select each bump kind.

    Names are opaque, case-sensitive strings compared verbatim against
    the pull request's labels.
    """

    model_config = ConfigDict(frozen=True)

    patch: str
    minor: str
    major: str


class Decided(BaseModel):
    """Exactly one bump label is present."""

    kind: BumpKind
    label: str

    @property
    def matched_labels(self) -> list[str]:
        return [self.label]


class NoneFound(BaseModel):
    """No bump label is present."""

    @property
    def matched_labels(self) -> list[str]:
        return []


class Ambiguous(BaseModel):
    """Two or more bump labels are present.

    Attributes:
        labels: Every matched label in pull-request order, duplicates kept.
    """

    labels: list[str]

    @property
    def matched_labels(self) -> list[str]:
        return list(self.labels)


BumpDecision = Decided | NoneFound | Ambiguous


class PullRequest(BaseModel):
    """The slice of a pull_request event payload the action reads.

    Attributes:
        number: Pull-request number.
        merged: Whether the pull request was merged. Only meaningful on
                "closed" events.
        merge_commit_sha: Commit the pull request was merged as, if known.
        labels: Label names carried by the payload. The pipeline re-reads
                labels from the API, since the payload can be stale.
    """

    model_config = ConfigDict(frozen=True)

    number: int
    merged: bool = False
    merge_commit_sha: str | None = None
    labels: list[str] = Field(default_factory=list)

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> PullRequest:
        return cls(
            number=data["number"],
            merged=bool(data.get("merged")),
            merge_commit_sha=data.get("merge_commit_sha"),
            labels=[label["name"] for label in data.get("labels") or []],
        )


class RunContext(BaseModel):
    """Everything the run knows about the event that triggered it.

    Built once at startup and passed to each component, so nothing reads
    the Actions environment behind the pipeline's back.
    """

    model_config = ConfigDict(frozen=True)

    event_name: str
    action: str | None = None
    owner: str
    repo: str
    server_url: str = "https://github.com"
    pull_request: PullRequest | None = None

    @property
    def phase(self) -> LifecyclePhase:
        if self.action != "closed":
            return LifecyclePhase.OPEN
        if self.pull_request is not None and self.pull_request.merged:
            return LifecyclePhase.MERGED
        return LifecyclePhase.CLOSED_UNMERGED

    def release_url(self, tag: str) -> str:
        return f"{self.server_url}/{self.owner}/{self.repo}/releases/tag/{tag}"


class IssueComment(BaseModel):
    """A comment on the pull request's conversation tab."""

    id: int
    body: str = ""
    author: str | None = None
    created_at: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> IssueComment:
        user = data.get("user") or {}
        return cls(
            id=data["id"],
            body=data.get("body") or "",
            author=user.get("login"),
            created_at=data.get("created_at") or "",
        )


class Workflow(BaseModel):
    """A repository workflow as listed by the Actions API."""

    id: int
    name: str


class RunResult(BaseModel):
    """Outcome of a single run.

    Attributes:
        phase: Lifecycle phase of the pull request.
        decision: Bump decision derived from the labels.
        current_version: Latest released version, when one was computed.
        next_version: Version the bump produces, when one was computed.
        tag: Tag created by this run, only set for merged pull requests.
        triggered: Workflow names dispatched against the new tag.
    """

    phase: LifecyclePhase
    decision: BumpDecision
    current_version: str | None = None
    next_version: str | None = None
    tag: str | None = None
    triggered: list[str] = Field(default_factory=list)
