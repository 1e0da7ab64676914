"""Bump label classification.

Turns a pull request's labels into a single bump decision. Fetching the
labels is kept apart from classifying them so the decision logic works on
plain lists.
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from .context import require_pull_request
from .errors import UnknownBumpError
from .github import GitHubClient
from .models import (
    Ambiguous,
    BumpDecision,
    BumpKind,
    BumpLabels,
    Decided,
    NoneFound,
    RunContext,
)
from .shell import info, warning


def bump_from_label(labels: BumpLabels, label: str) -> BumpKind:
    """Resolve a bump label to the kind it selects.

    Raises:
        UnknownBumpError: If label isn't one of the configured names.
    """
    for kind in BumpKind:
        if getattr(labels, kind.value) == label:
            return kind
    raise UnknownBumpError(f"Unknown version bump {label}. This shouldn't happen")


def classify(labels: BumpLabels, pr_labels: Sequence[str]) -> BumpDecision:
    """Classify a pull request's labels into a bump decision.

    Args:
        labels: Configured bump label names.
        pr_labels: Labels on the pull request, in order.

    Returns:
        Decided when exactly one bump label is present, NoneFound when
        there is none, Ambiguous (keeping order and duplicates) when there
        are several.
    """
    configured = {labels.patch, labels.minor, labels.major}
    matched = [label for label in pr_labels if label in configured]

    if not matched:
        info("No bump labels found")
        return NoneFound()
    if len(matched) > 1:
        shown = json.dumps(matched, separators=(",", ":"), ensure_ascii=False)
        warning(f"Multiple bump labels found: {shown}")
        return Ambiguous(labels=matched)
    return Decided(kind=bump_from_label(labels, matched[0]), label=matched[0])


def fetch_pr_labels(ctx: RunContext, client: GitHubClient) -> list[str]:
    """Fetch the pull request's current labels from the API.

    The event payload's labels reflect the moment the event fired; other
    label events may have landed since.
    """
    pr = require_pull_request(ctx)
    return client.get_pull_request_labels(pr.number)
