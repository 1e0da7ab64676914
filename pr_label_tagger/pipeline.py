"""Release pipeline: validate → classify → compute → branch → comment.

This module decides what a pull-request event means for the next release:
1. Check that the run was triggered by a pull request
2. Classify the pull request's labels into a bump decision
3. Compute the next version from the latest release tag
4. Branch on the pull request's lifecycle phase:
   - open: preview the release in the status comment
   - merged: tag the merge commit, dispatch follow-up workflows
   - closed unmerged: announce that nothing will be released
5. Write the outcome to the status comment

Every step runs to completion before the next starts. A failure anywhere
aborts the run; side effects already applied (e.g., a pushed tag) stay.
"""

from __future__ import annotations

from collections.abc import Sequence

from .comment import DISABLED_FOOTER, ENABLED_FOOTER, upsert_comment
from .config import ActionInputs, render_template
from .context import require_pull_request
from .dispatch import trigger_dispatch
from .github import GitHubClient
from .labels import classify, fetch_pr_labels
from .models import (
    Ambiguous,
    Decided,
    LifecyclePhase,
    NoneFound,
    RunContext,
    RunResult,
)
from .shell import debug, info, step
from .tags import create_and_push_tag, find_latest_version
from .versions import bump_version


def format_code(text: str) -> str:
    return f"`{text}`"


def format_code_list(items: Sequence[str]) -> str:
    """Render items as a comma-joined list of inline code spans."""
    return ", ".join(format_code(item) for item in items)


def _sections(*parts: str) -> str:
    # Empty sections are dropped so optional lines don't leave gaps.
    return "\n\n".join(part for part in parts if part)


def _enabled_footer(label: str) -> str:
    return f"{ENABLED_FOOTER} with label {format_code(label)}"


def ambiguous_message(labels: Sequence[str]) -> str:
    return _sections(
        f"Found {len(labels)} bump labels ({format_code_list(labels)}), "
        "please make sure you only add one bump label.",
        DISABLED_FOOTER,
    )


def no_labels_message() -> str:
    return _sections(
        "No bump labels found, please add one bump label to enable auto tagging.",
        DISABLED_FOOTER,
    )


def preview_message(inputs: ActionInputs, next_version: str, label: str) -> str:
    """Comment for an open pull request: what merging would release."""
    triggers = ""
    if inputs.triggers:
        triggers = "Merging will trigger workflows " + format_code_list(
            inputs.triggers
        )
    return _sections(
        render_template(inputs.release_comment, next_version),
        triggers,
        _enabled_footer(label),
    )


def released_message(
    inputs: ActionInputs,
    ctx: RunContext,
    next_version: str,
    label: str,
    triggered: Sequence[str],
) -> str:
    """Comment for a merged pull request: the release that was created."""
    triggers = ""
    if triggered:
        triggers = f"Triggering workflows {format_code_list(triggered)}"
    return _sections(
        render_template(
            inputs.released_comment, next_version, ctx.release_url(next_version)
        ),
        triggers,
        _enabled_footer(label),
    )


def unmerged_message(inputs: ActionInputs, next_version: str) -> str:
    """Comment for a pull request closed without merging."""
    return _sections(
        render_template(inputs.unmerged_comment, next_version), DISABLED_FOOTER
    )


def run_action(
    ctx: RunContext, inputs: ActionInputs, client: GitHubClient
) -> RunResult:
    """Execute one run of the action for a pull-request event.

    Args:
        ctx: Run context built from the Actions environment.
        inputs: Validated action inputs.
        client: GitHub API client for labels, comments and dispatches.

    Returns:
        What the run decided and did.

    Raises:
        TaggerError: On any failure. Nothing is rolled back.
    """
    pr = require_pull_request(ctx)
    labels = inputs.labels
    debug(
        f"Using {labels.patch}, {labels.minor}, {labels.major} "
        "to determine SemVer bump ..."
    )

    # Phase 1: Classification
    step(f"Classifying labels of PR #{pr.number}")
    decision = classify(labels, fetch_pr_labels(ctx, client))
    phase = ctx.phase

    match decision:
        case Ambiguous(labels=matched):
            upsert_comment(ctx, client, ambiguous_message(matched))
            return RunResult(phase=phase, decision=decision)
        case NoneFound():
            # Only a removed label can turn an existing comment stale.
            if ctx.action == "unlabeled":
                upsert_comment(ctx, client, no_labels_message(), update_only=True)
            return RunResult(phase=phase, decision=decision)
        case Decided(kind=kind, label=label):
            info(f"  {label} → {kind.value}")

    # Phase 2: Version
    step("Computing next version")
    current = find_latest_version()
    next_version = bump_version(current, kind)
    info(f"  {current} → {next_version}")
    result = RunResult(
        phase=phase,
        decision=decision,
        current_version=current,
        next_version=next_version,
    )

    # Phase 3: Act on the lifecycle phase
    if phase is LifecyclePhase.MERGED:
        create_and_push_tag(next_version, pr.merge_commit_sha)
        triggered = trigger_dispatch(client, next_version, inputs.triggers)
        upsert_comment(
            ctx,
            client,
            released_message(inputs, ctx, next_version, label, triggered),
        )
        return result.model_copy(update={"tag": next_version, "triggered": triggered})

    if phase is LifecyclePhase.CLOSED_UNMERGED:
        upsert_comment(ctx, client, unmerged_message(inputs, next_version))
        return result

    upsert_comment(ctx, client, preview_message(inputs, next_version, label))
    return result
