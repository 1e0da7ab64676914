"""Downstream workflow dispatch.

Workflows are addressed by their display name. Names aren't unique in a
repository, so every workflow carrying a configured name is triggered.
"""

from __future__ import annotations

from collections.abc import Sequence

from .github import GitHubClient
from .shell import debug, info, warning


def trigger_dispatch(client: GitHubClient, tag: str, names: Sequence[str]) -> list[str]:
    """Dispatch the named workflows against a release tag.

    Target workflows must declare the workflow_dispatch event; GitHub
    accepts the dispatch either way, so a misconfigured target only shows
    up as a missing run.

    Args:
        client: GitHub API client.
        tag: Tag to run the workflows on, e.g. "v1.3.0".
        names: Workflow names, in the order to trigger them.

    Returns:
        Names that matched at least one workflow.
    """
    if not names:
        return []

    workflows = client.list_workflows()
    triggered: list[str] = []
    for name in names:
        debug(f"Triggering workflow {name}")
        matches = [wf for wf in workflows if wf.name == name]
        if len(matches) > 1:
            debug(f"Multiple workflows with name {name}, triggering all of them")
        if not matches:
            warning(f"No workflow with name {name} found, skipping")
            continue
        for wf in matches:
            info(
                f"Triggering workflow {name} ({wf.id}). "
                "If the workflow doesn't run, please make sure that it's "
                "configured with the `workflow_dispatch` event"
            )
            client.dispatch_workflow(wf.id, f"refs/tags/{tag}")
        triggered.append(name)
    return triggered
