"""Run context from the GitHub Actions environment.

The runner describes the triggering event through environment variables
and a JSON payload file. load_context() reads them exactly once; every
other module receives the resulting RunContext as an argument.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import ValidationError

from .errors import ContextError
from .models import PullRequest, RunContext


def load_event_payload(path: str | None) -> dict:
    """Load the webhook payload the runner wrote to GITHUB_EVENT_PATH.

    Returns an empty payload when no path is set.

    Raises:
        ContextError: If the file can't be read or isn't a JSON object.
    """
    if not path:
        return {}
    try:
        payload = json.loads(Path(path).read_text())
    except (OSError, json.JSONDecodeError) as exc:
        raise ContextError(f"Unable to read event payload {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ContextError(f"Event payload {path} is not a JSON object")
    return payload


def load_context(env: Mapping[str, str] | None = None) -> RunContext:
    """Build the run context from the Actions environment.

    Raises:
        ContextError: If the repository coordinates are missing or the
                      pull_request payload is malformed.
    """
    env = os.environ if env is None else env
    payload = load_event_payload(env.get("GITHUB_EVENT_PATH"))

    owner, _, repo = env.get("GITHUB_REPOSITORY", "").partition("/")
    if not owner or not repo:
        raise ContextError("GITHUB_REPOSITORY must be set to '<owner>/<repo>'")

    pull_request = None
    if payload.get("pull_request"):
        try:
            pull_request = PullRequest.from_payload(payload["pull_request"])
        except (KeyError, TypeError, ValidationError) as exc:
            raise ContextError(f"Malformed pull_request payload: {exc}") from exc

    return RunContext(
        event_name=env.get("GITHUB_EVENT_NAME", ""),
        action=payload.get("action"),
        owner=owner,
        repo=repo,
        server_url=env.get("GITHUB_SERVER_URL") or "https://github.com",
        pull_request=pull_request,
    )


def require_pull_request(ctx: RunContext) -> PullRequest:
    """Return the context's pull request, failing for any other event.

    Raises:
        ContextError: Naming the event that triggered the run.
    """
    if ctx.pull_request is None:
        raise ContextError(
            f"Action is running for a '{ctx.event_name}' event. "
            "Only 'pull_request' events are supported"
        )
    return ctx.pull_request
