"""Status comment management.

The action keeps exactly one comment per pull request up to date. A
comment is "owned" when github-actions[bot] wrote it and its body carries
the marker below, which every message the action writes ends with.
"""

from __future__ import annotations

from .context import require_pull_request
from .github import GitHubClient
from .models import IssueComment, RunContext
from .shell import debug, warning

BOT_LOGIN = "github-actions[bot]"
COMMENT_MARKER = "🛠️ _Auto tagging "
ENABLED_FOOTER = "🛠️ _Auto tagging enabled_"
DISABLED_FOOTER = "🛠️ _Auto tagging disabled_"


def is_owned(comment: IssueComment) -> bool:
    return comment.author == BOT_LOGIN and COMMENT_MARKER in comment.body


def find_owned_comments(ctx: RunContext, client: GitHubClient) -> list[IssueComment]:
    """List the pull request's comments that belong to this action."""
    pr = require_pull_request(ctx)
    return [c for c in client.list_comments(pr.number) if is_owned(c)]


def upsert_comment(
    ctx: RunContext,
    client: GitHubClient,
    body: str,
    update_only: bool = False,
) -> None:
    """Create the status comment, or edit it if it already exists.

    If several owned comments exist, the oldest is edited and the rest
    are left alone. A new comment is never created while one exists.

    Args:
        ctx: Run context; must describe a pull_request event.
        client: GitHub API client.
        body: New comment body.
        update_only: Only edit an existing comment; never create one.

    Raises:
        ContextError: If the run isn't for a pull request.
    """
    pr = require_pull_request(ctx)
    comments = find_owned_comments(ctx, client)

    if not comments:
        if update_only:
            debug("No comment exists, and update_only=True, do nothing")
            return
        client.create_comment(pr.number, body)
        return

    if len(comments) > 1:
        warning(
            "Multiple potential comments owned by this action found, editing oldest"
        )
    # min() keeps API order on equal timestamps
    oldest = min(comments, key=lambda c: c.created_at)
    client.update_comment(oldest.id, body)
