"""GitHub REST API access through the gh CLI.

Each method maps onto one REST endpoint. Paginated endpoints are fetched
with --paginate --slurp, so callers always see every page.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from .errors import GitHubError
from .models import IssueComment, Workflow
from .shell import gh


def _unexpected(path: str, exc: Exception) -> GitHubError:
    return GitHubError(f"Unexpected response from {path}: {exc!r}")


class GitHubClient:
    """Thin client for the endpoints the action needs.

    Args:
        owner: Repository owner (user or organization).
        repo: Repository name.
        token: Token passed to gh for every call.
    """

    def __init__(self, owner: str, repo: str, token: str) -> None:
        self.owner = owner
        self.repo = repo
        self.token = token

    @property
    def repo_path(self) -> str:
        return f"repos/{self.owner}/{self.repo}"

    def api(
        self,
        path: str,
        *,
        method: str = "GET",
        fields: dict[str, str] | None = None,
        paginate: bool = False,
    ) -> Any:
        """Call an endpoint and return the decoded JSON response.

        Returns None for endpoints that answer with an empty body (e.g.,
        204 No Content). With paginate set, returns a list with one entry
        per page.
        """
        args = ["api", path, "--method", method]
        for key, value in (fields or {}).items():
            args.extend(["-f", f"{key}={value}"])
        if paginate:
            args.extend(["--paginate", "--slurp"])

        output = gh(*args, token=self.token)
        if not output.strip():
            return None
        try:
            return json.loads(output)
        except json.JSONDecodeError as exc:
            raise GitHubError(f"Invalid JSON from {method} {path}: {exc}") from exc

    def get_pull_request_labels(self, number: int) -> list[str]:
        """Fetch the current label names of a pull request."""
        path = f"{self.repo_path}/pulls/{number}"
        data = self.api(path)
        try:
            return [label["name"] for label in data.get("labels", [])]
        except (AttributeError, KeyError, TypeError) as exc:
            raise _unexpected(path, exc) from exc

    def list_comments(self, number: int) -> list[IssueComment]:
        """List every comment on a pull request, oldest first."""
        path = f"{self.repo_path}/issues/{number}/comments"
        pages = self.api(path, paginate=True)
        try:
            return [IssueComment.from_api(c) for page in pages or [] for c in page]
        except (AttributeError, KeyError, TypeError, ValidationError) as exc:
            raise _unexpected(path, exc) from exc

    def create_comment(self, number: int, body: str) -> None:
        self.api(
            f"{self.repo_path}/issues/{number}/comments",
            method="POST",
            fields={"body": body},
        )

    def update_comment(self, comment_id: int, body: str) -> None:
        self.api(
            f"{self.repo_path}/issues/comments/{comment_id}",
            method="PATCH",
            fields={"body": body},
        )

    def list_workflows(self) -> list[Workflow]:
        """List every workflow defined in the repository."""
        path = f"{self.repo_path}/actions/workflows"
        pages = self.api(path, paginate=True)
        try:
            return [
                Workflow(id=wf["id"], name=wf["name"])
                for page in pages or []
                for wf in page.get("workflows", [])
            ]
        except (AttributeError, KeyError, TypeError, ValidationError) as exc:
            raise _unexpected(path, exc) from exc

    def dispatch_workflow(self, workflow_id: int, ref: str) -> None:
        """Fire a workflow_dispatch event for a workflow at the given ref.

        The endpoint only answers 204; whether a run actually starts can't
        be observed here.
        """
        self.api(
            f"{self.repo_path}/actions/workflows/{workflow_id}/dispatches",
            method="POST",
            fields={"ref": ref},
        )
