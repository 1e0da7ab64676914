"""Tests for pr_label_tagger.context."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from pr_label_tagger.context import (
    load_context,
    load_event_payload,
    require_pull_request,
)
from pr_label_tagger.errors import ContextError
from pr_label_tagger.models import LifecyclePhase, RunContext


def _write_event(tmp_path: Path, payload: object) -> str:
    path = tmp_path / "event.json"
    path.write_text(json.dumps(payload))
    return str(path)


def _env(event_path: str, event_name: str = "pull_request") -> dict[str, str]:
    return {
        "GITHUB_EVENT_NAME": event_name,
        "GITHUB_EVENT_PATH": event_path,
        "GITHUB_REPOSITORY": "projectsyn/pr-label-tag-action",
    }


class TestLoadEventPayload:
    def test_no_path(self) -> None:
        assert load_event_payload(None) == {}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ContextError, match="Unable to read event payload"):
            load_event_payload(str(tmp_path / "nope.json"))

    def test_not_an_object(self, tmp_path: Path) -> None:
        with pytest.raises(ContextError, match="not a JSON object"):
            load_event_payload(_write_event(tmp_path, [1, 2]))


class TestLoadContext:
    def test_pull_request_event(self, tmp_path: Path) -> None:
        payload = {
            "action": "closed",
            "number": 123,
            "pull_request": {
                "number": 123,
                "merged": True,
                "merge_commit_sha": "abc123",
                "labels": [{"name": "bump:minor"}],
            },
        }

        ctx = load_context(_env(_write_event(tmp_path, payload)))

        assert ctx.event_name == "pull_request"
        assert ctx.action == "closed"
        assert (ctx.owner, ctx.repo) == ("projectsyn", "pr-label-tag-action")
        assert ctx.server_url == "https://github.com"
        assert ctx.pull_request is not None
        assert ctx.pull_request.merge_commit_sha == "abc123"
        assert ctx.pull_request.labels == ["bump:minor"]
        assert ctx.phase is LifecyclePhase.MERGED

    def test_non_pr_event_has_no_pull_request(self, tmp_path: Path) -> None:
        env = _env(_write_event(tmp_path, {"action": "created"}), "discussion")

        ctx = load_context(env)

        assert ctx.pull_request is None

    def test_custom_server_url(self, tmp_path: Path) -> None:
        env = _env(_write_event(tmp_path, {}))
        env["GITHUB_SERVER_URL"] = "https://github.example.com"

        assert load_context(env).server_url == "https://github.example.com"

    def test_missing_repository_raises(self, tmp_path: Path) -> None:
        env = _env(_write_event(tmp_path, {}))
        del env["GITHUB_REPOSITORY"]

        with pytest.raises(ContextError, match="GITHUB_REPOSITORY"):
            load_context(env)

    def test_malformed_pull_request_raises(self, tmp_path: Path) -> None:
        env = _env(_write_event(tmp_path, {"pull_request": {"title": "no number"}}))

        with pytest.raises(ContextError, match="Malformed pull_request payload"):
            load_context(env)


class TestRequirePullRequest:
    def test_returns_pull_request(self, pr_context: RunContext) -> None:
        assert require_pull_request(pr_context).number == 123

    def test_names_event(self) -> None:
        ctx = RunContext(event_name="discussion", owner="o", repo="r")

        with pytest.raises(ContextError) as excinfo:
            require_pull_request(ctx)
        assert str(excinfo.value) == (
            "Action is running for a 'discussion' event. "
            "Only 'pull_request' events are supported"
        )
