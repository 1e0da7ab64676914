"""Action inputs.

The Actions runner exposes each `with:` input as an INPUT_<NAME>
environment variable, with the name upper-cased and spaces replaced by
underscores (hyphens are kept, so "patch-label" becomes INPUT_PATCH-LABEL).
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from .errors import ConfigError
from .models import BumpLabels

NEXT_VERSION_PLACEHOLDER = "<next-version>"
REPO_URL_PLACEHOLDER = "<repo-url>"

DEFAULT_RELEASE_COMMENT = "🚀 Merging this PR will release `<next-version>`"
DEFAULT_RELEASED_COMMENT = (
    "🚀 This PR has been released as [`<next-version>`](<repo-url>)"
)
DEFAULT_UNMERGED_COMMENT = (
    "🚀 This PR has been closed unmerged. "
    "No new release will be created for these changes"
)


class ActionInputs(BaseModel):
    """All inputs of a run, read once at startup.

    Attributes:
        labels: Label names selecting each bump kind.
        token: Token used for every GitHub API call.
        release_comment: Template for open pull requests.
        released_comment: Template for merged pull requests.
        unmerged_comment: Template for pull requests closed without merging.
        triggers: Names of workflows to dispatch against a new tag.
    """

    model_config = ConfigDict(frozen=True)

    labels: BumpLabels
    token: str
    release_comment: str = DEFAULT_RELEASE_COMMENT
    released_comment: str = DEFAULT_RELEASED_COMMENT
    unmerged_comment: str = DEFAULT_UNMERGED_COMMENT
    triggers: list[str] = Field(default_factory=list)


def _env_name(name: str) -> str:
    return "INPUT_" + name.replace(" ", "_").upper()


def get_input(
    name: str, *, required: bool = False, env: Mapping[str, str] | None = None
) -> str:
    """Read a single input, stripped of surrounding whitespace.

    Raises:
        ConfigError: If required is set and the input is missing or empty.
    """
    env = os.environ if env is None else env
    value = env.get(_env_name(name), "").strip()
    if required and not value:
        raise ConfigError(f"Input required and not supplied: {name}")
    return value


def get_multiline_input(
    name: str, *, env: Mapping[str, str] | None = None
) -> list[str]:
    """Read an input as a list of lines, dropping blank ones."""
    return [
        line.strip() for line in get_input(name, env=env).splitlines() if line.strip()
    ]


def read_bump_labels(env: Mapping[str, str] | None = None) -> BumpLabels:
    """Read the three bump label inputs.

    Raises:
        ConfigError: If any label is empty, or two kinds share a label.
    """
    patch = get_input("patch-label", env=env)
    minor = get_input("minor-label", env=env)
    major = get_input("major-label", env=env)
    if not (patch and minor and major):
        raise ConfigError("Empty bump labels aren't supported")
    if len({patch, minor, major}) != 3:
        raise ConfigError(
            f"Bump labels must be distinct, got patch={patch!r}, "
            f"minor={minor!r}, major={major!r}"
        )
    return BumpLabels(patch=patch, minor=minor, major=major)


def read_inputs(env: Mapping[str, str] | None = None) -> ActionInputs:
    """Read and validate every action input.

    Optional comment templates fall back to their defaults when empty.
    """
    return ActionInputs(
        labels=read_bump_labels(env),
        token=get_input("github-token", required=True, env=env),
        release_comment=get_input("release-comment", env=env)
        or DEFAULT_RELEASE_COMMENT,
        released_comment=get_input("released-comment", env=env)
        or DEFAULT_RELEASED_COMMENT,
        unmerged_comment=get_input("unmerged-comment", env=env)
        or DEFAULT_UNMERGED_COMMENT,
        triggers=get_multiline_input("trigger", env=env),
    )


def render_template(template: str, next_version: str, repo_url: str = "") -> str:
    """Substitute the <next-version> and <repo-url> placeholders."""
    return template.replace(NEXT_VERSION_PLACEHOLDER, next_version).replace(
        REPO_URL_PLACEHOLDER, repo_url
    )
