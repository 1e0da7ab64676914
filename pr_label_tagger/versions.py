"""Version parsing and bumping utilities.

Handles conversion between tag names and semver objects. Release tags
carry a leading "v" (v1.2.3); the semver library works on the bare
version, so the prefix is stripped on the way in and added on the way out.
"""

from __future__ import annotations

from collections.abc import Iterable

import semver

from .errors import VersionBumpError
from .models import BumpKind

TAG_PREFIX = "v"
FLOOR_VERSION = "v0.0.0"


def parse_version(version_str: str) -> semver.Version:
    """Parse a version string into a semver.Version object.

    A single leading "v" is accepted and ignored:
    - "v1.2.3" → 1.2.3
    - "1.2.3" → 1.2.3

    Raises:
        ValueError: If the remainder isn't a full semantic version.
    """
    return semver.Version.parse(version_str.removeprefix(TAG_PREFIX))


def parse_tag(tag: str) -> semver.Version | None:
    """Parse a release tag, returning None for anything that isn't one.

    Only tags of the form v<semver> qualify. "foo-v1.0.0", "bar" and the
    partial "v1" are all rejected.
    """
    if not tag.startswith(TAG_PREFIX):
        return None
    try:
        return semver.Version.parse(tag[len(TAG_PREFIX) :])
    except ValueError:
        return None


def latest_version(tags: Iterable[str]) -> str:
    """Return the highest release tag under semver ordering.

    Non-conforming tags are skipped silently. Returns FLOOR_VERSION when
    no tag qualifies.

    Examples:
        ["v1.1.0", "v1.2.3", "v1.0.0"] → "v1.2.3"
        ["v1.9.0", "v1.10.0"] → "v1.10.0"
        [] → "v0.0.0"
    """
    versions = [v for v in (parse_tag(t) for t in tags) if v is not None]
    if not versions:
        return FLOOR_VERSION
    return f"{TAG_PREFIX}{max(versions)}"


def bump_version(current: str, kind: BumpKind | str) -> str:
    """Increment one component of a version and return it as a tag.

    Examples:
        ("v1.2.3", patch) → "v1.2.4"
        ("v1.2.3", minor) → "v1.3.0"
        ("1.2.3", major) → "v2.0.0"

    Raises:
        VersionBumpError: If current isn't a parseable version.
    """
    kind = BumpKind(kind)
    try:
        version = parse_version(current)
    except ValueError as exc:
        raise VersionBumpError(
            f"Unable to bump current version '{current}' to next {kind.value} version"
        ) from exc
    return f"{TAG_PREFIX}{version.next_version(part=kind.value)}"
