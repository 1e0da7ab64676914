"""Release tag reading and publishing.

Tags live in the local clone of the repository. Reading them requires a
checkout with full tag history (fetch-depth: 0 in actions/checkout), and
pushing requires credentials that allow writing refs.
"""

from __future__ import annotations

from .errors import GitError, PublishError
from .shell import debug, git, info, step
from .versions import latest_version


def list_tags() -> list[str]:
    """List every tag in the repository.

    Raises:
        GitError: If git can't list tags (e.g., not a repository).
    """
    return git("tag", "--list").splitlines()


def find_latest_version() -> str:
    """Find the most recent release version among the repository's tags.

    Returns v0.0.0 if no release tags exist yet.
    """
    tags = list_tags()
    latest = latest_version(tags)
    debug(f"Current version: {latest} ({len(tags)} tags considered)")
    return latest


def create_and_push_tag(tag: str, target: str | None = None) -> None:
    """Create a lightweight tag and push it to origin.

    Args:
        tag: Tag name, e.g. "v1.3.0".
        target: Commit to tag. Defaults to HEAD.

    Raises:
        PublishError: If creating or pushing the tag fails. The message
                      includes git's captured output.
    """
    step(f"Tagging release {tag}")
    try:
        git("tag", tag, *([target] if target else []))
    except GitError as exc:
        raise PublishError(
            f"Creating tag failed:\n{exc.stdout}\n{exc.stderr}",
            stdout=exc.stdout,
            stderr=exc.stderr,
        ) from exc
    try:
        git("push", "origin", tag)
    except GitError as exc:
        raise PublishError(
            f"Pushing tag failed:\n{exc.stdout}\n{exc.stderr}",
            stdout=exc.stdout,
            stderr=exc.stderr,
        ) from exc
    info(f"  {tag} → {target or 'HEAD'}")
