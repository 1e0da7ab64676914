"""CLI entry point for pr-label-tagger."""

from __future__ import annotations

import os

import click

from pr_label_tagger.config import read_inputs
from pr_label_tagger.context import load_context
from pr_label_tagger.errors import TaggerError
from pr_label_tagger.github import GitHubClient
from pr_label_tagger.models import BumpKind, Decided, RunResult
from pr_label_tagger.pipeline import run_action
from pr_label_tagger.shell import fatal
from pr_label_tagger.tags import list_tags
from pr_label_tagger.versions import bump_version, latest_version


def _write_output(output_path: str, name: str, value: str) -> None:
    with open(output_path, "a") as fh:
        fh.write(f"{name}={value}\n")


def write_outputs(output_path: str, result: RunResult) -> None:
    """Append the run's step outputs to the GITHUB_OUTPUT file."""
    decision = result.decision
    bump = decision.kind.value if isinstance(decision, Decided) else "none"
    _write_output(output_path, "bump", bump)
    if result.current_version:
        _write_output(output_path, "current-version", result.current_version)
    if result.next_version:
        _write_output(output_path, "next-version", result.next_version)
    if result.tag:
        _write_output(output_path, "tag", result.tag)


@click.group()
@click.version_option(package_name="pr-label-tagger")
def cli() -> None:
    """Tag releases from pull-request bump labels."""


@cli.command()
def run() -> None:
    """Run the action for the triggering pull-request event (called from CI)."""
    try:
        # Inputs first: a bad configuration fails before anything else.
        inputs = read_inputs()
        ctx = load_context()
        client = GitHubClient(ctx.owner, ctx.repo, inputs.token)
        result = run_action(ctx, inputs, client)
    except TaggerError as exc:
        fatal(str(exc))
        return

    output = os.environ.get("GITHUB_OUTPUT")
    if output:
        write_outputs(output, result)


@cli.command("next-version")
@click.option(
    "--bump",
    type=click.Choice([kind.value for kind in BumpKind]),
    required=True,
    help="Version component to increment.",
)
def next_version(bump: str) -> None:
    """Print the version a bump would release, based on local tags."""
    try:
        click.echo(bump_version(latest_version(list_tags()), bump))
    except TaggerError as exc:
        raise click.ClickException(str(exc)) from exc


if __name__ == "__main__":
    cli()
