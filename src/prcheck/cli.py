"""Command-line interface for PR Completeness Check."""

from __future__ import annotations

import json
import sys

import click

from prcheck import __version__
from prcheck.config import CUSTOM_TOKEN_ENV, GITHUB_TOKEN_ENV, LANGUAGE_ENV
from prcheck.exceptions import ConfigError
from prcheck.messages import DEFAULT_LANGUAGE, get_messages, supported_languages, validate_messages
from prcheck.ui.console import Console, configure_logging

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name="prcheck")
def main():
    """PR Completeness Check - require a milestone, assignees and labels on pull requests."""
    try:
        validate_messages()
    except ConfigError as e:
        console.error(str(e))
        sys.exit(1)


@main.command()
@click.option(
    "--github-token", envvar=list(GITHUB_TOKEN_ENV), default=None,
    help="Token used to read pull requests (env: GITHUB_TOKEN).",
)
@click.option(
    "--custom-token", envvar=list(CUSTOM_TOKEN_ENV), default=None,
    help="Token used to write the comment; defaults to --github-token.",
)
@click.option(
    "--language", "-l", envvar=list(LANGUAGE_ENV), default=None,
    help=f"Comment language (default: {DEFAULT_LANGUAGE}).",
)
@click.option("--event-name", default=None, help="Event name (env: GITHUB_EVENT_NAME).")
@click.option(
    "--event-path", default=None, type=click.Path(dir_okay=False),
    help="Webhook payload JSON file (env: GITHUB_EVENT_PATH).",
)
@click.option("--sha", default=None, help="Triggering commit SHA (env: GITHUB_SHA).")
@click.option("--repository", "-r", default=None, help="owner/name (env: GITHUB_REPOSITORY).")
@click.option("--api-url", default=None, help="GitHub API base URL (env: GITHUB_API_URL).")
@click.option("--dry-run", is_flag=True, help="Render the comment instead of posting it.")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def run(
    github_token: str | None,
    custom_token: str | None,
    language: str | None,
    event_name: str | None,
    event_path: str | None,
    sha: str | None,
    repository: str | None,
    api_url: str | None,
    dry_run: bool,
    output_format: str,
    verbose: bool,
):
    """Check the pull request behind the current CI event.

    Fails (exit 1) when the pull request lacks a milestone, assignees or
    labels, after commenting on it. Push events are matched to the open pull
    request that contains the pushed commit.

    Usage in GitHub Actions:

        prcheck run

    Local usage:

        prcheck run --repository owner/repo --event-name push --sha abc123 --dry-run
    """
    configure_logging(verbose)

    from prcheck.checker import execute_check
    from prcheck.config import load_config
    from prcheck.github.client import GitHubClient
    from prcheck.github.event import load_event

    try:
        config = load_config(
            github_token=github_token,
            custom_token=custom_token,
            language=language,
            api_url=api_url,
        )
        event = load_event(
            event_name=event_name,
            event_path=event_path,
            sha=sha,
            repository=repository,
        )
    except ConfigError as e:
        console.error(str(e))
        console.fail_workflow(str(e))
        sys.exit(1)

    read_client = GitHubClient(config.github_token, api_url=config.api_url)
    comment_client = read_client
    if config.uses_separate_comment_token:
        comment_client = GitHubClient(config.comment_token, api_url=config.api_url)

    try:
        result = execute_check(event, config, read_client, comment_client, dry_run=dry_run)
    finally:
        read_client.close()
        if comment_client is not read_client:
            comment_client.close()

    # Annotate before printing; JSON output must be the tail of stdout.
    if result.failed:
        console.fail_workflow(result.reason)

    if output_format == "json":
        click.echo(json.dumps(result.model_dump(mode="json"), indent=2))
    else:
        if dry_run and result.comment:
            click.echo(result.comment)
        console.show_result(result)

    sys.exit(result.exit_code)


@main.command()
@click.option(
    "--language", "-l", default=DEFAULT_LANGUAGE,
    type=click.Choice(supported_languages()),
    help=f"Comment language (default: {DEFAULT_LANGUAGE}).",
)
@click.option(
    "--missing", "-m", multiple=True,
    type=click.Choice(["milestone", "assignees", "labels"]),
    help="Field to report as missing (repeatable; default: all).",
)
def preview(language: str, missing: tuple[str, ...]):
    """Print the comment that would be posted, without contacting GitHub."""
    from prcheck.github.renderer import render_missing_fields_comment
    from prcheck.validator import MissingField

    # Keep the fixed reporting order regardless of option order.
    fields = [f for f in MissingField if not missing or f.value in missing]
    click.echo(render_missing_fields_comment(fields, get_messages(language)))


@main.command()
def languages():
    """List the available comment languages."""
    console.show_languages(DEFAULT_LANGUAGE)
