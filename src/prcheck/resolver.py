"""Find the pull request a CI event refers to."""

from __future__ import annotations

import logging
from typing import Protocol

from prcheck.exceptions import GitHubAPIError
from prcheck.github.models import Commit, PullRequest, Repository, TriggerEvent

logger = logging.getLogger("prcheck.resolver")


class PullRequestReader(Protocol):
    """The read side of the GitHub client."""

    def list_pull_requests(self, repo: Repository, state: str = "open") -> list[PullRequest]: ...

    def list_pull_request_commits(self, repo: Repository, number: int) -> list[Commit]: ...


def resolve_pull_request(event: TriggerEvent, client: PullRequestReader) -> PullRequest | None:
    """Return the PR embedded in `event`, or the open PR containing a pushed commit.

    For pushes, open PRs are scanned in API order and the first one whose
    commit list holds ``event.sha`` wins. API failures are logged and treated
    as "no match" rather than aborting the run.
    """
    if event.pull_request is not None:
        logger.info(f"Processing pull request #{event.pull_request.number}")
        return event.pull_request

    if event.kind != "push":
        logger.info(f"Event '{event.name}' carries no pull request")
        return None

    if not event.sha:
        logger.warning("Push event without a commit SHA, nothing to match")
        return None

    logger.info("Push event detected, searching for associated PRs...")
    logger.info(f"Current commit SHA: {event.sha}")
    return _find_open_pr_with_commit(event.repository, event.sha, client)


def _find_open_pr_with_commit(
    repo: Repository, sha: str, client: PullRequestReader
) -> PullRequest | None:
    try:
        pull_requests = client.list_pull_requests(repo, state="open")
    except GitHubAPIError as e:
        logger.warning(f"Error listing PRs: {e.message}")
        return None

    logger.info(f"Found {len(pull_requests)} open PRs in the repository")

    for pull_request in pull_requests:
        logger.info(f"Checking commits of PR #{pull_request.number}...")
        try:
            commits = client.list_pull_request_commits(repo, pull_request.number)
        except GitHubAPIError as e:
            logger.warning(
                f"Error searching commits for PR #{pull_request.number}: {e.message}"
            )
            continue

        logger.debug(f"PR #{pull_request.number} has {len(commits)} commits")
        if any(commit.sha == sha for commit in commits):
            logger.info(f"Found PR #{pull_request.number} related to commit {sha}")
            return pull_request

    return None
