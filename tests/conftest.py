"""Shared test fixtures for prcheck."""

from __future__ import annotations

from typing import Any

import pytest

from prcheck.config import CheckConfig
from prcheck.exceptions import GitHubAPIError
from prcheck.github.models import Commit, PullRequest, Repository, TriggerEvent

PUSH_SHA = "9f2c1e0b7a6d5c4b3a29180f7e6d5c4b3a291807"


def make_pr_payload(
    number: int = 42,
    milestone: bool = True,
    assignees: int = 1,
    labels: int = 1,
    **extra: Any,
) -> dict:
    """A pull_request object shaped like the GitHub webhook payload."""
    payload = {
        "number": number,
        "title": f"Change #{number}",
        "state": "open",
        "html_url": f"https://github.com/acme/widgets/pull/{number}",
        "milestone": {"number": 3, "title": "v1.2"} if milestone else None,
        "assignees": [{"login": f"dev{i}", "id": i} for i in range(assignees)],
        "labels": [{"name": f"label-{i}", "color": "ededed"} for i in range(labels)],
        "head": {"sha": f"{number:040x}", "ref": f"feature-{number}"},
        "user": {"login": "author"},
    }
    payload.update(extra)
    return payload


class FakeGitHubClient:
    """In-memory stand-in for GitHubClient that records every call."""

    def __init__(
        self,
        pull_requests: list[dict] | None = None,
        commits: dict[int, list[str]] | None = None,
        list_error: GitHubAPIError | None = None,
        commit_errors: dict[int, GitHubAPIError] | None = None,
        comment_error: Exception | None = None,
    ) -> None:
        self.pull_requests = [PullRequest.model_validate(p) for p in pull_requests or []]
        self.commits = commits or {}
        self.list_error = list_error
        self.commit_errors = commit_errors or {}
        self.comment_error = comment_error
        self.calls: list[tuple] = []
        self.comments: list[tuple[int, str]] = []
        self.closed = False

    def list_pull_requests(self, repo: Repository, state: str = "open") -> list[PullRequest]:
        self.calls.append(("list_pull_requests", repo.full_name, state))
        if self.list_error:
            raise self.list_error
        return list(self.pull_requests)

    def list_pull_request_commits(self, repo: Repository, number: int) -> list[Commit]:
        self.calls.append(("list_pull_request_commits", repo.full_name, number))
        if number in self.commit_errors:
            raise self.commit_errors[number]
        return [Commit(sha=sha) for sha in self.commits.get(number, [])]

    def create_issue_comment(self, repo: Repository, issue_number: int, body: str) -> dict:
        self.calls.append(("create_issue_comment", repo.full_name, issue_number))
        if self.comment_error:
            raise self.comment_error
        self.comments.append((issue_number, body))
        return {"id": len(self.comments), "body": body}

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def repo() -> Repository:
    return Repository(owner="acme", name="widgets")


@pytest.fixture
def config() -> CheckConfig:
    return CheckConfig(github_token="ghs_read", language="en")


@pytest.fixture
def complete_pr() -> PullRequest:
    return PullRequest.model_validate(make_pr_payload())


@pytest.fixture
def empty_pr() -> PullRequest:
    return PullRequest.model_validate(
        make_pr_payload(milestone=False, assignees=0, labels=0)
    )


@pytest.fixture
def push_event(repo: Repository) -> TriggerEvent:
    return TriggerEvent(name="push", repository=repo, sha=PUSH_SHA)


def pr_event(repo: Repository, **payload_kwargs: Any) -> TriggerEvent:
    return TriggerEvent(
        name="pull_request",
        repository=repo,
        sha="0" * 40,
        pull_request=PullRequest.model_validate(make_pr_payload(**payload_kwargs)),
    )
