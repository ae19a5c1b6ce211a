"""Pydantic models for the parts of GitHub payloads the check reads."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from prcheck.exceptions import EventError


class GitHubModel(BaseModel):
    """Immutable model that ignores payload keys it does not declare."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class User(GitHubModel):
    login: str


class Label(GitHubModel):
    name: str


class Milestone(GitHubModel):
    number: int | None = None
    title: str = ""


class GitRef(GitHubModel):
    sha: str
    ref: str | None = None


class Commit(GitHubModel):
    sha: str


class PullRequest(GitHubModel):
    """A pull request as returned by the REST API or embedded in an event."""

    number: int
    title: str = ""
    state: str = "open"
    html_url: str = ""
    milestone: Milestone | None = None
    assignees: list[User] = Field(default_factory=list)
    labels: list[Label] = Field(default_factory=list)
    head: GitRef | None = None

    @field_validator("assignees", "labels", mode="before")
    @classmethod
    def _null_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class Repository(GitHubModel):
    owner: str
    name: str

    @classmethod
    def parse(cls, full_name: str) -> Repository:
        """Build from an ``owner/name`` string."""
        owner, _, name = (full_name or "").strip().partition("/")
        if not owner or not name or "/" in name:
            raise EventError(f"Invalid repository '{full_name}', expected 'owner/name'")
        return cls(owner=owner, name=name)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    def __str__(self) -> str:
        return self.full_name


class TriggerEvent(GitHubModel):
    """The CI event that started the run."""

    name: str
    repository: Repository
    sha: str = ""
    pull_request: PullRequest | None = None

    @property
    def kind(self) -> str:
        """'pull_request' when a PR is embedded, 'push' for pushes, else 'other'."""
        if self.pull_request is not None:
            return "pull_request"
        if self.name == "push":
            return "push"
        return "other"
