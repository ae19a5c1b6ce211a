"""Minimal GitHub REST client for the three calls the check makes.

Each request is attempted once. Failures surface as GitHubAPIError so
callers decide whether they are fatal.
"""

from __future__ import annotations

import logging
from typing import Any

import requests
from pydantic import BaseModel, ValidationError

from prcheck import __version__
from prcheck.config import DEFAULT_API_URL
from prcheck.exceptions import GitHubAPIError
from prcheck.github.models import Commit, PullRequest, Repository

logger = logging.getLogger("prcheck.github")

PER_PAGE = 100
RATE_LIMIT_MIN_REMAINING = 10
API_VERSION = "2022-11-28"


class GitHubClient:
    """Token-authenticated access to the GitHub REST API."""

    def __init__(
        self,
        token: str,
        api_url: str = DEFAULT_API_URL,
        session: requests.Session | None = None,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": API_VERSION,
            "User-Agent": f"pr-completeness-check/{__version__}",
        })

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> GitHubClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def list_pull_requests(self, repo: Repository, state: str = "open") -> list[PullRequest]:
        """List pull requests in API order (most recently created first)."""
        items = self._get_all(f"/repos/{repo.full_name}/pulls", params={"state": state})
        return _parse_items(PullRequest, items)

    def list_pull_request_commits(self, repo: Repository, number: int) -> list[Commit]:
        items = self._get_all(f"/repos/{repo.full_name}/pulls/{number}/commits")
        return _parse_items(Commit, items)

    def create_issue_comment(self, repo: Repository, issue_number: int, body: str) -> dict:
        """Post `body` on the issue thread of a PR. Returns the created comment, if readable."""
        response = self._request(
            "POST",
            f"{self.api_url}/repos/{repo.full_name}/issues/{issue_number}/comments",
            json={"body": body},
        )
        try:
            created = response.json()
        except ValueError:
            logger.debug("Comment created but the response body is not JSON")
            return {}
        return created if isinstance(created, dict) else {}

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _get_all(self, path: str, params: dict[str, Any] | None = None) -> list[dict]:
        """GET every page of a list endpoint by following ``rel="next"`` links."""
        url: str | None = f"{self.api_url}{path}"
        query: dict[str, Any] | None = {**(params or {}), "per_page": PER_PAGE}
        items: list[dict] = []

        while url:
            response = self._request("GET", url, params=query)
            try:
                page = response.json()
            except ValueError as e:
                raise GitHubAPIError(f"Invalid JSON from {url}: {e}", response.status_code) from e
            if not isinstance(page, list):
                raise GitHubAPIError(f"Expected a list from {url}", response.status_code)
            items.extend(page)
            url = (response.links or {}).get("next", {}).get("url")
            query = None  # the next link already carries the query string

        return items

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        logger.debug(f"{method} {url}")
        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            raise GitHubAPIError(f"{method} {url} failed: {e}") from e

        _check_rate_limit(response)

        if response.status_code >= 400:
            raise GitHubAPIError(_error_message(response), response.status_code)
        return response


def _parse_items(model: type[BaseModel], items: list[dict]) -> list:
    """Validate list items, reporting malformed ones as an API error."""
    try:
        return [model.model_validate(item) for item in items]
    except ValidationError as e:
        raise GitHubAPIError(f"Unexpected {model.__name__} data: {e}") from e


def _error_message(response: requests.Response) -> str:
    """Prefer the API's own ``message`` field over the raw body."""
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return response.text or f"HTTP {response.status_code}"


def _check_rate_limit(response: requests.Response) -> None:
    remaining = response.headers.get("X-RateLimit-Remaining")
    if remaining is None:
        return
    try:
        remaining_count = int(remaining)
    except (TypeError, ValueError):
        return
    if remaining_count <= RATE_LIMIT_MIN_REMAINING:
        logger.warning(
            f"Approaching GitHub API rate limit: {remaining_count} requests remaining"
        )
