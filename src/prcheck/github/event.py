"""Build a TriggerEvent from the GitHub Actions run context."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from prcheck.exceptions import EventError
from prcheck.github.models import PullRequest, Repository, TriggerEvent

logger = logging.getLogger("prcheck.event")


def read_event_payload(event_path: str | Path | None) -> dict[str, Any]:
    """Load the webhook payload Actions writes to GITHUB_EVENT_PATH.

    A missing or unreadable file yields an empty payload.
    """
    if not event_path:
        return {}

    path = Path(event_path)
    if not path.exists():
        logger.warning(f"Event payload not found at {path}")
        return {}

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Could not read event payload {path}: {e}")
        return {}

    if not isinstance(payload, dict):
        logger.warning(f"Event payload {path} is not a JSON object")
        return {}
    return payload


def build_event(
    event_name: str,
    payload: Mapping[str, Any],
    sha: str = "",
    repository: str = "",
) -> TriggerEvent:
    """Interpret a payload into a TriggerEvent.

    The repository falls back to ``repository.full_name`` from the payload.

    Raises:
        EventError: If the repository is unknown or the embedded pull request
            is malformed.
    """
    full_name = repository or (payload.get("repository") or {}).get("full_name", "")
    if not full_name:
        raise EventError("Repository is unknown. Set GITHUB_REPOSITORY or --repository.")

    pull_request = None
    raw_pr = payload.get("pull_request")
    if raw_pr:
        try:
            pull_request = PullRequest.model_validate(raw_pr)
        except ValidationError as e:
            raise EventError(f"Malformed pull_request payload: {e}") from e

    return TriggerEvent(
        name=event_name,
        repository=Repository.parse(full_name),
        sha=sha or payload.get("after", "") or "",
        pull_request=pull_request,
    )


def load_event(
    env: Mapping[str, str] | None = None,
    *,
    event_name: str | None = None,
    event_path: str | None = None,
    sha: str | None = None,
    repository: str | None = None,
) -> TriggerEvent:
    """Resolve the triggering event; explicit arguments override the environment."""
    env = os.environ if env is None else env

    name = event_name or env.get("GITHUB_EVENT_NAME", "")
    payload = read_event_payload(event_path or env.get("GITHUB_EVENT_PATH"))

    event = build_event(
        name,
        payload,
        sha=sha or env.get("GITHUB_SHA", ""),
        repository=repository or env.get("GITHUB_REPOSITORY", ""),
    )
    logger.info(f"Event context: {event.name or 'unknown'}")
    logger.info(f"Repository: {event.repository}")
    return event
