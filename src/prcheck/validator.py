"""Presence checks for the pull request fields the project requires."""

from __future__ import annotations

from enum import Enum

from prcheck.github.models import PullRequest


class MissingField(str, Enum):
    """A required field that is not set, in reporting order."""

    MILESTONE = "milestone"
    ASSIGNEES = "assignees"
    LABELS = "labels"


def find_missing_fields(pr: PullRequest) -> list[MissingField]:
    """Return the required fields `pr` lacks, always in milestone/assignees/labels order."""
    missing: list[MissingField] = []
    if pr.milestone is None:
        missing.append(MissingField.MILESTONE)
    if not pr.assignees:
        missing.append(MissingField.ASSIGNEES)
    if not pr.labels:
        missing.append(MissingField.LABELS)
    return missing
