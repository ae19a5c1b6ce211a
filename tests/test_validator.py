"""Tests for the required-field validator."""

from __future__ import annotations

from conftest import make_pr_payload

from prcheck.github.models import PullRequest
from prcheck.validator import MissingField, find_missing_fields


def _pr(**kwargs) -> PullRequest:
    return PullRequest.model_validate(make_pr_payload(**kwargs))


class TestFindMissingFields:
    def test_complete_pr(self, complete_pr: PullRequest):
        assert find_missing_fields(complete_pr) == []

    def test_all_missing_in_fixed_order(self, empty_pr: PullRequest):
        assert find_missing_fields(empty_pr) == [
            MissingField.MILESTONE,
            MissingField.ASSIGNEES,
            MissingField.LABELS,
        ]

    def test_only_milestone_missing(self):
        assert find_missing_fields(_pr(milestone=False)) == [MissingField.MILESTONE]

    def test_only_assignees_missing(self):
        assert find_missing_fields(_pr(assignees=0)) == [MissingField.ASSIGNEES]

    def test_only_labels_missing(self):
        assert find_missing_fields(_pr(labels=0)) == [MissingField.LABELS]

    def test_order_kept_when_two_missing(self):
        assert find_missing_fields(_pr(milestone=False, labels=0)) == [
            MissingField.MILESTONE,
            MissingField.LABELS,
        ]

    def test_null_lists_count_as_missing(self):
        pr = PullRequest.model_validate(
            {**make_pr_payload(), "assignees": None, "labels": None}
        )
        assert find_missing_fields(pr) == [MissingField.ASSIGNEES, MissingField.LABELS]

    def test_idempotent(self, empty_pr: PullRequest):
        first = find_missing_fields(empty_pr)
        assert all(find_missing_fields(empty_pr) == first for _ in range(5))

    def test_tag_values(self):
        assert [f.value for f in MissingField] == ["milestone", "assignees", "labels"]
