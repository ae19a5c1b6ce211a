"""Run the completeness check: resolve the PR, validate it, report the outcome."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Protocol

from pydantic import BaseModel, Field

from prcheck.config import CheckConfig
from prcheck.exceptions import GitHubAPIError
from prcheck.github.models import PullRequest, Repository, TriggerEvent
from prcheck.github.renderer import render_missing_fields_comment
from prcheck.messages import MessageKey, get_messages
from prcheck.resolver import PullRequestReader, resolve_pull_request
from prcheck.validator import MissingField, find_missing_fields

logger = logging.getLogger("prcheck.checker")

INCOMPLETE_REASON = "PR is incomplete. See the added comment."
PERMISSION_HINTS = (
    "PERMISSION ERROR: Check if the token has permission to write in issues/pull requests",
    'Add "permissions: { issues: write, pull-requests: write }" to your workflow file',
)


class CommentWriter(Protocol):
    def create_issue_comment(self, repo: Repository, issue_number: int, body: str) -> dict: ...


class CheckStatus(str, Enum):
    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"


class CheckResult(BaseModel):
    """Outcome of one run."""

    status: CheckStatus
    reason: str = ""
    pull_request_number: int | None = None
    missing_fields: list[MissingField] = Field(default_factory=list)
    comment_posted: bool = False
    comment: str = ""
    hints: list[str] = Field(default_factory=list)

    @property
    def failed(self) -> bool:
        return self.status == CheckStatus.FAILED

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0


def report_missing_fields(
    missing_fields: list[MissingField],
    pr: PullRequest,
    repo: Repository,
    client: CommentWriter,
    texts: dict[MessageKey, str],
    dry_run: bool = False,
) -> CheckResult:
    """Comment on `pr` about `missing_fields` and turn them into a result.

    Any missing field fails the check, whether or not the comment lands.
    """
    if not missing_fields:
        logger.info(f"✅ PR #{pr.number} has all required fields filled.")
        return CheckResult(status=CheckStatus.PASSED, pull_request_number=pr.number)

    for field in missing_fields:
        logger.info(f"{field.value.capitalize()} not found")

    body = render_missing_fields_comment(missing_fields, texts)
    result = CheckResult(
        status=CheckStatus.FAILED,
        reason=INCOMPLETE_REASON,
        pull_request_number=pr.number,
        missing_fields=missing_fields,
        comment=body,
    )

    if dry_run:
        logger.info(f"Dry run: not commenting on PR #{pr.number}")
        return result

    logger.info(f"Missing required fields, creating comment on PR #{pr.number}")
    try:
        client.create_issue_comment(repo, pr.number, body)
    except GitHubAPIError as e:
        logger.error(f"Error creating comment: {e.message}")
        hints = list(PERMISSION_HINTS) if e.is_permission_error else []
        for hint in hints:
            logger.error(hint)
        return result.model_copy(update={
            "reason": f"Unable to add comment: {e.message}",
            "hints": hints,
        })

    logger.info("Comment added successfully")
    return result.model_copy(update={"comment_posted": True})


def run_check(
    event: TriggerEvent,
    config: CheckConfig,
    read_client: PullRequestReader,
    comment_client: CommentWriter,
    dry_run: bool = False,
) -> CheckResult:
    """Resolve, validate and report. Exceptions other than API errors propagate."""
    pr = resolve_pull_request(event, read_client)
    if pr is None:
        logger.info("No PR found to verify.")
        return CheckResult(status=CheckStatus.SKIPPED, reason="No PR found to verify.")

    logger.info("Verifying required PR fields...")
    missing = find_missing_fields(pr)
    return report_missing_fields(
        missing,
        pr,
        event.repository,
        comment_client,
        get_messages(config.language),
        dry_run=dry_run,
    )


def execute_check(
    event: TriggerEvent,
    config: CheckConfig,
    read_client: PullRequestReader,
    comment_client: CommentWriter,
    dry_run: bool = False,
) -> CheckResult:
    """Top-level boundary: any unexpected error becomes a failed result."""
    try:
        return run_check(event, config, read_client, comment_client, dry_run=dry_run)
    except Exception as e:
        logger.error(f"Error executing check: {e}")
        logger.debug("Stack trace", exc_info=True)
        return CheckResult(status=CheckStatus.FAILED, reason=str(e) or type(e).__name__)
