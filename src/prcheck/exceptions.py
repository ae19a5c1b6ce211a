"""Custom exceptions for PR Completeness Check."""

from __future__ import annotations

PERMISSION_DENIED_MESSAGE = "Resource not accessible by integration"


class PRCheckError(Exception):
    """Base exception for all prcheck errors."""


class ConfigError(PRCheckError):
    """Configuration-related errors."""


class EventError(ConfigError):
    """The triggering CI event could not be interpreted."""


class GitHubAPIError(PRCheckError):
    """A GitHub REST API call failed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def is_rate_limited(self) -> bool:
        return self.status_code in (403, 429) and "rate limit" in self.message.lower()

    @property
    def is_permission_error(self) -> bool:
        """True when the token lacks the rights for the attempted operation."""
        if PERMISSION_DENIED_MESSAGE.lower() in self.message.lower():
            return True
        return self.status_code in (401, 403) and not self.is_rate_limited
