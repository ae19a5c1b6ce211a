"""Configuration management for PR Completeness Check.

Settings come from the GitHub Actions environment: action inputs are exposed
as ``INPUT_<NAME>`` variables (upper-cased, hyphens kept) and the run context
as ``GITHUB_*`` variables.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, field_validator

from prcheck.exceptions import ConfigError
from prcheck.messages import DEFAULT_LANGUAGE, MESSAGES

logger = logging.getLogger("prcheck.config")

DEFAULT_API_URL = "https://api.github.com"

GITHUB_TOKEN_ENV = ("INPUT_GITHUB-TOKEN", "INPUT_GITHUB_TOKEN", "GITHUB_TOKEN")
CUSTOM_TOKEN_ENV = ("INPUT_CUSTOM-TOKEN", "INPUT_CUSTOM_TOKEN")
LANGUAGE_ENV = ("INPUT_LANGUAGE",)
API_URL_ENV = ("GITHUB_API_URL",)


class CheckConfig(BaseModel):
    """Effective settings for one check run."""

    model_config = ConfigDict(frozen=True)

    github_token: str
    custom_token: str | None = None
    language: str = DEFAULT_LANGUAGE
    api_url: str = DEFAULT_API_URL

    @field_validator("custom_token", mode="before")
    @classmethod
    def _blank_token_is_unset(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value

    @field_validator("language", mode="before")
    @classmethod
    def _known_language(cls, value: str | None) -> str:
        language = (value or "").strip().lower()
        if not language:
            return DEFAULT_LANGUAGE
        if language not in MESSAGES:
            logger.warning(
                f"Unsupported language '{language}', falling back to '{DEFAULT_LANGUAGE}'"
            )
            return DEFAULT_LANGUAGE
        return language

    @field_validator("api_url", mode="before")
    @classmethod
    def _strip_trailing_slash(cls, value: str | None) -> str:
        return (value or DEFAULT_API_URL).rstrip("/")

    @property
    def comment_token(self) -> str:
        """Token used to write the comment; the read token unless overridden."""
        return self.custom_token or self.github_token

    @property
    def uses_separate_comment_token(self) -> bool:
        return self.comment_token != self.github_token


def _first_env(env: Mapping[str, str], names: tuple[str, ...]) -> str | None:
    for name in names:
        value = env.get(name)
        if value:
            return value
    return None


def load_config(
    env: Mapping[str, str] | None = None,
    *,
    github_token: str | None = None,
    custom_token: str | None = None,
    language: str | None = None,
    api_url: str | None = None,
) -> CheckConfig:
    """Resolve the run configuration.

    Explicit arguments win over the environment.

    Raises:
        ConfigError: If no read token is available.
    """
    env = os.environ if env is None else env

    token = github_token or _first_env(env, GITHUB_TOKEN_ENV)
    if not token:
        raise ConfigError(
            "No GitHub token found. Set the 'github-token' input or GITHUB_TOKEN."
        )

    return CheckConfig(
        github_token=token,
        custom_token=custom_token or _first_env(env, CUSTOM_TOKEN_ENV),
        language=language or _first_env(env, LANGUAGE_ENV),
        api_url=api_url or _first_env(env, API_URL_ENV),
    )
