"""Tests for configuration management."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from prcheck.config import DEFAULT_API_URL, CheckConfig, load_config
from prcheck.exceptions import ConfigError


class TestConfig:
    def test_defaults(self):
        config = load_config({"GITHUB_TOKEN": "ghs_abc"})
        assert config.github_token == "ghs_abc"
        assert config.custom_token is None
        assert config.language == "pt"
        assert config.api_url == DEFAULT_API_URL

    def test_action_inputs(self):
        config = load_config({
            "INPUT_GITHUB-TOKEN": "ghs_input",
            "GITHUB_TOKEN": "ghs_env",
            "INPUT_CUSTOM-TOKEN": "ghp_custom",
            "INPUT_LANGUAGE": "EN",
            "GITHUB_API_URL": "https://ghe.example.com/api/v3/",
        })
        assert config.github_token == "ghs_input"
        assert config.custom_token == "ghp_custom"
        assert config.language == "en"
        assert config.api_url == "https://ghe.example.com/api/v3"

    def test_underscore_input_names(self):
        config = load_config({"INPUT_GITHUB_TOKEN": "a", "INPUT_CUSTOM_TOKEN": "b"})
        assert config.github_token == "a"
        assert config.comment_token == "b"

    def test_arguments_override_env(self):
        config = load_config(
            {"GITHUB_TOKEN": "ghs_env", "INPUT_LANGUAGE": "es"},
            github_token="ghs_arg",
            language="en",
        )
        assert config.github_token == "ghs_arg"
        assert config.language == "en"

    def test_missing_token(self):
        with pytest.raises(ConfigError, match="token"):
            load_config({})

    def test_comment_token_falls_back(self):
        config = CheckConfig(github_token="read")
        assert config.comment_token == "read"
        assert not config.uses_separate_comment_token

    def test_separate_comment_token(self):
        config = CheckConfig(github_token="read", custom_token="write")
        assert config.comment_token == "write"
        assert config.uses_separate_comment_token

    def test_blank_custom_token_ignored(self):
        config = CheckConfig(github_token="read", custom_token="   ")
        assert config.custom_token is None
        assert config.comment_token == "read"

    def test_same_token_is_not_separate(self):
        config = CheckConfig(github_token="same", custom_token="same")
        assert not config.uses_separate_comment_token

    def test_unknown_language_falls_back(self):
        assert CheckConfig(github_token="t", language="fr").language == "pt"

    def test_frozen(self):
        config = CheckConfig(github_token="t")
        with pytest.raises(ValidationError):
            config.language = "en"
