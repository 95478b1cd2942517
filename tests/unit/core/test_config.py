r"""Unit tests for RetryConfig and StudioConfig dataclasses.

This file contains tests for the configuration dataclasses in
core/config.py.
"""

from __future__ import annotations

from unittest.mock import Mock

import pytest
from coola.equality import objects_are_equal

from logoforge.core import (
    DEFAULT_IMAGE_MODEL,
    DEFAULT_INITIAL_DELAY,
    DEFAULT_LANGUAGE,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TEXT_MODEL,
    RetryConfig,
    StudioConfig,
)

#################################
#     Tests for RetryConfig     #
#################################


def test_retry_config_defaults() -> None:
    """Test that RetryConfig uses correct default values."""
    config = RetryConfig()

    assert config.max_retries == DEFAULT_MAX_RETRIES == 3
    assert config.initial_delay == DEFAULT_INITIAL_DELAY == 2.0
    assert config.retry_if is None
    assert config.on_attempt is None
    assert config.on_retry is None
    assert config.on_success is None
    assert config.on_failure is None


@pytest.mark.parametrize("max_retries", [1, 5, 10])
def test_retry_config_max_retries(max_retries: int) -> None:
    assert RetryConfig(max_retries=max_retries).max_retries == max_retries


@pytest.mark.parametrize("initial_delay", [0.0, 0.5, 2.0])
def test_retry_config_initial_delay(initial_delay: float) -> None:
    assert RetryConfig(initial_delay=initial_delay).initial_delay == initial_delay


def test_retry_config_rejects_zero_max_retries() -> None:
    with pytest.raises(ValueError, match=r"max_retries must be >= 1, got 0"):
        RetryConfig(max_retries=0)


def test_retry_config_rejects_negative_initial_delay() -> None:
    with pytest.raises(ValueError, match=r"initial_delay must be >= 0, got -1.0"):
        RetryConfig(initial_delay=-1.0)


def test_retry_config_merge() -> None:
    """Test that merge overrides only the given fields."""
    on_retry = Mock()
    config = RetryConfig(max_retries=4)
    merged = config.merge(initial_delay=0.5, on_retry=on_retry)

    assert merged is not config
    assert merged.max_retries == 4
    assert merged.initial_delay == 0.5
    assert merged.on_retry is on_retry
    assert config.initial_delay == DEFAULT_INITIAL_DELAY
    assert config.on_retry is None


def test_retry_config_merge_ignores_none() -> None:
    config = RetryConfig(max_retries=5, initial_delay=1.0)
    assert objects_are_equal(config.merge(max_retries=None, initial_delay=None), config)


def test_retry_config_merge_validates() -> None:
    with pytest.raises(ValueError, match=r"max_retries must be >= 1"):
        RetryConfig().merge(max_retries=0)


##################################
#     Tests for StudioConfig     #
##################################


def test_studio_config_defaults() -> None:
    config = StudioConfig()

    assert config.api_key is None
    assert not config.has_api_key
    assert config.text_model == DEFAULT_TEXT_MODEL
    assert config.image_model == DEFAULT_IMAGE_MODEL
    assert config.language == DEFAULT_LANGUAGE
    assert config.retry == RetryConfig()


def test_studio_config_retry_not_shared() -> None:
    assert StudioConfig().retry is not StudioConfig().retry


def test_studio_config_has_api_key() -> None:
    assert StudioConfig(api_key="secret").has_api_key
    assert not StudioConfig(api_key="").has_api_key


@pytest.mark.parametrize("field_name", ["text_model", "image_model"])
@pytest.mark.parametrize("name", ["", "   "])
def test_studio_config_rejects_blank_model(field_name: str, name: str) -> None:
    with pytest.raises(ValueError, match=rf"{field_name} must be a non-empty model name"):
        StudioConfig(**{field_name: name})


def test_studio_config_from_env_gemini_api_key() -> None:
    config = StudioConfig.from_env({"GEMINI_API_KEY": "gemini", "API_KEY": "generic"})
    assert config.api_key == "gemini"


def test_studio_config_from_env_api_key_fallback() -> None:
    assert StudioConfig.from_env({"API_KEY": "generic"}).api_key == "generic"


def test_studio_config_from_env_skips_empty_values() -> None:
    assert StudioConfig.from_env({"GEMINI_API_KEY": "", "API_KEY": "generic"}).api_key == "generic"


def test_studio_config_from_env_missing() -> None:
    config = StudioConfig.from_env({})
    assert config.api_key is None
    assert not config.has_api_key


def test_studio_config_from_env_os_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.setenv("API_KEY", "from-os")
    assert StudioConfig.from_env().api_key == "from-os"


def test_studio_config_from_env_kwargs() -> None:
    retry = RetryConfig(max_retries=5)
    config = StudioConfig.from_env({}, language="English", retry=retry)
    assert config.language == "English"
    assert config.retry is retry
