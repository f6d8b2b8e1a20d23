"""Tests for configuration adapter."""

import pytest
from pydantic import ValidationError

from departure_board.adapters.config import AppConfig
from departure_board.domain.errors import ConfigurationError


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    config = AppConfig(_env_file=None)

    assert config.provider == "nationalrail"
    assert config.timeout == 5
    assert config.rows == 10
    assert config.offset == 0
    assert config.window == 0
    assert config.limit is None
    assert config.json_output is False


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("DEPARTURE_BOARD_PROVIDER", "HSL")
    monkeypatch.setenv("DIGITRANSIT_SUBSCRIPTION_KEY", "key")
    monkeypatch.setenv("DEPARTURE_BOARD_ROWS", "3")
    monkeypatch.setenv("DEPARTURE_BOARD_JSON_OUTPUT", "true")

    config = AppConfig(_env_file=None)

    assert config.provider == "hsl"
    assert config.rows == 3
    assert config.json_output is True
    assert config.token_for_provider() == "key"


def test_unprefixed_variables_are_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given generic names like TIMEOUT and LIMIT, when loading, then defaults are kept."""
    monkeypatch.setenv("TIMEOUT", "30")
    monkeypatch.setenv("LIMIT", "1")
    monkeypatch.setenv("PROVIDER", "hsl")

    config = AppConfig(_env_file=None)

    assert config.timeout == 5
    assert config.limit is None
    assert config.provider == "nationalrail"


def test_explicit_values_override_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given env and explicit values, when loading, then explicit values win."""
    monkeypatch.setenv("DEPARTURE_BOARD_TIMEOUT", "30")

    config = AppConfig(_env_file=None, timeout=2)

    assert config.timeout == 2


def test_config_validates_provider() -> None:
    """Given an unknown provider, when loading config, then validation error is raised."""
    with pytest.raises(ValidationError, match="provider must be one of"):
        AppConfig(_env_file=None, provider="tfl")


@pytest.mark.parametrize("offset", [-121, 121])
def test_config_validates_offset_range(offset: int) -> None:
    """Given an offset outside -120..120, when loading, then validation error is raised."""
    with pytest.raises(ValidationError, match="offset must be between"):
        AppConfig(_env_file=None, offset=offset)


def test_config_validates_window_range() -> None:
    """Given a window over 120, when loading, then validation error is raised."""
    with pytest.raises(ValidationError, match="window must be between"):
        AppConfig(_env_file=None, window=180)


def test_config_validates_timeout_positive() -> None:
    """Given a zero timeout, when loading, then validation error is raised."""
    with pytest.raises(ValidationError):
        AppConfig(_env_file=None, timeout=0)


def test_missing_darwin_token_is_configuration_error() -> None:
    """Given no DARWIN_TOKEN, when asking for the token, then ConfigurationError."""
    config = AppConfig(_env_file=None)

    with pytest.raises(ConfigurationError, match="DARWIN_TOKEN"):
        config.token_for_provider()


def test_darwin_token_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given DARWIN_TOKEN, when asking for the token, then it is returned."""
    monkeypatch.setenv("DARWIN_TOKEN", "darwin")

    assert AppConfig(_env_file=None).token_for_provider() == "darwin"
