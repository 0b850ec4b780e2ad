from __future__ import annotations

import dataclasses

import pytest

from tps_utils.config import DERIVATION, MAX_ATTEMPTS, RETRY_DELAY, NodeSettings, RetryConfig, Runtime


def test_defaults_match_published_constants() -> None:
    config = RetryConfig()
    assert config.max_attempts == MAX_ATTEMPTS == 10
    assert config.retry_delay == RETRY_DELAY == 1.0
    assert DERIVATION == "//Sender/"


def test_retry_config_is_immutable() -> None:
    config = RetryConfig(max_attempts=3, retry_delay=0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.max_attempts = 5  # type: ignore[misc]


@pytest.mark.parametrize("attempts", [0, -1, 2.5, True])
def test_rejects_invalid_attempt_budget(attempts) -> None:
    with pytest.raises(ValueError):
        RetryConfig(max_attempts=attempts)


def test_rejects_negative_delay() -> None:
    with pytest.raises(ValueError):
        RetryConfig(retry_delay=-0.1)


def test_retry_config_from_env(monkeypatch) -> None:
    monkeypatch.setenv("TPS_CONNECT_MAX_ATTEMPTS", "4")
    monkeypatch.setenv("TPS_CONNECT_RETRY_DELAY", "0.25")
    assert RetryConfig.from_env() == RetryConfig(max_attempts=4, retry_delay=0.25)


def test_retry_config_from_env_defaults(monkeypatch) -> None:
    monkeypatch.delenv("TPS_CONNECT_MAX_ATTEMPTS", raising=False)
    monkeypatch.delenv("TPS_CONNECT_RETRY_DELAY", raising=False)
    assert RetryConfig.from_env() == RetryConfig()


def test_runtime_selection() -> None:
    assert Runtime.select("rococo") is Runtime.ROCOCO
    assert Runtime.select(" TICK ") is Runtime.TICK
    assert Runtime.TICK.metadata_path == "tick-meta.scale"


def test_runtime_selection_requires_one_choice() -> None:
    with pytest.raises(ValueError, match="must be selected"):
        Runtime.select(None)
    with pytest.raises(ValueError, match="mutually exclusive"):
        Runtime.select("rococo,tick")
    with pytest.raises(ValueError, match="Unknown runtime"):
        Runtime.select("kusama")


def test_node_settings_from_env(monkeypatch) -> None:
    monkeypatch.setenv("TPS_RUNTIME", "tick")
    monkeypatch.setenv("TPS_REQUEST_TIMEOUT", "5")
    monkeypatch.setenv("TPS_CONNECT_MAX_ATTEMPTS", "2")
    monkeypatch.delenv("TPS_CONNECT_RETRY_DELAY", raising=False)

    settings = NodeSettings.from_env()

    assert settings.runtime is Runtime.TICK
    assert settings.request_timeout == 5.0
    assert settings.retry == RetryConfig(max_attempts=2)


def test_node_settings_without_runtime(monkeypatch) -> None:
    monkeypatch.delenv("TPS_RUNTIME", raising=False)
    with pytest.raises(ValueError):
        NodeSettings.from_env()


@pytest.mark.parametrize("delay", [float("nan"), float("inf"), "1", None, True])
def test_rejects_non_finite_or_non_numeric_delay(delay) -> None:
    with pytest.raises(ValueError):
        RetryConfig(retry_delay=delay)


def test_retry_config_from_env_rejects_nan(monkeypatch) -> None:
    monkeypatch.setenv("TPS_CONNECT_RETRY_DELAY", "nan")
    with pytest.raises(ValueError):
        RetryConfig.from_env()


@pytest.mark.parametrize("timeout", [0, -1.0, float("inf"), "30"])
def test_node_settings_rejects_bad_timeout(timeout) -> None:
    with pytest.raises(ValueError):
        NodeSettings(request_timeout=timeout)


def test_node_settings_defaults_leave_runtime_open() -> None:
    settings = NodeSettings()
    assert settings.runtime is None
    assert settings.retry == RetryConfig()
    assert settings.request_timeout == 30.0
