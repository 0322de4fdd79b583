"""Unit tests for src/core/config.py"""

import pytest

from src.core.config import DEFAULT_QUEUE_CAPACITY, DEFAULT_STACK_CAPACITY, Settings
from src.core.exceptions import InvalidConfigError


def test_defaults() -> None:
    settings = Settings()
    assert settings.queue_capacity == DEFAULT_QUEUE_CAPACITY == 5
    assert settings.stack_capacity == DEFAULT_STACK_CAPACITY == 3
    assert settings.seed is None
    assert settings.log_level == "INFO"


def test_from_empty_environment() -> None:
    assert Settings.from_env({}) == Settings()


def test_from_environment() -> None:
    settings = Settings.from_env(
        {
            "PIECE_RESERVE_QUEUE_CAPACITY": "7",
            "PIECE_RESERVE_STACK_CAPACITY": "2",
            "PIECE_RESERVE_SEED": "42",
            "PIECE_RESERVE_LOG_LEVEL": "debug",
            "UNRELATED": "ignored",
        }
    )
    assert settings == Settings(queue_capacity=7, stack_capacity=2, seed=42, log_level="DEBUG")


@pytest.mark.parametrize(
    "environ",
    [
        {"PIECE_RESERVE_QUEUE_CAPACITY": "0"},
        {"PIECE_RESERVE_STACK_CAPACITY": "-1"},
        {"PIECE_RESERVE_QUEUE_CAPACITY": "five"},
        {"PIECE_RESERVE_SEED": "not a seed"},
        {"PIECE_RESERVE_LOG_LEVEL": "LOUD"},
    ],
)
def test_invalid_environment(environ: dict[str, str]) -> None:
    with pytest.raises(InvalidConfigError):
        _ = Settings.from_env(environ)


def test_override_ignores_missing_values() -> None:
    settings = Settings(queue_capacity=7).override(queue_capacity=None, stack_capacity=1, seed=None)
    assert settings == Settings(queue_capacity=7, stack_capacity=1)


def test_override_is_validated() -> None:
    with pytest.raises(InvalidConfigError):
        _ = Settings().override(stack_capacity=0)
