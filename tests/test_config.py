"""Tests for environment-driven settings."""

import pytest

from objpath import OBJPATH_CONFIG, ObjPathConfig, ObjPathConfigError
from objpath.testing import objpath_test_env


def test_defaults_without_environment() -> None:
    config = ObjPathConfig({})

    assert config.ignore_case is True
    assert config.strict_literals is False
    assert config.cache_max_size == 1000
    assert config.log_level == "WARNING"


def test_reads_environment_values() -> None:
    config = ObjPathConfig.from_env(
        {
            "OBJPATH_IGNORE_CASE": "no",
            "OBJPATH_STRICT_LITERALS": " TRUE ",
            "OBJPATH_CACHE_MAX_SIZE": "64",
            "OBJPATH_LOG_LEVEL": "debug",
        }
    )

    assert config.ignore_case is False
    assert config.strict_literals is True
    assert config.cache_max_size == 64
    assert config.log_level == "DEBUG"


def test_reads_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("OBJPATH_CACHE_MAX_SIZE", "12")

    assert ObjPathConfig().cache_max_size == 12


def test_blank_values_fall_back_to_defaults() -> None:
    assert ObjPathConfig({"OBJPATH_IGNORE_CASE": "  "}).ignore_case is True


@pytest.mark.parametrize(
    ("name", "raw", "message"),
    [
        ("OBJPATH_IGNORE_CASE", "maybe", "boolean flag"),
        ("OBJPATH_CACHE_MAX_SIZE", "lots", "must be an integer"),
        ("OBJPATH_CACHE_MAX_SIZE", "0", "must be positive"),
        ("OBJPATH_LOG_LEVEL", "LOUD", "logging level name"),
    ],
)
def test_rejects_bad_values(name: str, raw: str, message: str) -> None:
    with pytest.raises(ObjPathConfigError, match=message):
        ObjPathConfig({name: raw})


def test_config_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        ObjPathConfig({"OBJPATH_CACHE_MAX_SIZE": "-3"})


def test_test_env_restores_settings() -> None:
    before = repr(OBJPATH_CONFIG)

    with objpath_test_env(ignore_case=False, cache_max_size=5) as config:
        assert config.ignore_case is False
        assert config.cache_max_size == 5

    assert repr(OBJPATH_CONFIG) == before


def test_test_env_rejects_unknown_settings() -> None:
    with pytest.raises(TypeError, match="unknown objpath settings: colour"):
        with objpath_test_env(colour="blue"):
            pass
