"""Tests for environment-driven settings."""

from pathlib import Path

import pytest

from cob_scheduler.config import Settings


def test_defaults():
    settings = Settings.from_env({})
    assert settings.schedules_dir == Path("schedules")
    assert settings.default_num_assignees == 2
    assert settings.persist_schedules is True
    assert settings.port == 8000


def test_overrides():
    settings = Settings.from_env({
        "COB_SCHEDULES_DIR": "/var/lib/cob",
        "COB_DEFAULT_ASSIGNEES": "3",
        "COB_PERSIST_SCHEDULES": "off",
        "COB_PORT": "9000",
        "COB_LOG_LEVEL": "DEBUG",
    })
    assert settings.schedules_dir == Path("/var/lib/cob")
    assert settings.default_num_assignees == 3
    assert settings.persist_schedules is False
    assert settings.port == 9000
    assert settings.log_level == "debug"


@pytest.mark.parametrize("env", [
    {"COB_PORT": "http"},
    {"COB_PERSIST_SCHEDULES": "maybe"},
    {"COB_DEFAULT_ASSIGNEES": "0"},
])
def test_malformed_values(env):
    with pytest.raises(ValueError):
        Settings.from_env(env)
