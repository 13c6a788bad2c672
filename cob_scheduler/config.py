"""
Runtime configuration, read from COB_* environment variables.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Mapping, Optional
import os

_TRUE = {'1', 'true', 'yes', 'on'}
_FALSE = {'0', 'false', 'no', 'off'}


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


@dataclass(frozen=True)
class Settings:
    """Service settings."""

    schedules_dir: Path = Path('schedules')
    default_num_assignees: int = 2
    persist_schedules: bool = True
    host: str = '0.0.0.0'
    port: int = 8000
    log_level: str = 'info'

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        env = os.environ if environ is None else environ
        settings = cls(
            schedules_dir=Path(env.get('COB_SCHEDULES_DIR', 'schedules')),
            default_num_assignees=_parse_int('COB_DEFAULT_ASSIGNEES', env.get('COB_DEFAULT_ASSIGNEES', '2')),
            persist_schedules=_parse_bool('COB_PERSIST_SCHEDULES', env.get('COB_PERSIST_SCHEDULES', 'true')),
            host=env.get('COB_HOST', '0.0.0.0'),
            port=_parse_int('COB_PORT', env.get('COB_PORT', '8000')),
            log_level=env.get('COB_LOG_LEVEL', 'info').lower(),
        )
        if settings.default_num_assignees < 1:
            raise ValueError("COB_DEFAULT_ASSIGNEES must be at least 1")
        return settings


@lru_cache()
def get_settings() -> Settings:
    return Settings.from_env()
