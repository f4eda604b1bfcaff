"""
Configuration for query runs
"""

import os
from dataclasses import dataclass


_TRUE_VALUES = ('1', 'true', 'yes', 'on')
_FALSE_VALUES = ('0', 'false', 'no', 'off')


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be one of {_TRUE_VALUES + _FALSE_VALUES}, got {raw!r}")


@dataclass
class QueryConfig:
    """Flags shared by every strategy pass"""
    debug: bool = False
    dedupe_text_matches: bool = True

    @classmethod
    def from_env(cls) -> 'QueryConfig':
        """Build a config from DOM_TESTING_DEBUG / DOM_TESTING_DEDUPE"""
        return cls(
            debug=_env_flag('DOM_TESTING_DEBUG', False),
            dedupe_text_matches=_env_flag('DOM_TESTING_DEDUPE', True),
        )
