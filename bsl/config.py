from __future__ import annotations
import logging
import os

from bsl.errors import BslConfigError


# Defaults
DEFAULT_RECURSION_LIMIT = 20000
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_CHECK_SUCCESS_MARKER = '\U0001F389'


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise BslConfigError(f"{var} must be an integer, got {raw!r}")
    if value <= 0:
        raise BslConfigError(f"{var} must be positive, got {value}")
    return value


def str_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    return raw if raw else default


def get_recursion_limit() -> int:
    return int_from_env('BSL_RECURSION_LIMIT', DEFAULT_RECURSION_LIMIT)


def get_log_level() -> int:
    name = str_from_env('BSL_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise BslConfigError(f"BSL_LOG_LEVEL is not a logging level: {name!r}")
    return level


def get_check_success_marker() -> str:
    return str_from_env('BSL_CHECK_SUCCESS_MARKER', _DEFAULT_CHECK_SUCCESS_MARKER)
