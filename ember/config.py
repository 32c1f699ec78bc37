from __future__ import annotations
import logging
import os

# Defaults
_DEFAULT_SOURCE_EXT = '.em'
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_RECURSION_LIMIT = 10000


def value_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return raw.strip()


def get_source_extension() -> str:
    ext = value_from_env('EMBER_SOURCE_EXT', _DEFAULT_SOURCE_EXT)
    # accept "em" as well as ".em"
    return ext if ext.startswith('.') else '.' + ext


def get_log_level() -> int:
    name = value_from_env('EMBER_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def get_recursion_limit() -> int:
    raw = value_from_env('EMBER_RECURSION_LIMIT', str(_DEFAULT_RECURSION_LIMIT))
    try:
        limit = int(raw)
    except ValueError:
        return _DEFAULT_RECURSION_LIMIT
    return limit if limit > 0 else _DEFAULT_RECURSION_LIMIT
