from __future__ import annotations
import logging
import os

# Defaults
_DEFAULT_RECURSION_LIMIT = 10000
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_PROMPT = '> '


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in ('0', 'false', 'no', 'off')


def get_recursion_limit() -> int:
    return int_from_env('NORA_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT)


def get_log_level() -> int:
    name = os.environ.get('NORA_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName maps unknown names to the string "Level <name>"
    return level if isinstance(level, int) else logging.WARNING


def use_color() -> bool:
    return flag_from_env('NORA_COLOR', True)


def get_prompt() -> str:
    return os.environ.get('NORA_PROMPT', _DEFAULT_PROMPT)
