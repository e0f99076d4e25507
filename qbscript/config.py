from __future__ import annotations
import os


# Defaults
_DEFAULT_RECURSION_LIMIT = 10_000
_MIN_RECURSION_LIMIT = 100


def int_from_env(var: str, default: int, minimum: int = 0) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ValueError(f"{var} must be at least {minimum}, got {value}")
    return value


def get_recursion_limit() -> int:
    return int_from_env('QB_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT, _MIN_RECURSION_LIMIT)
