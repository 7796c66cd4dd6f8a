"""Environment switches for startup behavior."""

import os
from functools import lru_cache

_FALSY = {"", "0", "false", "no", "off"}
_TRUTHY = {"1", "true", "yes", "on"}


def _normalize_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _FALSY:
        return False
    if normalized in _TRUTHY:
        return True
    return default


@lru_cache(maxsize=None)
def auto_create_schema_enabled() -> bool:
    """Whether startup creates missing tables (``AUTO_CREATE_SCHEMA``, default on)."""
    return _normalize_bool(os.getenv("AUTO_CREATE_SCHEMA"), default=True)


def refresh_feature_flag_cache() -> None:
    auto_create_schema_enabled.cache_clear()
