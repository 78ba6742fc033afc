"""Runtime toggles read from the environment.

Only one toggle exists: whether the sample-data routes and the direct
progress override are exposed. Values are read once and cached; tests call
``refresh_feature_flag_cache`` after changing the environment.
"""

from __future__ import annotations

import os
from functools import lru_cache

DEV_ENDPOINTS_ENV = "FEATURE_DEV_ENDPOINTS_ENABLED"

_OFF_VALUES = frozenset({"", "0", "false", "no", "off"})
_ON_VALUES = frozenset({"1", "true", "yes", "on"})


def parse_flag(raw: str | None, default: bool) -> bool:
    """Read an env-style switch; unrecognised values keep the default."""
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _OFF_VALUES:
        return False
    if value in _ON_VALUES:
        return True
    return default


@lru_cache(maxsize=None)
def dev_endpoints_enabled() -> bool:
    """Whether /api/dummy/* and PUT /api/campaigns/{id}/progress are served."""
    return parse_flag(os.getenv(DEV_ENDPOINTS_ENV), default=True)


def refresh_feature_flag_cache() -> None:
    dev_endpoints_enabled.cache_clear()
