"""
Shared FastAPI dependencies.
"""
from crowdfund.errors import NotFound
from crowdfund.utils.feature_flags import dev_endpoints_enabled


def require_dev_endpoints() -> None:
    """Hide dev-only routes unless FEATURE_DEV_ENDPOINTS_ENABLED is on."""
    if not dev_endpoints_enabled():
        raise NotFound("Not found")
