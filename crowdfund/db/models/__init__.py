"""
Domain-split SQLAlchemy models.

Exposes `Base`, `now_utc`, and all ORM classes from one import path.
"""

from .base import Base, now_utc  # re-export

# Domain models
from .users import User
from .campaigns import Campaign, Donation

__all__ = [
    # base
    "Base",
    "now_utc",
    # users
    "User",
    # campaigns/donations
    "Campaign",
    "Donation",
]
