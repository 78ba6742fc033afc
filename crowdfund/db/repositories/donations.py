"""
Donation repository functions.

Donation rows are immutable once written; the only writes are inserts and
the administrative bulk delete.
"""
from __future__ import annotations

import uuid
from decimal import Decimal
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from crowdfund.db import models


def add_donation(db: Session, campaign_id: uuid.UUID, donor_name: str, amount: Decimal) -> models.Donation:
    """Stage a donation row and flush it. Does not commit."""
    db_donation = models.Donation(
        campaign_id=campaign_id,
        donor_name=donor_name,
        amount=amount,
    )
    db.add(db_donation)
    db.flush()
    return db_donation


def get_donations_by_campaign(
    db: Session,
    campaign_id: uuid.UUID,
    skip: int = 0,
    limit: Optional[int] = None,
) -> List[models.Donation]:
    """List a campaign's donations newest first; all of them unless limit is given."""
    q = (
        db.query(models.Donation)
        .filter(models.Donation.campaign_id == campaign_id)
        .order_by(models.Donation.created_at.desc(), models.Donation.id)
    )
    if skip:
        q = q.offset(skip)
    if limit is not None:
        q = q.limit(limit)
    return q.all()


def count_donations(db: Session, campaign_id: uuid.UUID | None = None) -> int:
    q = db.query(func.count(models.Donation.id))
    if campaign_id is not None:
        q = q.filter(models.Donation.campaign_id == campaign_id)
    return q.scalar() or 0


def sum_donated_amount(db: Session) -> Decimal:
    return db.query(func.coalesce(func.sum(models.Donation.amount), 0)).scalar() or Decimal("0")


def delete_all_donations(db: Session) -> int:
    """Delete every donation row. Does not commit."""
    return db.query(models.Donation).delete(synchronize_session=False)
