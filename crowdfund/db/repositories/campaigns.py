"""
Campaign repository functions.

Implements create/read for campaigns, the relative aggregate increment used
by donations, and the direct progress override.
"""
from __future__ import annotations

import uuid
from decimal import Decimal
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from crowdfund.db import models, schemas


def create_campaign(db: Session, campaign: schemas.CampaignCreate, image: str) -> models.Campaign:
    db_campaign = models.Campaign(
        title=campaign.title,
        description=campaign.description,
        target_amount=campaign.target_amount,
        raised_amount=Decimal("0"),
        creator_name=campaign.creator_name,
        image=image,
        days_left=campaign.days_left,
        supporters=0,
    )
    db.add(db_campaign)
    db.commit()
    db.refresh(db_campaign)
    return db_campaign


def get_campaign(db: Session, campaign_id: uuid.UUID) -> Optional[models.Campaign]:
    return db.query(models.Campaign).filter(models.Campaign.id == campaign_id).first()


def campaign_exists(db: Session, campaign_id: uuid.UUID) -> bool:
    return db.query(models.Campaign.id).filter(models.Campaign.id == campaign_id).first() is not None


def get_campaigns(db: Session, skip: int = 0, limit: Optional[int] = None) -> List[models.Campaign]:
    """List campaigns newest first."""
    q = db.query(models.Campaign).order_by(models.Campaign.created_at.desc())
    if skip:
        q = q.offset(skip)
    if limit is not None:
        q = q.limit(limit)
    return q.all()


def get_campaign_ids(db: Session) -> List[uuid.UUID]:
    return [row.id for row in db.query(models.Campaign.id).all()]


def increment_campaign_totals(db: Session, campaign_id: uuid.UUID, amount: Decimal) -> int:
    """Add one donation's amount and one supporter to a campaign.

    Expressed as ``raised_amount = raised_amount + :amount`` so concurrent
    donations compose in the database. Does not commit; returns the number
    of rows matched.
    """
    return (
        db.query(models.Campaign)
        .filter(models.Campaign.id == campaign_id)
        .update(
            {
                models.Campaign.raised_amount: models.Campaign.raised_amount + amount,
                models.Campaign.supporters: models.Campaign.supporters + 1,
            },
            synchronize_session=False,
        )
    )


def set_raised_amount(db: Session, campaign_id: uuid.UUID, raised_amount: Decimal) -> Optional[models.Campaign]:
    db_campaign = get_campaign(db, campaign_id)
    if db_campaign:
        db_campaign.raised_amount = raised_amount
        db.commit()
        db.refresh(db_campaign)
    return db_campaign


def count_campaigns(db: Session) -> int:
    return db.query(func.count(models.Campaign.id)).scalar() or 0


def sum_raised_amount(db: Session) -> Decimal:
    return db.query(func.coalesce(func.sum(models.Campaign.raised_amount), 0)).scalar() or Decimal("0")


def delete_all_campaigns(db: Session) -> int:
    """Delete every campaign row. Does not commit."""
    return db.query(models.Campaign).delete(synchronize_session=False)
