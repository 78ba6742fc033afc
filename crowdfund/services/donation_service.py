"""
Donation transaction: record a donation and update campaign aggregates.

The donation insert and the campaign increment share one unit of work on
the caller's session. Either both are committed or the session is rolled
back and nothing is visible.
"""
from __future__ import annotations

import logging
import uuid
from decimal import Decimal

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from crowdfund.db import models
from crowdfund.db.repositories import campaigns as campaign_repo
from crowdfund.db.repositories import donations as donation_repo
from crowdfund.errors import NotFound, PersistenceError, ValidationError

logger = logging.getLogger(__name__)

CAMPAIGN_NOT_FOUND = "Campaign not found"


def donate(db: Session, campaign_id: uuid.UUID, donor_name: str, amount: Decimal) -> models.Campaign:
    """Apply a donation and return the campaign with refreshed totals."""
    donor_name = (donor_name or "").strip()
    if not donor_name:
        raise ValidationError("donor_name: must not be empty")
    if amount is None or Decimal(amount) <= 0:
        raise ValidationError("amount: must be greater than 0")

    try:
        if not campaign_repo.campaign_exists(db, campaign_id):
            raise NotFound(CAMPAIGN_NOT_FOUND)
        donation = donation_repo.add_donation(db, campaign_id, donor_name, amount)
        donation_id = donation.id
        matched = campaign_repo.increment_campaign_totals(db, campaign_id, amount)
        if matched != 1:
            # Campaign vanished between the existence check and the update
            raise NotFound(CAMPAIGN_NOT_FOUND)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("donation_failed campaign_id=%s", campaign_id)
        raise PersistenceError("Server error processing donation.") from e
    except Exception:
        db.rollback()
        raise

    logger.info(
        "donation_recorded campaign_id=%s donation_id=%s amount=%s",
        campaign_id,
        donation_id,
        amount,
    )
    campaign = campaign_repo.get_campaign(db, campaign_id)
    if campaign is None:
        raise NotFound(CAMPAIGN_NOT_FOUND)
    db.refresh(campaign)
    return campaign
