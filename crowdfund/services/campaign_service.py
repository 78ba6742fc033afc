"""
Campaign creation and read path.
"""
from __future__ import annotations

import logging
import uuid
from decimal import Decimal
from typing import BinaryIO, List, Optional, Tuple

from sqlalchemy.orm import Session

from crowdfund.db import models, schemas
from crowdfund.db.repositories import campaigns as campaign_repo
from crowdfund.db.repositories import donations as donation_repo
from crowdfund.errors import NotFound
from crowdfund.services.donation_service import CAMPAIGN_NOT_FOUND
from crowdfund.services.image_storage import ImageStorage

logger = logging.getLogger(__name__)


def create_campaign(
    db: Session,
    campaign: schemas.CampaignCreate,
    *,
    storage: ImageStorage,
    image_stream: BinaryIO,
    image_filename: Optional[str],
    image_content_type: Optional[str],
) -> models.Campaign:
    """Store the image, then insert the campaign; drop the image if the insert fails."""
    filename = storage.save(image_stream, image_filename, image_content_type)
    try:
        created = campaign_repo.create_campaign(db, campaign, image=filename)
    except Exception:
        db.rollback()
        storage.delete(filename)
        raise
    logger.info("campaign_created campaign_id=%s target=%s", created.id, created.target_amount)
    return created


def get_campaign(db: Session, campaign_id: uuid.UUID) -> models.Campaign:
    campaign = campaign_repo.get_campaign(db, campaign_id)
    if campaign is None:
        raise NotFound(CAMPAIGN_NOT_FOUND)
    return campaign


def list_campaigns(db: Session) -> List[models.Campaign]:
    return campaign_repo.get_campaigns(db)


def list_donations(
    db: Session,
    campaign_id: uuid.UUID,
    skip: int = 0,
    limit: Optional[int] = None,
) -> Tuple[List[models.Donation], int]:
    """Return one page of a campaign's donations, newest first, and the full count."""
    if not campaign_repo.campaign_exists(db, campaign_id):
        raise NotFound(CAMPAIGN_NOT_FOUND)
    donations = donation_repo.get_donations_by_campaign(db, campaign_id, skip=skip, limit=limit)
    return donations, donation_repo.count_donations(db, campaign_id)


def override_progress(db: Session, campaign_id: uuid.UUID, raised_amount: Decimal) -> models.Campaign:
    """Overwrite raised_amount directly, bypassing donations. Dev use only."""
    campaign = campaign_repo.set_raised_amount(db, campaign_id, raised_amount)
    if campaign is None:
        raise NotFound(CAMPAIGN_NOT_FOUND)
    logger.warning("campaign_progress_overridden campaign_id=%s raised_amount=%s", campaign_id, raised_amount)
    return campaign
