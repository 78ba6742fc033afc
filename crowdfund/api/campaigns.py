"""
Campaign endpoints.

Listing, lookup, multipart creation with an image, donations, and the
dev-only progress override.
"""
import logging
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from crowdfund.api.deps import require_dev_endpoints
from crowdfund.db import schemas
from crowdfund.db.database import get_db
from crowdfund.errors import ValidationError
from crowdfund.services import campaign_service, donation_service
from crowdfund.services.image_storage import IMAGE_REQUIRED, ImageStorage, get_image_storage

logger = logging.getLogger(__name__)

MAX_DONATIONS_PAGE = 1000

router = APIRouter(prefix="/api/campaigns", tags=["campaigns"])


@router.get("", response_model=schemas.CampaignListResponse)
def list_campaigns_endpoint(db: Session = Depends(get_db)):
    return schemas.CampaignListResponse(campaigns=campaign_service.list_campaigns(db))


@router.get("/{campaign_id}", response_model=schemas.CampaignResponse)
def get_campaign_endpoint(campaign_id: uuid.UUID, db: Session = Depends(get_db)):
    return schemas.CampaignResponse(campaign=campaign_service.get_campaign(db, campaign_id))


@router.post("", response_model=schemas.CampaignCreateResponse, status_code=status.HTTP_201_CREATED)
def create_campaign_endpoint(
    title: Optional[str] = Form(default=None),
    description: Optional[str] = Form(default=None),
    target_amount: Optional[str] = Form(default=None),
    creator_name: Optional[str] = Form(default=None),
    days_left: Optional[str] = Form(default=None),
    image: Optional[UploadFile] = File(default=None),
    db: Session = Depends(get_db),
    storage: ImageStorage = Depends(get_image_storage),
):
    if image is None or not image.filename:
        raise ValidationError(IMAGE_REQUIRED)

    fields = {
        "title": title,
        "description": description,
        "target_amount": target_amount,
        "creator_name": creator_name,
        "days_left": days_left,
    }
    try:
        campaign = schemas.CampaignCreate.model_validate({k: v for k, v in fields.items() if v is not None})
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e) from e

    created = campaign_service.create_campaign(
        db,
        campaign,
        storage=storage,
        image_stream=image.file,
        image_filename=image.filename,
        image_content_type=image.content_type,
    )
    return schemas.CampaignCreateResponse(message="Campaign created successfully", campaign_id=created.id)


@router.post("/{campaign_id}/donate", response_model=schemas.CampaignProgressResponse)
def donate_endpoint(
    campaign_id: uuid.UUID,
    donation: schemas.DonationCreate,
    db: Session = Depends(get_db),
):
    campaign = donation_service.donate(db, campaign_id, donation.donor_name, donation.amount)
    return schemas.CampaignProgressResponse(
        message="Donation successful",
        campaign=schemas.CampaignProgress.model_validate(campaign),
    )


@router.get("/{campaign_id}/donations", response_model=schemas.DonationListResponse)
def list_donations_endpoint(
    campaign_id: uuid.UUID,
    skip: int = Query(default=0, ge=0),
    limit: Optional[int] = Query(default=None, ge=1, le=MAX_DONATIONS_PAGE),
    db: Session = Depends(get_db),
):
    # No limit means the full history; total always counts every donation
    donations, total = campaign_service.list_donations(db, campaign_id, skip=skip, limit=limit)
    return schemas.DonationListResponse(donations=donations, total=total)


@router.put(
    "/{campaign_id}/progress",
    response_model=schemas.CampaignProgressResponse,
    dependencies=[Depends(require_dev_endpoints)],
)
def override_progress_endpoint(
    campaign_id: uuid.UUID,
    update: schemas.ProgressUpdate,
    db: Session = Depends(get_db),
):
    campaign = campaign_service.override_progress(db, campaign_id, update.raised_amount)
    return schemas.CampaignProgressResponse(
        message="Progress updated successfully",
        campaign=schemas.CampaignProgress.model_validate(campaign),
    )
