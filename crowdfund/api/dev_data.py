"""
Dev-only endpoints for seeding and clearing sample data.

Hidden (404) unless FEATURE_DEV_ENDPOINTS_ENABLED is on.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from crowdfund.api.deps import require_dev_endpoints
from crowdfund.db import schemas
from crowdfund.db.database import get_db
from crowdfund.services import dev_data_service

router = APIRouter(
    prefix="/api/dummy",
    tags=["dev-data"],
    dependencies=[Depends(require_dev_endpoints)],
)


@router.post("/campaigns", response_model=schemas.SeededCampaignsResponse, status_code=status.HTTP_201_CREATED)
def seed_campaigns_endpoint(db: Session = Depends(get_db)):
    campaigns = dev_data_service.seed_campaigns(db)
    return schemas.SeededCampaignsResponse(
        message=f"{len(campaigns)} dummy campaigns created successfully",
        campaigns=campaigns,
    )


@router.post("/donations", response_model=schemas.SeededDonationsResponse, status_code=status.HTTP_201_CREATED)
def seed_donations_endpoint(db: Session = Depends(get_db)):
    donations = dev_data_service.seed_donations(db)
    return schemas.SeededDonationsResponse(
        message=f"{len(donations)} dummy donations created successfully",
        donations=donations,
    )


@router.delete("/clear", response_model=schemas.MessageResponse)
def clear_endpoint(db: Session = Depends(get_db)):
    dev_data_service.clear_all(db)
    return schemas.MessageResponse(message="All dummy data cleared successfully")


@router.get("/stats", response_model=schemas.DataStatsResponse)
def stats_endpoint(db: Session = Depends(get_db)):
    return schemas.DataStatsResponse(stats=dev_data_service.stats(db))
