import uuid
from datetime import datetime
from decimal import Decimal
from typing import Annotated, List

from pydantic import BaseModel, ConfigDict, Field

# Monetary inputs: fixed point, at most 10 integer digits and 2 decimals
PositiveMoney = Annotated[Decimal, Field(gt=0, max_digits=12, decimal_places=2)]


class CampaignBase(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    creator_name: str = Field(min_length=1, max_length=255)
    days_left: int = Field(ge=0)


class CampaignCreate(CampaignBase):
    target_amount: PositiveMoney


class Campaign(CampaignBase):
    id: uuid.UUID
    target_amount: float
    raised_amount: float
    image: str
    supporters: int
    created_at: datetime
    progress_percentage: float
    model_config = ConfigDict(from_attributes=True)


class CampaignProgress(BaseModel):
    raised_amount: float
    target_amount: float
    supporters: int
    progress_percentage: float
    model_config = ConfigDict(from_attributes=True)


class ProgressUpdate(BaseModel):
    raised_amount: Decimal = Field(ge=0, max_digits=12, decimal_places=2)


class CampaignListResponse(BaseModel):
    success: bool = True
    campaigns: List[Campaign]


class CampaignResponse(BaseModel):
    success: bool = True
    campaign: Campaign


class CampaignCreateResponse(BaseModel):
    success: bool = True
    message: str
    campaign_id: uuid.UUID


class CampaignProgressResponse(BaseModel):
    success: bool = True
    message: str
    campaign: CampaignProgress
