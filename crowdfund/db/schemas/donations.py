import uuid
from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .campaigns import PositiveMoney


class DonationCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    donor_name: str = Field(min_length=1, max_length=255)
    amount: PositiveMoney


class Donation(BaseModel):
    id: uuid.UUID
    campaign_id: uuid.UUID
    donor_name: str
    amount: float
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class DonationListResponse(BaseModel):
    success: bool = True
    donations: List[Donation]
    total: int
