from typing import List

from pydantic import BaseModel

from .campaigns import Campaign
from .donations import Donation


class DataStats(BaseModel):
    total_campaigns: int
    total_donations: int
    total_raised_in_campaigns: float
    total_donated_amount: float


class DataStatsResponse(BaseModel):
    success: bool = True
    stats: DataStats


class SeededCampaignsResponse(BaseModel):
    success: bool = True
    message: str
    campaigns: List[Campaign]


class SeededDonationsResponse(BaseModel):
    success: bool = True
    message: str
    donations: List[Donation]


class MessageResponse(BaseModel):
    success: bool = True
    message: str
