"""
Domain-split Pydantic schemas with a single import path.
"""

from .users import (
    DonorSignup,
    IndividualOwnerSignup,
    OrganizationOwnerSignup,
    CampaignOwnerSignup,
    SignupRequest,
    signup_adapter,
    LoginRequest,
    User,
    SignupResponse,
    LoginResponse,
)
from .campaigns import (
    CampaignBase,
    CampaignCreate,
    Campaign,
    CampaignProgress,
    ProgressUpdate,
    CampaignListResponse,
    CampaignResponse,
    CampaignCreateResponse,
    CampaignProgressResponse,
)
from .donations import DonationCreate, Donation, DonationListResponse
from .dummy import (
    DataStats,
    DataStatsResponse,
    SeededCampaignsResponse,
    SeededDonationsResponse,
    MessageResponse,
)

__all__ = [
    # users
    "DonorSignup",
    "IndividualOwnerSignup",
    "OrganizationOwnerSignup",
    "CampaignOwnerSignup",
    "SignupRequest",
    "signup_adapter",
    "LoginRequest",
    "User",
    "SignupResponse",
    "LoginResponse",
    # campaigns
    "CampaignBase",
    "CampaignCreate",
    "Campaign",
    "CampaignProgress",
    "ProgressUpdate",
    "CampaignListResponse",
    "CampaignResponse",
    "CampaignCreateResponse",
    "CampaignProgressResponse",
    # donations
    "DonationCreate",
    "Donation",
    "DonationListResponse",
    # test data
    "DataStats",
    "DataStatsResponse",
    "SeededCampaignsResponse",
    "SeededDonationsResponse",
    "MessageResponse",
]
