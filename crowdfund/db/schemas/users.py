"""
Signup and login payloads.

Signup is a tagged union: the donor variant and the two campaign-owner
variants each carry only the profile fields valid for that role, so a
payload mixing fields from different roles fails validation instead of
having the extras silently dropped.
"""
import re
import uuid
from datetime import date, datetime
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

_MOBILE_RE = re.compile(r"^[0-9]{10}$")


class _SignupBase(BaseModel):
    model_config = ConfigDict(extra='forbid', str_strip_whitespace=True)

    full_name: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=320)
    password: str = Field(min_length=1)
    mobile_number: Optional[str] = None
    address: Optional[str] = None

    @field_validator('email')
    @classmethod
    def _email_has_at(cls, v: str) -> str:
        local, _, domain = v.partition('@')
        if not local or not domain:
            raise ValueError('must be a valid email address')
        return v

    @field_validator('mobile_number', mode='before')
    @classmethod
    def _blank_mobile_is_absent(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator('mobile_number')
    @classmethod
    def _mobile_is_ten_digits(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not _MOBILE_RE.match(v):
            raise ValueError('must be exactly 10 digits')
        return v


class DonorSignup(_SignupBase):
    user_type: Literal['user']
    dob: Optional[date] = None
    occupation: Optional[str] = None


class _OwnerSignupBase(_SignupBase):
    user_type: Literal['campaign_owner']
    city: Optional[str] = None
    pincode: Optional[str] = Field(default=None, max_length=10)
    country: Optional[str] = None


class IndividualOwnerSignup(_OwnerSignupBase):
    account_type: Literal['individual']


class OrganizationOwnerSignup(_OwnerSignupBase):
    account_type: Literal['organization']
    ngo_id: Optional[str] = Field(default=None, max_length=100)


CampaignOwnerSignup = Annotated[
    Union[IndividualOwnerSignup, OrganizationOwnerSignup],
    Field(discriminator='account_type'),
]

SignupRequest = Annotated[
    Union[DonorSignup, CampaignOwnerSignup],
    Field(discriminator='user_type'),
]

signup_adapter: TypeAdapter = TypeAdapter(SignupRequest)


class LoginRequest(BaseModel):
    email: str
    password: str


class User(BaseModel):
    id: uuid.UUID
    full_name: Optional[str] = None
    email: str
    user_type: str
    account_type: Optional[str] = None
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class SignupResponse(BaseModel):
    success: bool = True
    message: str
    user_id: uuid.UUID


class LoginResponse(BaseModel):
    success: bool = True
    message: str
