import uuid
from sqlalchemy import Column, String, Text, Date, DateTime, CheckConstraint
from sqlalchemy.dialects.postgresql import UUID
from .base import Base, now_utc


class User(Base):
    __tablename__ = 'users'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    full_name = Column(Text, nullable=True)
    email = Column(Text, nullable=False, unique=True, index=True)
    password_hash = Column(Text, nullable=False)
    # 'user' (donor) | 'campaign_owner'
    user_type = Column(String(20), nullable=False)
    # 'individual' | 'organization'; owners only
    account_type = Column(String(20), nullable=True)
    mobile_number = Column(String(15), nullable=True)
    ngo_id = Column(String(100), nullable=True)
    dob = Column(Date, nullable=True)
    address = Column(Text, nullable=True)
    city = Column(Text, nullable=True)
    pincode = Column(String(10), nullable=True)
    country = Column(Text, nullable=True)
    occupation = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)

    __table_args__ = (
        CheckConstraint(
            "mobile_number IS NULL OR length(mobile_number) = 10",
            name='chk_mobile_length',
        ),
    )
