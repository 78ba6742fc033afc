import uuid
from decimal import Decimal, ROUND_HALF_UP
from sqlalchemy import Column, String, Text, Integer, Numeric, DateTime, ForeignKey, Index, CheckConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from .base import Base, now_utc

MONEY = Numeric(12, 2)
_CENT = Decimal("0.01")


def compute_progress_percentage(raised_amount, target_amount) -> Decimal:
    """Return raised/target as a percentage rounded half away from zero to 2 places.

    A non-positive target yields 0.00 instead of dividing by zero.
    """
    raised = Decimal(str(raised_amount or 0))
    target = Decimal(str(target_amount or 0))
    if target <= 0:
        return Decimal("0.00")
    return (raised / target * 100).quantize(_CENT, rounding=ROUND_HALF_UP)


class Campaign(Base):
    __tablename__ = 'campaigns'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    target_amount = Column(MONEY, nullable=False)
    raised_amount = Column(MONEY, nullable=False, default=Decimal("0"))
    creator_name = Column(String(255), nullable=False)
    image = Column(String(255), nullable=False)
    days_left = Column(Integer, nullable=False)
    supporters = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), default=now_utc)

    donations = relationship(
        "Donation",
        back_populates="campaign",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        CheckConstraint('target_amount > 0', name='chk_campaign_target_positive'),
        CheckConstraint('raised_amount >= 0', name='chk_campaign_raised_non_negative'),
        CheckConstraint('supporters >= 0', name='chk_campaign_supporters_non_negative'),
        CheckConstraint('days_left >= 0', name='chk_campaign_days_left_non_negative'),
        Index('idx_campaigns_created_at', 'created_at'),
    )

    @property
    def progress_percentage(self) -> Decimal:
        return compute_progress_percentage(self.raised_amount, self.target_amount)


class Donation(Base):
    __tablename__ = 'donations'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    campaign_id = Column(
        UUID(as_uuid=True),
        ForeignKey('campaigns.id', ondelete='CASCADE'),
        nullable=False,
    )
    donor_name = Column(String(255), nullable=False)
    amount = Column(MONEY, nullable=False)
    created_at = Column(DateTime(timezone=True), default=now_utc)

    campaign = relationship("Campaign", back_populates="donations")

    __table_args__ = (
        CheckConstraint('amount > 0', name='chk_donation_amount_positive'),
        Index('idx_donations_campaign_id_created_at', 'campaign_id', 'created_at'),
    )
