"""
Sample data for local development and demos.

Seeds a fixed set of campaigns and donations, clears campaign data, and
reports table totals. Seeded donations are raw rows: they do not touch the
campaign aggregates, whose sample values are preset.
"""
from __future__ import annotations

import logging
import random
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from crowdfund.db import models, schemas
from crowdfund.db.repositories import campaigns as campaign_repo
from crowdfund.db.repositories import donations as donation_repo
from crowdfund.errors import ValidationError

logger = logging.getLogger(__name__)

SAMPLE_CAMPAIGNS = [
    {
        "title": "Help 3-Year-Old Hansika Hear the World! Donate to Her Treatment",
        "description": "Little Hansika was born with severe hearing loss. With your support, she can get the cochlear implant surgery she needs to hear her mother's voice for the first time.",
        "target_amount": Decimal("3400000"),
        "raised_amount": Decimal("757774"),
        "creator_name": "Krishan",
        "image": "hansika-campaign.jpg",
        "days_left": 22,
        "supporters": 457,
    },
    {
        "title": "My Mother Is Fighting For Her Life And We Need Your Support To Save Her",
        "description": "My mother has been diagnosed with a critical illness and is currently in the ICU. The medical expenses are overwhelming and we need your help to continue her treatment.",
        "target_amount": Decimal("2000000"),
        "raised_amount": Decimal("927962"),
        "creator_name": "Feroz Basha Khan Pathan",
        "image": "mother-treatment.jpg",
        "days_left": 4,
        "supporters": 248,
    },
    {
        "title": "Save Little Shanaya's Life From the Clutches of a Brain Infection",
        "description": "2-year-old Shanaya is fighting a severe brain infection. She needs immediate medical intervention and your support can help save her precious life.",
        "target_amount": Decimal("3000000"),
        "raised_amount": Decimal("666468"),
        "creator_name": "Shazia Azeez",
        "image": "shanaya-brain.jpg",
        "days_left": 22,
        "supporters": 426,
    },
    {
        "title": "Emergency Heart Surgery Required for 8-Year-Old Arjun",
        "description": "Arjun was born with a congenital heart defect. He urgently needs open heart surgery to live a normal life. Your donation can give him a second chance at life.",
        "target_amount": Decimal("4500000"),
        "raised_amount": Decimal("1250000"),
        "creator_name": "Priya Sharma",
        "image": "arjun-heart.jpg",
        "days_left": 15,
        "supporters": 672,
    },
    {
        "title": "Help Rebuild Homes After Devastating Flood",
        "description": "A recent flood has destroyed 200+ homes in our village. Families are left with nothing. Help us rebuild their lives and provide them with basic necessities.",
        "target_amount": Decimal("5000000"),
        "raised_amount": Decimal("2100000"),
        "creator_name": "Village Development Committee",
        "image": "flood-relief.jpg",
        "days_left": 30,
        "supporters": 1234,
    },
    {
        "title": "Education Fund for Underprivileged Children",
        "description": "Support quality education for 50 underprivileged children in rural areas. Your contribution will cover books, uniforms, and school fees for one academic year.",
        "target_amount": Decimal("1500000"),
        "raised_amount": Decimal("890000"),
        "creator_name": "Education Trust NGO",
        "image": "education-fund.jpg",
        "days_left": 18,
        "supporters": 567,
    },
]

SAMPLE_DONATIONS = [
    ("Rahul Verma", Decimal("5000")),
    ("Priya Singh", Decimal("10000")),
    ("Amit Kumar", Decimal("2500")),
    ("Sneha Patel", Decimal("7500")),
    ("Vikram Sharma", Decimal("15000")),
    ("Anjali Gupta", Decimal("3000")),
    ("Ravi Mehta", Decimal("8000")),
    ("Kavya Reddy", Decimal("12000")),
    ("Arjun Nair", Decimal("6000")),
    ("Deepika Joshi", Decimal("9000")),
    ("Sanjay Yadav", Decimal("4000")),
    ("Pooja Agarwal", Decimal("11000")),
    ("Manoj Tiwari", Decimal("7000")),
    ("Ritika Bansal", Decimal("13000")),
    ("Gaurav Malhotra", Decimal("5500")),
]

NO_CAMPAIGNS = "No campaigns found. Create campaigns first."


def seed_campaigns(db: Session) -> List[models.Campaign]:
    created = [models.Campaign(**sample) for sample in SAMPLE_CAMPAIGNS]
    db.add_all(created)
    db.commit()
    for campaign in created:
        db.refresh(campaign)
    logger.info("seeded_campaigns count=%d", len(created))
    return created


def seed_donations(db: Session, rng: Optional[random.Random] = None) -> List[models.Donation]:
    campaign_ids = campaign_repo.get_campaign_ids(db)
    if not campaign_ids:
        raise ValidationError(NO_CAMPAIGNS)
    rng = rng or random.Random()
    created = [
        models.Donation(campaign_id=rng.choice(campaign_ids), donor_name=name, amount=amount)
        for name, amount in SAMPLE_DONATIONS
    ]
    db.add_all(created)
    db.commit()
    for donation in created:
        db.refresh(donation)
    logger.info("seeded_donations count=%d", len(created))
    return created


def clear_all(db: Session) -> None:
    """Delete all donations then all campaigns in one transaction."""
    try:
        donations = donation_repo.delete_all_donations(db)
        campaigns = campaign_repo.delete_all_campaigns(db)
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.warning("cleared_campaign_data donations=%d campaigns=%d", donations, campaigns)


def stats(db: Session) -> schemas.DataStats:
    return schemas.DataStats(
        total_campaigns=campaign_repo.count_campaigns(db),
        total_donations=donation_repo.count_donations(db),
        total_raised_in_campaigns=campaign_repo.sum_raised_amount(db),
        total_donated_amount=donation_repo.sum_donated_amount(db),
    )
