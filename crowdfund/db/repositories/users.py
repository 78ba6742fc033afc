"""
User repository functions.

Creates users from a validated signup variant and looks them up by email.
"""
from __future__ import annotations

from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from crowdfund.db import models, schemas
from crowdfund.errors import Conflict

EMAIL_TAKEN_MESSAGE = "Email already registered."


def get_user_by_email(db: Session, email: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.email == email).first()


def _profile_columns(signup: schemas.SignupRequest) -> dict:
    # Every variant dumps only its own fields; the account_type tag only
    # exists on owner variants.
    data = signup.model_dump(exclude={'password'})
    return {
        'full_name': data.get('full_name'),
        'email': data['email'],
        'user_type': data['user_type'],
        'account_type': data.get('account_type'),
        'mobile_number': data.get('mobile_number'),
        'ngo_id': data.get('ngo_id'),
        'dob': data.get('dob'),
        'address': data.get('address'),
        'city': data.get('city'),
        'pincode': data.get('pincode'),
        'country': data.get('country'),
        'occupation': data.get('occupation'),
    }


def create_user(db: Session, signup: schemas.SignupRequest, password_hash: str) -> models.User:
    """Insert a user row; a concurrent duplicate email surfaces as Conflict."""
    db_user = models.User(password_hash=password_hash, **_profile_columns(signup))
    db.add(db_user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if get_user_by_email(db, signup.email) is not None:
            raise Conflict(EMAIL_TAKEN_MESSAGE) from e
        raise
    db.refresh(db_user)
    return db_user


def update_password_hash(db: Session, user: models.User, password_hash: str) -> models.User:
    user.password_hash = password_hash
    db.commit()
    db.refresh(user)
    return user
