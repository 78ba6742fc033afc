"""
Signup and credential checks.

Login deliberately reports unknown emails and wrong passwords with the same
error so callers cannot probe which addresses are registered.
"""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from crowdfund.db import models, schemas
from crowdfund.db.repositories import users as user_repo
from crowdfund.errors import Conflict, InvalidCredentials
from crowdfund.utils.passwords import hash_password, needs_rehash, verify_password

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


def signup(db: Session, payload: schemas.SignupRequest) -> models.User:
    if user_repo.get_user_by_email(db, payload.email) is not None:
        logger.info("signup_rejected reason=email_taken")
        raise Conflict(user_repo.EMAIL_TAKEN_MESSAGE)
    user = user_repo.create_user(db, payload, password_hash=hash_password(payload.password))
    logger.info("signup_ok user_id=%s user_type=%s", user.id, user.user_type)
    return user


def login(db: Session, email: str, password: str) -> models.User:
    user = user_repo.get_user_by_email(db, email)
    if not verify_password(password, user.password_hash if user else None):
        logger.info("login_rejected")
        raise InvalidCredentials(INVALID_CREDENTIALS)
    if needs_rehash(user.password_hash):
        # Stored with older Argon2 parameters; upgrade while the plaintext is at hand
        user_repo.update_password_hash(db, user, hash_password(password))
        logger.info("password_rehashed user_id=%s", user.id)
    logger.info("login_ok user_id=%s", user.id)
    return user
