"""
Signup and login endpoints.

There is no session management: a successful login only reports success.
"""
from fastapi import APIRouter, Body, Depends, status
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from crowdfund.db import schemas
from crowdfund.db.database import get_db
from crowdfund.errors import ValidationError
from crowdfund.services import identity_service

router = APIRouter(tags=["auth"])


@router.post("/signup", response_model=schemas.SignupResponse, status_code=status.HTTP_201_CREATED)
def signup_endpoint(
    payload: dict = Body(...),
    db: Session = Depends(get_db),
):
    # Parsed by hand: the body is a nested tagged union on user_type/account_type
    try:
        signup = schemas.signup_adapter.validate_python(payload)
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e) from e
    user = identity_service.signup(db, signup)
    return schemas.SignupResponse(message="Signup successful!", user_id=user.id)


@router.post("/login", response_model=schemas.LoginResponse)
def login_endpoint(
    credentials: schemas.LoginRequest,
    db: Session = Depends(get_db),
):
    identity_service.login(db, credentials.email, credentials.password)
    return schemas.LoginResponse(message="Login successful")
