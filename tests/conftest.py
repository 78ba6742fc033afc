import os
import tempfile
from datetime import datetime, timedelta, timezone
from decimal import Decimal

# Must be set before the app module is imported: the /uploads mount reads it once
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="crowdfund-uploads-"))
os.environ.setdefault("PYTEST_RUNNING", "1")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

import crowdfund.db.database as db_module
from crowdfund.api.main import app
from crowdfund.db import models
from crowdfund.utils.feature_flags import refresh_feature_flag_cache


@pytest.fixture(autouse=True)
def _default_feature_flags(monkeypatch):
    monkeypatch.delenv("FEATURE_DEV_ENDPOINTS_ENABLED", raising=False)
    refresh_feature_flag_cache()
    yield
    refresh_feature_flag_cache()


# Fresh in-memory database per test; StaticPool keeps one shared connection
@pytest.fixture
def engine():
    eng = db_module.build_engine(db_module.SQLITE_MEMORY_URL)
    models.Base.metadata.create_all(bind=eng)
    try:
        yield eng
    finally:
        eng.dispose()


@pytest.fixture
def SessionLocal(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(SessionLocal):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


# Backwards compatibility: some tests use the shorter 'db' name
@pytest.fixture
def db(db_session):
    return db_session


@pytest.fixture
def client(SessionLocal):
    def _override_get_db():
        session = SessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[db_module.get_db] = _override_get_db
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.pop(db_module.get_db, None)


@pytest.fixture
def make_campaign(db_session):
    """Insert a campaign row directly and commit it."""
    def _make(
        *,
        title="Clean water for Ward 9",
        target_amount=Decimal("100000"),
        raised_amount=Decimal("0"),
        supporters=0,
        days_left=30,
        created_at=None,
    ):
        campaign = models.Campaign(
            title=title,
            description="Borewell and filtration unit for the ward school.",
            target_amount=Decimal(str(target_amount)),
            raised_amount=Decimal(str(raised_amount)),
            creator_name="Ward 9 Committee",
            image="ward9.jpg",
            days_left=days_left,
            supporters=supporters,
        )
        if created_at is not None:
            campaign.created_at = created_at
        db_session.add(campaign)
        db_session.commit()
        db_session.refresh(campaign)
        return campaign

    return _make


@pytest.fixture
def timestamps():
    """Strictly increasing creation times, oldest first."""
    base = datetime(2025, 1, 1, tzinfo=timezone.utc)
    return [base + timedelta(minutes=i) for i in range(10)]


@pytest.fixture
def count_users_with_email():
    def _count(session, email):
        return session.query(models.User).filter(models.User.email == email).count()

    return _count
