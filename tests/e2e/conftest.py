"""
PostgreSQL-backed fixtures for the end-to-end suite.

Uses TEST_DATABASE_URL when set; with E2E_TEST=1 a throwaway container is
started through testcontainers. Otherwise every test here is skipped.
"""
import os
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import text

import crowdfund.db.database as db_module

REPO_ROOT = Path(__file__).resolve().parents[2]


def alembic_config(url: str) -> Config:
    cfg = Config(str(REPO_ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(REPO_ROOT / "migrations"))
    cfg.set_main_option("sqlalchemy.url", url)
    return cfg


def _normalize(url: str) -> str:
    # postgresql+psycopg2:// -> postgresql://
    if url.startswith("postgresql+"):
        return "postgresql://" + url.split("://", 1)[1]
    return url


@pytest.fixture(scope="session")
def pg_url():
    url = os.getenv("TEST_DATABASE_URL")
    if url:
        yield _normalize(url)
        return
    if os.getenv("E2E_TEST") != "1":
        pytest.skip("set TEST_DATABASE_URL or E2E_TEST=1 to run against PostgreSQL")

    from testcontainers.postgres import PostgresContainer

    image = os.getenv("TEST_POSTGRES_IMAGE", "postgres:16-alpine")
    with PostgresContainer(image) as pg:
        url = _normalize(pg.get_connection_url())
        # migrations/env.py reads the URL from the environment
        os.environ["TEST_DATABASE_URL"] = url
        try:
            yield url
        finally:
            os.environ.pop("TEST_DATABASE_URL", None)


@pytest.fixture(scope="session")
def _migrated_engine(pg_url):
    command.upgrade(alembic_config(pg_url), "head")
    eng = db_module.build_engine(pg_url)
    try:
        yield eng
    finally:
        eng.dispose()


@pytest.fixture
def engine(_migrated_engine):
    """Overrides the in-memory engine; tables are emptied after each test."""
    yield _migrated_engine
    with _migrated_engine.begin() as conn:
        conn.execute(text("TRUNCATE donations, campaigns, users CASCADE"))


@pytest.fixture
def alembic_cfg(pg_url):
    return alembic_config(pg_url)
