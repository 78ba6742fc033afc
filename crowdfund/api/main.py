"""
FastAPI app assembly: logging, middleware, error handlers and router wiring.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from crowdfund.utils import config

# Configure logging
LOG_LEVEL_NAME = config.log_level_name()
LOG_LEVEL = config.log_level()
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)

from crowdfund.db.database import init_sqlite_schema
from crowdfund.api.errors import register_exception_handlers
from crowdfund.api.auth import router as auth_router
from crowdfund.api.campaigns import router as campaigns_router
from crowdfund.api.dev_data import router as dev_data_router
from crowdfund.services.image_storage import ImageStorage

# Postgres schema is managed by Alembic migrations; SQLite gets create_all.


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_sqlite_schema()
    root = ImageStorage().ensure_root()
    logger.info("upload_dir=%s", root)
    yield


app = FastAPI(
    title="Crowdfund Service",
    description="API for crowdfunding campaigns, donations and user signup.",
    version="1.0.0",
    lifespan=lifespan,
)

# Avoid implicit trailing-slash redirects for predictable URLs
app.router.redirect_slashes = False

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins(),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth_router)
app.include_router(campaigns_router)
app.include_router(dev_data_router)

app.mount(
    "/uploads",
    StaticFiles(directory=str(config.upload_dir()), check_dir=False),
    name="uploads",
)


@app.get("/health")
def health_check():
    return {"status": "ok", "service": "crowdfund-service"}
