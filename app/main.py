"""FastAPI application entrypoint. No business logic; only wiring, startup and error mapping."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.exception_handlers import register_exception_handlers
from app.api.v1 import router as v1_router
from app.core.config import settings
from app.core.database import SessionLocal, init_db
from app.core.security import hash_password
from app.services.bootstrap import ensure_admin_user

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def bootstrap() -> None:
    """Create tables and seed the admin account. Runs once per process start."""
    init_db()
    if not settings.BOOTSTRAP_ADMIN_ENABLED:
        logger.info("Admin bootstrap disabled (BOOTSTRAP_ADMIN_ENABLED=false); skipping.")
        return
    db = SessionLocal()
    try:
        ensure_admin_user(
            db,
            hash_password,
            username=settings.BOOTSTRAP_ADMIN_USERNAME,
            password=settings.BOOTSTRAP_ADMIN_PASSWORD.get_secret_value(),
            email=settings.BOOTSTRAP_ADMIN_EMAIL,
        )
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    bootstrap()
    yield


app = FastAPI(
    title="Employee Management API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)
app.include_router(v1_router, prefix=settings.API_V1_PREFIX)
