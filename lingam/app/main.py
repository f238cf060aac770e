"""
Lingam Aabharanam - storefront back-office API

FastAPI application entry point.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lingam.app.api import appointments, auth, customers, health, store_info, testimonials
from lingam.app.core.config import get_settings
from lingam.app.core.database import async_session_maker, create_tables, engine
from lingam.app.core.logging import setup_logging, get_logger
from lingam.app.middleware.trace import TracingMiddleware
from lingam.app.services import build_services

settings = get_settings()

setup_logging(level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")

    await create_tables()
    app.state.services = await build_services(async_session_maker, settings)

    yield

    logger.info(f"Shutting down {settings.app_name}")
    await engine.dispose()


app = FastAPI(
    title=settings.app_name,
    description="Appointments, customers and testimonials for the Lingam storefront",
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(TracingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Correlation-ID"],
)

app.include_router(health.router, tags=["Health"])
app.include_router(auth.router, prefix=f"{settings.api_prefix}/auth", tags=["Authentication"])
app.include_router(
    appointments.router,
    prefix=f"{settings.api_prefix}/appointments",
    tags=["Appointments"],
)
app.include_router(
    testimonials.router,
    prefix=f"{settings.api_prefix}/testimonials",
    tags=["Testimonials"],
)
app.include_router(
    customers.router,
    prefix=f"{settings.api_prefix}/customers",
    tags=["Customers"],
)
app.include_router(store_info.router, prefix=settings.api_prefix, tags=["Store Info"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
