"""FastAPI application factory"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from customer_rewards.api.middleware import RequestIDMiddleware, MetricsMiddleware
from customer_rewards.api.v1 import rewards
from customer_rewards.infrastructure.database.loader import seed_transactions
from customer_rewards.infrastructure.database.models import Base
from customer_rewards.infrastructure.database.session import SessionLocal, engine
from customer_rewards.infrastructure.observability.logging import setup_logging
from customer_rewards.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and load seed transactions before serving"""
    Base.metadata.create_all(bind=engine)

    if settings.seed_data_path:
        db = SessionLocal()
        try:
            seed_transactions(db, settings.seed_data_path)
        finally:
            db.close()
    else:
        logging.info("Seed data path not configured. Skipping data load.")

    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Customer Rewards API",
        description="REST API to calculate reward points for customers based on transactions.",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(rewards.router, prefix="/v1", tags=["rewards"])

    return app


app = create_app()
