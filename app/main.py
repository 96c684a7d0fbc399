"""FastAPI application — main entry point."""

import structlog
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.infrastructure.database import engine, Base
from app.core.logging import configure_logging
from app.core.middleware import setup_middleware
from app.core.exceptions import AppError, global_exception_handler

# Import all models so SQLAlchemy knows about them
from app.domain.models.user import User
from app.domain.models.business import Business
from app.domain.models.whatsapp_connection import WhatsAppConnection
from app.domain.models.chat_message import ChatMessage
from app.domain.models.automation_rule import AutomationRule

# Import routers
from app.interfaces.api.auth import router as auth_router
from app.interfaces.api.business import router as business_router
from app.interfaces.api.whatsapp import router as whatsapp_router
from app.interfaces.api.messages import router as messages_router
from app.interfaces.api.automation import router as automation_router
from app.interfaces.api.dashboard import router as dashboard_router

settings = get_settings()

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    logger.info("Starting AutomaBiz dashboard API...", env=settings.ENVIRONMENT)

    # Create DB tables (dev only — use migrations in production)
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified")

    yield

    logger.info("AutomaBiz dashboard API stopped")


app = FastAPI(
    title="AutomaBiz — WhatsApp AI Business Dashboard",
    description="API Backend — business profile, WhatsApp channels, automation rules and message feed",
    version="1.0.0",
    lifespan=lifespan,
)

# Setup Middleware (Correlation ID, Logging)
setup_middleware(app)

# Global Exception Handling
app.add_exception_handler(AppError, global_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

# CORS is added last so it runs first on every request
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth_router)
app.include_router(business_router)
app.include_router(whatsapp_router)
app.include_router(messages_router)
app.include_router(automation_router)
app.include_router(dashboard_router)


@app.get("/")
def root():
    return {
        "name": "AutomaBiz Dashboard API",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
def health():
    return {"status": "healthy"}
