"""
FastAPI application entry point.

Sets up the FastAPI application with logging, CORS middleware and routers.
"""

import logging
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load environment variables first
load_dotenv()

# Import configuration
from .config import get_settings

# Import consolidated API router
from .routes import router as api_router

# Get settings instance
settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Community platform backend linking users to per-community Discourse forums",
    version=settings.app_version,
    debug=settings.debug
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Schema migrations are out of scope; make sure the tables exist on startup
@app.on_event("startup")
def _ensure_database_initialized():
    from .config.database import engine
    from .models import Base
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready")

# Include routers
app.include_router(api_router)

# Root endpoint
@app.get("/")
def read_root():
    """Health check endpoint."""
    return {
        "message": "Community Forum Backend is running!",
        "version": settings.app_version,
        "environment": settings.app_env
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
