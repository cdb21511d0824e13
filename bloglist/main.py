# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Optional
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.error_handlers import register_error_handlers
from .api.middleware import register_request_logger
from .api.v1 import blog_router, user_router
from .core.config import get_settings
from .core.logging_config import setup_logging
from .di.base_container import BaseContainer
from .di.container import DIContainer
from .infrastructure.db.mongo_connection import init_mongo, close_mongo, ensure_indexes

logger = logging.getLogger(__name__)


def _build_lifespan(injected_container: Optional[BaseContainer]):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Lifespan context manager for startup/shutdown events.
        
        Opens the MongoDB connection, creates indexes and builds the DI
        container on startup; closes the connection on shutdown. An injected
        container skips the database entirely.
        """
        settings = get_settings()
        setup_logging("WARNING" if settings.is_test else settings.log_level)
        
        if injected_container is not None:
            app.state.container = injected_container
            yield
            return
        
        database = init_mongo(settings)
        try:
            await ensure_indexes(database)
            app.state.container = DIContainer(database)
            logger.info("Application startup complete")
            yield
        finally:
            close_mongo()
            logger.info("Application shutdown complete")
    
    return lifespan


def create_application(container: Optional[BaseContainer] = None) -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading
    - CORS and request logging middleware
    - Centralized error handlers
    - API route registration
    
    Args:
        container: Pre-built container (tests); when omitted one is built
            around MongoDB at startup
    
    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    settings = get_settings()
    
    application = FastAPI(
        title="Bloglist API",
        version="1.0.0",
        description="Blog list and user registration backend",
        lifespan=_build_lifespan(container),
    )
    
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_request_logger(application)
    register_error_handlers(application)
    
    # Register API routers
    application.include_router(blog_router, prefix="/api/blogs")
    application.include_router(user_router, prefix="/api/users")
    
    return application


# Create application instance
app = create_application()
