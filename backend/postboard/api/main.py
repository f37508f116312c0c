"""
Postboard FastAPI application entry point.

This module creates and configures the FastAPI application with:
- Router registration for posts and health endpoints
- Middleware for CORS and request logging
- Exception handlers mapping failures to HTTP status codes
- Lifespan events that open and close the MongoDB connection

Usage:
    # Development mode (with auto-reload)
    python -m backend.postboard.api.main

    # Or using uvicorn directly
    uvicorn backend.postboard.api.main:app --reload --host 0.0.0.0 --port 4000
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI

from backend.postboard import __version__
from backend.postboard.api.errors import register_exception_handlers
from backend.postboard.api.middleware import RequestLoggingMiddleware, configure_cors
from backend.postboard.api.routers import health_router, posts_router
from backend.postboard.core.data.store import PostStore
from backend.postboard.core.utils.config import ConfigManager, get_config

# Load environment variables from config/.env (real environment wins)
env_path = Path(__file__).resolve().parents[3] / 'config' / '.env'
if env_path.exists():
    load_dotenv(dotenv_path=env_path, override=False)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Startup:
        - Open the MongoDB connection (unless a store was injected)
        - Ensure the search and ordering indexes

    Shutdown:
        - Close the MongoDB connection

    A failed connection at startup is fatal: the error is logged and
    re-raised so the server does not start.
    """
    config: ConfigManager = app.state.config

    logger.info("=" * 60)
    logger.info(f"Starting Postboard API v{__version__}")
    logger.info("=" * 60)

    try:
        if getattr(app.state, "store", None) is None:
            logger.info("Connecting to MongoDB...")
            app.state.store = PostStore.from_config(config)
        app.state.store.ensure_indexes()
        logger.info(f"Using database '{app.state.store.database_name}'")
    except Exception as e:
        logger.error(f"Failed to start application: {e}")
        raise

    logger.info("Postboard API is ready!")

    yield

    logger.info("Shutting down Postboard API")
    app.state.store.close()
    app.state.store = None
    logger.info("Cleanup completed successfully")


def create_app(config: Optional[ConfigManager] = None, store: Optional[PostStore] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Configuration to use; defaults to the global ConfigManager.
        store: Pre-built PostStore (tests pass one backed by mongomock).
            When omitted, the lifespan connects using the configured URI.

    Returns:
        FastAPI: Configured application.
    """
    config = config or get_config()

    app = FastAPI(
        title="Postboard API",
        version=__version__,
        description="""
        Postboard REST API for blog posts.

        ## Features

        * **Posts**: Create, read, replace and delete posts
        * **Search**: Case-insensitive substring search over title, content and category
        * **Health Monitoring**: Liveness and readiness checks
        """,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "posts",
                "description": "Post CRUD and search",
            },
            {
                "name": "health",
                "description": "Health checks",
            },
        ],
    )
    app.state.config = config
    app.state.store = store

    # Configure CORS
    configure_cors(app, config)

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(RequestLoggingMiddleware, config=config)

    # Register routers
    app.include_router(health_router)
    app.include_router(posts_router)

    register_exception_handlers(app)

    return app


app = create_app()


# Main entry point for direct execution
if __name__ == "__main__":
    import uvicorn

    config = get_config()

    uvicorn.run(
        "backend.postboard.api.main:app",
        host=config.get("api.host", "0.0.0.0"),
        port=config.get("api.port", 4000),
        reload=config.get("api.reload", False),
        log_level=config.get("api.log_level", "info"),
    )
