from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

from shopfloor.config import get_settings
from shopfloor.database import database
from shopfloor.api.routes import api_router
from shopfloor.exceptions import InvalidArgumentError

# Configure logging
logging.basicConfig(level=get_settings().log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    # Startup
    try:
        await database.connect()
    except Exception as e:
        logger.error(f"Failed to connect to database: {e}")

    yield

    # Shutdown
    await database.disconnect()


async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
    """Answer calculator contract violations with 400."""
    logger.warning(f"Rejected {request.url.path}: {exc.message}")
    return JSONResponse(status_code=400, content=exc.to_dict())


def create_app() -> FastAPI:
    """Application factory to create FastAPI app instance."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="API for production progress, purchasing status and business dates",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InvalidArgumentError, invalid_argument_handler)

    # Include routers
    app.include_router(api_router)
    app.include_router(api_router, prefix="/api")

    return app


# Create app instance
app = create_app()
