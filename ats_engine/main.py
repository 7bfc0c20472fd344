"""
Resumit ATS Engine - Main FastAPI Application

Rule-based resume analysis: ATS compatibility scoring, action verb
enhancement, skill grouping and template recommendation.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ats_engine.api.routes import router
from ats_engine.config import get_settings
from ats_engine.services.cache import get_redis_client

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"Result cache: {'redis' if get_redis_client() else 'disabled'}")

    yield

    # Shutdown
    client = get_redis_client()
    if client is not None:
        await client.aclose()
    logger.info(f"Shutting down {settings.app_name}")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="""
## Resumit ATS Engine API

Deterministic, offline resume analysis. No AI calls, no document storage.

### Features

- **ATS Score**: Seven weighted categories (contact, summary, experience, education,
  skills, keywords, formatting) with issues and prioritized recommendations
- **Action Verbs**: Detect weak verbs and suggest power-verb replacements
- **Skill Grouping**: Sort a skills list into standard categories
- **Template Recommendation**: Match the resume to industry templates

### Data Format

The API accepts resume data in JSON format matching the frontend structure:
- `personalInfo`: Name, email, phone, location, links
- `summary`: Professional summary
- `experience`: Work experience entries
- `education`: Education entries
- `skills`: Flat list of skills
        """,
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Add global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "message": "An internal error occurred",
                "detail": str(exc) if settings.debug else "Please try again later"
            }
        )

    # Include API routes
    app.include_router(router, prefix="/api")

    # Root endpoint
    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "status": "running",
            "docs": "/docs",
            "api": "/api"
        }

    return app


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "ats_engine.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
