import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import get_ai_config
from .database import Base, engine
from .routes.ideas import router as ideas_router


# Load environment variables from .env file
load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):

    # Startup
    Base.metadata.create_all(bind=engine)
    config = get_ai_config()
    logger.info("Starting Idea Insight API")
    logger.info("   AI enabled:  %s", config.enabled)
    logger.info("   AI endpoint: %s", config.api_url or "NOT SET")
    logger.info("   AI key:      %s", "Configured" if config.api_key else "Not set (heuristic analysis only)")
    logger.info("   AI model:    %s", config.model)

    yield

    logger.info("Shutting down Idea Insight API")


app = FastAPI(
    title="Idea Insight API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        origin.strip()
        for origin in os.getenv(
            "CORS_ORIGINS", "http://localhost:5173,http://localhost:3000"
        ).split(",")
        if origin.strip()
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(ideas_router)


@app.get(
    "/",
    summary="API Root",
    description="Welcome endpoint with API information",
    tags=["General"]
)
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Idea Insight API",
        "version": "0.1.0",
        "description": "Startup idea insight scores and Lean Canvas generation",
        "docs": "/docs",
        "endpoints": {
            "submit": "POST /ideas/ - Analyze and store a startup idea",
            "list": "GET /ideas/ - List analyzed ideas",
            "mentor": "GET /ideas/mentor/summary - Trends and blind spots",
            "ai_status": "GET /ideas/ai/status - AI availability",
            "health": "GET /health - Service health check",
        }
    }


@app.get(
    "/health",
    summary="Global Health Check",
    description="Check if the API server is running",
    tags=["General"]
)
async def health():
    """Global health check endpoint."""
    return {
        "status": "healthy",
        "service": "idea-insight-api",
        "version": "0.1.0",
        "ai_available": get_ai_config().is_available(),
    }


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler for unhandled errors."""
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "detail": str(exc) if os.getenv("DEBUG", "false").lower() == "true" else "An unexpected error occurred"
        }
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
        reload=os.getenv("DEBUG", "true").lower() == "true",
    )
