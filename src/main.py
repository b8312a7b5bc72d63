"""
NewsVerify Content Verification Service
Fingerprint cache lookup against curated articles with heuristic fallback
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
import os
import time
from contextlib import asynccontextmanager

from dotenv import load_dotenv

from data_loader import load_verified_articles
from newsverify.config import get_settings
from newsverify.engine import VerificationEngine
from newsverify.errors import (
    GENERIC_FAILURE_MESSAGE,
    InternalError,
    MalformedSubmission,
    StoreUnavailable,
    VerificationError,
)
from newsverify.models import ContentSubmission, VerifyResponse
from newsverify.storage import build_store


# Load environment variables early so Settings picks them up
load_dotenv()

settings = get_settings()

# Logging configuration
logging.basicConfig(
    level=settings.get_log_level(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(),
        logging.FileHandler('logs/newsverify.log') if os.path.exists('logs') else logging.NullHandler()
    ]
)

logger = logging.getLogger(__name__)

store = build_store(settings)
engine = VerificationEngine(store=store, strict_cache_lookup=settings.strict_cache_lookup)
metrics = engine.metrics


async def seed_verified_articles() -> int:
    """Load the configured seed file into the in-memory store."""
    if not settings.verified_articles_path:
        return 0
    if store.name != "memory":
        logger.warning("verified_articles_path is only loaded for the memory backend; use scripts/seed_verified_articles.py")
        return 0
    records = load_verified_articles(settings.verified_articles_path)
    for record in records:
        await store.add_verified_article(record)
    return len(records)


# Application lifespan
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    logger.info("=" * 60)
    logger.info(f"Starting {settings.app_title} v{settings.version}")
    logger.info("=" * 60)
    logger.info(f"  Store backend: {settings.store_backend}")
    logger.info(f"  Strict cache lookup: {settings.strict_cache_lookup}")

    await store.connect()
    seeded = await seed_verified_articles()
    if seeded:
        logger.info(f"Seeded {seeded} verified articles")

    logger.info("Service ready")

    yield

    logger.info("Shutting down...")
    await store.close()
    logger.info("Shutdown complete")


# FastAPI application
app = FastAPI(
    title=settings.app_title,
    version=settings.version,
    description=settings.app_description,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def failure_response(status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": GENERIC_FAILURE_MESSAGE})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Error payloads echo the input, which can be a whole media blob.
    logger.info(f"Rejected malformed submission at {[err.get('loc') for err in exc.errors()]}")
    return failure_response(status.HTTP_400_BAD_REQUEST)


@app.exception_handler(MalformedSubmission)
async def malformed_submission_handler(request: Request, exc: MalformedSubmission):
    logger.info(f"Rejected malformed submission: {exc}")
    return failure_response(status.HTTP_400_BAD_REQUEST)


@app.exception_handler(StoreUnavailable)
async def store_unavailable_handler(request: Request, exc: StoreUnavailable):
    logger.error(f"Store unavailable: {exc}")
    return failure_response(status.HTTP_503_SERVICE_UNAVAILABLE)


@app.exception_handler(InternalError)
async def internal_error_handler(request: Request, exc: InternalError):
    logger.error(f"Verification fault: {exc}", exc_info=exc)
    return failure_response(status.HTTP_500_INTERNAL_SERVER_ERROR)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return failure_response(status.HTTP_500_INTERNAL_SERVER_ERROR)


# API endpoints
@app.get("/")
async def root():
    """Root endpoint with service information"""
    return {
        "service": settings.app_title,
        "version": settings.version,
        "status": "operational",
        "endpoints": {
            "verify": "POST /verify",
            "health": "GET /health",
            "metrics": "GET /metrics"
        },
        "storage": store.name
    }


@app.get("/health")
async def health_check():
    """Health check including store reachability"""
    store_ok = await store.ping()
    return {
        "status": "healthy" if store_ok else "degraded",
        "version": settings.version,
        "components": {
            "store": {"backend": store.name, "reachable": store_ok},
        }
    }


@app.get("/metrics")
async def get_metrics():
    """Service metrics"""
    return {"metrics": metrics.get_stats()}


@app.post("/verify", response_model=VerifyResponse)
async def verify_content(submission: ContentSubmission):
    """
    Verify a text, image or video submission.
    Cached verified articles win; anything else goes to the heuristic classifier.
    """
    started = time.perf_counter()
    logger.info(f"New {submission.content_type} verification: {submission.content[:50]}...")

    try:
        verdict = await engine.verify(submission)
    except VerificationError:
        metrics.record_request(success=False, processing_time=time.perf_counter() - started)
        raise

    metrics.record_request(success=True, processing_time=time.perf_counter() - started)
    return verdict.to_response()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8001,
        reload=True,
        log_level="info"
    )
