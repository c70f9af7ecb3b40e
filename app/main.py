import logging
from fastapi import FastAPI, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from slowapi.errors import RateLimitExceeded

from app.api import analysis, metrics
from app.middlewares.access_logger import AccessLoggingMiddleware
from app.middlewares.logging import setup_logging
from app.middlewares.security import (
    SecurityHeadersMiddleware,
    add_cors_middleware,
    add_rate_limit,
)
from app.utils.exception_handlers import (
    generic_exception_handler,
    http_exception_handler,
    rate_limit_exceeded_handler,
)
from app.utils.telemetry import setup_observability
from app.core.config import settings


# ✅ SETUP LOGGING FIRST
setup_logging()
logger = logging.getLogger(__name__)

logger.info(
    f"Starting sentiment API env={settings.ENV} "
    f"inference_delay={settings.INFERENCE_DELAY_SECONDS}s "
    f"random_contributions={settings.RANDOM_CONTRIBUTIONS} "
    f"lemmatizer={settings.LEMMATIZER}"
)

app = FastAPI(
    title="Review Sentiment API",
    description="Explainable lexicon-based sentiment analysis for product reviews",
    version="1.0.0",
    debug=(not settings.ENV == "production"),
)


# ===============
# Middlewares
# ===============
add_cors_middleware(app)
add_rate_limit(app)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(AccessLoggingMiddleware)

if settings.OTEL_ENABLED:
    setup_observability(app)


# ===============
# Routers
# ===============
app.include_router(analysis.router)
app.include_router(metrics.router)


# ===============
# Health Checks
# ===============
@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/liveness", status_code=204)
def liveness():
    return Response(status_code=204)


@app.api_route("/readiness", methods=["GET", "HEAD"], status_code=200)
def readiness():
    # lexicons and stopwords are module constants, ready once imported
    return {"status": "ready"}


# ===============
# Global Error Handlers
# ===============
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)
