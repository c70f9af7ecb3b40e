import os

# Must be set before app.core.config is imported anywhere
os.environ.setdefault("INFERENCE_DELAY_SECONDS", "0")
os.environ.setdefault("ENV", "test")

import pytest

from app.middlewares.security import limiter
from app.services.sentiment_service import SentimentService


@pytest.fixture(autouse=True)
def _disable_rate_limit():
    limiter.enabled = False
    yield
    limiter.enabled = True


@pytest.fixture
def service() -> SentimentService:
    return SentimentService(inference_delay=0.0)
