import logging

from fastapi import APIRouter

from app.messages.metrics_messages import (
    PERFORMANCE_METRICS_FAILED,
    PERFORMANCE_METRICS_SUCCESS,
)
from app.schemas.metrics import PerformanceMetricsResponse
from app.services.metrics_service import get_performance_metrics
from app.utils.exceptions import ServerError
from app.utils.response_builder import success_response

router = APIRouter(prefix="/api/metrics", tags=["Metrics"])
logger = logging.getLogger(__name__)


@router.get("/performance", response_model=PerformanceMetricsResponse)
async def performance_metrics():
    try:
        return success_response(
            message=PERFORMANCE_METRICS_SUCCESS,
            data=get_performance_metrics().to_dict(),
        )
    except Exception as e:
        logger.exception(f"❌ Failed to load performance metrics: {e}")
        raise ServerError(
            code="PERFORMANCE_METRICS_FAILED", message=PERFORMANCE_METRICS_FAILED
        )
