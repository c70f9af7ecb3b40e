import asyncio
import logging
from functools import lru_cache

from fastapi import APIRouter, Depends, Request

from app.core.config import settings
from app.core.errors import EmptyInputError, PipelineFailure
from app.core.lemmatization.lemmatizer import lemmatizer_for
from app.core.sentiment.config import SentimentConfig
from app.data_loader import load_sample_reviews
from app.messages.analysis_messages import (
    ANALYSIS_FAILED,
    ANALYSIS_TIMEOUT,
    BATCH_ANALYSIS_SUCCESS,
    EMPTY_INPUT,
    SAMPLE_REVIEWS_SUCCESS,
    SENTIMENT_ANALYSIS_SUCCESS,
)
from app.middlewares.security import limiter
from app.schemas.sentiment import (
    AnalysisResponse,
    AnalyzeRequest,
    BatchAnalysisResponse,
    BatchAnalyzeRequest,
    SampleReviewsResponse,
)
from app.services.preprocess import PreprocessingPipeline
from app.services.sentiment_service import SentimentService
from app.utils.exceptions import BadRequestError, GatewayTimeoutError, ServerError
from app.utils.response_builder import success_response

router = APIRouter(prefix="/api/sentiment", tags=["Sentiment"])
logger = logging.getLogger(__name__)


@lru_cache
def get_sentiment_service() -> SentimentService:
    # FastAPI resolves sync dependencies in a worker thread, so corpus
    # downloads during warm_up never run on the event loop
    lemmatizer = lemmatizer_for(settings.LEMMATIZER)
    lemmatizer.warm_up()

    # stateless after construction, so one instance serves every request
    return SentimentService(
        SentimentConfig(random_contributions=settings.RANDOM_CONTRIBUTIONS),
        preprocessor=PreprocessingPipeline(lemmatizer=lemmatizer),
        inference_delay=settings.INFERENCE_DELAY_SECONDS,
    )


@router.post("/analyze", response_model=AnalysisResponse)
@limiter.limit(settings.ANALYZE_RATE_LIMIT)
async def analyze_text(
    request: Request,
    req: AnalyzeRequest,
    service: SentimentService = Depends(get_sentiment_service),
):
    try:
        result = await asyncio.wait_for(
            service.analyze(req.text), timeout=settings.ANALYZE_TIMEOUT_SECONDS
        )
        return success_response(
            message=SENTIMENT_ANALYSIS_SUCCESS, data=result.to_dict()
        )

    except EmptyInputError:
        raise BadRequestError(code="EMPTY_INPUT", message=EMPTY_INPUT)
    except asyncio.TimeoutError:
        logger.warning(
            f"⏱️ Sentiment analysis exceeded {settings.ANALYZE_TIMEOUT_SECONDS}s"
        )
        raise GatewayTimeoutError(code="ANALYSIS_TIMEOUT", message=ANALYSIS_TIMEOUT)
    except PipelineFailure as e:
        logger.error(f"❌ Sentiment pipeline failed at '{e.stage}': {e.__cause__}")
        raise ServerError(code="ANALYSIS_FAILED", message=ANALYSIS_FAILED)
    except Exception as e:
        logger.exception(f"❌ Unexpected sentiment analysis error: {e}")
        raise ServerError(code="ANALYSIS_FAILED", message=ANALYSIS_FAILED)


@router.post("/batch", response_model=BatchAnalysisResponse)
@limiter.limit(settings.ANALYZE_RATE_LIMIT)
async def analyze_batch(
    request: Request,
    req: BatchAnalyzeRequest,
    service: SentimentService = Depends(get_sentiment_service),
):
    try:
        results = await asyncio.wait_for(
            service.analyze_many(req.texts),
            timeout=settings.ANALYZE_TIMEOUT_SECONDS,
        )
        summary = service.summarize(results)
        return success_response(
            message=BATCH_ANALYSIS_SUCCESS,
            data={
                "results": [r.to_dict() for r in results],
                "summary": {"total": summary.total, "overall": summary.overall},
            },
        )

    except EmptyInputError:
        raise BadRequestError(code="EMPTY_INPUT", message=EMPTY_INPUT)
    except asyncio.TimeoutError:
        logger.warning(
            f"⏱️ Batch analysis of {len(req.texts)} texts exceeded "
            f"{settings.ANALYZE_TIMEOUT_SECONDS}s"
        )
        raise GatewayTimeoutError(code="ANALYSIS_TIMEOUT", message=ANALYSIS_TIMEOUT)
    except Exception as e:
        logger.exception(f"❌ Batch sentiment analysis failed: {e}")
        raise ServerError(code="ANALYSIS_FAILED", message=ANALYSIS_FAILED)


@router.get("/samples", response_model=SampleReviewsResponse)
async def get_sample_reviews():
    return success_response(
        message=SAMPLE_REVIEWS_SUCCESS,
        data={"samples": list(load_sample_reviews())},
    )
