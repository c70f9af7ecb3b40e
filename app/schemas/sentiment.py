from typing import Dict, List, Tuple
from pydantic import BaseModel, Field

from app.core.config import settings
from app.schemas.common import BaseResponse


class AnalyzeRequest(BaseModel):
    # blank text is rejected by the service with EMPTY_INPUT
    text: str


class BatchAnalyzeRequest(BaseModel):
    texts: List[str] = Field(..., min_length=1, max_length=settings.MAX_BATCH_SIZE)


class PreprocessingSteps(BaseModel):
    original: str
    lowercase: str
    no_special_chars: str
    no_stopwords: str
    lemmatized: str


class AnalysisData(BaseModel):
    final_prediction: str
    final_confidence: float = Field(..., ge=0.0, le=1.0)
    baseline_prediction: str
    baseline_confidence: float = Field(..., ge=0.0, le=1.0)
    highlighted_text: List[Tuple[str, float]]
    preprocessing_steps: PreprocessingSteps


class AnalysisResponse(BaseResponse):
    data: AnalysisData


class BatchSummaryData(BaseModel):
    total: int
    overall: Dict[str, float]  # {'positive': %, 'negative': %, 'neutral': %}


class BatchAnalysisData(BaseModel):
    results: List[AnalysisData]
    summary: BatchSummaryData


class BatchAnalysisResponse(BaseResponse):
    data: BatchAnalysisData


class SampleReviewsData(BaseModel):
    samples: List[str]


class SampleReviewsResponse(BaseResponse):
    data: SampleReviewsData
