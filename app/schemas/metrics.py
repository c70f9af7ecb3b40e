from typing import List
from pydantic import BaseModel

from app.schemas.common import BaseResponse


class PerformanceMetricsData(BaseModel):
    f1_score: float
    precision: float
    recall: float
    accuracy: float
    confusion_matrix: List[List[int]]
    labels: List[str]


class PerformanceMetricsResponse(BaseResponse):
    data: PerformanceMetricsData
