from __future__ import annotations

from app.core.sentiment.config import (
    NEGATIVE,
    NEUTRAL,
    POSITIVE,
    CalibrationConfig,
)
from app.core.sentiment.types import PredictionResult


class ConfidenceCalibrator:
    """
    Aggregate polarity -> (label, confidence).

    Confidence starts at ``base_confidence`` and grows by ``step`` per net
    lexicon hit, capped at ``max_confidence``. A zero aggregate is Neutral at
    exactly the base confidence.
    """

    def __init__(self, config: CalibrationConfig | None = None):
        self.cfg = config or CalibrationConfig()
        if not 0.0 <= self.cfg.base_confidence <= self.cfg.max_confidence < 1.0:
            raise ValueError("Calibration requires 0 <= base <= max < 1.")

    def confidence_for(self, aggregate: int) -> float:
        if aggregate == 0:
            return self.cfg.base_confidence
        return min(
            self.cfg.max_confidence,
            self.cfg.base_confidence + abs(aggregate) * self.cfg.step,
        )

    def calibrate(self, aggregate: int) -> PredictionResult:
        if aggregate > 0:
            label = POSITIVE
        elif aggregate < 0:
            label = NEGATIVE
        else:
            label = NEUTRAL
        return PredictionResult(label=label, confidence=self.confidence_for(aggregate))
