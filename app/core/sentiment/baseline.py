from __future__ import annotations

from app.core.sentiment.config import BaselineConfig
from app.core.sentiment.types import PredictionResult


class BaselineComparator:
    """
    Lower-fidelity comparator derived from the final prediction.

    Shares the final label and drops the confidence by a fixed offset. If a
    separately trained baseline is ever introduced, it needs its own scoring
    pass and calibration instead of this derived view.
    """

    def __init__(self, config: BaselineConfig | None = None):
        self.cfg = config or BaselineConfig()

    def baseline(self, final: PredictionResult) -> PredictionResult:
        confidence = max(
            self.cfg.min_confidence, final.confidence - self.cfg.confidence_offset
        )
        return PredictionResult(label=final.label, confidence=confidence)
