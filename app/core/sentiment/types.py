from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from app.core.sentiment.config import LABEL_ORDER, Label

TRACE_STAGES: Tuple[str, ...] = (
    "original",
    "lowercase",
    "no_special_chars",
    "no_stopwords",
    "lemmatized",
)


@dataclass(frozen=True)
class PreprocessingTrace:
    original: str
    lowercase: str
    no_special_chars: str
    no_stopwords: str
    lemmatized: str

    def as_dict(self) -> Dict[str, str]:
        return {stage: getattr(self, stage) for stage in TRACE_STAGES}


@dataclass(frozen=True)
class TokenScore:
    token: str
    contribution: float

    def __post_init__(self):
        if not -1.0 <= self.contribution <= 1.0:
            raise ValueError(
                f"Contribution for '{self.token}' out of range: {self.contribution}"
            )

    def as_pair(self) -> Tuple[str, float]:
        return (self.token, self.contribution)


@dataclass(frozen=True)
class PredictionResult:
    label: Label
    confidence: float

    def __post_init__(self):
        if self.label not in LABEL_ORDER:
            raise ValueError(f"Unknown sentiment label: {self.label}")
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Confidence out of range: {self.confidence}")


@dataclass(frozen=True)
class AnalysisResult:
    final: PredictionResult
    baseline: PredictionResult
    token_scores: Tuple[TokenScore, ...]
    trace: PreprocessingTrace

    def to_dict(self) -> Dict[str, Any]:
        return {
            "final_prediction": self.final.label,
            "final_confidence": self.final.confidence,
            "baseline_prediction": self.baseline.label,
            "baseline_confidence": self.baseline.confidence,
            "highlighted_text": [ts.as_pair() for ts in self.token_scores],
            "preprocessing_steps": self.trace.as_dict(),
        }
