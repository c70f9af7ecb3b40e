from __future__ import annotations
from typing import Iterable, Optional

from app.core.sentiment.types import (
    AnalysisResult,
    PredictionResult,
    PreprocessingTrace,
    TokenScore,
)


def assemble(
    trace: Optional[PreprocessingTrace],
    token_scores: Optional[Iterable[TokenScore]],
    final: Optional[PredictionResult],
    baseline: Optional[PredictionResult],
) -> AnalysisResult:
    """Compose the stage outputs into one immutable result, or fail as a whole."""
    missing = [
        name
        for name, part in (
            ("trace", trace),
            ("token_scores", token_scores),
            ("final", final),
            ("baseline", baseline),
        )
        if part is None
    ]
    if missing:
        raise ValueError(f"Cannot assemble result, missing: {', '.join(missing)}")

    if baseline.label != final.label:
        raise ValueError(
            f"Baseline label {baseline.label} disagrees with final label {final.label}."
        )
    if baseline.confidence > final.confidence:
        raise ValueError("Baseline confidence exceeds final confidence.")

    return AnalysisResult(
        final=final,
        baseline=baseline,
        token_scores=tuple(token_scores),
        trace=trace,
    )
