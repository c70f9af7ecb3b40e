from __future__ import annotations
import asyncio
import logging
import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence

import pandas as pd

from app.core.errors import EmptyInputError, PipelineFailure
from app.core.sentiment.assembler import assemble
from app.core.sentiment.baseline import BaselineComparator
from app.core.sentiment.calibrator import ConfidenceCalibrator
from app.core.sentiment.config import LABEL_ORDER, SentimentConfig
from app.core.sentiment.contribution import ContributionSource, RandomContribution
from app.core.sentiment.scorer import LexiconScorer
from app.core.sentiment.types import AnalysisResult
from app.services.preprocess import PreprocessingPipeline
from app.utils.telemetry import astep, mark_prediction, step

logger = logging.getLogger(__name__)


def _safe_pct(n: int, d: int) -> float:
    if not d:
        return 0.0
    v = (n / d) * 100.0
    return 0.0 if not math.isfinite(v) else round(v, 1)


@dataclass(frozen=True)
class BatchSummary:
    total: int
    overall: Dict[str, float]  # {'positive': %, 'negative': %, 'neutral': %}


class SentimentService:
    """
    Runs one analysis end to end:
      normalize -> score lowercase stage -> calibrate -> baseline -> assemble

    The only suspension point is the simulated inference delay. Callers that
    need a deadline wrap ``analyze`` in ``asyncio.wait_for``.
    """

    def __init__(
        self,
        cfg: SentimentConfig | None = None,
        *,
        preprocessor: PreprocessingPipeline | None = None,
        inference_delay: float = 0.0,
    ):
        self.cfg = cfg or SentimentConfig()
        self.preprocessor = preprocessor or PreprocessingPipeline()
        self.scorer = LexiconScorer(self.cfg.lexicon)
        self.calibrator = ConfidenceCalibrator(self.cfg.calibration)
        self.comparator = BaselineComparator(self.cfg.baseline)
        self.inference_delay = max(0.0, inference_delay)

    @staticmethod
    def _validate(text: str) -> None:
        if text is None or not str(text).strip():
            raise EmptyInputError()

    def _contribution_source(self) -> ContributionSource | None:
        # fresh RNG per call; None falls back to the scorer's hash source
        return RandomContribution() if self.cfg.random_contributions else None

    def _run_stage(self, stage: str, fn, *args):
        with step(f"sentiment.{stage}"):
            try:
                return fn(*args)
            except Exception as e:
                logger.exception(f"Sentiment stage '{stage}' failed: {e}")
                raise PipelineFailure(stage) from e

    def _analyze_sync(self, text: str) -> AnalysisResult:
        trace = self._run_stage("normalize", self.preprocessor.normalize, text)
        aggregate, token_scores = self._run_stage(
            "score", self.scorer.score, trace.lowercase, self._contribution_source()
        )
        final = self._run_stage("calibrate", self.calibrator.calibrate, aggregate)
        baseline = self._run_stage("baseline", self.comparator.baseline, final)
        result = self._run_stage(
            "assemble", assemble, trace, token_scores, final, baseline
        )

        mark_prediction(result.final.label)
        logger.info(
            "Analyzed %d tokens: aggregate=%d label=%s confidence=%.2f",
            len(token_scores),
            aggregate,
            final.label,
            final.confidence,
        )
        return result

    async def _simulate_inference(self) -> None:
        if self.inference_delay > 0:
            async with astep("sentiment.inference", delay_s=self.inference_delay):
                await asyncio.sleep(self.inference_delay)

    async def analyze(self, text: str) -> AnalysisResult:
        self._validate(text)
        await self._simulate_inference()
        return self._analyze_sync(text)

    async def analyze_many(self, texts: Sequence[str]) -> List[AnalysisResult]:
        """Analyze a batch; one empty text rejects the whole batch."""
        for t in texts:
            self._validate(t)
        await self._simulate_inference()
        return [self._analyze_sync(t) for t in texts]

    @staticmethod
    def summarize(results: Iterable[AnalysisResult]) -> BatchSummary:
        labels = pd.Series([r.final.label for r in results], dtype="object")
        counts = labels.value_counts().to_dict()
        total = int(len(labels))
        return BatchSummary(
            total=total,
            overall={
                label.lower(): _safe_pct(int(counts.get(label, 0)), total)
                for label in LABEL_ORDER
            },
        )
