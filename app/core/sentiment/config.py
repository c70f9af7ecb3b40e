from __future__ import annotations
from dataclasses import dataclass, field
from typing import FrozenSet, Literal, Tuple

Label = Literal["Positive", "Negative", "Neutral"]

POSITIVE: Label = "Positive"
NEGATIVE: Label = "Negative"
NEUTRAL: Label = "Neutral"

# Row/column order of the confusion matrix and every label listing
LABEL_ORDER: Tuple[Label, ...] = (POSITIVE, NEGATIVE, NEUTRAL)

POSITIVE_WORDS: FrozenSet[str] = frozenset(
    {
        "amazing",
        "excellent",
        "outstanding",
        "great",
        "fantastic",
        "wonderful",
        "love",
        "perfect",
        "awesome",
    }
)

NEGATIVE_WORDS: FrozenSet[str] = frozenset(
    {
        "terrible",
        "awful",
        "horrible",
        "hate",
        "worst",
        "disappointed",
        "broken",
        "useless",
        "waste",
    }
)


def _validate_lexicon(name: str, words: FrozenSet[str]) -> None:
    if not words:
        raise ValueError(f"{name} lexicon must not be empty.")
    for w in words:
        if not isinstance(w, str) or not w.strip():
            raise ValueError(f"{name} lexicon contains an empty or non-string entry.")
        if w != w.lower() or w != w.strip():
            raise ValueError(
                f"{name} lexicon entry '{w}' must be lowercase without surrounding spaces."
            )


@dataclass(frozen=True)
class LexiconConfig:
    positive: FrozenSet[str] = field(default_factory=lambda: POSITIVE_WORDS)
    negative: FrozenSet[str] = field(default_factory=lambda: NEGATIVE_WORDS)

    def __post_init__(self):
        # accept any iterable of words but store frozensets
        object.__setattr__(self, "positive", frozenset(self.positive))
        object.__setattr__(self, "negative", frozenset(self.negative))
        _validate_lexicon("positive", self.positive)
        _validate_lexicon("negative", self.negative)


@dataclass(frozen=True)
class CalibrationConfig:
    base_confidence: float = 0.75
    step: float = 0.1
    max_confidence: float = 0.95


@dataclass(frozen=True)
class BaselineConfig:
    confidence_offset: float = 0.15
    min_confidence: float = 0.0


@dataclass(frozen=True)
class SentimentConfig:
    lexicon: LexiconConfig = field(default_factory=LexiconConfig)
    calibration: CalibrationConfig = field(default_factory=CalibrationConfig)
    baseline: BaselineConfig = field(default_factory=BaselineConfig)
    # False: hash-derived contributions (reproducible); True: fresh RNG per call
    random_contributions: bool = False
