# app/core/sentiment/scorer.py
from __future__ import annotations
from typing import Iterable, List, Optional, Tuple, Union

import pandas as pd

from app.core.sentiment.calibrator import ConfidenceCalibrator
from app.core.sentiment.config import LexiconConfig
from app.core.sentiment.contribution import (
    ContributionSource,
    HashContribution,
    Polarity,
)
from app.core.sentiment.types import TokenScore
from app.core.tokenization.base import Tokenizer
from app.core.tokenization.tokenizer import DefaultTokenizer


def _as_text_series(x: Union[pd.Series, Iterable[str], List[str]]) -> pd.Series:
    s = x if isinstance(x, pd.Series) else pd.Series(list(x), dtype="object")
    # normalize to strings, keep index
    return s.fillna("").astype(str)


class LexiconScorer:
    """
    Counts lexicon hits over whitespace tokens of the lowercase text.

    A token hits a lexicon when any lexicon word is a substring of it, so
    "amazing!" and "greatest" both count as positive. A token can hit both
    lexicons; it then counts once toward each side.
    """

    def __init__(
        self,
        lexicon: LexiconConfig | None = None,
        tokenizer: Tokenizer | None = None,
    ):
        self.lexicon = lexicon or LexiconConfig()
        self.tokenizer = tokenizer or DefaultTokenizer()
        self._default_source = HashContribution()

    def _matches(self, token: str, words) -> bool:
        return any(w in token for w in words)

    def polarity_of(self, token: str) -> Tuple[bool, bool]:
        return (
            self._matches(token, self.lexicon.positive),
            self._matches(token, self.lexicon.negative),
        )

    def score(
        self, normalized_text: str, source: Optional[ContributionSource] = None
    ) -> Tuple[int, List[TokenScore]]:
        src = source or self._default_source
        aggregate = 0
        token_scores: List[TokenScore] = []

        for token in self.tokenizer.tokenize(normalized_text):
            is_pos, is_neg = self.polarity_of(token)
            if is_pos:
                aggregate += 1
            if is_neg:
                aggregate -= 1

            polarity: Polarity = (
                "positive" if is_pos else "negative" if is_neg else "neutral"
            )
            token_scores.append(TokenScore(token, src.contribution(token, polarity)))

        return aggregate, token_scores

    def aggregate(self, normalized_text: str) -> int:
        total = 0
        for token in self.tokenizer.tokenize(normalized_text):
            is_pos, is_neg = self.polarity_of(token)
            total += int(is_pos) - int(is_neg)
        return total

    def score_series(
        self, texts: pd.Series, calibrator: ConfidenceCalibrator | None = None
    ) -> pd.Series:
        """Label a batch of lowercase texts; the index is preserved."""
        cal = calibrator or ConfidenceCalibrator()
        s = _as_text_series(texts)
        return s.map(lambda txt: cal.calibrate(self.aggregate(txt)).label)
