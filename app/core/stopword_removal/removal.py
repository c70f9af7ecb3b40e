from __future__ import annotations
from typing import FrozenSet, List, Tuple

from app.core.stopword_removal.base import StopwordRemover
from app.core.stopword_removal.config import DEFAULT_STOPWORDS, StopwordConfig


class DefaultStopwordRemover(StopwordRemover):
    def __init__(self, config: StopwordConfig | None = None):
        self.cfg = config or StopwordConfig()
        self._stopset = self._build_stopset()

    @property
    def stopwords(self) -> FrozenSet[str]:
        return self._stopset

    def _build_stopset(self) -> FrozenSet[str]:
        base = set(DEFAULT_STOPWORDS)
        base |= set(self.cfg.custom_stopwords)
        base -= set(self.cfg.exclude_stopwords)

        if self.cfg.lowercase:
            base = {w.lower() for w in base}
        return frozenset(base)

    def remove(self, tokens: List[str]) -> Tuple[List[str], List[str]]:
        cleaned: List[str] = []
        removed: List[str] = []
        for t in tokens:
            norm = t.lower() if self.cfg.lowercase else t
            if norm in self._stopset:
                removed.append(t)
                continue
            cleaned.append(t)
        return cleaned, removed
