from __future__ import annotations
import unicodedata

from app.core.normalization.base import TextNormalizer
from app.core.normalization.config import NormalizationConfig


class DefaultTextNormalizer(TextNormalizer):
    def __init__(self, config: NormalizationConfig | None = None):
        self.cfg = config or NormalizationConfig()

    def normalize(self, text: str) -> str:
        if text is None:
            return ""
        s = str(text)

        if self.cfg.unicode_nfkc:
            s = unicodedata.normalize("NFKC", s)

        # whitespace is left untouched so token boundaries match the raw input
        s = s.casefold() if self.cfg.aggressive_casefold else s.lower()

        # symbols like "🅐" stay uppercase after lower(); they carry no letters
        return "".join(ch for ch in s if not ch.isupper())
