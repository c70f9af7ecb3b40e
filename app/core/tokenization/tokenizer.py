from __future__ import annotations
import re
from typing import List

from app.core.tokenization.base import Tokenizer
from app.core.tokenization.config import TokenizationConfig


class DefaultTokenizer(Tokenizer):
    """Adapter: whitespace split (punctuation stays attached to its word)."""

    def __init__(self, config: TokenizationConfig | None = None):
        self.cfg = config or TokenizationConfig()
        if self.cfg.method not in ("whitespace", "regex"):
            raise ValueError(f"Unsupported tokenization method: {self.cfg.method}")
        self._regex = re.compile(self.cfg.regex_pattern or r"\S+")

    def _tokenize_raw(self, text: str) -> List[str]:
        s = text or ""
        if self.cfg.method == "regex":
            return self._regex.findall(s)
        return s.split()

    def tokenize(self, text: str) -> List[str]:
        return [t for t in self._tokenize_raw(text) if len(t) >= self.cfg.min_token_len]
