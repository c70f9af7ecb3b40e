from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TokenizationConfig:
    method: str = "whitespace"  # "whitespace" | "regex"
    regex_pattern: Optional[str] = None  # used if method == "regex"
    min_token_len: int = 1  # drop tokens shorter than this
