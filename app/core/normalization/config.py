from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class NormalizationConfig:
    # str.lower() by default; casefold() also folds e.g. "ß" -> "ss"
    aggressive_casefold: bool = False
    # NFKC maps styled capitals such as "𝐀" or "🄰" to plain letters first
    unicode_nfkc: bool = True
