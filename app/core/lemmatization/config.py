from __future__ import annotations
from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class LemmatizationConfig:
    method: Literal["passthrough", "wordnet"] = "passthrough"
    use_pos_tagging: bool = False  # wordnet only: tag tokens then lemmatize by POS
