from __future__ import annotations
from dataclasses import dataclass, field
from typing import FrozenSet

# Closed list shown in the display pipeline; never applied before scoring.
DEFAULT_STOPWORDS: FrozenSet[str] = frozenset(
    {
        "the",
        "is",
        "at",
        "which",
        "on",
        "and",
        "a",
        "to",
        "are",
        "as",
        "was",
        "were",
        "been",
        "be",
    }
)


@dataclass(frozen=True)
class StopwordConfig:
    custom_stopwords: FrozenSet[str] = field(
        default_factory=frozenset
    )  # extra words to remove
    exclude_stopwords: FrozenSet[str] = field(
        default_factory=frozenset
    )  # words to keep even if in list
    lowercase: bool = True
