from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List


class Lemmatizer(ABC):
    """
    Port: lemmatize a list of tokens.

    Implementations must return at most as many tokens as they receive, in the
    same order, and be idempotent (lemmatizing the output changes nothing).
    """

    @abstractmethod
    def lemmatize(self, tokens: List[str]) -> List[str]: ...

    def warm_up(self) -> None:
        """Load any corpora up front so the first request does not pay for it."""
