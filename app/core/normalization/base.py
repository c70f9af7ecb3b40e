from __future__ import annotations
from abc import ABC, abstractmethod


class TextNormalizer(ABC):
    """Port: case-fold raw text into the lowercase stage."""

    @abstractmethod
    def normalize(self, text: str) -> str: ...
