from __future__ import annotations
import hashlib
import random
from typing import Literal, Optional, Protocol

Polarity = Literal["positive", "negative", "neutral"]

NOISE_BAND = 0.15
_BITS = 32


def _spread(polarity: Polarity, n: int) -> float:
    """Map a 32-bit integer onto the polarity's open contribution band."""
    u = (n + 0.5) / 2**_BITS  # strictly inside (0, 1)
    if polarity == "positive":
        return 1.0 - 0.5 * u  # (0.5, 1.0)
    if polarity == "negative":
        return -(1.0 - 0.5 * u)  # (-1.0, -0.5)
    return (2.0 * u - 1.0) * NOISE_BAND  # (-0.15, 0.15)


class ContributionSource(Protocol):
    def contribution(self, token: str, polarity: Polarity) -> float: ...


class HashContribution:
    """Reproducible: the value depends only on (polarity, token)."""

    def contribution(self, token: str, polarity: Polarity) -> float:
        digest = hashlib.sha256(f"{polarity}:{token}".encode("utf-8")).digest()
        return _spread(polarity, int.from_bytes(digest[:4], "big"))


class RandomContribution:
    """
    Random draw per token. Create one instance per analysis call so that no
    RNG state is shared between concurrent requests.
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def contribution(self, token: str, polarity: Polarity) -> float:
        return _spread(polarity, self._rng.getrandbits(_BITS))
