from __future__ import annotations
import re
from typing import Tuple, List

from app.core.special_char_removal.base import SpecialCleaner
from app.core.special_char_removal.config import SpecialCleanConfig

# Unicode-aware: keeps letters, digits and "_" from any script
_RE_SPECIAL = re.compile(r"[^\w\s]")
_RE_DIGITS = re.compile(r"\d")
_RE_WS = re.compile(r"\s+")


def _get_removed_chars(original: str, cleaned: str) -> List[str]:
    return sorted(set(original) - set(cleaned))


class DefaultSpecialCleaner(SpecialCleaner):
    """
    Adapter:
      - drop every character that is neither a word character nor whitespace
      - optionally drop digits
      - collapse whitespace runs to one space and trim the ends
    """

    def __init__(self, config: SpecialCleanConfig | None = None):
        self.cfg = config or SpecialCleanConfig()

    def clean(self, text: str) -> Tuple[str, List[str]]:
        original = text or ""

        s = original
        if self.cfg.remove_special:
            s = _RE_SPECIAL.sub("", s)
        if self.cfg.remove_numbers:
            s = _RE_DIGITS.sub("", s)
        if self.cfg.collapse_whitespace:
            s = _RE_WS.sub(" ", s).strip()

        return s, _get_removed_chars(original, s)
