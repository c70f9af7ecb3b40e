from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class SpecialCleanConfig:
    remove_special: bool = True
    remove_numbers: bool = False
    collapse_whitespace: bool = True
