from __future__ import annotations

__all__ = ['DIGIT', 'DIGITS', 'DIGIT_STRING', 'WEIGHTS']

from typing import Sequence

from typing_extensions import TypeAlias

DIGIT: TypeAlias = int
DIGITS: TypeAlias = tuple[DIGIT, ...]
DIGIT_STRING: TypeAlias = str
WEIGHTS: TypeAlias = Sequence[int]
