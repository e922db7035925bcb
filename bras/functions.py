from __future__ import annotations

__all__ = [
        'find_digits',
        'remove_separators',
        'to_digits',
        'zero_pad',
        'all_equal',
        'descending_weights',
        'weighted_sum',
        'mod11_digit',
        'empty_to_none'
]

import re
from collections.abc import Sequence

from bras.alias import DIGITS, DIGIT_STRING, WEIGHTS


def find_digits(string: str) -> list[str]:
    return re.findall(r'[0-9]', string)

def remove_separators(string: str, separators: str) -> str:
    if not separators:
        return string
    return re.sub(f'[{re.escape(separators)}]', '', string)

def to_digits(string: DIGIT_STRING) -> DIGITS:
    return tuple(int(i) for i in string)

def zero_pad(value: int, size: int) -> DIGIT_STRING:
    return f'{value:0{size}d}'

def all_equal(sequence: Sequence) -> bool:
    return len(set(sequence)) <= 1

def descending_weights(size: int) -> WEIGHTS:
    """Weights size+1, size, ..., 2 for a sequence with `size` items."""
    return range(size + 1, 1, -1)

def weighted_sum(digits: Sequence[int], weights: WEIGHTS) -> int:
    return sum(d * w for d, w in zip(digits, weights, strict=True))

def mod11_digit(digits: Sequence[int]) -> int:
    """Check digit of the modulo 11 scheme over descending weights.

    A remainder below 2 gives 0, any other remainder r gives 11 - r.
    """
    remainder = weighted_sum(digits, descending_weights(len(digits))) % 11
    if remainder < 2:
        return 0
    return 11 - remainder

def empty_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value
