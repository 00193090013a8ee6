"""Polynomial string hash used to place dictionary words in the table."""
from typing import Optional

HASH_BASE = 47


def polynomial_hash(word: str, table_size: int, end: Optional[int] = None) -> int:
    """Map ``word[:end]`` to a bucket index in ``[0, table_size)``.

    Each character contributes ``abs(ord(c) - 47)`` and the accumulator is
    multiplied by 47 and reduced mod ``table_size`` at every step, which
    keeps common ASCII letters from piling into the same clusters the way
    an additive hash does.
    """
    if end is None:
        end = len(word)
    key = 0
    for i in range(end):
        askey = abs(ord(word[i]) - HASH_BASE)
        key = (key * HASH_BASE + askey) % table_size
    return key
