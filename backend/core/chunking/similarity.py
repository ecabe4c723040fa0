"""
Vector similarity helpers.

Dependencies: math (stdlib)
System role: Similarity measure for semantic merging
"""

import math
from collections.abc import Sequence


def cosine_similarity(a: Sequence[float] | None, b: Sequence[float] | None) -> float:
    """
    Cosine similarity of two vectors.

    Args:
        a: First vector
        b: Second vector

    Returns:
        float: dot(a, b) / (|a| * |b|), with a zero denominator replaced by 1.
            0.0 when either vector is empty or the lengths differ.
    """
    if not a or not b or len(a) != len(b):
        return 0.0
    dot = sum(x * y for x, y in zip(a, b))
    norm_a = math.sqrt(sum(x * x for x in a))
    norm_b = math.sqrt(sum(y * y for y in b))
    return dot / ((norm_a * norm_b) or 1)


def is_comparable(a: Sequence[float] | None, b: Sequence[float] | None) -> bool:
    """
    Whether two embeddings can take part in a similarity comparison.

    Both must be non-empty, of equal length and not all zeros.
    """
    if not a or not b or len(a) != len(b):
        return False
    return any(a) and any(b)
