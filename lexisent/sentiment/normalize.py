"""Score normalization into [-1, 1]."""

from __future__ import annotations

import math


DEFAULT_ALPHA = 15.0


def normalize(score: float, alpha: float = DEFAULT_ALPHA) -> float:
    """
    Squash an unbounded score into [-1, 1].

    Uses score / sqrt(score^2 + alpha): near-linear for small scores,
    saturating towards +/-1 for large ones. Larger alpha saturates slower.

    Args:
        score: Aggregate sentiment score
        alpha: Saturation constant, must be > 0 (default: 15)

    Returns:
        Normalized score clamped to [-1, 1]
    """
    if not alpha > 0:
        raise ValueError(f"alpha must be positive, got {alpha}")

    if math.isinf(score):
        return math.copysign(1.0, score)

    # hypot keeps score**2 from overflowing for huge scores
    norm_score = score / math.hypot(score, math.sqrt(alpha))

    if norm_score < -1.0:
        return -1.0
    if norm_score > 1.0:
        return 1.0
    return norm_score
