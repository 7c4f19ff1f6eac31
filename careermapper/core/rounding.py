from __future__ import annotations

import math

# Scores and salary figures are displayed as whole numbers and must match the
# product's half-up rounding (2.5 -> 3), not Python's round-half-even.


def round_half_up(x: float) -> int:
    """Deterministic half-up rounding toward +inf, e.g. 11.5 -> 12, -2.5 -> -2."""
    return int(math.floor(x + 0.5))
