"""
Fuzzy comparison of floating-point cell values.

Used by ``Matrix.compare`` to decide whether two matrices agree within a
tolerance rather than bit-for-bit.
"""

from __future__ import annotations

import math


class ToleranceMode:
    """Modes for fuzzy comparison."""

    RELATIVE = "relative"  # |a - b| / max(|a|, |b|) <= tol
    ABSOLUTE = "absolute"  # |a - b| <= tol
    SIGFIGS = "sigfigs"  # Significant figures


# Absorbs representation error when the tolerance itself is tight
EPSILON = 1e-12


def fuzzy_compare(a: float, b: float, tolerance: float, mode: str) -> bool:
    """
    Compare two floats with tolerance.

    Args:
        a: First value
        b: Second value
        tolerance: Tolerance value (digits for sigfigs mode)
        mode: Comparison mode (relative, absolute, sigfigs)

    Returns:
        True if values are equal within tolerance

    Raises:
        ValueError: If mode is not a known ToleranceMode
    """
    if a == b:
        return True

    # Infinities only match themselves; nan matches nothing
    if not (math.isfinite(a) and math.isfinite(b)):
        return False

    if mode == ToleranceMode.ABSOLUTE:
        return abs(a - b) <= tolerance + EPSILON

    elif mode == ToleranceMode.RELATIVE:
        max_abs = max(abs(a), abs(b))
        if max_abs == 0:
            return abs(a - b) <= tolerance + EPSILON
        return abs(a - b) / max_abs <= tolerance + EPSILON

    elif mode == ToleranceMode.SIGFIGS:
        diff = abs(a - b)
        avg = (abs(a) + abs(b)) / 2
        if avg == 0:
            return diff < 10 ** (-tolerance)
        return math.floor(math.log10(diff / avg)) < -tolerance

    else:
        raise ValueError(f"Unknown tolerance mode: {mode}")
