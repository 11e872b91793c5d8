"""Small numeric helpers shared by the engine modules."""

import math
import numpy as np


def safe_value(value) -> float:
    """Return value as a float, or 0.0 if it is not finite."""
    try:
        value = float(value)
    except (TypeError, ValueError):
        return 0.0
    return value if math.isfinite(value) else 0.0


def clamp(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)


def as_vector(values) -> np.ndarray:
    """Coerce a 3-sequence to a float array, raising on the wrong shape."""
    arr = np.asarray(values, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"Expected a 3D vector, got shape {arr.shape}")
    return arr


def normalize(vec, eps: float = 1e-12) -> np.ndarray | None:
    """Return the unit vector along vec, or None for zero-length input."""
    vec = np.asarray(vec, dtype=float)
    length = np.linalg.norm(vec)
    if not np.isfinite(length) or length < eps:
        return None
    return vec / length


def is_finite(value) -> bool:
    try:
        return math.isfinite(float(value))
    except (TypeError, ValueError):
        return False
