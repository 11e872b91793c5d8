"""Maximum flame/smoke detection distance from mounting height and target size."""

from dataclasses import dataclass, field, replace
import numpy as np
from ._numeric import safe_value, clamp, is_finite
from .constants import (
    FLAME_REFERENCE_WIDTH,
    SMOKE_REFERENCE_WIDTH,
    MOUNTING_HEIGHT_LIMIT,
    OPENING_ANGLE_LIMIT,
    MSG_MOUNTING_HEIGHT,
    MSG_OPENING_ANGLE,
    MSG_FOCAL_LENGTH,
    MSG_TARGET_WIDTH,
    DEFAULT_RANGE_INPUTS,
)


@dataclass(frozen=True, slots=True)
class HeightDistanceSample:
    """One vendor calibration row, distances measured at the reference widths."""

    height: float
    flame_distance: float
    smoke_distance: float


# ascending by height
HEIGHT_LOOKUP = (
    HeightDistanceSample(2, 4, 3),
    HeightDistanceSample(5, 9, 7),
    HeightDistanceSample(10, 16, 12),
    HeightDistanceSample(15, 22, 17),
    HeightDistanceSample(20, 27, 21),
    HeightDistanceSample(25, 31, 24),
    HeightDistanceSample(30, 34, 26),
)

_HEIGHTS = np.array([row.height for row in HEIGHT_LOOKUP], dtype=float)


@dataclass(frozen=True, slots=True)
class RangeInputs:
    """
    Detector inputs, in meters except where noted.

    opening_angle is in degrees and focal_length in millimeters. Both are
    only validated; the calibration table already reflects the lens.
    """

    mounting_height: float = DEFAULT_RANGE_INPUTS["mounting_height"]
    opening_angle: float = DEFAULT_RANGE_INPUTS["opening_angle"]
    focal_length: float = DEFAULT_RANGE_INPUTS["focal_length"]
    min_flame_width: float = DEFAULT_RANGE_INPUTS["min_flame_width"]
    min_smoke_width: float = DEFAULT_RANGE_INPUTS["min_smoke_width"]

    def with_(self, **kwargs):
        return replace(self, **{k: v for k, v in kwargs.items() if v is not None})

    def sanitized(self) -> "RangeInputs":
        """Copy with every non-finite value replaced by 0."""
        return RangeInputs(
            mounting_height=safe_value(self.mounting_height),
            opening_angle=safe_value(self.opening_angle),
            focal_length=safe_value(self.focal_length),
            min_flame_width=safe_value(self.min_flame_width),
            min_smoke_width=safe_value(self.min_smoke_width),
        )


@dataclass(slots=True)
class RangeOutputs:
    flame_max_distance: float
    smoke_max_distance: float
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "flame_max_distance": self.flame_max_distance,
            "smoke_max_distance": self.smoke_max_distance,
            "warnings": list(self.warnings),
        }


def _interpolate(value, lower, upper):
    if lower.height == upper.height:
        return lower.flame_distance, lower.smoke_distance
    ratio = (value - lower.height) / (upper.height - lower.height)
    flame = lower.flame_distance + ratio * (upper.flame_distance - lower.flame_distance)
    smoke = lower.smoke_distance + ratio * (upper.smoke_distance - lower.smoke_distance)
    return flame, smoke


def lookup_base_distances(mounting_height: float) -> tuple[float, float]:
    """
    Flame and smoke distances at the reference widths for a mounting height.

    Heights outside the table are clamped to its span; there is no
    extrapolation.
    """
    height = clamp(safe_value(mounting_height), _HEIGHTS[0], _HEIGHTS[-1])
    # first row whose height is >= the clamped height
    idx = int(np.searchsorted(_HEIGHTS, height, side="left"))
    if idx <= 0:
        first = HEIGHT_LOOKUP[0]
        return float(first.flame_distance), float(first.smoke_distance)
    flame, smoke = _interpolate(height, HEIGHT_LOOKUP[idx - 1], HEIGHT_LOOKUP[idx])
    return float(flame), float(smoke)


def _out_of_range(value, lo, hi=None) -> bool:
    """True for a finite value <= lo or > hi. Non-finite values are never flagged."""
    if not is_finite(value):
        return False
    value = float(value)
    return value <= lo or (hi is not None and value > hi)


def validate(inputs: RangeInputs) -> list[str]:
    """
    Return every validation message that applies, in a fixed order.

    Non-finite values are zeroed silently by `estimate` and raise no message.
    """
    msgs = []
    if _out_of_range(inputs.mounting_height, 0, MOUNTING_HEIGHT_LIMIT):
        msgs.append(MSG_MOUNTING_HEIGHT)
    if _out_of_range(inputs.opening_angle, 0, OPENING_ANGLE_LIMIT):
        msgs.append(MSG_OPENING_ANGLE)
    if _out_of_range(inputs.focal_length, 0):
        msgs.append(MSG_FOCAL_LENGTH)
    if _out_of_range(inputs.min_flame_width, 0) or _out_of_range(
        inputs.min_smoke_width, 0
    ):
        msgs.append(MSG_TARGET_WIDTH)
    return msgs


def _scale(width: float, reference: float) -> float:
    return width / reference if width > 0 else 0.0


def estimate(inputs: RangeInputs) -> RangeOutputs:
    """
    Estimate maximum flame and smoke detection distances.

    Invalid inputs are never rejected: they produce warnings alongside a
    best-effort result, which is 0 for a non-positive target width.
    """
    msgs = validate(inputs)
    inputs = inputs.sanitized()

    base_flame, base_smoke = lookup_base_distances(inputs.mounting_height)
    flame_scale = _scale(inputs.min_flame_width, FLAME_REFERENCE_WIDTH)
    smoke_scale = _scale(inputs.min_smoke_width, SMOKE_REFERENCE_WIDTH)

    return RangeOutputs(
        flame_max_distance=max(0.0, base_flame * flame_scale),
        smoke_max_distance=max(0.0, base_smoke * smoke_scale),
        warnings=msgs,
    )
