"""Ground footprint of a downward-looking camera."""

from dataclasses import dataclass, replace
import math
from ._numeric import safe_value, clamp
from .constants import MAX_FOV_DEG


@dataclass(frozen=True, slots=True)
class FovParams:
    """Lens and mounting parameters that determine the footprint."""

    mounting_height: float
    range_max: float
    horizontal_fov_deg: float
    vertical_fov_deg: float

    def with_(
        self,
        *,
        mounting_height=None,
        range_max=None,
        horizontal_fov_deg=None,
        vertical_fov_deg=None,
    ):
        return replace(
            self,
            mounting_height=(
                self.mounting_height if mounting_height is None else mounting_height
            ),
            range_max=self.range_max if range_max is None else range_max,
            horizontal_fov_deg=(
                self.horizontal_fov_deg
                if horizontal_fov_deg is None
                else horizontal_fov_deg
            ),
            vertical_fov_deg=(
                self.vertical_fov_deg if vertical_fov_deg is None else vertical_fov_deg
            ),
        )


@dataclass(frozen=True, slots=True)
class Footprint:
    """
    Rectangular ground area seen by the camera.

    `projection_distance` is the distance the footprint is projected over:
    the shorter of mounting height and usable range.
    """

    width: float
    depth: float
    projection_distance: float

    @property
    def area(self) -> float:
        return self.width * self.depth

    @property
    def d(self) -> float:
        return self.projection_distance

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "depth": self.depth,
            "area": self.area,
            "d": self.projection_distance,
        }


def _extent(distance: float, fov_deg: float) -> float:
    fov = clamp(fov_deg, 0.0, MAX_FOV_DEG)
    return max(0.0, 2 * distance * math.tan(math.radians(fov / 2)))


def project(params: FovParams) -> Footprint:
    """
    Project the field of view onto the ground.

    Non-finite inputs are treated as 0, so this never raises. FOV angles are
    limited to [0, MAX_FOV_DEG].
    """
    mounting_height = max(0.0, safe_value(params.mounting_height))
    range_max = max(0.0, safe_value(params.range_max))
    hfov = safe_value(params.horizontal_fov_deg)
    vfov = safe_value(params.vertical_fov_deg)

    d = max(0.0, min(mounting_height, range_max))
    return Footprint(
        width=_extent(d, hfov),
        depth=_extent(d, vfov),
        projection_distance=d,
    )
