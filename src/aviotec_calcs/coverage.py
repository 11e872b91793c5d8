"""Combine footprint, range and placement into displayable coverage values."""

from dataclasses import dataclass, field
from ._numeric import safe_value
from .constants import (
    MIN_VISIBLE_SIZE,
    FOOTPRINT_FLOOR_OFFSET,
    DIAGRAM_WIDTH,
    DIAGRAM_HEIGHT,
    DIAGRAM_PADDING,
)


@dataclass(frozen=True, slots=True)
class Coverage:
    """
    Footprint as drawn in the room.

    width/depth are the room-clamped extents along x and z; `footprint` keeps
    the unclamped projection.
    """

    width: float
    depth: float
    center: tuple[float, float, float]
    footprint: object
    flame_max_distance: float | None = None
    smoke_max_distance: float | None = None
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def area(self) -> float:
        return self.width * self.depth

    @property
    def corners(self) -> list[tuple[float, float, float]]:
        """Footprint corners (x, y, z) at the render height, counter-clockwise from above."""
        cx, cy, cz = self.center
        hw, hd = self.width / 2, self.depth / 2
        return [
            (cx - hw, cy, cz - hd),
            (cx - hw, cy, cz + hd),
            (cx + hw, cy, cz + hd),
            (cx + hw, cy, cz - hd),
        ]

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "depth": self.depth,
            "area": self.area,
            "center": list(self.center),
            "footprint": self.footprint.to_dict(),
            "flame_max_distance": self.flame_max_distance,
            "smoke_max_distance": self.smoke_max_distance,
            "warnings": list(self.warnings),
        }


def compose(footprint, placement, bounds, ranges=None) -> Coverage:
    """
    Fit a footprint into the room and anchor it under the placement.

    Extents never exceed the room and never drop below MIN_VISIBLE_SIZE, so an
    empty footprint still renders. Without a placement the footprint is
    centered on the floor.
    """
    width = max(min(footprint.width, bounds.length), MIN_VISIBLE_SIZE)
    depth = max(min(footprint.depth, bounds.width), MIN_VISIBLE_SIZE)

    if placement is None:
        cx, cz = bounds.length / 2, bounds.width / 2
    else:
        cx, cz = placement.x, placement.z

    kwargs = {}
    if ranges is not None:
        kwargs = {
            "flame_max_distance": ranges.flame_max_distance,
            "smoke_max_distance": ranges.smoke_max_distance,
            "warnings": tuple(ranges.warnings),
        }
    return Coverage(
        width=width,
        depth=depth,
        center=(cx, FOOTPRINT_FLOOR_OFFSET, cz),
        footprint=footprint,
        **kwargs,
    )


@dataclass(frozen=True, slots=True)
class SideProfile:
    """Vertical slice through the camera: mounting height against flame reach."""

    mounting_height: float
    reach: float

    @property
    def triangle(self) -> list[tuple[float, float]]:
        """Camera, foot of the mount and reach point, in meters."""
        return [(0.0, self.mounting_height), (0.0, 0.0), (self.reach, 0.0)]

    def to_canvas(
        self, width=DIAGRAM_WIDTH, height=DIAGRAM_HEIGHT, padding=DIAGRAM_PADDING
    ) -> dict:
        """
        Pixel geometry for a canvas with y pointing down.

        The scale fits both the reach and the height inside the padded canvas,
        treating anything under 1 m as 1 m.
        """
        max_distance = max(self.reach, 1)
        max_height = max(self.mounting_height, 1)
        scale = min(
            (width - padding * 2) / max_distance,
            (height - padding * 2) / max_height,
        )
        ground_y = height - padding
        camera_x = padding
        camera_y = ground_y - self.mounting_height * scale
        return {
            "scale": scale,
            "ground_y": ground_y,
            "camera": (camera_x, camera_y),
            "reach_x": camera_x + self.reach * scale,
        }


def side_profile(inputs, outputs) -> SideProfile:
    return SideProfile(
        mounting_height=max(0.0, safe_value(inputs.mounting_height)),
        reach=outputs.flame_max_distance,
    )
