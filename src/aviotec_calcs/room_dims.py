from dataclasses import dataclass, replace
import math
import numpy as np
from .surface import Surface


@dataclass(frozen=True, slots=True)
class RoomBounds:
    """
    Rectangular room, y-up: x runs along the length, z along the width and
    y is height above the floor. Walls occupy wall_thickness on each side.
    """

    length: float
    width: float
    height: float
    wall_thickness: float = 0.0

    def __post_init__(self):
        for name in ("length", "width", "height", "wall_thickness"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValueError(f"Room {name} must be finite, got {value}")
        if self.length <= 0 or self.width <= 0 or self.height <= 0:
            raise ValueError("Room length, width and height must be positive")
        if self.wall_thickness < 0:
            raise ValueError("Wall thickness must not be negative")
        if 2 * self.wall_thickness >= min(self.length, self.width):
            raise ValueError(
                f"Wall thickness {self.wall_thickness} leaves no interior in a "
                f"{self.length} x {self.width} room"
            )

    @property
    def volume(self) -> float:
        return self.length * self.width * self.height

    @property
    def dimensions(self) -> np.ndarray:
        return np.array([self.length, self.height, self.width])

    @property
    def interior_limits(self) -> dict:
        """(lo, hi) per axis of the space a placement may occupy."""
        wt = self.wall_thickness
        return {
            "x": (wt, self.length - wt),
            "y": (0.0, self.height),
            "z": (wt, self.width - wt),
        }

    @property
    def faces(self) -> dict:
        # p0, pU, pV with u x v pointing into the room
        x1, x2 = self.interior_limits["x"]
        z1, z2 = self.interior_limits["z"]
        h = self.height
        return {
            "floor": ((x1, 0, z1), (x1, 0, z2), (x2, 0, z1)),
            "ceiling": ((x1, h, z1), (x2, h, z1), (x1, h, z2)),
            "south": ((x1, 0, z1), (x2, 0, z1), (x1, h, z1)),
            "north": ((x1, 0, z2), (x1, h, z2), (x2, 0, z2)),
            "west": ((x1, 0, z1), (x1, h, z1), (x1, 0, z2)),
            "east": ((x2, 0, z1), (x2, 0, z2), (x2, h, z1)),
        }

    @property
    def surfaces(self) -> list[Surface]:
        """Interior surfaces in a fixed order: floor, ceiling, then walls."""
        return [
            Surface(p0, pU, pV, surface_id=key)
            for key, (p0, pU, pV) in self.faces.items()
        ]

    def contains(self, point) -> bool:
        x, y, z = point
        limits = self.interior_limits
        return all(
            lo <= val <= hi
            for val, (lo, hi) in zip((x, y, z), (limits["x"], limits["y"], limits["z"]))
        )

    def with_(self, *, length=None, width=None, height=None, wall_thickness=None):
        return replace(
            self,
            length=self.length if length is None else length,
            width=self.width if width is None else width,
            height=self.height if height is None else height,
            wall_thickness=(
                self.wall_thickness if wall_thickness is None else wall_thickness
            ),
        )
