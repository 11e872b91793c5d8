"""Camera placement from an aimed ray against room surfaces."""

from dataclasses import dataclass, replace
import numpy as np
from ._numeric import as_vector, normalize, clamp, safe_value
from .constants import PLACEMENT_CLEARANCE


@dataclass(frozen=True, slots=True)
class Ray:
    origin: tuple[float, float, float]
    direction: tuple[float, float, float]

    def __post_init__(self):
        object.__setattr__(self, "origin", tuple(as_vector(self.origin).tolist()))
        object.__setattr__(
            self, "direction", tuple(as_vector(self.direction).tolist())
        )

    @property
    def unit_direction(self) -> np.ndarray | None:
        """Normalized direction, or None for a zero-length direction."""
        return normalize(self.direction)


@dataclass(frozen=True, slots=True)
class Placement:
    """Mount point of the camera and the unit normal of the surface it sits on."""

    position: tuple[float, float, float]
    normal: tuple[float, float, float]
    surface_id: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "position", tuple(as_vector(self.position).tolist()))
        object.__setattr__(self, "normal", tuple(as_vector(self.normal).tolist()))

    @property
    def x(self) -> float:
        return self.position[0]

    @property
    def y(self) -> float:
        return self.position[1]

    @property
    def z(self) -> float:
        return self.position[2]

    def to_dict(self) -> dict:
        return {
            "position": list(self.position),
            "normal": list(self.normal),
            "surface_id": self.surface_id,
        }


def resolve_placement(ray, surfaces, clearance=PLACEMENT_CLEARANCE):
    """
    Place the camera where ray first hits one of the surfaces.

    The nearest strictly positive hit wins. Hits at exactly the same distance
    resolve to the surface that comes first in `surfaces`. Returns None when
    nothing is hit; keeping any previous placement is up to the caller.

    The normal is flipped when it faces along the ray so it always points
    back toward the viewer, and the position is pushed off the surface by
    `clearance` along that normal.
    """
    direction = ray.unit_direction
    if direction is None:
        return None
    origin = np.asarray(ray.origin, dtype=float)

    best_t, best_surface = None, None
    for surface in surfaces:
        t = surface.intersect(origin, direction)
        # strict comparison keeps the earlier surface on ties
        if t is not None and (best_t is None or t < best_t):
            best_t, best_surface = t, surface

    if best_surface is None:
        return None

    hit = origin + best_t * direction
    normal = best_surface.normal_at(hit)
    if normal @ direction > 0:
        normal = -normal
    position = hit + clearance * normal
    return Placement(
        position=position, normal=normal, surface_id=best_surface.surface_id
    )


def clamp_to_bounds(placement, bounds):
    """
    Pull a placement back inside the room interior.

    The normal is left alone. A placement already inside `bounds` is returned
    unchanged. Non-finite coordinates are zeroed before clamping.
    """
    limits = bounds.interior_limits
    clamped = tuple(
        clamp(safe_value(value), *limits[axis])
        for value, axis in zip(placement.position, "xyz")
    )
    if clamped == placement.position:
        return placement
    return replace(placement, position=clamped)


class PlacementResolver:
    """
    Resolves aimed rays against a fixed set of surfaces.

    Example usage:
        resolver = PlacementResolver.for_bounds(RoomBounds(20, 15, 10, 0.2))
        placement = resolver.resolve(Ray((10, 5, 7), (0, 1, 0)))
    """

    def __init__(self, surfaces, bounds=None, clearance: float = PLACEMENT_CLEARANCE):
        self.surfaces = list(surfaces)
        self.bounds = bounds
        self.clearance = clearance

    @classmethod
    def for_bounds(cls, bounds, clearance: float = PLACEMENT_CLEARANCE):
        """Create a resolver for the interior surfaces of a room."""
        return cls(bounds.surfaces, bounds=bounds, clearance=clearance)

    def resolve(self, ray) -> Placement | None:
        return resolve_placement(ray, self.surfaces, clearance=self.clearance)

    def clamp(self, placement, bounds=None) -> Placement:
        bounds = bounds or self.bounds
        if bounds is None:
            raise ValueError("bounds must be set to clamp a placement")
        return clamp_to_bounds(placement, bounds)
