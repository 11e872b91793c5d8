from .room import Room
from .room_dims import RoomBounds
from .surface import Surface
from .footprint import FovParams, Footprint, project
from .range_estimator import (
    HeightDistanceSample,
    HEIGHT_LOOKUP,
    RangeInputs,
    RangeOutputs,
    estimate,
    validate,
    lookup_base_distances,
)
from .placement import (
    Ray,
    Placement,
    PlacementResolver,
    resolve_placement,
    clamp_to_bounds,
)
from .coverage import Coverage, SideProfile, compose, side_profile
from .coverage_plotter import CoveragePlotter
from ._data import get_height_table, get_range_table
from ._version import __version__

__all__ = [
    "Room",
    "RoomBounds",
    "Surface",
    "FovParams",
    "Footprint",
    "project",
    "HeightDistanceSample",
    "HEIGHT_LOOKUP",
    "RangeInputs",
    "RangeOutputs",
    "estimate",
    "validate",
    "lookup_base_distances",
    "Ray",
    "Placement",
    "PlacementResolver",
    "resolve_placement",
    "clamp_to_bounds",
    "Coverage",
    "SideProfile",
    "compose",
    "side_profile",
    "CoveragePlotter",
    "get_height_table",
    "get_range_table",
]

__version__ = __version__
