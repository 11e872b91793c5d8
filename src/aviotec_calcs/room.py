import warnings
import copy
from .constants import ROOM_DEFAULTS, DEFAULT_FOV, MSG_NO_HIT, PLACEMENT_CLEARANCE
from .room_dims import RoomBounds
from .footprint import FovParams, project
from .range_estimator import RangeInputs, estimate, validate
from .placement import Ray, PlacementResolver
from .coverage import compose, side_profile
from .coverage_plotter import CoveragePlotter


class Room:
    """
    A rectangular room with a single detection camera.

    Holds the room bounds, the lens and detector inputs, and the current
    camera placement. Setting new dimensions pulls the placement back inside
    the room. Footprint, ranges and coverage are recomputed on access.
    """

    def __init__(
        self,
        length: float = None,
        width: float = None,
        height: float = None,
        wall_thickness: float = None,
        fov: FovParams | None = None,
        range_inputs: RangeInputs | None = None,
        clearance: float = PLACEMENT_CLEARANCE,
    ):
        self.bounds = RoomBounds(
            length if length is not None else ROOM_DEFAULTS["length"],
            width if width is not None else ROOM_DEFAULTS["width"],
            height if height is not None else ROOM_DEFAULTS["height"],
            (
                wall_thickness
                if wall_thickness is not None
                else ROOM_DEFAULTS["wall_thickness"]
            ),
        )
        self.fov = fov if fov is not None else FovParams(**DEFAULT_FOV)
        self.range_inputs = range_inputs if range_inputs is not None else RangeInputs()
        self.clearance = clearance
        self.placement = None

        self._plotter = CoveragePlotter(self)

    def __repr__(self):
        return (
            f"Room(length={self.length}, width={self.width}, height={self.height}, "
            f"wall_thickness={self.wall_thickness}, fov={self.fov}, "
            f"range_inputs={self.range_inputs}, placement={self.placement})"
        )

    def copy(self):
        return copy.deepcopy(self)

    # -------------- Dimensions -----------------------

    def set_dimensions(self, length=None, width=None, height=None, wall_thickness=None):
        """set room dimensions, clamping the current placement into the new bounds"""
        self.bounds = self.bounds.with_(
            length=length, width=width, height=height, wall_thickness=wall_thickness
        )
        if self.placement is not None:
            self.placement = self.resolver.clamp(self.placement)
        return self

    @property
    def length(self) -> float:
        return self.bounds.length

    @property
    def width(self) -> float:
        return self.bounds.width

    @property
    def height(self) -> float:
        return self.bounds.height

    @property
    def wall_thickness(self) -> float:
        return self.bounds.wall_thickness

    @property
    def dimensions(self) -> tuple[float, float, float]:
        return (self.bounds.length, self.bounds.width, self.bounds.height)

    @property
    def surfaces(self):
        return self.bounds.surfaces

    # -------------- Camera parameters -----------------------

    def set_fov(
        self,
        mounting_height=None,
        range_max=None,
        horizontal_fov_deg=None,
        vertical_fov_deg=None,
    ):
        """update lens parameters"""
        self.fov = self.fov.with_(
            mounting_height=mounting_height,
            range_max=range_max,
            horizontal_fov_deg=horizontal_fov_deg,
            vertical_fov_deg=vertical_fov_deg,
        )
        return self

    def set_range_inputs(self, **kwargs):
        """update detector inputs (mounting_height, opening_angle, focal_length, min widths)"""
        unknown = set(kwargs) - set(RangeInputs.__dataclass_fields__)
        if unknown:
            raise KeyError(f"Invalid range inputs {sorted(unknown)}")
        self.range_inputs = self.range_inputs.with_(**kwargs)
        return self

    @property
    def mounting_height(self) -> float:
        """Height of the placed camera, or the lens mounting height if unplaced."""
        if self.placement is not None:
            return self.placement.y
        return self.fov.mounting_height

    # -------------- Placement -----------------------

    @property
    def resolver(self) -> PlacementResolver:
        return PlacementResolver.for_bounds(self.bounds, clearance=self.clearance)

    def place(self, origin, direction):
        """
        Mount the camera where the aimed ray hits the room. A ray that hits
        nothing leaves the current placement as it is. A ray aimed from
        outside lands on the outer face and is pulled back inside the room.
        """
        resolver = self.resolver
        placement = resolver.resolve(Ray(origin, direction))
        if placement is None:
            warnings.warn(MSG_NO_HIT, stacklevel=2)
        else:
            self.placement = resolver.clamp(placement)
        return self

    def clear_placement(self):
        self.placement = None
        return self

    # -------------- Results -----------------------

    @property
    def footprint(self):
        return project(self.fov.with_(mounting_height=self.mounting_height))

    @property
    def effective_range_inputs(self) -> RangeInputs:
        return self.range_inputs.with_(mounting_height=self.mounting_height)

    @property
    def ranges(self):
        return estimate(self.effective_range_inputs)

    def check_inputs(self):
        """return any validation messages for the current detector inputs"""
        msgs = validate(self.effective_range_inputs)
        for msg in msgs:
            warnings.warn(msg, stacklevel=2)
        return msgs

    def coverage(self, warn=True):
        """compose the footprint, detection ranges and placement for display"""
        ranges = self.ranges
        if warn:
            for msg in ranges.warnings:
                warnings.warn(msg, stacklevel=2)
        return compose(self.footprint, self.placement, self.bounds, ranges=ranges)

    def side_profile(self):
        inputs = self.effective_range_inputs
        return side_profile(inputs, estimate(inputs))

    # ------------------- Plotting ----------------------

    def plotly(self, fig=None, title=""):
        """return a plotly figure of the room, footprint and camera"""
        return self._plotter.plotly(fig=fig, title=title)

    def plot(self, fig=None, title=""):
        """alias for plotly"""
        return self._plotter.plotly(fig=fig, title=title)

    def plot_side_view(self, fig=None, ax=None, title=""):
        """return a matplotlib side view of mounting height and flame reach"""
        return self._plotter.plot_side_view(fig=fig, ax=ax, title=title)
