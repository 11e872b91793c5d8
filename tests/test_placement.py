"""Tests for ray-based camera placement."""

import pytest
import numpy as np
from aviotec_calcs import (
    Ray,
    Placement,
    PlacementResolver,
    Surface,
    resolve_placement,
    clamp_to_bounds,
)
from aviotec_calcs.constants import PLACEMENT_CLEARANCE


class TestResolvePlacement:
    """Tests for resolve_placement against room surfaces."""

    def test_ceiling_hit(self, basic_bounds):
        ray = Ray(origin=(10, 5, 7), direction=(0, 1, 0))
        placement = resolve_placement(ray, basic_bounds.surfaces)
        assert placement.surface_id == "ceiling"
        np.testing.assert_array_almost_equal(placement.normal, (0, -1, 0))
        np.testing.assert_array_almost_equal(
            placement.position, (10, 10 - PLACEMENT_CLEARANCE, 7)
        )

    def test_wall_hit(self, basic_bounds):
        ray = Ray(origin=(10, 5, 7), direction=(1, 0, 0))
        placement = resolve_placement(ray, basic_bounds.surfaces)
        assert placement.surface_id == "east"
        np.testing.assert_array_almost_equal(placement.normal, (-1, 0, 0))
        assert placement.x == pytest.approx(19.8 - PLACEMENT_CLEARANCE)
        assert placement.y == pytest.approx(5)
        assert placement.z == pytest.approx(7)

    def test_oblique_ray_nearest_surface(self, basic_bounds):
        """A ray toward a corner lands on whichever surface it reaches first."""
        ray = Ray(origin=(10, 5, 7), direction=(0, 1, 1))
        placement = resolve_placement(ray, basic_bounds.surfaces)
        # ceiling at t=5/sqrt(.5) < north wall at t=7.8/sqrt(.5)
        assert placement.surface_id == "ceiling"

    def test_direction_need_not_be_unit(self, basic_bounds):
        a = resolve_placement(Ray((10, 5, 7), (0, 5, 0)), basic_bounds.surfaces)
        b = resolve_placement(Ray((10, 5, 7), (0, 1, 0)), basic_bounds.surfaces)
        assert a == b

    def test_no_surfaces(self):
        """No surfaces means no placement, never an exception."""
        assert resolve_placement(Ray((0, 0, 0), (0, 1, 0)), []) is None

    def test_zero_direction(self, basic_bounds):
        assert resolve_placement(Ray((10, 5, 7), (0, 0, 0)), basic_bounds.surfaces) is None

    def test_ray_from_outside_pointing_away(self, basic_bounds):
        ray = Ray(origin=(10, 20, 7), direction=(0, 1, 0))
        assert resolve_placement(ray, basic_bounds.surfaces) is None

    def test_custom_clearance(self, basic_bounds):
        ray = Ray(origin=(10, 5, 7), direction=(0, -1, 0))
        placement = resolve_placement(ray, basic_bounds.surfaces, clearance=0.5)
        assert placement.surface_id == "floor"
        assert placement.y == pytest.approx(0.5)

    def test_zero_clearance_lies_on_surface(self, basic_bounds):
        ray = Ray(origin=(10, 5, 7), direction=(0, -1, 0))
        placement = resolve_placement(ray, basic_bounds.surfaces, clearance=0)
        assert placement.y == pytest.approx(0)


class TestNormalOrientation:
    """The normal always faces back along the incoming ray."""

    def test_normal_flipped_when_hit_from_behind(self):
        """A floor hit from below gets a downward normal."""
        floor = Surface(p0=(0, 0, 0), pU=(0, 0, 1), pV=(1, 0, 0), surface_id="floor")
        ray = Ray(origin=(0.5, -2, 0.5), direction=(0, 1, 0))
        placement = resolve_placement(ray, [floor])
        np.testing.assert_array_almost_equal(placement.normal, (0, -1, 0))
        assert placement.y == pytest.approx(-PLACEMENT_CLEARANCE)

    @pytest.mark.parametrize(
        "direction",
        [
            (0, 1, 0),
            (0, -1, 0),
            (1, 0.2, 0.1),
            (-1, 0.3, -0.4),
            (0.2, -0.1, 1),
            (0.3, 0.9, -0.6),
        ],
    )
    def test_unit_and_facing_ray(self, basic_bounds, direction):
        placement = resolve_placement(Ray((10, 5, 7), direction), basic_bounds.surfaces)
        normal = np.asarray(placement.normal)
        d = np.asarray(direction) / np.linalg.norm(direction)
        assert np.linalg.norm(normal) == pytest.approx(1.0)
        assert normal @ d <= 0
        assert basic_bounds.contains(placement.position)


class TestTieBreaking:
    """Equal-distance hits resolve to the first surface given."""

    @pytest.fixture
    def twin_surfaces(self):
        a = Surface(p0=(-1, 1, -1), pU=(-1, 1, 1), pV=(1, 1, -1), surface_id="a")
        b = Surface(p0=(-1, 1, -1), pU=(1, 1, -1), pV=(-1, 1, 1), surface_id="b")
        return a, b

    def test_first_wins(self, twin_surfaces):
        a, b = twin_surfaces
        ray = Ray((0, 0, 0), (0, 1, 0))
        assert resolve_placement(ray, [a, b]).surface_id == "a"
        assert resolve_placement(ray, [b, a]).surface_id == "b"

    def test_tied_normals_still_face_ray(self, twin_surfaces):
        """The two patches have opposite normals; both get flipped toward the ray."""
        ray = Ray((0, 0, 0), (0, 1, 0))
        for order in (twin_surfaces, twin_surfaces[::-1]):
            placement = resolve_placement(ray, list(order))
            np.testing.assert_array_almost_equal(placement.normal, (0, -1, 0))


class TestClampToBounds:
    """Tests for clamp_to_bounds."""

    def test_inside_is_unchanged(self, basic_bounds):
        placement = Placement(position=(5, 5, 5), normal=(0, -1, 0))
        assert clamp_to_bounds(placement, basic_bounds) is placement

    def test_non_finite_position_is_finite(self, basic_bounds):
        placement = Placement(position=(float("nan"), 5, float("inf")), normal=(0, -1, 0))
        clamped = clamp_to_bounds(placement, basic_bounds)
        assert all(np.isfinite(clamped.position))
        assert basic_bounds.contains(clamped.position)

    def test_idempotent(self, basic_bounds):
        placement = Placement(position=(30, -2, 40), normal=(-1, 0, 0))
        once = clamp_to_bounds(placement, basic_bounds)
        twice = clamp_to_bounds(once, basic_bounds)
        assert once == twice

    def test_clamps_each_axis(self, basic_bounds):
        placement = Placement(position=(30, 12, -1), normal=(-1, 0, 0), surface_id="east")
        clamped = clamp_to_bounds(placement, basic_bounds)
        x1, x2 = basic_bounds.interior_limits["x"]
        z1, z2 = basic_bounds.interior_limits["z"]
        assert clamped.position == (x2, 10, z1)
        assert clamped.normal == placement.normal
        assert clamped.surface_id == "east"

    def test_shrinking_room(self, basic_bounds):
        placement = resolve_placement(Ray((10, 5, 7), (1, 0, 0)), basic_bounds.surfaces)
        smaller = basic_bounds.with_(length=8, height=4)
        clamped = clamp_to_bounds(placement, smaller)
        assert clamped.x == pytest.approx(7.8)
        assert clamped.y == pytest.approx(4)
        assert clamped.z == pytest.approx(7)
        assert smaller.contains(clamped.position)


class TestPlacementResolver:
    """Tests for the PlacementResolver wrapper."""

    def test_for_bounds(self, basic_bounds):
        resolver = PlacementResolver.for_bounds(basic_bounds)
        assert len(resolver.surfaces) == 6
        placement = resolver.resolve(Ray((10, 5, 7), (0, 1, 0)))
        assert placement.surface_id == "ceiling"

    def test_clearance_is_passed_through(self, basic_bounds):
        resolver = PlacementResolver.for_bounds(basic_bounds, clearance=0.2)
        placement = resolver.resolve(Ray((10, 5, 7), (0, 1, 0)))
        assert placement.y == pytest.approx(9.8)

    def test_clamp_uses_own_bounds(self, basic_bounds):
        resolver = PlacementResolver.for_bounds(basic_bounds)
        clamped = resolver.clamp(Placement((50, 50, 50), (0, -1, 0)))
        assert basic_bounds.contains(clamped.position)

    def test_clamp_without_bounds_raises(self, basic_bounds):
        resolver = PlacementResolver(basic_bounds.surfaces)
        with pytest.raises(ValueError):
            resolver.clamp(Placement((1, 1, 1), (0, -1, 0)))

    def test_empty_resolver(self):
        assert PlacementResolver([]).resolve(Ray((0, 0, 0), (1, 0, 0))) is None


class TestPlacementValue:
    def test_coerces_to_float_tuples(self):
        placement = Placement(position=np.array([1, 2, 3]), normal=[0, 1, 0])
        assert placement.position == (1.0, 2.0, 3.0)
        assert placement.normal == (0.0, 1.0, 0.0)

    def test_to_dict(self):
        placement = Placement((1, 2, 3), (0, 1, 0), surface_id="floor")
        assert placement.to_dict() == {
            "position": [1.0, 2.0, 3.0],
            "normal": [0.0, 1.0, 0.0],
            "surface_id": "floor",
        }
