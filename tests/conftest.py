"""Shared pytest fixtures for aviotec_calcs test suite."""

import matplotlib

matplotlib.use("Agg")

import pytest
from aviotec_calcs import Room, RoomBounds, FovParams, RangeInputs


# ============== Room Fixtures ==============

@pytest.fixture
def basic_bounds():
    """A 20 x 15 x 10 m room with 0.2 m walls."""
    return RoomBounds(length=20, width=15, height=10, wall_thickness=0.2)


@pytest.fixture
def thin_wall_bounds():
    """A 6 x 4 x 3 m room with zero-thickness walls."""
    return RoomBounds(length=6, width=4, height=3, wall_thickness=0)


@pytest.fixture
def basic_room():
    """A room with default dimensions and camera settings."""
    return Room()


@pytest.fixture
def placed_room(basic_room):
    """A room with the camera mounted on the ceiling above the room center."""
    return basic_room.place(origin=(10, 5, 7.5), direction=(0, 1, 0))


# ============== Camera Fixtures ==============

@pytest.fixture
def basic_fov():
    """A 90 x 60 degree lens mounted at 4 m with 10 m usable range."""
    return FovParams(
        mounting_height=4,
        range_max=10,
        horizontal_fov_deg=90,
        vertical_fov_deg=60,
    )


@pytest.fixture
def reference_inputs():
    """Detector inputs at the calibration reference widths."""
    return RangeInputs(
        mounting_height=10,
        opening_angle=48.5,
        focal_length=6.0,
        min_flame_width=0.5,
        min_smoke_width=0.75,
    )
