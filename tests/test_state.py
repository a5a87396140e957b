"""
Unit tests for the per-frame simulation update.
"""
import math

import pytest

from lorenzorbit.config import SimulationConfig
from lorenzorbit.model.geometry_primitives import Point3
from lorenzorbit.model.state import SimulationContext, advance_azimuth
from lorenzorbit.model.trajectory import compute_centroid


class TestAdvanceAzimuth:

    def test_increments(self):
        assert advance_azimuth(0.0, 0.1) == pytest.approx(0.1)

    def test_wraps_past_full_turn(self):
        assert advance_azimuth(359.95, 0.1) == pytest.approx(0.05)

    def test_stays_in_range_over_many_frames(self):
        azimuth = 0.0
        for _ in range(10_000):
            azimuth = advance_azimuth(azimuth, 0.1)
            assert 0.0 <= azimuth < 360.0


class TestSimulationContext:
    """Order and effects of advance_frame()."""

    def test_initial_state(self):
        context = SimulationContext()

        assert len(context.trajectory) == 1
        assert context.pitch.value == 0.0
        assert context.pitch.minimum == -75.0
        assert context.pitch.maximum == 75.0
        assert context.camera.distance == 30.0
        assert context.frame_index == 0

    def test_frame_appends_steps(self, context):
        snapshot = context.advance_frame()

        assert len(context.trajectory) == 31
        assert snapshot.point_count == 31
        assert snapshot.frame_index == 1
        assert snapshot.was_reset is False

    def test_frame_advances_azimuth_and_pitch(self, context):
        context.advance_frame()

        assert context.azimuth_deg == pytest.approx(0.1)
        assert context.pitch.value == pytest.approx(0.1)
        assert context.camera.pitch_deg == pytest.approx(0.1)

    def test_camera_targets_centroid(self, context):
        context.advance_frame()
        snapshot = context.advance_frame()

        expected = compute_centroid(context.trajectory.points())
        assert snapshot.target.to_tuple() == pytest.approx(expected.to_tuple(), abs=1e-9)
        assert context.camera.target == snapshot.target

    def test_camera_orbits_at_distance(self, context):
        for _ in range(5):
            snapshot = context.advance_frame()

        distance = math.dist(snapshot.position.to_tuple(), snapshot.target.to_tuple())
        assert distance == pytest.approx(30.0)
        assert snapshot.up == Point3(0.0, 1.0, 0.0)

    def test_reset_happens_before_append(self, context):
        # cap 50, 30 steps per frame: 31, 61, then reset -> 1 + 30
        context.advance_frame()
        context.advance_frame()
        assert len(context.trajectory) == 61

        snapshot = context.advance_frame()

        assert snapshot.was_reset is True
        assert len(context.trajectory) == 31
        assert context.trajectory[0] == Point3(1.0, 1.0, 1.0)

    def test_trail_length_is_sawtooth(self, context):
        lengths = [context.advance_frame().point_count for _ in range(9)]

        assert lengths == [31, 61, 31, 61, 31, 61, 31, 61, 31]

    def test_zero_steps_per_frame_keeps_seed(self):
        context = SimulationContext(config=SimulationConfig(steps_per_frame=0))

        snapshot = context.advance_frame()

        assert snapshot.point_count == 1
        assert snapshot.target == Point3(1.0, 1.0, 1.0)


if __name__ == "__main__":
    pytest.main([__file__])
