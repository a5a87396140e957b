"""
Simulation State (Data Model)
=============================
This module defines the central data structure for the running visualizer.

Why is this file needed?
------------------------
1. State Management: It holds the trail, the pitch oscillator, the camera and
   the azimuth in one place instead of module-level globals.
2. Decoupling: The controller advances this object once per frame; the view
   only reads the FrameSnapshot it returns.

Classes:
    FrameSnapshot: What the view needs to draw one frame.
    SimulationContext: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import TYPE_CHECKING

import numpy as np

from lorenzorbit.config import SimulationConfig
from lorenzorbit.model.camera import CameraState
from lorenzorbit.model.geometry_primitives import Point3
from lorenzorbit.model.oscillator import BoundedOscillator
from lorenzorbit.model.trajectory import TrajectoryBuffer

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class FrameSnapshot:
    frame_index: int
    points: npt.NDArray[np.float64]
    position: Point3
    target: Point3
    up: Point3
    was_reset: bool = False

    @property
    def point_count(self) -> int:
        return int(self.points.shape[0])


def advance_azimuth(azimuth_deg: float, step_deg: float) -> float:
    """Rotate by `step_deg`, wrapped into [0, 360)."""
    return (azimuth_deg + step_deg) % 360.0


@dataclass
class SimulationContext:
    """
    Everything the per-frame update mutates. Pass this instance to the
    controller; nothing else writes to it.
    """
    config: SimulationConfig = field(default_factory=SimulationConfig)
    trajectory: TrajectoryBuffer = field(default_factory=TrajectoryBuffer)
    pitch: BoundedOscillator = field(init=False)
    camera: CameraState = field(init=False)
    azimuth_deg: float = 0.0
    frame_index: int = 0

    def __post_init__(self) -> None:
        cfg = self.config
        self.pitch = BoundedOscillator(
            value=cfg.pitch_initial,
            minimum=cfg.pitch_min,
            maximum=cfg.pitch_max,
            step_size=cfg.pitch_step,
        )
        self.camera = CameraState(distance=cfg.distance)

    def advance_frame(self) -> FrameSnapshot:
        """
        Run one simulation frame:
        1. Restart the trail if it overflowed.
        2. Integrate the new points.
        3. Rotate azimuth and bounce pitch.
        4. Retarget the camera at the trail centroid and move it on its orbit.
        """
        was_reset = self.trajectory.maybe_reset(self.config.max_points)
        self.trajectory.append_steps(self.config.steps_per_frame)

        self.azimuth_deg = advance_azimuth(self.azimuth_deg, self.config.azimuth_step)
        pitch = self.pitch.step()

        target = self.trajectory.centroid()
        placement = self.camera.update(self.azimuth_deg, pitch, target)

        self.frame_index += 1
        if self.frame_index % 600 == 0:
            logger.debug(
                f"Frame {self.frame_index}: {len(self.trajectory)} points, "
                f"azimuth {self.azimuth_deg:.1f}, pitch {pitch:.1f}"
            )

        return FrameSnapshot(
            frame_index=self.frame_index,
            points=self.trajectory.points(),
            position=placement.position,
            target=target,
            up=placement.up,
            was_reset=was_reset,
        )

