"""
Configuration & Global Constants
================================
This module serves as the central registry for simulation constants and the
startup configuration of the visualizer.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (seed point, trail cap, camera
   orbit) from being scattered throughout the code.
2. Startup: The CLI builds a single SimulationConfig from these defaults and
   every core object is constructed from it.

Exports:
    SimulationConfig: Dataclass bundling all tunable startup parameters.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging

logger = logging.getLogger(__name__)

# --- Lorenz system ---
LORENZ_SIGMA: float = 10.0
LORENZ_RHO: float = 28.0
LORENZ_BETA: float = 8.0 / 3.0
LORENZ_DT: float = 0.001

# --- Trail ---
SEED_POINT: tuple[float, float, float] = (1.0, 1.0, 1.0)
MAX_TRAIL_POINTS: int = 200_000
STEPS_PER_FRAME: int = 30

# --- Camera orbit ---
CAMERA_DISTANCE: float = 30.0
CAMERA_INITIAL_POSITION: tuple[float, float, float] = (0.0, 10.0, 10.0)
CAMERA_FOV_DEG: float = 90.0
AZIMUTH_STEP_DEG: float = 0.1
PITCH_INITIAL_DEG: float = 0.0
PITCH_MIN_DEG: float = -75.0
PITCH_MAX_DEG: float = 75.0
PITCH_STEP_DEG: float = 0.1

# --- Rendering ---
TARGET_FPS: int = 60
BACKGROUND_COLOR: str = "black"
TRAIL_COLOR: str = "red"
TRAIL_LINE_WIDTH: float = 1.0
WINDOW_TITLE: str = "Lorenz Attractor"


@dataclass
class SimulationConfig:
    """Startup parameters for one visualizer run."""
    max_points: int = MAX_TRAIL_POINTS
    steps_per_frame: int = STEPS_PER_FRAME
    distance: float = CAMERA_DISTANCE
    azimuth_step: float = AZIMUTH_STEP_DEG
    pitch_initial: float = PITCH_INITIAL_DEG
    pitch_min: float = PITCH_MIN_DEG
    pitch_max: float = PITCH_MAX_DEG
    pitch_step: float = PITCH_STEP_DEG
    fps: int = TARGET_FPS

    @property
    def frame_interval_ms(self) -> int:
        """Timer interval for the requested frame rate."""
        return max(1, 1000 // self.fps)

    def validate(self) -> None:
        """
        Check the construction preconditions of the core objects.

        Raises:
            ValueError: If any parameter is out of its valid range.
        """
        if self.max_points < 1:
            raise ValueError(f"max_points must be >= 1, got {self.max_points}.")
        if self.steps_per_frame < 0:
            raise ValueError(f"steps_per_frame must be >= 0, got {self.steps_per_frame}.")
        if self.distance <= 0.0:
            raise ValueError(f"distance must be positive, got {self.distance}.")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}.")
        if not -90.0 < self.pitch_min < self.pitch_max < 90.0:
            raise ValueError(
                f"Pitch range must lie strictly inside (-90, 90), got [{self.pitch_min}, {self.pitch_max}]."
            )
        if not self.pitch_min <= self.pitch_initial <= self.pitch_max:
            raise ValueError(f"pitch_initial {self.pitch_initial} is outside the pitch range.")
        if not 0.0 < self.pitch_step < self.pitch_max - self.pitch_min:
            raise ValueError(
                f"pitch_step must be positive and smaller than the pitch range, got {self.pitch_step}."
            )
        logger.debug(f"Configuration validated: {self}")
