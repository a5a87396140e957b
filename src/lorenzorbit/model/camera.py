"""
Orbit Camera
============
Converts orbital parameters (distance, azimuth, pitch, target) into a
world-space eye position. The camera sits on a sphere of radius `distance`
around the target; azimuth rotates about the vertical (Y) axis and pitch is
the elevation above the XZ plane.

The fixed world-up (0, 1, 0) is valid while |pitch| < 90 degrees.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import math

from lorenzorbit.config import CAMERA_DISTANCE, CAMERA_INITIAL_POSITION
from lorenzorbit.model.geometry_primitives import Point3, ORIGIN, WORLD_UP


@dataclass(frozen=True)
class CameraPlacement:
    position: Point3
    up: Point3


def place(distance: float, azimuth_deg: float, pitch_deg: float, target: Point3) -> CameraPlacement:
    """Eye position on the orbit sphere around `target`, plus the up vector."""
    azimuth = math.radians(azimuth_deg)
    pitch = math.radians(pitch_deg)
    offset = Point3(
        distance * math.cos(azimuth) * math.cos(pitch),
        distance * math.sin(pitch),
        distance * math.sin(azimuth) * math.cos(pitch),
    )
    return CameraPlacement(position=target + offset, up=WORLD_UP)


@dataclass
class CameraState:
    """
    Render camera owned by the simulation context.

    `position` is derived by update() and never set from outside.
    """
    distance: float = CAMERA_DISTANCE
    position: Point3 = field(default_factory=lambda: Point3(*CAMERA_INITIAL_POSITION))
    target: Point3 = ORIGIN
    up: Point3 = WORLD_UP
    azimuth_deg: float = 0.0
    pitch_deg: float = 0.0

    def update(self, azimuth_deg: float, pitch_deg: float, target: Point3) -> CameraPlacement:
        """Retarget the camera and move it onto the orbit."""
        self.azimuth_deg = azimuth_deg
        self.pitch_deg = pitch_deg
        self.target = target
        placement = place(self.distance, azimuth_deg, pitch_deg, target)
        self.position = placement.position
        self.up = placement.up
        return placement
