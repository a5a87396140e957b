"""
Bounded Oscillator
==================
A scalar that walks linearly between a minimum and a maximum and bounces
off each bound. Drives the camera pitch.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class BoundedOscillator:
    """
    Scalar bouncing between `minimum` and `maximum`.

    Overshoot past a bound is mirrored back inside (2*bound - value) and the
    direction flips, so the bounce keeps the overshoot magnitude instead of
    sticking at the bound.

    Precondition (not checked here): 0 < step < maximum - minimum, otherwise a
    single reflection may still land outside the range. See
    SimulationConfig.validate().
    """
    value: float
    minimum: float
    maximum: float
    step_size: float
    direction: float = 1.0

    def step(self) -> float:
        """Advance one step and return the new value."""
        self.value += self.direction * self.step_size
        if self.value > self.maximum:
            self.value = 2.0 * self.maximum - self.value
            self.direction = -1.0
        elif self.value < self.minimum:
            self.value = 2.0 * self.minimum - self.value
            self.direction = 1.0
        return self.value
