"""
Lorenz Attractor Integrator
===========================
Advances a 3D state by one fixed time step of the Lorenz system using
explicit Euler integration.

    x' = x + dt * sigma * (y - x)
    y' = y + dt * (x * (rho - z) - y)
    z' = z + dt * (x * y - beta * z)

All three derivatives are evaluated from the same input point before any
coordinate is advanced (Jacobi style, not Gauss-Seidel).
"""
from __future__ import annotations

from dataclasses import dataclass

from lorenzorbit.config import LORENZ_SIGMA, LORENZ_RHO, LORENZ_BETA, LORENZ_DT
from lorenzorbit.model.geometry_primitives import Point3


@dataclass(frozen=True)
class LorenzParameters:
    sigma: float = LORENZ_SIGMA
    rho: float = LORENZ_RHO
    beta: float = LORENZ_BETA
    dt: float = LORENZ_DT


DEFAULT_PARAMETERS = LorenzParameters()


def lorenz_derivative(
        x: float, y: float, z: float,
        params: LorenzParameters = DEFAULT_PARAMETERS
) -> tuple[float, float, float]:
    """Right-hand side of the Lorenz ODE at (x, y, z)."""
    dx = params.sigma * (y - x)
    dy = x * (params.rho - z) - y
    dz = x * y - params.beta * z
    return dx, dy, dz


def lorenz_step(current: Point3, params: LorenzParameters = DEFAULT_PARAMETERS) -> Point3:
    """
    Pure function: returns the state one time step after `current`.

    Non-finite results are not treated as errors; a diverging trajectory
    simply propagates inf/nan.
    """
    x, y, z = current.x, current.y, current.z
    dx, dy, dz = lorenz_derivative(x, y, z, params)
    return Point3(
        x + params.dt * dx,
        y + params.dt * dy,
        z + params.dt * dz,
    )
