"""Real-time Lorenz attractor visualizer with an orbiting camera."""

__version__ = "0.1.0"
