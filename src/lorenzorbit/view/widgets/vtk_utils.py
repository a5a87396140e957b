"""
VTK and Geometry Utilities
Helper functions for converting trail data into PyVista meshes.
"""
import numpy as np
import numpy.typing as npt
import pyvista as pv

import logging

logger = logging.getLogger(__name__)


class VtkUtils:
    @staticmethod
    def as_points_xyz(a: npt.ArrayLike) -> npt.NDArray[np.float64]:
        """
        Copy the input into a writable, contiguous (N, 3) float64 array.

        Raises:
            ValueError: If the input cannot be shaped as (N, 3).
        """
        arr = np.array(a, dtype=np.float64, copy=True)
        if arr.ndim != 2 or arr.shape[1] != 3:
            raise ValueError(f"Expected shape (N, 3), got {arr.shape}.")
        return arr

    @staticmethod
    def polyline_connectivity(n_points: int) -> npt.NDArray[np.int64]:
        """
        VTK cell array for one polyline through points 0..n-1, i.e. the
        segments (i-1, i) for every i >= 1. Empty for fewer than two points.
        """
        if n_points < 2:
            return np.empty(0, dtype=np.int64)
        return np.concatenate(([n_points], np.arange(n_points, dtype=np.int64)))

    @staticmethod
    def polyline_from_points(points: npt.ArrayLike) -> pv.PolyData:
        """
        Build a PolyData polyline joining consecutive trail points.

        The mesh holds line cells only, no vertex cells.
        """
        xyz = VtkUtils.as_points_xyz(points)
        poly = pv.PolyData()
        poly.points = xyz
        lines = VtkUtils.polyline_connectivity(xyz.shape[0])
        if lines.size:
            poly.lines = lines
        return poly
