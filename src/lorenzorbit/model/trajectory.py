"""
Trajectory Buffer
=================
Holds the simulated path of the attractor as an ordered, growable sequence
of 3D points, plus the centroid estimator used as the camera target.

Why is this file needed?
------------------------
1. Growth: New points are produced by the integrator and appended in
   simulation-time order.
2. Reset policy: Once the trail exceeds its cap the whole buffer is replaced
   by the seed point. This is a hard restart, not a sliding window, and
   produces a sawtooth in trail length over time.
3. Centroid: The mean of all points is the camera's look-at target.

Classes:
    TrajectoryBuffer: The trail container.
Functions:
    compute_centroid: Full-pass arithmetic mean of a point set.
"""
from __future__ import annotations

import logging
from typing import Iterator, TYPE_CHECKING

import numpy as np

from lorenzorbit.config import SEED_POINT
from lorenzorbit.model.attractor import LorenzParameters, DEFAULT_PARAMETERS, lorenz_step
from lorenzorbit.model.geometry_primitives import Point3

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

SEED = Point3(*SEED_POINT)
_INITIAL_CAPACITY = 1024


def compute_centroid(points: npt.ArrayLike) -> Point3:
    """
    Unweighted arithmetic mean of all points.

    Args:
        points: (N, 3) array (or sequence of Point3 / xyz triples).

    Raises:
        ValueError: If the point set is empty. The trail is never empty by
            construction, so this signals a broken invariant.
    """
    if isinstance(points, np.ndarray):
        arr = points.astype(np.float64, copy=False)
    else:
        arr = np.array([tuple(p) for p in points], dtype=np.float64)
    if arr.size == 0:
        raise ValueError("Cannot find center of an empty point set.")
    arr = arr.reshape(-1, 3)
    return Point3.from_iterable(arr.sum(axis=0) / arr.shape[0])


class TrajectoryBuffer:
    """
    Ordered trail of Point3 stored in a growable (capacity, 3) float64 array.

    Invariant: len(self) >= 1, and right after a reset the only element is
    the seed point (1, 1, 1).
    """

    def __init__(self, params: LorenzParameters = DEFAULT_PARAMETERS) -> None:
        self.params = params
        self._data: npt.NDArray[np.float64] = np.empty((_INITIAL_CAPACITY, 3), dtype=np.float64)
        self._length: int = 0
        # Running coordinate sum so centroid() does not rescan the trail
        self._sum: npt.NDArray[np.float64] = np.zeros(3, dtype=np.float64)
        self.reset_count: int = 0
        self._seed()

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Point3]:
        for row in self._data[:self._length]:
            yield Point3.from_iterable(row)

    def __getitem__(self, index: int) -> Point3:
        if not -self._length <= index < self._length:
            raise IndexError(f"Trail index {index} out of range (length {self._length}).")
        return Point3.from_iterable(self._data[index % self._length])

    def last(self) -> Point3:
        """Most recent point of the trail."""
        if self._length == 0:
            raise RuntimeError("Trajectory buffer is empty; the seed invariant was violated.")
        return Point3.from_iterable(self._data[self._length - 1])

    def points(self) -> npt.NDArray[np.float64]:
        """
        Read-only (N, 3) view of the trail in simulation-time order.

        The view is only valid until the next append or reset.
        """
        view = self._data[:self._length]
        view.flags.writeable = False
        return view

    def append_steps(self, n: int) -> None:
        """
        Integrate `n` steps from the current last point, appending every
        intermediate state. Never removes points.

        Raises:
            RuntimeError: If the buffer is empty (unreachable while the seed
                invariant holds).
        """
        current = self.last()
        if n <= 0:
            return
        self._reserve(self._length + n)
        start = self._length
        for i in range(n):
            current = lorenz_step(current, self.params)
            self._data[start + i] = (current.x, current.y, current.z)
        self._sum += self._data[start:start + n].sum(axis=0)
        self._length += n

    def maybe_reset(self, max_len: int) -> bool:
        """
        Replace the whole trail with the seed point if it is longer than
        `max_len`. Leaves the buffer untouched otherwise.

        Returns:
            True if a reset happened.
        """
        if self._length <= max_len:
            return False
        logger.info(f"Trail reached {self._length} points (cap {max_len}), restarting from seed.")
        self._data = np.empty((_INITIAL_CAPACITY, 3), dtype=np.float64)
        self._length = 0
        self._sum = np.zeros(3, dtype=np.float64)
        self._seed()
        self.reset_count += 1
        return True

    def centroid(self) -> Point3:
        """Mean of all trail points, from the running sum."""
        if self._length == 0:
            raise ValueError("Cannot find center of an empty point set.")
        return Point3.from_iterable(self._sum / self._length)

    # ------------------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------------------

    def _seed(self) -> None:
        self._data[0] = SEED.to_tuple()
        self._length = 1
        self._sum += self._data[0]

    def _reserve(self, size: int) -> None:
        capacity = self._data.shape[0]
        if size <= capacity:
            return
        while capacity < size:
            capacity *= 2
        grown = np.empty((capacity, 3), dtype=np.float64)
        grown[:self._length] = self._data[:self._length]
        self._data = grown
