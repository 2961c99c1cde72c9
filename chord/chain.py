import logging
import math
import numbers

import numpy as np

from .MassPoint import MassPoint
from .Vec2 import Vec2

logger = logging.getLogger(__name__)

# height step per segment of the tent profile
LINEAR_SLOPE = 0.375
SINE_AMPLITUDE = 5.0


def _check_arguments(n, k):
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise ValueError(f"segment count must be an integer, got {n!r}")
    if n < 2:
        raise ValueError(f"segment count must be at least 2, got {n}")
    k = float(k)
    if not math.isfinite(k):
        raise ValueError(f"stiffness must be finite, got {k}")
    return int(n), k


class Chain:
    def __init__(self, points, stiffness):
        """
        A chord of mass points joined by springs to their index neighbours.

        :param points: MassPoints in spatial order; the first and last must be fixed.
        :param stiffness: Multiplier turning summed neighbour offsets into acceleration.
        """
        points = list(points)
        if len(points) < 2:
            raise ValueError("a chain needs at least two points")
        if not (points[0].fixed and points[-1].fixed):
            raise ValueError("both end points of a chain must be fixed")
        self.stiffness = float(stiffness)
        self._points = points

    @classmethod
    def linear(cls, n, k):
        """Tent shaped chain: rises from the left anchor, peaks at n/2, falls to the right one."""
        n, k = _check_arguments(n, k)
        points = [MassPoint(0.0, 0.0, True)]
        for i in range(1, n // 2):
            points.append(MassPoint(i, i * LINEAR_SLOPE))
        for i in range(n // 2, n):
            points.append(MassPoint(i, (n - i) * LINEAR_SLOPE))
        points.append(MassPoint(n, 0.0, True))
        logger.debug("Built linear chain: %d points, stiffness=%g", len(points), k)
        return cls(points, k)

    @classmethod
    def sine(cls, n, k):
        """Half sine wave between the two anchors."""
        n, k = _check_arguments(n, k)
        points = [MassPoint(0.0, 0.0, True)]
        for i in range(1, n):
            points.append(MassPoint(i, math.sin(math.pi * i / n) * SINE_AMPLITUDE))
        points.append(MassPoint(n, 0.0, True))
        logger.debug("Built sine chain: %d points, stiffness=%g", len(points), k)
        return cls(points, k)

    @classmethod
    def from_profile(cls, n, k, profile="linear"):
        try:
            build = PROFILES[profile]
        except KeyError:
            raise ValueError(f"unknown profile {profile!r}, expected one of {sorted(PROFILES)}") from None
        return build(n, k)

    @property
    def points(self):
        """
        The MassPoints in index order. The tuple cannot be reordered but the
        points in it are the live, mutable ones; renderers should prefer positions().
        """
        return tuple(self._points)

    def positions(self):
        return np.array([p.pos.as_tuple() for p in self._points], dtype=np.float64)

    def tick(self):
        """
        Advance the chain by one step.

        Every acceleration is computed from the current positions before any
        point moves; only then are the free points integrated (velocity first,
        then position).
        """
        points = self._points
        last = len(points) - 1

        for i, p in enumerate(points):
            force = Vec2(0.0, 0.0)
            if i > 0:
                force = force + p.relative_position(points[i - 1])
            if i < last:
                force = force + p.relative_position(points[i + 1])
            force.scale(self.stiffness)
            p.set_acceleration(force)

        for p in points:
            if p.fixed:
                continue
            p.accelerate()
            p.displace()

    def __len__(self):
        return len(self._points)

    def __repr__(self):
        return f"<{self.__class__.__name__} points={len(self._points)} stiffness={self.stiffness}>"


PROFILES = {
    "linear": Chain.linear,
    "sine": Chain.sine,
    "sinusoidal": Chain.sine,
}
