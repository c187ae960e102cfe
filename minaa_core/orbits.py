"""Orbit reference table and per-orbit importance weights.

The reference magnitudes are the orbit-dependency counts used by GRAAL:
an orbit that depends on many other orbits is less informative on its own
and therefore receives a smaller weight.
"""

from __future__ import annotations

import math

import numpy as np

from minaa_core.errors import OrbitIndexError

ORBIT_COUNT = 73

ORBIT_REFERENCE = np.array(
    [
        1, 2, 2, 2, 3, 4, 3, 3, 4, 3,
        4, 4, 4, 4, 3, 4, 6, 5, 4, 5,
        6, 6, 4, 4, 4, 5, 7, 4, 6, 6,
        7, 4, 6, 6, 6, 5, 6, 7, 7, 5,
        7, 6, 7, 6, 5, 5, 6, 8, 7, 6,
        6, 8, 6, 9, 5, 6, 4, 6, 6, 7,
        8, 6, 6, 8, 7, 6, 7, 7, 8, 5,
        6, 6, 4,
    ],
    dtype=float,
)
ORBIT_REFERENCE.setflags(write=False)


def weight(orbit_index: int) -> float:
    """Return the weight of an orbit, in (0, 1].

    Args:
        orbit_index: Orbit position in the signature (0 is the degree)

    Returns:
        ``1 - log10(reference) / log10(73)``

    Raises:
        OrbitIndexError: If the index is outside the orbit table
    """
    if not 0 <= orbit_index < ORBIT_COUNT:
        raise OrbitIndexError(orbit_index)
    return 1 - math.log10(ORBIT_REFERENCE[orbit_index]) / math.log10(ORBIT_COUNT)


ORBIT_WEIGHTS = np.array([weight(i) for i in range(ORBIT_COUNT)], dtype=float)
ORBIT_WEIGHTS.setflags(write=False)

TOTAL_WEIGHT = float(ORBIT_WEIGHTS.sum())
