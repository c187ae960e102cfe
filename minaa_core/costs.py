"""Blending of topological and biological cost matrices."""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from minaa_core.errors import DimensionMismatchError

LOGGER = logging.getLogger(__name__)


def combine(
    topo_costs: np.ndarray,
    bio_costs: Optional[np.ndarray],
    beta: float,
) -> np.ndarray:
    """Combine the topological and biological cost matrices.

    Args:
        topo_costs: Topological cost matrix, |G| x |H|
        bio_costs: Biological cost matrix of the same shape, or None/empty when absent
        beta: Share of the topological cost; (1 - beta) goes to the biological cost

    Returns:
        ``beta * topo + (1 - beta) * bio``, or ``topo_costs`` itself when there
        is no biological data or beta is outside [0, 1] (NaN included)

    Raises:
        DimensionMismatchError: If the two matrices differ in shape
    """
    if bio_costs is None or np.size(bio_costs) == 0:
        return topo_costs

    if not 0 <= beta <= 1:
        LOGGER.warning("Beta must be between 0 and 1. Defaulting to beta = 1.")
        return topo_costs

    topo = np.asarray(topo_costs, dtype=float)
    bio = np.asarray(bio_costs, dtype=float)
    if topo.shape != bio.shape:
        raise DimensionMismatchError(
            "Biological cost matrix does not match the topological cost matrix",
            expected=topo.shape,
            actual=bio.shape,
        )

    LOGGER.info(f"Combining cost matrices {topo.shape[0]}x{topo.shape[1]} with beta={beta:.3f}")
    return beta * topo + (1 - beta) * bio


def normalize(matrix: np.ndarray) -> np.ndarray:
    """Rescale the entries of a matrix into [0, 1].

    Negative matrices are first shifted up by the magnitude of their minimum,
    then every entry is divided by the maximum. A matrix whose maximum is 0
    after shifting comes back as all zeros.
    """
    values = np.array(matrix, dtype=float)
    if values.size == 0:
        return values

    low = values.min()
    high = values.max()

    # Make nonnegative
    if low < 0:
        values += abs(low)
        high += abs(low)

    if high == 0:
        LOGGER.warning("Matrix has no positive entries after shifting; normalizing to zeros")
        return np.zeros_like(values)

    return values / high
