"""Topological cost between nodes of two graphs from their graphlet degree vectors."""

from __future__ import annotations

import logging
import math
from typing import Iterable, Sequence

import numpy as np

from minaa_core.errors import SignatureError
from minaa_core.orbits import ORBIT_COUNT, ORBIT_WEIGHTS, TOTAL_WEIGHT, weight

LOGGER = logging.getLogger(__name__)


def as_signature(values: Sequence[int]) -> np.ndarray:
    """Validate a single graphlet degree vector.

    Args:
        values: Orbit counts of one node, degree first

    Returns:
        Read-only int64 array of shape (73,)

    Raises:
        SignatureError: If the vector does not hold exactly 73 non-negative counts
    """
    signature = np.array(values, dtype=np.int64)
    if signature.ndim != 1 or signature.shape[0] != ORBIT_COUNT:
        raise SignatureError(
            f"A signature must hold exactly {ORBIT_COUNT} orbit counts",
            length=int(signature.size),
        )
    if (signature < 0).any():
        raise SignatureError("Orbit counts must be non-negative")
    signature.setflags(write=False)
    return signature


def as_signatures(rows: Iterable[Sequence[int]] | np.ndarray) -> np.ndarray:
    """Validate the signatures of every node of one graph.

    Args:
        rows: One graphlet degree vector per node, in adjacency-row order

    Returns:
        Read-only int64 array of shape (n, 73); (0, 73) for an empty graph

    Raises:
        SignatureError: If any row is not a valid signature
    """
    if not isinstance(rows, np.ndarray):
        rows = list(rows)
        for node, row in enumerate(rows):
            if len(row) != ORBIT_COUNT:
                raise SignatureError(
                    f"A signature must hold exactly {ORBIT_COUNT} orbit counts",
                    node=node,
                    length=len(row),
                )

    signatures = np.array(rows, dtype=np.int64)
    if signatures.size == 0:
        signatures = np.zeros((0, ORBIT_COUNT), dtype=np.int64)
    if signatures.ndim != 2 or signatures.shape[1] != ORBIT_COUNT:
        raise SignatureError(
            f"Signatures must form an (n, {ORBIT_COUNT}) matrix, got shape {signatures.shape}"
        )

    negative = np.argwhere(signatures < 0)
    if negative.size:
        raise SignatureError("Orbit counts must be non-negative", node=int(negative[0][0]))

    signatures.setflags(write=False)
    return signatures


def distance(v_count: int, u_count: int, orbit_index: int) -> float:
    """Weighted, log-scaled difference between two counts of the same orbit."""
    diff = abs(math.log10(v_count + 1) - math.log10(u_count + 1))
    return diff / math.log10(max(v_count, u_count) + 2) * weight(orbit_index)


def similarity(sig_v: Sequence[int], sig_u: Sequence[int]) -> float:
    """Signature similarity of two nodes; 1 means identical signatures.

    The value is ``1 - (sum of orbit distances) / (sum of orbit weights)``
    and is not clamped.
    """
    v = as_signature(sig_v)
    u = as_signature(sig_u)
    dist = sum(distance(int(v[i]), int(u[i]), i) for i in range(ORBIT_COUNT))
    return 1 - dist / TOTAL_WEIGHT


def _degree_term(deg_v: float, deg_u: float, g_max_degree: int, h_max_degree: int) -> float:
    total = g_max_degree + h_max_degree
    if total == 0:
        return 0.0
    return (deg_v + deg_u) / total


def cost(
    sig_v: Sequence[int],
    sig_u: Sequence[int],
    g_max_degree: int,
    h_max_degree: int,
    *,
    alpha: float,
) -> float:
    """Cost of aligning node v of G with node u of H; lower is a better match.

    Args:
        sig_v: Signature of the G node
        sig_u: Signature of the H node
        g_max_degree: Highest degree in G
        h_max_degree: Highest degree in H
        alpha: Share of the signature similarity against the degree term

    Returns:
        ``1 - ((1 - alpha) * degree_term + alpha * similarity)``
    """
    v = as_signature(sig_v)
    u = as_signature(sig_u)
    node_degs = _degree_term(int(v[0]), int(u[0]), g_max_degree, h_max_degree)
    return 1 - ((1 - alpha) * node_degs + alpha * similarity(v, u))


def max_degree(signatures: np.ndarray) -> int:
    """Highest degree (orbit 0) among the given signatures, 0 when there are none."""
    if len(signatures) == 0:
        return 0
    return int(np.max(signatures[:, 0]))


def _similarity_row(v: np.ndarray, h_signatures: np.ndarray, h_logs: np.ndarray) -> np.ndarray:
    """Similarity of one G signature against every H signature."""
    v_logs = np.log10(v + 1.0)
    scale = np.log10(np.maximum(v, h_signatures) + 2.0)
    dist = (np.abs(v_logs - h_logs) / scale) @ ORBIT_WEIGHTS
    return 1 - dist / TOTAL_WEIGHT


def build_cost_matrix(g_signatures, h_signatures, *, alpha: float) -> np.ndarray:
    """Build the dense topological cost matrix between G and H.

    Every cell (i, j) equals ``cost(g_signatures[i], h_signatures[j], ...)``;
    rows are evaluated one G node at a time against all of H.

    Args:
        g_signatures: Signatures of G, one per node
        h_signatures: Signatures of H, one per node
        alpha: Share of the signature similarity against the degree term

    Returns:
        Float array of shape (|G|, |H|)
    """
    g = as_signatures(g_signatures)
    h = as_signatures(h_signatures)

    g_max_deg = max_degree(g)
    h_max_deg = max_degree(h)
    total_max = g_max_deg + h_max_deg

    h_float = h.astype(float)
    h_logs = np.log10(h_float + 1.0)
    h_degrees = h_float[:, 0]

    costs = np.empty((len(g), len(h)), dtype=float)
    for i, v in enumerate(g.astype(float)):
        if total_max:
            node_degs = (v[0] + h_degrees) / total_max
        else:
            node_degs = np.zeros(len(h))
        costs[i] = 1 - ((1 - alpha) * node_degs + alpha * _similarity_row(v, h_float, h_logs))

    LOGGER.info(
        f"Built topological cost matrix {costs.shape[0]}x{costs.shape[1]} "
        f"(alpha={alpha:.3f}, max degrees {g_max_deg}/{h_max_deg})"
    )
    return costs
