"""Bridged graph: G and H side by side, stitched at their aligned nodes."""

from __future__ import annotations

import logging

import numpy as np

from minaa_fusion.index import alignment_mask, check_alignment_shape, square_adjacency

LOGGER = logging.getLogger(__name__)


def _without_self_loops(adjacency: np.ndarray) -> np.ndarray:
    edges = (adjacency > 0).astype(int)
    np.fill_diagonal(edges, 0)
    return edges


def bridge(g_adj, h_adj, alignment, gamma: float = 0.0) -> np.ndarray:
    """Build the bridged adjacency matrix of G and H.

    The result is the (|G|+|H|)-square block matrix::

        [ G      A ]
        [ A^T    H ]

    where G and H are the 0/1 edge matrices of the inputs with self-loops
    removed, and A holds 1 for every aligned pair (score > 0 and >= gamma).

    Args:
        g_adj: Adjacency matrix of G
        h_adj: Adjacency matrix of H
        alignment: |G| x |H| alignment scores
        gamma: Minimum score for an alignment entry to count as a match

    Returns:
        Unweighted 0/1 int matrix of size |G|+|H|
    """
    g = square_adjacency(g_adj, "G")
    h = square_adjacency(h_adj, "H")
    g_size, h_size = len(g), len(h)
    scores = check_alignment_shape(alignment, g_size, h_size)

    bridged = np.zeros((g_size + h_size, g_size + h_size), dtype=int)
    links = alignment_mask(scores, gamma).astype(int)

    bridged[:g_size, :g_size] = _without_self_loops(g)
    bridged[g_size:, g_size:] = _without_self_loops(h)
    bridged[:g_size, g_size:] = links
    bridged[g_size:, :g_size] = links.T

    LOGGER.info(f"Bridged {g_size}+{h_size} nodes with {int(links.sum())} alignment edges")
    return bridged
