"""Merged graph: aligned node pairs collapsed, every edge tagged by provenance."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Sequence

import numpy as np

from minaa_fusion.index import AlignmentIndex, check_alignment_shape, square_adjacency
from minaa_fusion.labels import check_labels
from minaa_fusion.vocabulary import LabelVocabulary, assign

LOGGER = logging.getLogger(__name__)


class EdgeProvenance(IntEnum):
    """Which input graph(s) an edge of the merged graph comes from."""

    NONE = 0
    G_ONLY = 1
    H_ONLY = 2
    BOTH = 3


def _neighbors(adjacency: np.ndarray, node: int) -> list[int]:
    """Neighbours of a node in row order, self-loop excluded."""
    return [int(k) for k in np.flatnonzero(adjacency[node] > 0) if k != node]


def merge(
    g_adj,
    h_adj,
    alignment,
    g_labels: Sequence[str],
    h_labels: Sequence[str],
    merged_labels: Sequence[str],
    gamma: float = 0.0,
) -> np.ndarray:
    """Build the merged adjacency matrix of G and H.

    Aligned node pairs become a single node labelled ``g_label + h_label``.
    Edges are coded with :class:`EdgeProvenance`: 1 when only G has the
    edge, 2 when only H has it, 3 when both do. Counterparts are resolved by
    first match in scan order; an H node matched by a row that fused with an
    earlier column folds into that row's merged node.

    Args:
        g_adj: Adjacency matrix of G
        h_adj: Adjacency matrix of H
        alignment: |G| x |H| alignment scores
        g_labels: Labels of G, by node
        h_labels: Labels of H, by node
        merged_labels: Vocabulary from :func:`merge_labels`
        gamma: Minimum score for an alignment entry to count as a match

    Returns:
        Symmetric int matrix indexed by ``merged_labels``
    """
    g = square_adjacency(g_adj, "G")
    h = square_adjacency(h_adj, "H")
    check_labels(g_labels, len(g), "G")
    check_labels(h_labels, len(h), "H")
    scores = check_alignment_shape(alignment, len(g), len(h))

    index = AlignmentIndex.from_matrix(scores, gamma)
    vocabulary = (
        merged_labels if isinstance(merged_labels, LabelVocabulary) else LabelVocabulary(merged_labels)
    )
    merged = np.zeros((len(vocabulary), len(vocabulary)), dtype=int)

    def g_label(node: int) -> str:
        return index.g_label(node, g_labels, h_labels)

    def h_label(node: int) -> str:
        return index.h_label(node, g_labels, h_labels)

    for gi in range(len(g)):
        hj = index.g_to_h[gi]

        if hj is None:
            for gj in _neighbors(g, gi):
                assign(merged, vocabulary, g_labels[gi], g_label(gj), EdgeProvenance.G_ONLY)
            continue

        fused = g_label(gi)

        # Edges seen from G
        for gk in _neighbors(g, gi):
            hl = index.g_to_h[gk]
            if hl is None:
                assign(merged, vocabulary, fused, g_labels[gk], EdgeProvenance.G_ONLY)
            elif hl != hj and h[hj, hl] > 0:
                assign(merged, vocabulary, fused, g_label(gk), EdgeProvenance.BOTH)
            else:
                assign(merged, vocabulary, fused, g_label(gk), EdgeProvenance.G_ONLY)

        # Edges seen from H; those G also has were coded above
        for hk in _neighbors(h, hj):
            gl = index.h_to_g[hk]
            if gl is None:
                assign(merged, vocabulary, fused, h_labels[hk], EdgeProvenance.H_ONLY)
            elif gl == gi or not g[gi, gl] > 0:
                # H nodes sharing this row's merged node add no edge
                if h_label(hk) != fused:
                    assign(merged, vocabulary, fused, h_label(hk), EdgeProvenance.H_ONLY)

    for hi in range(len(h)):
        if index.h_to_g[hi] is not None:
            continue
        for hj in _neighbors(h, hi):
            assign(merged, vocabulary, h_labels[hi], h_label(hj), EdgeProvenance.H_ONLY)

    LOGGER.info(
        f"Merged {len(g)}+{len(h)} nodes into {len(vocabulary)} "
        f"({index.aligned_pairs} aligned pairs)"
    )
    return merged
