"""Edge provenance statistics for a merged graph."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict

import numpy as np

from minaa_fusion.merge import EdgeProvenance

LOGGER = logging.getLogger(__name__)


@dataclass
class MergeSummary:
    """Counts of merged-graph edges by provenance."""

    node_count: int
    aligned_pairs: int
    g_only_edges: int
    h_only_edges: int
    conserved_edges: int
    provenance_distribution: Dict[str, int] = field(default_factory=dict)  # Provenance name -> count

    @property
    def total_edges(self) -> int:
        return self.g_only_edges + self.h_only_edges + self.conserved_edges

    @property
    def edge_conservation(self) -> float:
        """Share of G's projected edges that H corroborates."""
        g_edges = self.conserved_edges + self.g_only_edges
        return self.conserved_edges / g_edges if g_edges else 0.0


def summarize_merge(merged: np.ndarray, aligned_pairs: int = 0) -> MergeSummary:
    """Count each undirected edge of a merged graph once, by provenance code.

    Args:
        merged: Symmetric provenance-coded matrix from :func:`merge`
        aligned_pairs: Number of fused nodes, reported as-is

    Returns:
        MergeSummary for the matrix
    """
    matrix = np.asarray(merged)
    upper = matrix[np.triu_indices(len(matrix), k=1)] if matrix.size else np.zeros(0, dtype=int)

    distribution = {
        provenance.name: int(np.count_nonzero(upper == provenance.value))
        for provenance in EdgeProvenance
        if provenance is not EdgeProvenance.NONE
    }

    summary = MergeSummary(
        node_count=len(matrix),
        aligned_pairs=aligned_pairs,
        g_only_edges=distribution[EdgeProvenance.G_ONLY.name],
        h_only_edges=distribution[EdgeProvenance.H_ONLY.name],
        conserved_edges=distribution[EdgeProvenance.BOTH.name],
        provenance_distribution=distribution,
    )

    LOGGER.info(
        f"Merged graph: {summary.node_count} nodes, {summary.total_edges} edges "
        f"({summary.conserved_edges} conserved, edge conservation {summary.edge_conservation:.3f})"
    )
    return summary
