"""First-match lookup of aligned counterparts between G and H."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from minaa_core.errors import DimensionMismatchError, GraphShapeError


def is_aligned(score: float, gamma: float) -> bool:
    """An alignment score counts as a match when it is positive and at least gamma."""
    return score > 0 and score >= gamma


def alignment_mask(alignment: np.ndarray, gamma: float) -> np.ndarray:
    """Boolean matrix of the alignment entries that count as matches."""
    scores = np.asarray(alignment, dtype=float)
    return (scores > 0) & (scores >= gamma)


def square_adjacency(adjacency, graph: str) -> np.ndarray:
    """Return the adjacency as an array, rejecting non-square input."""
    matrix = np.asarray(adjacency)
    if matrix.ndim == 1 and matrix.size == 0:
        matrix = matrix.reshape(0, 0)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise GraphShapeError(
            f"Adjacency matrix of {graph} must be square",
            graph=graph,
            shape=matrix.shape,
        )
    return matrix


def check_alignment_shape(alignment, g_size: int, h_size: int) -> np.ndarray:
    """Return the alignment as a float array of shape (g_size, h_size)."""
    scores = np.asarray(alignment, dtype=float)
    if scores.size == 0 and g_size * h_size == 0:
        scores = scores.reshape(g_size, h_size)
    if scores.shape != (g_size, h_size):
        raise DimensionMismatchError(
            "Alignment matrix does not match the graph sizes",
            expected=(g_size, h_size),
            actual=scores.shape,
        )
    return scores


@dataclass(frozen=True)
class AlignmentIndex:
    """Aligned counterpart of every node, resolved by first match in scan order.

    ``g_to_h[i]`` is the first H column whose score in row i qualifies, and
    ``h_to_g[j]`` the first G row whose score in column j qualifies; ``None``
    marks a node without a match. Alignment matrices are not required to be
    one-to-one, so the two directions are resolved independently.
    """

    g_to_h: Tuple[Optional[int], ...]
    h_to_g: Tuple[Optional[int], ...]

    @classmethod
    def from_matrix(cls, alignment: np.ndarray, gamma: float = 0.0) -> "AlignmentIndex":
        mask = alignment_mask(alignment, gamma)
        if mask.ndim == 1 and mask.size == 0:
            mask = mask.reshape(0, 0)
        if mask.ndim != 2:
            raise DimensionMismatchError("Alignment matrix must be two-dimensional", actual=mask.shape)

        g_to_h = tuple(
            int(np.argmax(row)) if row.any() else None for row in mask
        )
        h_to_g = tuple(
            int(np.argmax(column)) if column.any() else None for column in mask.T
        )
        return cls(g_to_h=g_to_h, h_to_g=h_to_g)

    @property
    def aligned_pairs(self) -> int:
        """Number of G nodes with an aligned counterpart."""
        return sum(1 for j in self.g_to_h if j is not None)

    def g_label(self, node: int, g_labels, h_labels) -> str:
        """Label of a G node in the merged graph: fused when aligned, plain otherwise."""
        partner = self.g_to_h[node]
        if partner is None:
            return g_labels[node]
        return g_labels[node] + h_labels[partner]

    def h_label(self, node: int, g_labels, h_labels) -> str:
        """Label of the merged node an H node belongs to.

        A matched H node resolves to the merged node of its first-match G
        row. That node is fused with the row's own first column, which need
        not be this H node when the row has several qualifying scores.
        """
        partner = self.h_to_g[node]
        if partner is None:
            return h_labels[node]
        return self.g_label(partner, g_labels, h_labels)
