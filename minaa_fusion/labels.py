"""Label vocabulary for the merged graph."""

from __future__ import annotations

import logging
from collections import Counter
from typing import List, Sequence

import numpy as np

from minaa_core.errors import DimensionMismatchError, DuplicateLabelError
from minaa_fusion.index import AlignmentIndex, check_alignment_shape

LOGGER = logging.getLogger(__name__)


def check_labels(labels: Sequence[str], size: int, graph: str) -> None:
    """Ensure a graph has exactly one label per node."""
    if len(labels) != size:
        raise DimensionMismatchError(
            f"{graph} has {size} nodes but {len(labels)} labels",
            expected=size,
            actual=len(labels),
        )


def merge_labels(
    alignment: np.ndarray,
    g_labels: Sequence[str],
    h_labels: Sequence[str],
    gamma: float = 0.0,
) -> List[str]:
    """Build the ordered label vocabulary of the merged graph.

    Each G node contributes its label fused with the label of its first
    aligned H node in column order, or its own label when it has none. H
    nodes that no G node is aligned to are appended afterwards, in order.
    When a row or column has several qualifying scores the first one in scan
    order wins.

    Merged labels must be unique, so G and H need disjoint label spaces:
    networks over the same node names (a shared gene set, say) should be
    prefixed first, e.g. ``["g:" + label for label in g_labels]``. Two
    unaligned nodes named alike otherwise raise DuplicateLabelError.

    Args:
        alignment: |G| x |H| alignment scores
        g_labels: Labels of G, by node
        h_labels: Labels of H, by node
        gamma: Minimum score for an alignment entry to count as a match

    Returns:
        Labels of the merged graph's nodes, in matrix order

    Raises:
        DuplicateLabelError: If two merged nodes end up with the same label
    """
    scores = check_alignment_shape(alignment, len(g_labels), len(h_labels))
    index = AlignmentIndex.from_matrix(scores, gamma)

    merged = [index.g_label(i, g_labels, h_labels) for i in range(len(g_labels))]
    merged.extend(
        h_labels[j] for j, partner in enumerate(index.h_to_g) if partner is None
    )

    duplicates = sorted(label for label, count in Counter(merged).items() if count > 1)
    if duplicates:
        raise DuplicateLabelError(duplicates)

    LOGGER.debug(f"Merged vocabulary: {len(merged)} labels, {index.aligned_pairs} fused")
    return merged
