"""Alignment pipeline: costs → external aligner → bridged and merged graphs."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Protocol

import numpy as np
import pandas as pd
import structlog
import yaml
from pydantic import ValidationError as PydanticValidationError

from minaa_core.costs import combine, normalize
from minaa_core.errors import DimensionMismatchError
from minaa_core.signatures import as_signatures, build_cost_matrix
from minaa_fusion.bridge import bridge
from minaa_fusion.index import AlignmentIndex, alignment_mask, square_adjacency
from minaa_fusion.labels import check_labels, merge_labels
from minaa_fusion.merge import merge
from minaa_fusion.quality import MergeSummary, summarize_merge
from minaa_fusion.vocabulary import LabelVocabulary
from minaa_orchestrator.errors import AlignerError, ParameterFileError
from minaa_orchestrator.models import AlignmentParameters, GraphData

# Configure structured logging
structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer() if sys.stderr.isatty() else structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
    context_class=dict,
    logger_factory=structlog.PrintLoggerFactory(),
    cache_logger_on_first_use=False,
)

logger = structlog.get_logger(__name__)


class Aligner(Protocol):
    """Contract for the external node-assignment algorithm."""

    name: str

    def align(self, costs: np.ndarray) -> np.ndarray:
        """Return a |G| x |H| alignment matrix with scores in [0, 1]."""


@dataclass
class AlignmentArtifacts:
    g_labels: List[str]
    h_labels: List[str]
    costs: np.ndarray
    combined_costs: np.ndarray
    alignment: np.ndarray
    bridged: np.ndarray
    merged: np.ndarray
    merged_labels: List[str]
    summary: MergeSummary
    gamma: float = 0.0

    def cost_frame(self) -> pd.DataFrame:
        """Combined cost matrix with G labels as rows and H labels as columns."""
        return pd.DataFrame(self.combined_costs, index=self.g_labels, columns=self.h_labels)

    def merged_frame(self) -> pd.DataFrame:
        """Merged provenance matrix indexed by the merged vocabulary."""
        return pd.DataFrame(self.merged, index=self.merged_labels, columns=self.merged_labels)

    def alignment_pairs(self) -> pd.DataFrame:
        """Every alignment entry above the threshold, in row-major scan order.

        A node with several qualifying scores appears once per score; the
        merged graph only fuses each G node with its first match.
        """
        rows, cols = np.nonzero(alignment_mask(self.alignment, self.gamma))
        return pd.DataFrame(
            {
                "g_label": [self.g_labels[i] for i in rows],
                "h_label": [self.h_labels[j] for j in cols],
                "similarity": self.alignment[rows, cols].astype(float),
            },
            columns=["g_label", "h_label", "similarity"],
        )


def load_parameters(path: Path) -> AlignmentParameters:
    """Load and validate alignment parameters from a YAML file.

    Args:
        path: Path to a YAML mapping of parameter names to values

    Returns:
        Validated AlignmentParameters

    Raises:
        ParameterFileError: If the file is unreadable or fails validation
    """
    logger.info("loading_parameters", path=str(path))
    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ParameterFileError(f"Failed to read parameters: {str(e)}", path=str(path)) from e

    try:
        return AlignmentParameters.model_validate(data)
    except PydanticValidationError as e:
        errors = []
        for error in e.errors():
            loc = " -> ".join(str(l) for l in error['loc'])
            errors.append(f"{loc}: {error['msg']}")
        raise ParameterFileError("Parameter validation failed", path=str(path), errors=errors) from e


def _check_graph(graph: GraphData, name: str) -> tuple[np.ndarray, np.ndarray]:
    """Validate one input graph and return its adjacency and signatures as arrays."""
    adjacency = square_adjacency(graph.adjacency, name)
    signatures = as_signatures(graph.signatures)
    check_labels(graph.labels, len(adjacency), name)
    if len(signatures) != len(adjacency):
        raise DimensionMismatchError(
            f"{name} has {len(adjacency)} nodes but {len(signatures)} signatures",
            expected=len(adjacency),
            actual=len(signatures),
        )
    return adjacency, signatures


def run_alignment(
    g: GraphData,
    h: GraphData,
    aligner: Aligner,
    params: Optional[AlignmentParameters] = None,
    bio_costs: Optional[np.ndarray] = None,
) -> AlignmentArtifacts:
    """Run one alignment of G against H.

    Args:
        g: First input graph
        h: Second input graph
        aligner: External assignment algorithm consuming the combined costs
        params: Balance and threshold parameters (defaults when omitted)
        bio_costs: Optional |G| x |H| biological cost matrix

    Returns:
        AlignmentArtifacts with every matrix the run produced

    Raises:
        ContractViolationError: If any input breaks the core's data contract
        AlignerError: If the aligner fails
    """
    params = params or AlignmentParameters()
    log = logger.bind(g_nodes=g.node_count, h_nodes=h.node_count, aligner=aligner.name)

    g_adj, g_sigs = _check_graph(g, "G")
    h_adj, h_sigs = _check_graph(h, "H")

    log.info("stage_costs", alpha=params.alpha)
    costs = build_cost_matrix(g_sigs, h_sigs, alpha=params.alpha)

    if bio_costs is not None and np.size(bio_costs) > 0:
        bio = normalize(bio_costs) if params.normalize_bio else np.asarray(bio_costs, dtype=float)
        log.info("stage_combine", beta=params.beta, normalized=params.normalize_bio)
        combined = combine(costs, bio, params.beta)
    else:
        log.info("biological_costs_absent")
        combined = costs

    log.info("stage_alignment")
    try:
        alignment = np.asarray(aligner.align(combined), dtype=float)
    except Exception as e:
        log.error("alignment_failed", error=str(e))
        raise AlignerError(f"Aligner failed: {str(e)}", aligner=aligner.name) from e

    if alignment.shape != combined.shape:
        raise DimensionMismatchError(
            "Aligner returned an alignment of the wrong shape",
            expected=combined.shape,
            actual=alignment.shape,
        )

    log.info("stage_bridge", gamma=params.gamma)
    bridged = bridge(g_adj, h_adj, alignment, params.gamma)

    log.info("stage_merge", gamma=params.gamma)
    merged_labels = merge_labels(alignment, g.labels, h.labels, params.gamma)
    merged = merge(
        g_adj,
        h_adj,
        alignment,
        g.labels,
        h.labels,
        LabelVocabulary(merged_labels),
        params.gamma,
    )
    index = AlignmentIndex.from_matrix(alignment, params.gamma)
    summary = summarize_merge(merged, aligned_pairs=index.aligned_pairs)

    log.info(
        "alignment_complete",
        merged_nodes=summary.node_count,
        conserved_edges=summary.conserved_edges,
        edge_conservation=round(summary.edge_conservation, 4),
    )

    return AlignmentArtifacts(
        g_labels=list(g.labels),
        h_labels=list(h.labels),
        costs=costs,
        combined_costs=combined,
        alignment=alignment,
        bridged=bridged,
        merged=merged,
        merged_labels=merged_labels,
        summary=summary,
        gamma=params.gamma,
    )
