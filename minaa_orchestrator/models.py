"""Pydantic models for run parameters and the graph data handed to the core."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np
from pydantic import BaseModel, Field, field_validator


class AlignmentParameters(BaseModel):
    """Balance and threshold parameters for one alignment run."""

    alpha: float = Field(default=1.0, description="GDV similarity vs. degree balance, in [0, 1]")
    beta: float = Field(
        default=1.0,
        description="Topological vs. biological cost balance; out-of-range values fall back to 1",
    )
    gamma: float = Field(default=0.0, description="Minimum alignment score counted as a match, in [0, 1]")
    normalize_bio: bool = Field(default=True, description="Rescale biological costs into [0, 1] before combining")

    @field_validator('alpha', 'gamma')
    @classmethod
    def validate_unit_interval(cls, v: float, info) -> float:
        """Ensure alpha and gamma lie in [0, 1]."""
        if v < 0 or v > 1:
            raise ValueError(f"The {info.field_name} argument must be in range [0, 1].")
        return v


@dataclass(frozen=True)
class GraphData:
    """One input graph: labels, adjacency and signatures, all in node order."""

    labels: List[str]
    adjacency: np.ndarray
    signatures: np.ndarray

    @classmethod
    def from_sequences(
        cls,
        labels: Sequence[str],
        adjacency: Sequence[Sequence[int]],
        signatures: Sequence[Sequence[int]],
    ) -> "GraphData":
        return cls(
            labels=list(labels),
            adjacency=np.asarray(adjacency, dtype=int),
            signatures=np.asarray(signatures, dtype=np.int64),
        )

    @property
    def node_count(self) -> int:
        return len(self.labels)
