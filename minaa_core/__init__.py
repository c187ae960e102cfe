"""Topological and combined cost matrices for MINAA graph alignment."""

from .costs import combine, normalize
from .errors import (
    ContractViolationError,
    DimensionMismatchError,
    DuplicateLabelError,
    GraphShapeError,
    LabelNotFoundError,
    MinaaError,
    OrbitIndexError,
    SignatureError,
)
from .orbits import ORBIT_COUNT, ORBIT_REFERENCE, ORBIT_WEIGHTS, TOTAL_WEIGHT, weight
from .signatures import (
    as_signature,
    as_signatures,
    build_cost_matrix,
    cost,
    distance,
    max_degree,
    similarity,
)

__all__ = [
    # Orbits
    "ORBIT_COUNT",
    "ORBIT_REFERENCE",
    "ORBIT_WEIGHTS",
    "TOTAL_WEIGHT",
    "weight",
    # Signatures
    "as_signature",
    "as_signatures",
    "distance",
    "similarity",
    "cost",
    "max_degree",
    "build_cost_matrix",
    # Costs
    "combine",
    "normalize",
    # Errors
    "MinaaError",
    "ContractViolationError",
    "SignatureError",
    "OrbitIndexError",
    "DimensionMismatchError",
    "GraphShapeError",
    "LabelNotFoundError",
    "DuplicateLabelError",
]
