"""Exception hierarchy shared by the MINAA packages."""

from __future__ import annotations

from typing import Any, Dict, Optional


class MinaaError(Exception):
    """Base exception for all MINAA errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Initialize error with message and optional details.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of error."""
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for structured logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


# Contract violations

class ContractViolationError(MinaaError, ValueError):
    """Raised when a caller hands the core data that breaks its contract."""
    pass


class SignatureError(ContractViolationError):
    """Raised when a graphlet degree vector is malformed."""

    def __init__(self, message: str, node: Optional[int] = None, length: Optional[int] = None) -> None:
        details = {}
        if node is not None:
            details["node"] = node
        if length is not None:
            details["length"] = length
        super().__init__(message, details)


class OrbitIndexError(ContractViolationError):
    """Raised when an orbit index is outside the orbit table."""

    def __init__(self, orbit_index: int) -> None:
        super().__init__(
            f"Orbit index {orbit_index} is out of range",
            {"orbit_index": orbit_index},
        )


class DimensionMismatchError(ContractViolationError):
    """Raised when two matrices (or a matrix and a label list) disagree in shape."""

    def __init__(self, message: str, expected: Any = None, actual: Any = None) -> None:
        details = {}
        if expected is not None:
            details["expected"] = expected
        if actual is not None:
            details["actual"] = actual
        super().__init__(message, details)


class GraphShapeError(ContractViolationError):
    """Raised when an adjacency matrix is not square."""

    def __init__(self, message: str, graph: Optional[str] = None, shape: Any = None) -> None:
        details = {}
        if graph:
            details["graph"] = graph
        if shape is not None:
            details["shape"] = shape
        super().__init__(message, details)


class LabelNotFoundError(ContractViolationError):
    """Raised when a label is missing from the merged-graph vocabulary."""

    def __init__(self, label: str) -> None:
        super().__init__(f"Label '{label}' is not in the merged vocabulary", {"label": label})


class DuplicateLabelError(ContractViolationError):
    """Raised when the merged-graph vocabulary would contain a label twice."""

    def __init__(self, duplicates: list) -> None:
        super().__init__("Merged vocabulary contains duplicate labels", {"duplicates": duplicates})
