"""Pipeline-level errors for the MINAA orchestrator."""

from __future__ import annotations

from typing import Any, Optional

from minaa_core.errors import MinaaError


class PipelineError(MinaaError):
    """Base class for pipeline execution errors."""
    pass


class StageError(PipelineError):
    """Base class for stage-specific errors."""

    def __init__(self, message: str, stage: str, **kwargs: Any) -> None:
        details = {"stage": stage}
        details.update(kwargs)
        super().__init__(message, details)


class AlignerError(StageError):
    """Raised when the external aligner fails to produce an alignment."""

    def __init__(self, message: str, aligner: Optional[str] = None) -> None:
        details = {}
        if aligner:
            details["aligner"] = aligner
        super().__init__(message, stage="alignment", **details)


class ParameterFileError(PipelineError):
    """Raised when a parameter file cannot be read or validated."""

    def __init__(self, message: str, path: Optional[str] = None, errors: Optional[list] = None) -> None:
        details = {}
        if path:
            details["path"] = path
        if errors:
            details["validation_errors"] = errors
        super().__init__(message, details)
