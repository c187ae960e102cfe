"""Orchestration of a MINAA alignment run."""

from .errors import AlignerError, ParameterFileError, PipelineError, StageError
from .models import AlignmentParameters, GraphData
from .pipeline import Aligner, AlignmentArtifacts, load_parameters, run_alignment

__all__ = [
    "AlignmentParameters",
    "GraphData",
    "Aligner",
    "AlignmentArtifacts",
    "load_parameters",
    "run_alignment",
    "PipelineError",
    "StageError",
    "AlignerError",
    "ParameterFileError",
]
