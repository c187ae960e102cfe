"""Bridged and merged graph construction from an alignment."""

from .bridge import bridge
from .index import AlignmentIndex, alignment_mask, is_aligned
from .labels import merge_labels
from .merge import EdgeProvenance, merge
from .quality import MergeSummary, summarize_merge
from .vocabulary import LabelVocabulary, assign

__all__ = [
    # Alignment lookup
    "AlignmentIndex",
    "alignment_mask",
    "is_aligned",
    # Bridging
    "bridge",
    # Merging
    "merge_labels",
    "LabelVocabulary",
    "assign",
    "EdgeProvenance",
    "merge",
    # Quality
    "MergeSummary",
    "summarize_merge",
]
