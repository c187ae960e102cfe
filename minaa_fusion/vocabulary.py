"""Label vocabulary of the merged graph and symmetric writes by label."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Sequence, Union

import numpy as np

from minaa_core.errors import LabelNotFoundError


class LabelVocabulary(Sequence[str]):
    """Ordered, immutable label list with constant-time position lookup.

    Positions refer to the first occurrence of a label, matching a linear
    scan of the list.
    """

    def __init__(self, labels: Iterable[str]) -> None:
        self._labels = tuple(labels)
        self._positions: Dict[str, int] = {}
        for position, label in enumerate(self._labels):
            self._positions.setdefault(label, position)

    def __getitem__(self, index):
        return self._labels[index]

    def __len__(self) -> int:
        return len(self._labels)

    def __iter__(self) -> Iterator[str]:
        return iter(self._labels)

    def __contains__(self, label: object) -> bool:
        return label in self._positions

    def __repr__(self) -> str:
        return f"LabelVocabulary({list(self._labels)!r})"

    def position(self, label: str) -> int:
        """Position of the first occurrence of ``label``.

        Raises:
            LabelNotFoundError: If the label is not in the vocabulary
        """
        try:
            return self._positions[label]
        except KeyError:
            raise LabelNotFoundError(label) from None


def assign(
    merged: np.ndarray,
    merged_labels: Union[LabelVocabulary, Sequence[str]],
    label1: str,
    label2: str,
    value: int,
) -> None:
    """Write ``value`` for the edge between two labels, in both directions.

    Args:
        merged: Merged adjacency matrix being built (written in place)
        merged_labels: Vocabulary indexing the rows and columns of ``merged``
        label1: Label of one endpoint
        label2: Label of the other endpoint
        value: Edge provenance code

    Raises:
        LabelNotFoundError: If either label is missing from the vocabulary
    """
    if not isinstance(merged_labels, LabelVocabulary):
        merged_labels = LabelVocabulary(merged_labels)

    pos1 = merged_labels.position(label1)
    pos2 = merged_labels.position(label2)
    merged[pos1, pos2] = value
    merged[pos2, pos1] = value
