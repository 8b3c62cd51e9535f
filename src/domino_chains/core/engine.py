"""Solve pipeline bridging detector labels and the chain composer.

This is the caller side of :func:`combine`: a camera frame's labels are
parsed into tiles and composed from the selected starting value. Bad
input never propagates out of :func:`solve`; it is logged and the frame
simply has no results, so an interactive session keeps running.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from domino_chains.core.composer import CompositionResult, combine
from domino_chains.core.detections import tiles_from_labels
from domino_chains.core.errors import InvalidInputError

log = logging.getLogger(__name__)

SORT_COLUMNS: tuple[str, ...] = (
    "sequence_length",
    "sequence_score",
    "unused_score",
    "unused",
)

_CAMEL_ALIASES: dict[str, str] = {
    "sequenceLength": "sequence_length",
    "sequenceScore": "sequence_score",
    "unusedScore": "unused_score",
}


def solve(labels: Sequence[str], head: int) -> list[CompositionResult]:
    """Compose chains from one frame of detector labels.

    Args:
        labels: Class labels such as ``"3x5"``, one per detected tile.
        head: The starting pip value selected by the user.

    Returns:
        The ranked chains, or an empty list when there is nothing to
        compose or the input is invalid.
    """
    if not labels:
        return []
    try:
        tiles = tiles_from_labels(labels)
        return combine(tiles, head)
    except InvalidInputError as exc:
        log.warning("Cannot compose chains for %d detections: %s", len(labels), exc)
        return []


def sort_results(
    results: Sequence[CompositionResult],
    by: str = "sequence_length",
    *,
    descending: bool = True,
) -> list[CompositionResult]:
    """Re-sort results on a single column, as a results table does.

    The sort is stable, so ties keep the composer's ranking.

    Args:
        results: Results returned by :func:`combine` or :func:`solve`.
        by: Column name; camelCase aliases are accepted.
        descending: Largest values first when True.

    Returns:
        A new sorted list.

    Raises:
        ValueError: If ``by`` is not a sortable column.
    """
    column = _CAMEL_ALIASES.get(by, by)
    if column not in SORT_COLUMNS:
        raise ValueError(f"Unknown sort column: {by!r}")
    return sorted(results, key=lambda r: getattr(r, column), reverse=descending)


def best_result(results: Sequence[CompositionResult]) -> CompositionResult | None:
    """Return the top-ranked result, or None when there are none."""
    return results[0] if results else None
