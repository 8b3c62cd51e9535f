"""Detector label parsing and pip counting.

The tile detector reports one class label per domino, the two pip counts
joined by ``"x"`` (``"3x5"``, ``"12x12"``). These helpers turn a frame's
labels into tiles for the composer and compute the running pip total
shown while counting a hand.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np
from numpy.typing import NDArray

from domino_chains.core.config import LABEL_SEPARATOR, MAX_PIP
from domino_chains.core.errors import InvalidInputError
from domino_chains.core.tiles import Tile, generate_full_set


def _parse_parts(label: str) -> list[int]:
    if not isinstance(label, str):
        raise InvalidInputError(f"Detection label must be a string, got {label!r}")
    try:
        return [int(part) for part in label.split(LABEL_SEPARATOR)]
    except ValueError as exc:
        raise InvalidInputError(f"Malformed detection label: {label!r}") from exc


def parse_label(label: str) -> Tile:
    """Convert a detector class label into a tile.

    Args:
        label: Two pip counts joined by ``"x"``, in either order.

    Returns:
        The canonical tile for the label.

    Raises:
        InvalidInputError: If the label does not hold exactly two integer
            pip counts in [0, 12].
    """
    parts = _parse_parts(label)
    if len(parts) != 2:
        raise InvalidInputError(
            f"Detection label must have two pip counts, got {label!r}"
        )
    x, y = parts
    if not (0 <= x <= MAX_PIP and 0 <= y <= MAX_PIP):
        raise InvalidInputError(f"Pip count out of range in label {label!r}")
    return Tile.of(x, y)


def tiles_from_labels(labels: Iterable[str]) -> list[Tile]:
    """Parse every label of a frame, keeping repeated tiles.

    Raises:
        InvalidInputError: On the first malformed label.
    """
    return [parse_label(label) for label in labels]


def label_pip_total(label: str) -> int:
    """Sum all pip counts in one label, however many parts it has."""
    return sum(_parse_parts(label))


def count_pips(labels: Iterable[str]) -> int:
    """Return the total pip count across all detected labels."""
    return sum(label_pip_total(label) for label in labels)


def pip_histogram(tiles: Sequence[Tile]) -> NDArray[np.int64]:
    """Count how many tile ends show each pip value.

    Args:
        tiles: The tiles to count. A double contributes two ends.

    Returns:
        Array of length 13 where entry ``v`` is the number of ends
        showing ``v``.
    """
    ends = np.array([v for tile in tiles for v in tile.values()], dtype=np.int64)
    return np.bincount(ends, minlength=MAX_PIP + 1).astype(np.int64)


def all_labels() -> list[str]:
    """Return the 91 class labels of the double-twelve detector model."""
    return [tile.label() for tile in sorted(generate_full_set())]
