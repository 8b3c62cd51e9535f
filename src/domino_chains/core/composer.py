"""Chain composition search over a multiset of detected tiles.

Given the tiles seen on the table and a starting pip value, ``combine``
enumerates every maximal chain that can be laid end-to-end from that
value, collapses chains that differ only in the order the search picked
interchangeable tiles, and ranks what is left: longest chains first, then
highest pip score.

The search is exhaustive backtracking. Each recursion level works on its
own copy of the remaining pool, so sibling branches never see each
other's tentative placements.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np

from domino_chains.core.config import HASH_BASE, HASH_SEPARATOR, MAX_PIP
from domino_chains.core.errors import InvalidInputError
from domino_chains.core.tiles import PlacedTile, Tile

log = logging.getLogger(__name__)

# A tile as the caller supplied it; orientation only matters for which end
# is tried first when both ends match the head.
Pair = tuple[int, int]


@dataclass(frozen=True)
class CompositionResult:
    """One distinct chain found by :func:`combine`.

    Attributes:
        sequence_length: Number of tiles placed.
        sequence_score: Sum of all pips on placed tiles.
        unused_score: Sum of all pips on tiles left out of the chain.
        unused: Number of tiles left out of the chain.
        sequence: Placed tiles in chain order, each oriented
            ``(head, free)``.
        hash: Canonical identity used for deduplication.
    """

    sequence_length: int
    sequence_score: int
    unused_score: int
    unused: int
    sequence: tuple[PlacedTile, ...]
    hash: str

    @property
    def last_tile(self) -> PlacedTile | None:
        """The tile that terminates the chain, or None for an empty chain."""
        return self.sequence[-1] if self.sequence else None

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase mapping consumed by the presentation layer."""
        return {
            "sequenceLength": self.sequence_length,
            "sequenceScore": self.sequence_score,
            "unusedScore": self.unused_score,
            "unused": self.unused,
            "sequence": [[p.head, p.free] for p in self.sequence],
            "hash": self.hash,
        }


# ------------------------------------------------------------------
# Hashing
# ------------------------------------------------------------------


def tile_hash(x: int, y: int) -> int:
    """Encode an unordered pair as ``low + high * HASH_BASE``.

    Args:
        x: One pip value.
        y: The other pip value.

    Returns:
        An integer that is identical for ``(x, y)`` and ``(y, x)`` and
        distinct for every other pair of values in [0, 12].
    """
    low, high = sorted((x, y))
    return low + high * HASH_BASE


def sequence_hash(sequence: Sequence[PlacedTile]) -> str:
    """Return the canonical identity of a chain.

    Every tile except the last is treated as an order-free multiset; the
    last tile keeps its own slot so chains that end on different tiles
    stay distinct.

    Args:
        sequence: The placed tiles in chain order.

    Returns:
        The per-tile hashes joined by ``HASH_SEPARATOR``; empty string for
        an empty chain.
    """
    if not sequence:
        return ""
    *body, last = sequence
    hashes = sorted(tile_hash(p.head, p.free) for p in body)
    hashes.append(tile_hash(last.head, last.free))
    return HASH_SEPARATOR.join(str(h) for h in hashes)


# ------------------------------------------------------------------
# Validation
# ------------------------------------------------------------------


def _is_pip(value: object) -> bool:
    if isinstance(value, bool):
        return False
    if not isinstance(value, (int, np.integer)):
        return False
    return 0 <= value <= MAX_PIP


def _as_pair(tile: object) -> Pair | None:
    if isinstance(tile, Tile):
        return tile.values()
    if not isinstance(tile, (list, tuple)) or len(tile) != 2:
        return None
    x, y = tile
    if not (_is_pip(x) and _is_pip(y)):
        return None
    return (int(x), int(y))


def validate_available(available: object) -> tuple[Pair, ...]:
    """Check the tile collection and normalise it to plain int pairs.

    Args:
        available: A list or tuple whose elements are ``Tile`` instances
            or two-element lists/tuples of ints in [0, 12].

    Returns:
        The tiles as ``(x, y)`` tuples, in input order and orientation.

    Raises:
        InvalidInputError: If ``available`` is not a list or tuple, or any
            element has the wrong shape, type, or range.
    """
    if not isinstance(available, (list, tuple)):
        raise InvalidInputError("Available tiles must be an array")
    pairs: list[Pair] = []
    for index, tile in enumerate(available):
        pair = _as_pair(tile)
        if pair is None:
            raise InvalidInputError(
                "Invalid tiles: each tile must be a [number, number] array "
                f"with values 0-{MAX_PIP} (got {tile!r} at index {index})"
            )
        pairs.append(pair)
    return tuple(pairs)


def validate_head(head: object) -> int:
    """Check the starting pip value.

    Raises:
        InvalidInputError: If ``head`` is not an int in [0, 12].
    """
    if not _is_pip(head):
        raise InvalidInputError(
            f"Invalid head value: must be an integer between 0 and {MAX_PIP}"
        )
    return int(head)  # type: ignore[call-overload]


# ------------------------------------------------------------------
# Search
# ------------------------------------------------------------------


def _combine_all(
    available: tuple[Pair, ...],
    sequence: tuple[PlacedTile, ...],
    head: int,
    sequence_score: int,
    unused_score: int,
) -> list[CompositionResult]:
    """Collect every terminal chain reachable from this position."""
    results: list[CompositionResult] = []

    for index, (x, y) in enumerate(available):
        if x == head:
            free = y
        elif y == head:
            free = x
        else:
            continue
        results.extend(
            _combine_all(
                available[:index] + available[index + 1 :],
                sequence + (PlacedTile(head, free),),
                free,
                sequence_score + head + free,
                unused_score - head - free,
            )
        )

    if results:
        return results

    # Dead end at the root: nothing matched the starting value.
    if not sequence:
        return []

    # A double cannot close the chain while tiles are still left over.
    if sequence[-1].is_double() and available:
        return []

    return [
        CompositionResult(
            sequence_length=len(sequence),
            sequence_score=sequence_score,
            unused_score=unused_score,
            unused=len(available),
            sequence=sequence,
            hash=sequence_hash(sequence),
        )
    ]


def _unique(results: list[CompositionResult]) -> list[CompositionResult]:
    # Later duplicates replace earlier ones but keep the first slot.
    by_hash: dict[str, CompositionResult] = {}
    for result in results:
        by_hash[result.hash] = result
    return list(by_hash.values())


def combine(available: object, head: object) -> list[CompositionResult]:
    """Enumerate, deduplicate and rank the chains buildable from *head*.

    Args:
        available: The detected tiles, a list or tuple of ``Tile`` objects
            or ``[x, y]`` pairs with values in [0, 12]. Duplicates are
            distinct physical tiles.
        head: The pip value the first tile must match, 0-12.

    Returns:
        Distinct chains sorted by length descending, then by score
        descending. Empty when no tile matches *head* or no tiles were
        given.

    Raises:
        InvalidInputError: If *available* or *head* is malformed. Raised
            before any search is attempted.
    """
    pairs = validate_available(available)
    start = validate_head(head)

    total_score = sum(x + y for x, y in pairs)
    raw = _combine_all(pairs, (), start, 0, total_score)
    results = _unique(raw)
    results.sort(key=lambda r: (-r.sequence_length, -r.sequence_score))

    log.debug(
        "Composed %d tiles from head %d: %d leaves, %d distinct chains",
        len(pairs),
        start,
        len(raw),
        len(results),
    )
    return results
