"""Core domain types for domino chain composition."""

from domino_chains.core.composer import (
    CompositionResult,
    combine,
    sequence_hash,
    tile_hash,
)
from domino_chains.core.detections import (
    all_labels,
    count_pips,
    parse_label,
    pip_histogram,
    tiles_from_labels,
)
from domino_chains.core.engine import best_result, solve, sort_results
from domino_chains.core.errors import InvalidInputError
from domino_chains.core.tiles import PlacedTile, Tile, generate_full_set, suits

__all__ = [
    "CompositionResult",
    "InvalidInputError",
    "PlacedTile",
    "Tile",
    "all_labels",
    "best_result",
    "combine",
    "count_pips",
    "generate_full_set",
    "parse_label",
    "pip_histogram",
    "sequence_hash",
    "solve",
    "sort_results",
    "suits",
    "tile_hash",
    "tiles_from_labels",
]
