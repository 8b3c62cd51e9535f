"""Tile representation and double-twelve set generation."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from functools import lru_cache

from domino_chains.core.config import LABEL_SEPARATOR, MAX_PIP


@dataclass(frozen=True, order=True)
class Tile:
    """A domino tile as canonical unordered pair (a <= b).

    Tiles are immutable and ordered. The canonical form ensures ``a <= b``
    so the same physical tile always has one representation; use
    :meth:`of` to build a tile from a pair in arbitrary order.

    Attributes:
        a: The lower (or equal) pip value, 0-12.
        b: The higher (or equal) pip value, 0-12.

    Raises:
        ValueError: If the tile values are outside [0, 12] or not in
            canonical order (a <= b).
    """

    a: int
    b: int

    def __post_init__(self) -> None:
        if not (0 <= self.a <= self.b <= MAX_PIP):
            raise ValueError(f"Invalid tile: ({self.a}, {self.b})")

    @classmethod
    def of(cls, x: int, y: int) -> Tile:
        """Build the canonical tile for the unordered pair ``(x, y)``.

        Args:
            x: One pip value.
            y: The other pip value.

        Returns:
            ``Tile(min(x, y), max(x, y))``.
        """
        return cls(min(x, y), max(x, y))

    def is_double(self) -> bool:
        """Return True if the tile is a double (both ends equal)."""
        return self.a == self.b

    def values(self) -> tuple[int, int]:
        """Return the two pip values as a tuple ``(a, b)``."""
        return (self.a, self.b)

    def contains_value(self, v: int) -> bool:
        """Return True if ``a == v`` or ``b == v``."""
        return self.a == v or self.b == v

    def other_value(self, v: int) -> int:
        """Given one end value, return the other end.

        For doubles, returns the same value.

        Args:
            v: One of the tile's pip values.

        Returns:
            The other pip value on the tile.

        Raises:
            ValueError: If ``v`` is not one of the tile's values.
        """
        if v == self.a:
            return self.b
        if v == self.b:
            return self.a
        raise ValueError(f"Value {v} not in tile {self}")

    def pip_count(self) -> int:
        """Return the total pip count (sum of both ends)."""
        return self.a + self.b

    def label(self) -> str:
        """Return the detector class label, e.g. ``"3x5"``."""
        return f"{self.a}{LABEL_SEPARATOR}{self.b}"

    def __str__(self) -> str:
        return f"[{self.a}|{self.b}]"

    def __repr__(self) -> str:
        return f"Tile({self.a}, {self.b})"


@dataclass(frozen=True, order=True)
class PlacedTile:
    """A tile placed in a chain, oriented from its matched end.

    Attributes:
        head: The end touching the previous tile (or the starting value).
        free: The exposed end the next tile must match.
    """

    head: int
    free: int

    def __post_init__(self) -> None:
        if not (0 <= self.head <= MAX_PIP and 0 <= self.free <= MAX_PIP):
            raise ValueError(f"Invalid placed tile: ({self.head}, {self.free})")

    @property
    def tile(self) -> Tile:
        """The canonical, orientation-free tile."""
        return Tile.of(self.head, self.free)

    def is_double(self) -> bool:
        return self.head == self.free

    def pip_count(self) -> int:
        return self.head + self.free

    def __iter__(self) -> Iterator[int]:
        yield self.head
        yield self.free

    def __str__(self) -> str:
        return f"[{self.head}|{self.free}]"

    def __repr__(self) -> str:
        return f"PlacedTile({self.head}, {self.free})"


@lru_cache(maxsize=1)
def generate_full_set() -> frozenset[Tile]:
    """Generate the complete double-twelve domino set (91 tiles).

    Returns:
        A frozenset containing all 91 tiles where ``0 <= a <= b <= 12``.
    """
    return frozenset(
        Tile(a, b) for a in range(MAX_PIP + 1) for b in range(a, MAX_PIP + 1)
    )


@lru_cache(maxsize=MAX_PIP + 1)
def suits(value: int) -> frozenset[Tile]:
    """Return all tiles in the full set that contain the given pip value.

    A "suit" is the set of all tiles bearing a particular value. Each suit
    contains exactly 13 tiles in a double-twelve set.

    Args:
        value: The pip value to filter on (0-12).

    Returns:
        A frozenset of tiles containing ``value``.

    Raises:
        ValueError: If ``value`` is not in the range [0, 12].
    """
    if not (0 <= value <= MAX_PIP):
        raise ValueError(f"Invalid suit value: {value}. Must be 0-{MAX_PIP}.")
    return frozenset(tile for tile in generate_full_set() if tile.contains_value(value))
