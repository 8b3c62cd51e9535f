"""Constants shared by the composer and the detection helpers."""

from __future__ import annotations

# Highest pip value on a double-twelve set.
MAX_PIP: int = 12

# Per-tile hash is ``low + high * HASH_BASE``; must exceed MAX_PIP.
HASH_BASE: int = 100
HASH_SEPARATOR: str = "|"

# Detector class labels look like "3x5".
LABEL_SEPARATOR: str = "x"
